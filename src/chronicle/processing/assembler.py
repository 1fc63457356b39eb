"""Assembly of version buckets into the ordered changelog document."""

from typing import Dict, List, Optional, Sequence, TypeVar, Union

import structlog

from chronicle.models import (
    ChangelogDocument,
    ChangelogVersion,
    ClassifiedCommit,
    CommitGroup,
    CommitType,
    SortOrder,
    UnclassifiedPolicy,
    VersionBucket,
)
from chronicle.processing.classifier import classify
from chronicle.processing.patterns import CommitPattern, compile_commit_pattern

logger = structlog.get_logger(__name__)

Positioned = TypeVar("Positioned", bound=Union[VersionBucket, ChangelogVersion])


def order_versions(versions: Sequence[Positioned], sort_order: SortOrder) -> List[Positioned]:
    """Order buckets or versions for display.

    Released versions are ordered by their position in history, reversed for
    oldest-first. The unreleased entry always stays at the newest end: first
    for newest-first, last for oldest-first. The result depends only on the
    positions, so ordering an already ordered list is a no-op.

    Args:
        versions: VersionBucket or ChangelogVersion items
        sort_order: Requested order

    Returns:
        New list in display order
    """
    oldest_first = sort_order is SortOrder.OLDEST
    released = sorted(
        (version for version in versions if not version.is_unreleased),
        key=lambda version: version.position,
        reverse=oldest_first,
    )
    unreleased = [version for version in versions if version.is_unreleased]

    if oldest_first:
        return released + unreleased
    return unreleased + released


def group_commits(
    commits: Sequence[ClassifiedCommit],
    policy: UnclassifiedPolicy = UnclassifiedPolicy.DROP,
) -> List[CommitGroup]:
    """Group classified commits by type.

    Groups follow CommitType rank order and keep the commits' relative
    order. Empty groups are not created. Unclassified commits are dropped,
    or collected in a trailing fallback group under the GROUP policy.

    Args:
        commits: Classified commits in history order
        policy: Unclassified commit policy

    Returns:
        Non-empty groups in display order
    """
    by_type: Dict[Optional[CommitType], List[ClassifiedCommit]] = {}
    for commit in commits:
        if not commit.is_classified and policy is UnclassifiedPolicy.DROP:
            continue
        by_type.setdefault(commit.commit_type, []).append(commit)

    groups = [
        CommitGroup(commit_type=commit_type, commits=by_type[commit_type])
        for commit_type in CommitType.ranked()
        if commit_type in by_type
    ]
    if None in by_type:
        groups.append(CommitGroup(commit_type=None, commits=by_type[None]))

    return groups


class ChangelogAssembler:
    """Turns version buckets into a ChangelogDocument."""

    def __init__(
        self,
        commit_pattern: Optional[CommitPattern] = None,
        unclassified: UnclassifiedPolicy = UnclassifiedPolicy.DROP,
    ) -> None:
        """Initialize the assembler.

        Args:
            commit_pattern: Compiled commit pattern (default pattern if None)
            unclassified: Policy for commits that do not classify
        """
        self.commit_pattern = commit_pattern or compile_commit_pattern()
        self.unclassified = unclassified

    def assemble_version(self, bucket: VersionBucket) -> ChangelogVersion:
        """Classify and group the commits of one bucket."""
        classified = [classify(commit, self.commit_pattern) for commit in bucket.commits]

        dropped = sum(1 for commit in classified if not commit.is_classified)
        if dropped and self.unclassified is UnclassifiedPolicy.DROP:
            logger.debug("unclassified_dropped", version=bucket.label, count=dropped)

        return ChangelogVersion(
            label=bucket.label,
            version=bucket.version,
            date=bucket.date,
            position=bucket.position,
            groups=group_commits(classified, self.unclassified),
        )

    def assemble(
        self,
        title: str,
        buckets: Sequence[VersionBucket],
        sort_order: SortOrder = SortOrder.NEWEST,
    ) -> ChangelogDocument:
        """Build the changelog document.

        Args:
            title: Document title
            buckets: Buckets as produced by the segmenter
            sort_order: Version section order

        Returns:
            ChangelogDocument with versions in display order
        """
        versions = [
            self.assemble_version(bucket) for bucket in order_versions(buckets, sort_order)
        ]

        logger.info(
            "changelog_assembled",
            versions=len(versions),
            entries=sum(version.commit_count for version in versions),
            sort_order=sort_order.value,
        )
        return ChangelogDocument(title=title, sort_order=sort_order, versions=versions)
