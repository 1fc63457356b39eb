"""Partitioning of commit history into version buckets."""

from datetime import datetime
from typing import List, Optional, Sequence

import structlog

from chronicle.models import UNRELEASED_LABEL, RawCommit, VersionBucket
from chronicle.processing.patterns import VersionPattern

logger = structlog.get_logger(__name__)


class _OpenBucket:
    """Bucket still collecting commits during the history walk."""

    def __init__(
        self,
        label: str,
        version: Optional[str] = None,
        date: Optional[datetime] = None,
    ) -> None:
        self.label = label
        self.version = version
        self.date = date
        self.commits: List[RawCommit] = []


def segment(commits: Sequence[RawCommit], pattern: VersionPattern) -> List[VersionBucket]:
    """Split newest-first history into version buckets.

    A commit whose tag matches the version pattern opens the bucket for that
    release; it and every older commit up to the next release tag belong to
    that bucket. Commits newer than the newest release tag form the
    Unreleased bucket, which is omitted when empty. Tags that do not match
    the pattern are ignored.

    Args:
        commits: Commits in newest-first order
        pattern: Compiled version tag pattern

    Returns:
        Buckets in newest-first order, each with its position in that order
    """
    open_buckets = [_OpenBucket(UNRELEASED_LABEL)]

    for commit in commits:
        if commit.tag:
            version = pattern.version_of(commit.tag)
            if version is not None:
                open_buckets.append(_OpenBucket(commit.tag, version, commit.author_date))
            else:
                logger.debug("tag_ignored", tag=commit.tag, commit=commit.short_hash)

        open_buckets[-1].commits.append(commit)

    if not open_buckets[0].commits:
        open_buckets.pop(0)

    buckets = [
        VersionBucket(
            label=bucket.label,
            version=bucket.version,
            date=bucket.date,
            position=position,
            commits=bucket.commits,
        )
        for position, bucket in enumerate(open_buckets)
    ]

    logger.info(
        "history_segmented",
        commits=len(commits),
        versions=sum(1 for bucket in buckets if not bucket.is_unreleased),
        unreleased=sum(len(bucket.commits) for bucket in buckets if bucket.is_unreleased),
    )
    return buckets
