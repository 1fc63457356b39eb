"""Classification of raw commits into typed changelog entries."""

import structlog

from chronicle.models import ClassifiedCommit, CommitType, RawCommit
from chronicle.processing.patterns import CommitPattern

logger = structlog.get_logger(__name__)


def subject_line(message: str) -> str:
    """Return the first line of a commit message, stripped."""
    lines = message.strip().splitlines()
    return lines[0].strip() if lines else ""


def classify(commit: RawCommit, pattern: CommitPattern) -> ClassifiedCommit:
    """Classify a commit by matching its subject line against the commit pattern.

    Commits that do not match, or whose type keyword is not one of the known
    CommitType keywords, come back with ``commit_type=None`` and the whole
    subject line as message.

    Args:
        commit: Raw commit from history
        pattern: Compiled commit pattern

    Returns:
        ClassifiedCommit
    """
    subject = subject_line(commit.message)
    captures = pattern.captures(subject)

    commit_type = CommitType.from_keyword(captures.type) if captures else None
    if commit_type is None:
        logger.debug("commit_unclassified", commit=commit.short_hash, subject=subject)
        return ClassifiedCommit(
            hash=commit.hash,
            commit_type=None,
            message=subject,
            author_date=commit.author_date,
        )

    scope = captures.scope.strip() if captures.scope else None

    return ClassifiedCommit(
        hash=commit.hash,
        commit_type=commit_type,
        scope=scope or None,
        message=captures.message.strip(),
        author_date=commit.author_date,
    )
