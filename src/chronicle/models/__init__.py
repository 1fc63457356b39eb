"""Data models for changelog generation."""

from chronicle.models.commit import (
    UNCLASSIFIED_HEADING,
    ClassifiedCommit,
    CommitType,
    RawCommit,
)
from chronicle.models.config import (
    ChangelogSettings,
    OutputFormat,
    RepositoryConfig,
    SortOrder,
    UnclassifiedPolicy,
)
from chronicle.models.changelog import (
    UNRELEASED_LABEL,
    ChangelogDocument,
    ChangelogVersion,
    CommitGroup,
    VersionBucket,
)

__all__ = [
    "RawCommit",
    "ClassifiedCommit",
    "CommitType",
    "UNCLASSIFIED_HEADING",
    "VersionBucket",
    "CommitGroup",
    "ChangelogVersion",
    "ChangelogDocument",
    "UNRELEASED_LABEL",
    "RepositoryConfig",
    "ChangelogSettings",
    "SortOrder",
    "OutputFormat",
    "UnclassifiedPolicy",
]
