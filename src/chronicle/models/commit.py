"""Data models for commits and the commit type taxonomy."""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CommitType(str, Enum):
    """Closed set of change categories, declared in display rank order.

    The value of each member is the commit message keyword that selects it.
    """

    FEATURES = "feat"
    BUG_FIXES = "fix"
    DOCUMENTATION = "doc"
    STYLING = "style"
    REFACTOR = "refactor"
    PERFORMANCE = "perf"
    TESTING = "test"
    BUILD = "build"
    CONTINUOUS_INTEGRATION = "ci"
    CHORE = "chore"

    @classmethod
    def from_keyword(cls, keyword: str) -> Optional["CommitType"]:
        """Look up a type by its exact (case-sensitive) keyword.

        Args:
            keyword: Keyword captured from a commit message

        Returns:
            Matching CommitType, or None for unknown keywords
        """
        try:
            return cls(keyword)
        except ValueError:
            return None

    @classmethod
    def ranked(cls) -> List["CommitType"]:
        """All types sorted by display rank."""
        return sorted(cls, key=lambda commit_type: commit_type.rank)

    @property
    def rank(self) -> int:
        return _DISPLAY[self][0]

    @property
    def emoji(self) -> str:
        return _DISPLAY[self][1]

    @property
    def label(self) -> str:
        return _DISPLAY[self][2]

    @property
    def heading(self) -> str:
        return f"{self.emoji} {self.label}"


_DISPLAY = {
    CommitType.FEATURES: (0, "🚀", "Features"),
    CommitType.BUG_FIXES: (1, "🐛", "Bug Fixes"),
    CommitType.DOCUMENTATION: (2, "📚", "Documentation"),
    CommitType.STYLING: (3, "🎨", "Styling"),
    CommitType.REFACTOR: (4, "🚜", "Refactor"),
    CommitType.PERFORMANCE: (5, "⚡", "Performance"),
    CommitType.TESTING: (6, "🧪", "Testing"),
    CommitType.BUILD: (7, "🏗️", "Build"),
    CommitType.CONTINUOUS_INTEGRATION: (8, "👷", "Continuous Integration"),
    CommitType.CHORE: (9, "🧹", "Chore"),
}

# Heading of the fallback group holding unclassified commits
UNCLASSIFIED_HEADING = "Miscellaneous Tasks"


class RawCommit(BaseModel):
    """A commit as read from history, before classification."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "hash": "abc123def456",
                "author_date": "2024-01-15T10:30:00Z",
                "tag": "v1.2.0",
                "message": "feat(api): add login endpoint",
            }
        },
    )

    hash: str = Field(..., description="Full commit SHA hash")
    author_date: datetime = Field(..., description="Author timestamp")
    tag: Optional[str] = Field(None, description="Tag name pointing at this commit, if any")
    message: str = Field(..., description="Full commit message")

    @property
    def short_hash(self) -> str:
        return self.hash[:7]


class ClassifiedCommit(BaseModel):
    """A commit after its message has been matched against the commit pattern."""

    model_config = ConfigDict(frozen=True)

    hash: str = Field(..., description="Commit hash this entry came from")
    commit_type: Optional[CommitType] = Field(
        None, description="Matched commit type, None when unclassified"
    )
    scope: Optional[str] = Field(None, description="Optional scope, e.g. the affected subsystem")
    message: str = Field(..., description="Entry text")
    author_date: datetime = Field(..., description="Author timestamp")

    @property
    def is_classified(self) -> bool:
        return self.commit_type is not None
