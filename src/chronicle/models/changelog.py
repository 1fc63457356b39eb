"""Data models for version buckets and the assembled changelog document."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from chronicle.models.commit import UNCLASSIFIED_HEADING, ClassifiedCommit, CommitType, RawCommit
from chronicle.models.config import SortOrder

UNRELEASED_LABEL = "Unreleased"


class VersionBucket(BaseModel):
    """Commits attributed to one release, or to the unreleased tip of history."""

    label: str = Field(..., description="Tag name, or 'Unreleased'")
    version: Optional[str] = Field(None, description="Version string extracted from the tag")
    date: Optional[datetime] = Field(None, description="Author date of the tagged commit")
    position: int = Field(
        ..., description="Index in newest-first history order (0 is the newest bucket)"
    )
    commits: List[RawCommit] = Field(default_factory=list, description="Commits, newest first")

    @property
    def is_unreleased(self) -> bool:
        return self.version is None


class CommitGroup(BaseModel):
    """Commits of a single type within one version."""

    commit_type: Optional[CommitType] = Field(
        None, description="Type of every commit in the group, None for the fallback group"
    )
    commits: List[ClassifiedCommit] = Field(default_factory=list)

    @property
    def heading(self) -> str:
        if self.commit_type is None:
            return UNCLASSIFIED_HEADING
        return self.commit_type.heading


class ChangelogVersion(BaseModel):
    """One version section of the changelog."""

    label: str
    version: Optional[str] = None
    date: Optional[datetime] = None
    position: int
    groups: List[CommitGroup] = Field(default_factory=list)

    @property
    def is_unreleased(self) -> bool:
        return self.version is None

    @property
    def commit_count(self) -> int:
        return sum(len(group.commits) for group in self.groups)


class ChangelogDocument(BaseModel):
    """Fully assembled changelog, ready for rendering."""

    title: str = Field("Changelog", description="Document title")
    sort_order: SortOrder = Field(SortOrder.NEWEST, description="Order of version sections")
    versions: List[ChangelogVersion] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.versions
