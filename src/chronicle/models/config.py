"""Configuration models."""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SortOrder(str, Enum):
    """Order in which version sections appear in the changelog."""

    NEWEST = "newest"
    OLDEST = "oldest"


class OutputFormat(str, Enum):
    """Rendered document format."""

    MARKDOWN = "markdown"
    HTML = "html"

    @property
    def extension(self) -> str:
        return ".md" if self is OutputFormat.MARKDOWN else ".html"


class UnclassifiedPolicy(str, Enum):
    """What to do with commits whose message does not match the commit pattern."""

    DROP = "drop"
    GROUP = "group"


class RepositoryConfig(BaseModel):
    """Configuration for the Git repository to read history from."""

    repo_path: Path = Field(..., description="Path to the Git repository")
    branch: str = Field("HEAD", description="Revision to walk history from")
    max_count: Optional[int] = Field(None, description="Maximum number of commits to read")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "repo_path": "/path/to/repo",
                "branch": "main",
                "max_count": None,
            }
        }
    )


class ChangelogSettings(BaseSettings):
    """Changelog generation settings.

    Settings can be loaded from environment variables or .env file.
    All settings are prefixed with CHRONICLE_ (e.g., CHRONICLE_SORT_ORDER).
    """

    model_config = SettingsConfigDict(
        env_prefix="CHRONICLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    title: str = Field(default="Changelog", description="Changelog title")
    sort_order: SortOrder = Field(
        default=SortOrder.NEWEST,
        description="Version order: newest or oldest first",
    )
    output_format: OutputFormat = Field(
        default=OutputFormat.MARKDOWN,
        description="Output format: markdown or html",
    )
    output: Path = Field(default=Path("CHANGELOG.md"), description="Output file path")

    # Custom regular expressions, validated before any commit is read
    commit_pattern: Optional[str] = Field(
        default=None,
        description="Commit message pattern with named groups 'type' and 'message'",
    )
    version_pattern: Optional[str] = Field(
        default=None,
        description="Version tag pattern with a 'version' group or one capturing group",
    )

    unclassified: UnclassifiedPolicy = Field(
        default=UnclassifiedPolicy.DROP,
        description="Drop unclassified commits or collect them in a fallback group",
    )

    # Logging
    log_level: str = "INFO"
