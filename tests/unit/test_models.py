"""Tests for data and configuration models."""

from datetime import datetime, timezone
from pathlib import Path

import pytest
from pydantic import ValidationError

from chronicle.models import (
    ChangelogSettings,
    CommitType,
    OutputFormat,
    RawCommit,
    RepositoryConfig,
    SortOrder,
    UnclassifiedPolicy,
)


class TestCommitType:
    """Test the commit type table."""

    def test_ranks_are_unique_and_total(self):
        ranks = [commit_type.rank for commit_type in CommitType]
        assert sorted(ranks) == list(range(len(CommitType)))

    def test_ranked_order(self):
        assert CommitType.ranked()[0] == CommitType.FEATURES
        assert CommitType.ranked()[-1] == CommitType.CHORE
        assert CommitType.ranked() == list(CommitType)

    def test_from_keyword(self):
        assert CommitType.from_keyword("ci") == CommitType.CONTINUOUS_INTEGRATION
        assert CommitType.from_keyword("CI") is None
        assert CommitType.from_keyword("docs") is None

    def test_heading(self):
        assert CommitType.FEATURES.heading == "🚀 Features"
        assert CommitType.CONTINUOUS_INTEGRATION.label == "Continuous Integration"
        assert CommitType.PERFORMANCE.emoji == "⚡"


class TestRawCommit:
    """Test RawCommit."""

    def test_immutable(self):
        commit = RawCommit(
            hash="abc123def456",
            author_date=datetime(2025, 1, 1, tzinfo=timezone.utc),
            message="feat: a",
        )

        assert commit.tag is None
        assert commit.short_hash == "abc123d"
        with pytest.raises(ValidationError):
            commit.message = "changed"


class TestChangelogSettings:
    """Test settings loading."""

    def test_defaults(self, monkeypatch):
        for name in ["TITLE", "SORT_ORDER", "OUTPUT_FORMAT", "UNCLASSIFIED", "OUTPUT"]:
            monkeypatch.delenv(f"CHRONICLE_{name}", raising=False)

        settings = ChangelogSettings(_env_file=None)

        assert settings.title == "Changelog"
        assert settings.sort_order == SortOrder.NEWEST
        assert settings.output_format == OutputFormat.MARKDOWN
        assert settings.output == Path("CHANGELOG.md")
        assert settings.unclassified == UnclassifiedPolicy.DROP
        assert settings.commit_pattern is None
        assert settings.version_pattern is None

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("CHRONICLE_TITLE", "History")
        monkeypatch.setenv("CHRONICLE_SORT_ORDER", "oldest")
        monkeypatch.setenv("CHRONICLE_UNCLASSIFIED", "group")

        settings = ChangelogSettings(_env_file=None)

        assert settings.title == "History"
        assert settings.sort_order == SortOrder.OLDEST
        assert settings.unclassified == UnclassifiedPolicy.GROUP

    def test_invalid_sort_order(self, monkeypatch):
        monkeypatch.setenv("CHRONICLE_SORT_ORDER", "sideways")

        with pytest.raises(ValidationError):
            ChangelogSettings(_env_file=None)

    def test_output_format_extension(self):
        assert OutputFormat.MARKDOWN.extension == ".md"
        assert OutputFormat.HTML.extension == ".html"


class TestRepositoryConfig:
    """Test the repository configuration model."""

    def test_defaults(self):
        config = RepositoryConfig(repo_path=Path("/tmp/repo"))

        assert config.branch == "HEAD"
        assert config.max_count is None

    def test_schema_example(self):
        schema = RepositoryConfig.model_json_schema()

        assert schema["example"]["branch"] == "main"
        assert RepositoryConfig.model_config["json_schema_extra"]["example"]["repo_path"] == "/path/to/repo"
