"""End-to-end changelog generation."""

from pathlib import Path
from typing import List, Optional, Sequence

import structlog

from chronicle.extraction import GitExtractor
from chronicle.models import (
    ChangelogDocument,
    ChangelogSettings,
    RawCommit,
    RepositoryConfig,
    VersionBucket,
)
from chronicle.processing import (
    ChangelogAssembler,
    compile_commit_pattern,
    compile_version_pattern,
    segment,
)
from chronicle.rendering import output_path_for, render, write_changelog

logger = structlog.get_logger(__name__)


class ChangelogGenerator:
    """Runs history through segmentation, classification and assembly."""

    def __init__(self, settings: Optional[ChangelogSettings] = None) -> None:
        """Initialize the generator.

        Custom patterns are compiled here, so invalid configuration fails
        before any history is read.

        Args:
            settings: Generation settings. If None, loads from environment.

        Raises:
            InvalidPatternError: If a custom pattern is invalid
        """
        self.settings = settings or ChangelogSettings()
        self.commit_pattern = compile_commit_pattern(self.settings.commit_pattern)
        self.version_pattern = compile_version_pattern(self.settings.version_pattern)
        self.assembler = ChangelogAssembler(
            commit_pattern=self.commit_pattern,
            unclassified=self.settings.unclassified,
        )

    def read_history(self, repository: RepositoryConfig) -> List[RawCommit]:
        """Read newest-first commits from a repository."""
        extractor = GitExtractor(repository)
        return extractor.extract_commits(version_pattern=self.version_pattern)

    def segment(self, commits: Sequence[RawCommit]) -> List[VersionBucket]:
        """Split commits into version buckets in newest-first order."""
        return segment(commits, self.version_pattern)

    def generate(self, commits: Sequence[RawCommit]) -> ChangelogDocument:
        """Build the changelog document for newest-first commits.

        Args:
            commits: Commits in newest-first order

        Returns:
            ChangelogDocument
        """
        return self.assembler.assemble(
            self.settings.title,
            self.segment(commits),
            self.settings.sort_order,
        )

    def render(self, document: ChangelogDocument) -> str:
        return render(document, self.settings.output_format)

    def write(self, document: ChangelogDocument, output: Optional[Path] = None) -> Path:
        """Render and write the document.

        Args:
            document: Assembled changelog
            output: Destination, defaults to the configured output path. The
                extension is adjusted to the output format.

        Returns:
            Path that was written
        """
        path = output_path_for(output or self.settings.output, self.settings.output_format)
        text = self.render(document)
        write_changelog(text, path)
        logger.info("changelog_written", path=str(path), format=self.settings.output_format.value)
        return path

    def generate_from_repository(self, repository: RepositoryConfig) -> ChangelogDocument:
        """Read a repository's history and build its changelog document."""
        return self.generate(self.read_history(repository))
