"""Git repository history extraction."""

from typing import Dict, List, Optional

import git
import structlog
from git import Commit, Repo

from chronicle.models import RawCommit, RepositoryConfig
from chronicle.processing.patterns import VersionPattern, compile_version_pattern

logger = structlog.get_logger(__name__)


class GitExtractor:
    """Extracts commit history and tags from a Git repository."""

    def __init__(self, config: RepositoryConfig) -> None:
        """Initialize the GitExtractor.

        Args:
            config: Repository configuration

        Raises:
            ValueError: If repository path is invalid
        """
        self.config = config
        if not config.repo_path.exists():
            raise ValueError(f"Repository path does not exist: {config.repo_path}")

        try:
            self.repo = Repo(config.repo_path)
        except git.exc.InvalidGitRepositoryError as e:
            raise ValueError(f"Invalid Git repository: {config.repo_path}") from e

    def extract_commits(
        self,
        version_pattern: Optional[VersionPattern] = None,
    ) -> List[RawCommit]:
        """Extract commits newest-first, each with the tag pointing at it.

        Args:
            version_pattern: Used to pick the release tag when several tags
                point at one commit (default version pattern if None)

        Returns:
            List of RawCommit objects, empty for a repository without commits

        Raises:
            ValueError: If the configured branch does not resolve
        """
        if not self.repo.head.is_valid():
            logger.info("repository_empty", repo=str(self.config.repo_path))
            return []

        try:
            tip = self.repo.commit(self.config.branch)
        except (git.exc.BadName, ValueError) as e:
            raise ValueError(f"Cannot read history of {self.config.branch}: {e}") from e

        version_pattern = version_pattern or compile_version_pattern()
        tags = self.extract_tags()
        kwargs = {"date_order": True}
        if self.config.max_count:
            kwargs["max_count"] = self.config.max_count

        history = list(self.repo.iter_commits(tip.hexsha, **kwargs))

        commits = [
            self._to_raw_commit(commit, self._pick_tag(tags.get(commit.hexsha, []), version_pattern))
            for commit in history
        ]

        logger.info(
            "history_extracted",
            repo=str(self.config.repo_path),
            branch=self.config.branch,
            commits=len(commits),
            tags=len(tags),
        )
        return commits

    def extract_tags(self) -> Dict[str, List[str]]:
        """Map commit hashes to the names of tags pointing at them.

        Annotated tags are peeled to the commit they tag. Tags that do not
        point at a commit are skipped.

        Returns:
            Dict of commit hash to sorted tag names
        """
        tags: Dict[str, List[str]] = {}
        for tag in self.repo.tags:
            try:
                commit = tag.commit
            except ValueError:
                logger.debug("tag_skipped", tag=tag.name)
                continue
            tags.setdefault(commit.hexsha, []).append(tag.name)

        return {hexsha: sorted(names) for hexsha, names in tags.items()}

    @staticmethod
    def _pick_tag(names: List[str], version_pattern: VersionPattern) -> Optional[str]:
        """Choose the tag to attach to a commit.

        Args:
            names: Sorted tag names pointing at the commit
            version_pattern: Preferred tag pattern

        Returns:
            First matching tag name, else the first tag name, else None
        """
        if not names:
            return None
        for name in names:
            if version_pattern.version_of(name) is not None:
                return name
        return names[0]

    @staticmethod
    def _to_raw_commit(commit: Commit, tag: Optional[str]) -> RawCommit:
        """Convert a GitPython Commit object.

        Args:
            commit: GitPython Commit object
            tag: Tag name pointing at this commit

        Returns:
            RawCommit object
        """
        message = commit.message
        if isinstance(message, bytes):
            message = message.decode("utf-8", errors="replace")

        return RawCommit(
            hash=commit.hexsha,
            author_date=commit.authored_datetime,
            tag=tag,
            message=message.strip(),
        )
