"""Compiled matchers for commit messages and version tags.

Custom expressions are configuration: they are validated and compiled once,
before any commit is processed, and the resulting matchers are immutable.
"""

import re
from dataclasses import dataclass
from typing import NamedTuple, Optional, Pattern

DEFAULT_COMMIT_PATTERN = r"^(?P<type>\w+)(?:\((?P<scope>[^()]*)\))?:\s(?P<message>.+)$"
DEFAULT_VERSION_PATTERN = r"^v?(?P<version>\d+\.\d+\.\d+)$"


class InvalidPatternError(ValueError):
    """A custom expression does not compile or lacks a required capture group."""

    def __init__(self, expression: str, reason: str) -> None:
        self.expression = expression
        self.reason = reason
        super().__init__(f"Invalid pattern {expression!r}: {reason}")


class CommitCaptures(NamedTuple):
    """Groups captured from a commit subject line."""

    type: str
    scope: Optional[str]
    message: str


@dataclass(frozen=True)
class CompiledPattern:
    """A validated regular expression."""

    expression: str
    regex: Pattern[str]

    def match(self, text: str) -> Optional[re.Match]:
        return self.regex.search(text)


@dataclass(frozen=True)
class CommitPattern(CompiledPattern):
    """Matcher for commit subject lines with 'type', 'scope' and 'message' groups."""

    def captures(self, text: str) -> Optional[CommitCaptures]:
        """Match a subject line.

        Args:
            text: Commit subject line

        Returns:
            CommitCaptures, or None if the text does not match or a required
            group did not participate in the match
        """
        found = self.match(text)
        if found is None:
            return None

        groups = found.groupdict()
        if groups.get("type") is None or groups.get("message") is None:
            return None

        return CommitCaptures(
            type=groups["type"],
            scope=groups.get("scope"),
            message=groups["message"],
        )


@dataclass(frozen=True)
class VersionPattern(CompiledPattern):
    """Matcher for version tags.

    The version string is taken from the 'version' group when the expression
    defines one, otherwise from the first capturing group.
    """

    def version_of(self, tag: str) -> Optional[str]:
        found = self.match(tag)
        if found is None:
            return None

        if "version" in self.regex.groupindex:
            version = found.group("version")
        else:
            version = found.group(1)
        # An optional group that did not participate still marks a release
        return version if version is not None else found.group(0)


def _compile(expression: str) -> Pattern[str]:
    try:
        return re.compile(expression)
    except re.error as e:
        raise InvalidPatternError(expression, str(e)) from e


def compile_commit_pattern(expression: Optional[str] = None) -> CommitPattern:
    """Compile the commit message pattern.

    Args:
        expression: Custom expression, or None for the default conventional
            commit pattern

    Returns:
        CommitPattern

    Raises:
        InvalidPatternError: If the expression does not compile or lacks the
            'type' or 'message' named group
    """
    expression = DEFAULT_COMMIT_PATTERN if expression is None else expression
    regex = _compile(expression)

    missing = [name for name in ("type", "message") if name not in regex.groupindex]
    if missing:
        raise InvalidPatternError(
            expression, f"missing named group(s): {', '.join(missing)}"
        )

    return CommitPattern(expression=expression, regex=regex)


def compile_version_pattern(expression: Optional[str] = None) -> VersionPattern:
    """Compile the version tag pattern.

    Args:
        expression: Custom expression, or None for the default
            ``v<major>.<minor>.<patch>`` pattern

    Returns:
        VersionPattern

    Raises:
        InvalidPatternError: If the expression does not compile or has no
            capturing group to take the version string from
    """
    expression = DEFAULT_VERSION_PATTERN if expression is None else expression
    regex = _compile(expression)

    if "version" not in regex.groupindex and regex.groups < 1:
        raise InvalidPatternError(
            expression, "needs a 'version' named group or at least one capturing group"
        )

    return VersionPattern(expression=expression, regex=regex)
