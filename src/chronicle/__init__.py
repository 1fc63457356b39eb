"""chronicle - changelog generation from Git commit history."""

__version__ = "0.1.0"

from chronicle.generator import ChangelogGenerator
from chronicle.models import ChangelogDocument, ChangelogSettings, CommitType, RawCommit
from chronicle.processing import InvalidPatternError

__all__ = [
    "ChangelogGenerator",
    "ChangelogDocument",
    "ChangelogSettings",
    "CommitType",
    "RawCommit",
    "InvalidPatternError",
]
