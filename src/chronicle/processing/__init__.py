"""Commit classification, version segmentation and changelog assembly."""

from chronicle.processing.assembler import ChangelogAssembler, group_commits, order_versions
from chronicle.processing.classifier import classify, subject_line
from chronicle.processing.patterns import (
    DEFAULT_COMMIT_PATTERN,
    DEFAULT_VERSION_PATTERN,
    CommitCaptures,
    CommitPattern,
    CompiledPattern,
    InvalidPatternError,
    VersionPattern,
    compile_commit_pattern,
    compile_version_pattern,
)
from chronicle.processing.segmenter import segment

__all__ = [
    "ChangelogAssembler",
    "group_commits",
    "order_versions",
    "classify",
    "subject_line",
    "segment",
    "CompiledPattern",
    "CommitPattern",
    "VersionPattern",
    "CommitCaptures",
    "InvalidPatternError",
    "compile_commit_pattern",
    "compile_version_pattern",
    "DEFAULT_COMMIT_PATTERN",
    "DEFAULT_VERSION_PATTERN",
]
