"""Git history extraction."""

from chronicle.extraction.git_extractor import GitExtractor

__all__ = ["GitExtractor"]
