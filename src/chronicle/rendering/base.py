"""Base class for changelog renderers."""

from abc import ABC, abstractmethod

from chronicle.models import ChangelogDocument, ChangelogVersion

INTRO = "All notable changes to this project will be documented in this file."
GENERATOR_NAME = "chronicle"
DATE_FORMAT = "%Y-%m-%d"


class BaseRenderer(ABC):
    """Abstract base class for changelog renderers."""

    @abstractmethod
    def render(self, document: ChangelogDocument) -> str:
        """Serialize a changelog document.

        Args:
            document: Assembled changelog

        Returns:
            Rendered text
        """
        pass

    @staticmethod
    def version_heading(version: ChangelogVersion) -> str:
        """Heading text for a version section, e.g. ``[v1.2.0] - 2024-01-15``."""
        if version.date is None:
            return f"[{version.label}]"
        return f"[{version.label}] - {version.date.strftime(DATE_FORMAT)}"
