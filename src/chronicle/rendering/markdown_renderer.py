"""Markdown changelog renderer."""

from typing import List

from chronicle.models import ChangelogDocument, ChangelogVersion
from chronicle.rendering.base import GENERATOR_NAME, INTRO, BaseRenderer


class MarkdownRenderer(BaseRenderer):
    """Renders a changelog as Markdown in the keep-a-changelog layout."""

    def render(self, document: ChangelogDocument) -> str:
        lines = [f"# {document.title}", "", INTRO, ""]

        for version in document.versions:
            lines.extend(self._render_version(version))

        lines.append(f"<!-- generated by {GENERATOR_NAME} -->")
        return "\n".join(lines) + "\n"

    def _render_version(self, version: ChangelogVersion) -> List[str]:
        lines = [f"## {self.version_heading(version)}", ""]

        for group in version.groups:
            lines.extend([f"### {group.heading}", ""])
            for commit in group.commits:
                if commit.scope:
                    lines.append(f"- **{commit.scope}**: {commit.message}")
                else:
                    lines.append(f"- {commit.message}")
            lines.append("")

        return lines
