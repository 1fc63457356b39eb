"""HTML changelog renderer."""

from html import escape
from typing import List

from chronicle.models import ChangelogDocument, ChangelogVersion
from chronicle.rendering.base import GENERATOR_NAME, INTRO, BaseRenderer

STYLE = """\
        body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Helvetica, Arial, sans-serif; line-height: 1.5; max-width: 800px; margin: 0 auto; padding: 20px; color: #24292e; }
        h1 { border-bottom: 1px solid #eaecef; padding-bottom: 0.3em; }
        h2 { margin-top: 24px; margin-bottom: 16px; font-weight: 600; line-height: 1.25; border-bottom: 1px solid #eaecef; padding-bottom: 0.3em; }
        h3 { margin-top: 24px; margin-bottom: 16px; font-weight: 600; line-height: 1.25; }
        ul { padding-left: 2em; }
        li { margin: 0.25em 0; }
        .footer { margin-top: 30px; color: #6a737d; font-size: 0.9em; text-align: center; }"""


class HtmlRenderer(BaseRenderer):
    """Renders a changelog as a standalone HTML page.

    All text taken from commits and configuration is HTML-escaped.
    """

    def render(self, document: ChangelogDocument) -> str:
        title = escape(document.title)
        lines = [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '    <meta charset="UTF-8">',
            f"    <title>{title}</title>",
            "    <style>",
            STYLE,
            "    </style>",
            "</head>",
            "<body>",
            f"    <h1>{title}</h1>",
            f"    <p>{INTRO}</p>",
        ]

        for version in document.versions:
            lines.extend(self._render_version(version))

        lines.extend(
            [
                f'    <div class="footer">Generated by {GENERATOR_NAME}</div>',
                "</body>",
                "</html>",
            ]
        )
        return "\n".join(lines) + "\n"

    def _render_version(self, version: ChangelogVersion) -> List[str]:
        lines = [f"    <h2>{escape(self.version_heading(version))}</h2>"]

        for group in version.groups:
            lines.append(f"    <h3>{escape(group.heading)}</h3>")
            lines.append("    <ul>")
            for commit in group.commits:
                message = escape(commit.message)
                if commit.scope:
                    lines.append(f"        <li><strong>{escape(commit.scope)}</strong>: {message}</li>")
                else:
                    lines.append(f"        <li>{message}</li>")
            lines.append("    </ul>")

        return lines
