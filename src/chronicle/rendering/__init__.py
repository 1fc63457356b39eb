"""Rendering of changelog documents to Markdown and HTML."""

from chronicle.models import ChangelogDocument, OutputFormat
from chronicle.rendering.base import BaseRenderer
from chronicle.rendering.html_renderer import HtmlRenderer
from chronicle.rendering.markdown_renderer import MarkdownRenderer
from chronicle.rendering.writer import output_path_for, write_changelog

_RENDERERS = {
    OutputFormat.MARKDOWN: MarkdownRenderer,
    OutputFormat.HTML: HtmlRenderer,
}


def get_renderer(output_format: OutputFormat) -> BaseRenderer:
    """Create the renderer for an output format."""
    return _RENDERERS[output_format]()


def render(document: ChangelogDocument, output_format: OutputFormat) -> str:
    """Render a changelog document in the given format."""
    return get_renderer(output_format).render(document)


__all__ = [
    "BaseRenderer",
    "MarkdownRenderer",
    "HtmlRenderer",
    "get_renderer",
    "render",
    "output_path_for",
    "write_changelog",
]
