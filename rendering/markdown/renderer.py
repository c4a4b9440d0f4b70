# rendering/markdown/renderer.py

import markdown

from rendering.exceptions import MarkdownRenderError
from rendering.postprocessors import apply_postprocessors

from .config import get_markdown_config
from .extensions import HeadingIdExtension, RawHtmlEscapeExtension


def build_markdown(config=None):
    """Return a fresh Markdown instance; instances are never shared between renders."""
    config = config or get_markdown_config()
    return markdown.Markdown(
        extensions=[*config.extensions, RawHtmlEscapeExtension(), HeadingIdExtension()],
        output_format=config.output_format,
    )


def render_markdown(text, context=None, config=None):
    """
    Convert Markdown to sanitized HTML.

    Args:
        text: Raw markdown text
        context: Optional dict passed to the postprocessors
        config: Optional MarkdownConfig; defaults to the settings-driven one

    Raises:
        MarkdownRenderError: if the conversion itself fails
    """
    context = context or {}

    try:
        html = build_markdown(config).convert(text)
    except Exception as e:
        raise MarkdownRenderError(str(e)) from e

    # Post-processing: sanitization always runs on converted output
    return apply_postprocessors(html, context)
