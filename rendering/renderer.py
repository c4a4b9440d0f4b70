# rendering/renderer.py
"""
Format dispatcher: (content, format) -> safe markup.

    plaintext          -> escaped paragraphs / bullet lists
    markdown           -> Python-Markdown (raw HTML escaped) -> sanitizer
    html, html_editor  -> sanitizer

render_for_display() adds the post-render pass (code highlighting) on top.
"""

import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from rendering.exceptions import MarkdownRenderError
from rendering.formats import ContentFormat
from rendering.markdown.renderer import render_markdown
from rendering.plaintext import render_plaintext
from rendering.postprocessors import DISPLAY_POSTPROCESSORS, apply_postprocessors

logger = logging.getLogger(__name__)

NO_CONTENT_HTML = '<p class="no-content">No content is available yet.</p>'
MARKDOWN_ERROR_HTML = '<p class="render-error">Error rendering markdown content</p>'


def _render_markdown(content, context):
    try:
        return render_markdown(content, context)
    except MarkdownRenderError:
        logger.exception("Error parsing markdown")
        return MARKDOWN_ERROR_HTML


def _render_html(content, context):
    return apply_postprocessors(content, context)


_RENDERERS = {
    ContentFormat.PLAINTEXT: render_plaintext,
    ContentFormat.MARKDOWN: _render_markdown,
    ContentFormat.HTML: _render_html,
    ContentFormat.HTML_EDITOR: _render_html,
}

_missing = set(ContentFormat) - set(_RENDERERS)
if _missing:
    raise ImproperlyConfigured(
        f"No renderer registered for content formats: {', '.join(sorted(_missing))}"
    )


def render_content(content, content_format, context=None):
    """
    Render ``content`` declared as ``content_format`` to sanitized HTML.

    Empty content (None, "" or only whitespace) yields NO_CONTENT_HTML.
    Markdown conversion failures are logged and yield MARKDOWN_ERROR_HTML.
    An unknown format raises ValueError.
    """
    content_format = ContentFormat.coerce(content_format)
    if not content or not content.strip():
        return NO_CONTENT_HTML
    return _RENDERERS[content_format](content, context or {})


def render_for_display(content, content_format, context=None):
    """render_content() followed by syntax highlighting of code blocks."""
    context = context or {}
    html = render_content(content, content_format, context)
    if not getattr(settings, "CONTENT_HIGHLIGHT_ENABLED", True):
        return html
    return apply_postprocessors(html, context, DISPLAY_POSTPROCESSORS)
