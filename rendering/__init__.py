from rendering.formats import ContentFormat
from rendering.renderer import (
    MARKDOWN_ERROR_HTML,
    NO_CONTENT_HTML,
    render_content,
    render_for_display,
)

__all__ = (
    "ContentFormat",
    "MARKDOWN_ERROR_HTML",
    "NO_CONTENT_HTML",
    "render_content",
    "render_for_display",
)
