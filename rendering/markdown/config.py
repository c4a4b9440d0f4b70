from dataclasses import dataclass
from typing import Tuple

from django.conf import settings

DEFAULT_EXTENSIONS = ("fenced_code", "tables", "sane_lists")


@dataclass(frozen=True)
class MarkdownConfig:
    """
    Read-only configuration for one Markdown conversion.

    The raw HTML escaper and heading ids are not listed here: the renderer
    always installs them, so configuration cannot turn them off.
    """

    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    output_format: str = "html"


def get_markdown_config():
    """Configuration for Python-Markdown, with overrides from Django settings."""
    extensions = getattr(settings, "CONTENT_MARKDOWN_EXTENSIONS", DEFAULT_EXTENSIONS)
    return MarkdownConfig(extensions=tuple(extensions))
