# rendering/postprocessors/sanitizer.py

import html as html_lib
import logging
from functools import lru_cache

import bleach

logger = logging.getLogger(__name__)

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Build the allowlist once; it is never mutated afterwards."""
    allowed_tags = frozenset(
        {
            # text
            "p",
            "br",
            "hr",
            "div",
            "span",
            "blockquote",
            "strong",
            "b",
            "em",
            "i",
            "u",
            "s",
            "del",
            "ins",
            "mark",
            "small",
            "sub",
            "sup",
            "abbr",
            "cite",
            "q",
            # headings
            *HEADING_TAGS,
            # lists
            "ul",
            "ol",
            "li",
            "dl",
            "dt",
            "dd",
            # code
            "pre",
            "code",
            "kbd",
            "samp",
            # tables
            "table",
            "thead",
            "tbody",
            "tfoot",
            "tr",
            "th",
            "td",
            "caption",
            # media
            "img",
            "figure",
            "figcaption",
            # links
            "a",
        }
    )

    allowed_attrs = {
        "*": ["class", "title"],
        "a": ["href", "title", "rel", "target"],
        "img": ["src", "alt", "title", "width", "height", "loading"],
        # rich editor code blocks carry their language on <pre>
        "pre": ["class", "data-language", "data-highlighted"],
        "code": ["class"],
        "th": ["colspan", "rowspan", "scope"],
        "td": ["colspan", "rowspan"],
        "ol": ["start", "type"],
        "abbr": ["title"],
        "blockquote": ["cite"],
        **{tag: ["id", "class"] for tag in HEADING_TAGS},
    }

    allowed_protocols = frozenset({"http", "https", "mailto", "tel"})

    return allowed_tags, allowed_attrs, allowed_protocols


def sanitize_html(html, context=None):
    """
    Sanitize HTML with bleach against the fixed allowlist.

    Disallowed elements are stripped (their text is kept), comments are
    removed, and no ``style`` or ``on*`` attribute survives. ``href`` and
    ``src`` values outside http/https/mailto/tel are dropped, which removes
    ``javascript:`` and ``data:`` URLs.

    Running it twice gives the same result as running it once.
    """
    allowed_tags, allowed_attrs, allowed_protocols = _get_bleach_config()

    try:
        return bleach.clean(
            html,
            tags=allowed_tags,
            attributes=allowed_attrs,
            protocols=allowed_protocols,
            strip=True,
            strip_comments=True,
        )
    except Exception as e:
        # Never hand back unsanitized markup; show it as text instead.
        logger.error(f"Bleach sanitization failed: {e}", exc_info=True)
        return html_lib.escape(html)
