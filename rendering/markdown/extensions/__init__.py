from .heading_ids import HeadingIdExtension, slugify_heading
from .raw_html_escaper import RawHtmlEscapeExtension

__all__ = ("HeadingIdExtension", "RawHtmlEscapeExtension", "slugify_heading")
