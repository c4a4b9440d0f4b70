# rendering/markdown/extensions/heading_ids.py
"""
A Markdown extension that sets id attributes on h1–h6 for deep linking.

The id is derived from the heading text:
- lowercased
- characters other than word characters, whitespace and hyphens removed
- whitespace runs replaced with a single hyphen
- leading/trailing hyphens trimmed

"## Hello, World!" becomes <h2 id="hello-world">.

Notes:
- Headings whose slug is empty get no id.
- Identical headings get identical ids; no -2/-3 suffixes are added.
"""

import html
import re

from markdown import util
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

HEADING_TAGS = {f"h{i}" for i in range(1, 7)}

_NON_SLUG_CHARS_RE = re.compile(r"[^\w\s-]")
_WHITESPACE_RE = re.compile(r"\s+")
# Backslash escapes are still encoded as STX<ord>ETX when tree processors run.
_ESCAPED_CHAR_RE = re.compile(re.escape(util.STX) + r"([0-9]+)" + re.escape(util.ETX))


def slugify_heading(text: str) -> str:
    slug = _NON_SLUG_CHARS_RE.sub("", text.lower())
    slug = _WHITESPACE_RE.sub("-", slug)
    return slug.strip("-")


class HeadingIdTreeprocessor(Treeprocessor):
    def _stashed_text(self, match) -> str:
        stashed = self.md.htmlStash.rawHtmlBlocks[int(match.group(1))]
        return html.unescape(stashed) if isinstance(stashed, str) else ""

    def heading_text(self, element) -> str:
        text = "".join(element.itertext()).replace(util.AMP_SUBSTITUTE, "&")
        text = util.HTML_PLACEHOLDER_RE.sub(self._stashed_text, text)
        return _ESCAPED_CHAR_RE.sub(lambda m: chr(int(m.group(1))), text)

    def run(self, root):
        for element in root.iter():
            if element.tag not in HEADING_TAGS:
                continue
            slug = slugify_heading(self.heading_text(element))
            if slug:
                element.set("id", slug)


class HeadingIdExtension(Extension):
    def extendMarkdown(self, md):
        # After "inline" (20) so heading text is fully parsed.
        md.treeprocessors.register(HeadingIdTreeprocessor(md), "heading_ids", priority=15)


def makeExtension(**kwargs):
    return HeadingIdExtension(**kwargs)
