"""
Plain text to HTML.

- &, < and > are escaped; quotes are left as typed
- Two or more newlines start a new paragraph
- A paragraph whose first non-blank character is -, * or • becomes a <ul>,
  one <li> per non-empty line, with the bullet marker removed
- Any other paragraph becomes a <p>, single newlines turned into <br>
"""

import html
import re

BULLET_MARKERS = ("-", "*", "•")

_PARAGRAPH_SPLIT_RE = re.compile(r"\n{2,}")
_BULLET_RE = re.compile(r"^[-*•]\s*")


def escape_plaintext(text: str) -> str:
    return html.escape(text, quote=False)


def _render_list(paragraph: str) -> str:
    items = []
    for line in paragraph.split("\n"):
        line = line.strip()
        if line:
            items.append(f"<li>{_BULLET_RE.sub('', line, count=1)}</li>")
    return f"<ul>{''.join(items)}</ul>"


def _render_paragraph(paragraph: str) -> str:
    body = paragraph.strip("\n").replace("\n", "<br>")
    return f"<p>{body}</p>"


def render_plaintext(content: str, context=None) -> str:
    text = content.replace("\r\n", "\n").replace("\r", "\n")
    blocks = []
    for paragraph in _PARAGRAPH_SPLIT_RE.split(escape_plaintext(text)):
        if not paragraph.strip():
            continue
        if paragraph.lstrip().startswith(BULLET_MARKERS):
            blocks.append(_render_list(paragraph))
        else:
            blocks.append(_render_paragraph(paragraph))
    return "".join(blocks)
