# rendering/postprocessors/code_highlighter.py
"""
Postprocessor that syntax-highlights code blocks in rendered markup.

This postprocessor:
- Finds every <pre> block (with or without an inner <code>)
- Picks the language from, in order: data-language on <pre>, a
  language-<name> / lang-<name> class on <code>, then "plaintext"
- Tokenizes the code with Pygments and rebuilds it as nested
  <span class="..."> wrappers that follow the token type hierarchy
  (Token.Name.Function -> <span class="n"><span class="nf">...</span></span>)
- Streams every text token through one BracketColorizer per block, so
  braces get depth colours on top of the grammar's own classes
- Marks handled blocks with data-highlighted="yes" and skips them on later
  runs

Unknown languages are left untouched and logged as a warning.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup, Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.token import STANDARD_TYPES, Text
from pygments.util import ClassNotFound

from rendering.brackets import BracketColorizer
from rendering.exceptions import UnknownLanguageError

logger = logging.getLogger(__name__)

PLAINTEXT_LANGUAGE = "plaintext"
HIGHLIGHTED_ATTR = "data-highlighted"
LANGUAGE_ATTR = "data-language"

_PLAINTEXT_ALIASES = {"plaintext", "plain", "text", "txt"}
_LANGUAGE_CLASS_RE = re.compile(r"^(?:language|lang)-(.+)$")

# Same escaping as bs4's "minimal" formatter, but void elements are written
# the way bleach writes them (<br>, not <br/>).
_OUTPUT_FORMATTER = HTMLFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix=None,
)


@dataclass(frozen=True)
class CodeToken:
    """A node of the token tree: plain text or a classed element."""

    kind: str
    value: str = ""
    classes: Tuple[str, ...] = ()
    children: Tuple["CodeToken", ...] = ()

    @classmethod
    def text(cls, value: str) -> "CodeToken":
        return cls(kind="text", value=value)

    @classmethod
    def element(cls, classes, children) -> "CodeToken":
        return cls(kind="element", classes=tuple(classes), children=tuple(children))


def detect_language(pre: Tag, code: Optional[Tag] = None) -> str:
    explicit = (pre.get(LANGUAGE_ATTR) or "").strip()
    if explicit:
        return explicit.lower()

    if code is not None:
        classes = code.get("class", [])
        if isinstance(classes, str):
            classes = classes.split()
        for css_class in classes:
            match = _LANGUAGE_CLASS_RE.match(css_class)
            if match:
                return match.group(1).lower()

    return PLAINTEXT_LANGUAGE


def resolve_lexer(language: str):
    """Return a Pygments lexer that keeps the code text byte for byte."""
    if language in _PLAINTEXT_ALIASES:
        return TextLexer(stripnl=False, ensurenl=False)
    try:
        return get_lexer_by_name(language, stripnl=False, ensurenl=False)
    except ClassNotFound as exc:
        raise UnknownLanguageError(language) from exc


def _css_class(ttype) -> str:
    # Mirrors HtmlFormatter: custom subtypes extend their nearest known parent.
    name = STANDARD_TYPES.get(ttype)
    suffix = ""
    while name is None:
        suffix = ttype[-1] + suffix
        ttype = ttype.parent
        name = STANDARD_TYPES.get(ttype)
    return name + suffix


def _build_tree(items, depth: int) -> List[CodeToken]:
    nodes = []
    i = 0
    while i < len(items):
        path, value = items[i]
        if len(path) <= depth:
            nodes.append(CodeToken.text(value))
            i += 1
            continue

        head = path[depth]
        j = i
        while j < len(items) and len(items[j][0]) > depth and items[j][0][depth] == head:
            j += 1
        nodes.append(CodeToken.element([_css_class(head)], _build_tree(items[i:j], depth + 1)))
        i = j
    return nodes


def tokenize(code: str, lexer) -> List[CodeToken]:
    """Tokenize ``code`` into a tree that mirrors the token type hierarchy."""
    items = []
    for ttype, value in lexer.get_tokens(code):
        if not value:
            continue
        # Text and whitespace stay bare.
        path = () if ttype in Text else tuple(ttype.split()[1:])
        items.append((path, value))
    return _build_tree(items, 0)


def render_tokens(tokens, colorizer: BracketColorizer) -> str:
    parts = []
    for token in tokens:
        if token.kind == "text":
            parts.append(colorizer.feed(token.value))
        else:
            inner = render_tokens(token.children, colorizer)
            parts.append(f'<span class="{" ".join(token.classes)}">{inner}</span>')
    return "".join(parts)


def highlight_block(pre: Tag) -> bool:
    """Highlight one <pre> in place. Returns False when left untouched."""
    code = pre.find("code")
    target = code if code is not None else pre
    language = detect_language(pre, code)

    try:
        lexer = resolve_lexer(language)
    except UnknownLanguageError as e:
        logger.warning(f"Skipping code highlighting: {e}")
        return False

    markup = render_tokens(tokenize(target.get_text(), lexer), BracketColorizer())
    fragment = BeautifulSoup(markup, "html.parser")

    target.clear()
    for node in list(fragment.contents):
        target.append(node.extract())

    classes = target.get("class", [])
    if isinstance(classes, str):
        classes = classes.split()
    target["class"] = list(dict.fromkeys(classes + ["hljs", f"language-{language}"]))
    pre[HIGHLIGHTED_ATTR] = "yes"
    return True


def highlight_code_blocks(html, context=None):
    """
    Highlight every code block in ``html``.

    Markup without <pre> is returned as is, and blocks already marked
    data-highlighted="yes" are skipped, so the pass is idempotent and
    leaves non-code content alone.

    When a block is highlighted the whole document is re-serialized, so
    non-code content keeps its DOM but not its exact spelling: entities
    other than &amp; &lt; &gt; come back as the characters they stand for
    (&nbsp; becomes U+00A0, &quot; becomes a plain quote).
    """
    if "<pre" not in html.lower():
        return html

    soup = BeautifulSoup(html, "html.parser")
    changed = False
    for pre in soup.find_all("pre"):
        if pre.get(HIGHLIGHTED_ATTR) == "yes":
            continue
        changed = highlight_block(pre) or changed

    if not changed:
        return html
    return soup.decode(formatter=_OUTPUT_FORMATTER)
