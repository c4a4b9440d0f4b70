# rendering/brackets.py
"""
Rainbow colouring for curly braces.

Every ``{`` takes the colour of the nesting depth it opens at, and its
matching ``}`` takes the same colour. Colours cycle through a fixed palette
of six classes: ``bracket-depth-0`` .. ``bracket-depth-5``.

The colorizer is used in two places:
- ``colorize()`` for a single standalone string
- ``BracketColorizer.feed()`` by the code highlighter, which streams every
  text token of one code block through a single instance so depth carries
  across tokens. A new instance is created per block.
"""

import html
import re

PALETTE_SIZE = 6
BRACKET_CLASS = "bracket-depth-{}"

_BRACE_SPLIT_RE = re.compile(r"([{}])")


class BracketColorizer:
    """Streaming brace colorizer. Not shared between code blocks."""

    def __init__(self):
        self.depth = 0
        self._stack = []

    @property
    def open_count(self) -> int:
        """Number of ``{`` still waiting for their ``}``."""
        return len(self._stack)

    def feed(self, text: str) -> str:
        """Return ``text`` as HTML with each brace wrapped in a depth span."""
        parts = []
        for chunk in _BRACE_SPLIT_RE.split(text):
            if chunk == "{":
                level = self.depth
                self._stack.append(level)
                self.depth += 1
                parts.append(self._wrap(chunk, level))
            elif chunk == "}":
                # Unmatched closers clamp at zero.
                self.depth = max(self.depth - 1, 0)
                level = self._stack.pop() if self._stack else 0
                parts.append(self._wrap(chunk, level))
            elif chunk:
                parts.append(html.escape(chunk, quote=False))
        return "".join(parts)

    @staticmethod
    def _wrap(char: str, level: int) -> str:
        css_class = BRACKET_CLASS.format(level % PALETTE_SIZE)
        return f'<span class="{css_class}">{char}</span>'


def colorize(text: str) -> str:
    """Colour the braces of ``text`` with a fresh colorizer."""
    return BracketColorizer().feed(text)
