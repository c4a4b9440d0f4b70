# rendering/editor/code_block.py
"""
Keystroke handling inside the rich editor's code blocks.

handle_key() is a pure transition function: given the pressed key, the
code block's text and caret offset, and the auto-match toggles, it returns
either Handled(mutation) or PASS_THROUGH. The editor integration applies
the mutation with its own commands (insertContent + setTextSelection) and
suppresses its default handling when the action is handled.

    ( [ " ' `   insert the pair, caret between (when the toggle is on)
    {           always: open brace, indented blank line, closing brace
    Enter       newline + current indent, one extra level after ( or [
    Backspace   swallowed at offset 0 so the block never merges upward
"""

from dataclasses import dataclass, replace
from typing import Optional, Union

from .settings import DEFAULT_SETTINGS, AutoMatchSettings

INDENT_UNIT = "  "

# opening char -> (closing char, AutoMatchSettings field)
AUTO_PAIRS = {
    "(": (")", "parens"),
    "[": ("]", "brackets"),
    '"': ('"', "double_quotes"),
    "'": ("'", "single_quotes"),
    "`": ("`", "backticks"),
}

ENTER = "Enter"
BACKSPACE = "Backspace"

_EXTRA_INDENT_AFTER = ("(", "[")


@dataclass(frozen=True)
class EditorState:
    """Text of the code block the caret is in, and the caret's offset."""

    text: str
    offset: int
    in_code_block: bool = True

    def __post_init__(self):
        if not 0 <= self.offset <= len(self.text):
            raise ValueError(f"Caret offset {self.offset} outside text of length {len(self.text)}")

    @property
    def line_start(self) -> int:
        return self.text.rfind("\n", 0, self.offset) + 1

    @property
    def current_line(self) -> str:
        end = self.text.find("\n", self.offset)
        return self.text[self.line_start:] if end == -1 else self.text[self.line_start:end]

    @property
    def text_before_caret(self) -> str:
        return self.text[self.line_start:self.offset]

    @property
    def indent(self) -> str:
        line = self.current_line
        return line[: len(line) - len(line.lstrip(" \t"))]


@dataclass(frozen=True)
class Mutation:
    """Insert ``insert`` at the caret, then put the caret ``caret`` chars into it."""

    insert: str
    caret: int

    def apply(self, state: EditorState) -> EditorState:
        text = state.text[: state.offset] + self.insert + state.text[state.offset:]
        return replace(state, text=text, offset=state.offset + self.caret)


@dataclass(frozen=True)
class Handled:
    """The key was consumed. ``mutation`` is None when nothing changes."""

    mutation: Optional[Mutation] = None

    @property
    def handled(self) -> bool:
        return True


class PassThrough:
    """Let the editor's default key handling run."""

    handled = False

    def __repr__(self):
        return "PASS_THROUGH"


PASS_THROUGH = PassThrough()

Action = Union[Handled, PassThrough]


def _auto_pair(key: str, state: EditorState, settings: AutoMatchSettings) -> Action:
    closing, toggle = AUTO_PAIRS[key]
    if not getattr(settings, toggle):
        return PASS_THROUGH
    return Handled(Mutation(insert=key + closing, caret=1))


def _open_brace(state: EditorState) -> Action:
    indent = state.indent
    head = "{\n" + indent + INDENT_UNIT
    return Handled(Mutation(insert=head + "\n" + indent + "}", caret=len(head)))


def _enter(state: EditorState) -> Action:
    # "{" is excluded: typing it already produced the indented body.
    indent = state.indent
    if state.text_before_caret.rstrip().endswith(_EXTRA_INDENT_AFTER):
        indent += INDENT_UNIT
    insert = "\n" + indent
    return Handled(Mutation(insert=insert, caret=len(insert)))


def _backspace(state: EditorState) -> Action:
    if state.offset == 0:
        return Handled()
    return PASS_THROUGH


_KEY_HANDLERS = {
    "{": _open_brace,
    ENTER: _enter,
    BACKSPACE: _backspace,
}


def handle_key(key: str, state: EditorState, settings: AutoMatchSettings = DEFAULT_SETTINGS) -> Action:
    """Decide what ``key`` does at ``state``; see the module docstring."""
    if not state.in_code_block:
        return PASS_THROUGH

    if key in AUTO_PAIRS:
        return _auto_pair(key, state, settings)

    handler = _KEY_HANDLERS.get(key)
    if handler is None:
        return PASS_THROUGH
    return handler(state)
