"""Errors raised inside the rendering pipeline.

None of these reach template code: the renderer and the highlighter catch
them and degrade to safe markup.
"""


class RenderingError(Exception):
    """Base class for rendering failures."""


class MarkdownRenderError(RenderingError):
    """Markdown conversion raised."""


class UnknownLanguageError(RenderingError):
    """No grammar is registered for a code block's language."""

    def __init__(self, language):
        self.language = language
        super().__init__(f"No lexer found for language '{language}'")
