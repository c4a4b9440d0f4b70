from django.db import models


class ContentFormat(models.TextChoices):
    """Declared encoding of an authored content blob."""

    PLAINTEXT = "plaintext", "Plain text"
    MARKDOWN = "markdown", "Markdown"
    HTML = "html", "HTML"
    # Same sanitization path as HTML; the source came from the rich editor.
    HTML_EDITOR = "html_editor", "Rich editor"

    @classmethod
    def coerce(cls, value):
        """Return the member for ``value`` (a member or its string value)."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown content format: {value!r}") from None
