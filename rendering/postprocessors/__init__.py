# rendering/postprocessors/__init__.py

from .code_highlighter import highlight_code_blocks
from .sanitizer import sanitize_html

# Run on every converted html/markdown body before it leaves the renderer.
POSTPROCESSORS = [
    sanitize_html,  # Must stay first; nothing unsanitized goes further
]

# Run on already-safe markup right before display.
DISPLAY_POSTPROCESSORS = [
    highlight_code_blocks,  # Pygments spans + bracket depth colours
]


def apply_postprocessors(html, context, processors=None):
    """Apply postprocessors in order"""
    for processor in POSTPROCESSORS if processors is None else processors:
        html = processor(html, context)
    return html
