# rendering/markdown/extensions/raw_html_escaper.py
"""
A Markdown extension that shows raw HTML typed into Markdown as text.

Python-Markdown normally passes raw HTML through untouched: block-level
HTML is stashed by the "html_block" preprocessor and inline tags by the
"html" inline processor. This extension:
- Removes the "html_block" preprocessor, so HTML blocks are parsed as
  ordinary paragraphs
- Replaces the "html" inline processor with one that stashes the
  entity-encoded source of each tag or comment instead of the tag itself

`a <title>b</title> c` renders as `<p>a &lt;title&gt;b&lt;/title&gt; c</p>`.
Everything else (code spans, fences, autolinks, entities) is unaffected.
"""

import html

from markdown.extensions import Extension
from markdown.inlinepatterns import HTML_RE, HtmlInlineProcessor


class EscapedHtmlInlineProcessor(HtmlInlineProcessor):
    """Stash raw HTML as escaped text."""

    def handleMatch(self, m, data):
        rawhtml = self.unescape(m.group(1))
        place_holder = self.md.htmlStash.store(html.escape(rawhtml, quote=True))
        return place_holder, m.start(0), m.end(0)


class RawHtmlEscapeExtension(Extension):
    def extendMarkdown(self, md):
        md.preprocessors.deregister("html_block", strict=False)
        # Same name and priority as the built-in processor, which it replaces.
        md.inlinePatterns.register(EscapedHtmlInlineProcessor(HTML_RE, md), "html", 90)


def makeExtension(**kwargs):
    return RawHtmlEscapeExtension(**kwargs)
