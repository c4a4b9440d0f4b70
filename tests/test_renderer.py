import markdown
import pytest

from rendering import MARKDOWN_ERROR_HTML, NO_CONTENT_HTML, ContentFormat, render_content, render_for_display
from rendering.postprocessors import highlight_code_blocks


@pytest.mark.parametrize("empty", [None, ""])
def test_empty_content_yields_sentinel(empty, content_format):
    assert render_content(empty, content_format) == NO_CONTENT_HTML


@pytest.mark.parametrize("blank", [" ", "\n\n", " \t\r\n "])
def test_whitespace_only_content_yields_sentinel(blank, content_format):
    assert render_content(blank, content_format) == NO_CONTENT_HTML


def test_empty_markdown_is_not_an_empty_string():
    assert render_content(None, "markdown") == NO_CONTENT_HTML
    assert render_content("", "markdown") == NO_CONTENT_HTML
    assert NO_CONTENT_HTML


def test_unknown_format_is_rejected():
    with pytest.raises(ValueError):
        render_content("text", "rst")


def test_format_accepts_enum_members_and_strings():
    assert render_content("*hi*", ContentFormat.MARKDOWN) == render_content("*hi*", "markdown")


def test_script_never_survives_any_format(content_format):
    rendered = render_for_display("<script>alert(1)</script>", content_format)
    assert "<script" not in rendered


def test_markdown_failure_is_reported_not_raised(monkeypatch, caplog):
    def boom(self, source):
        raise RuntimeError("tokenizer crashed")

    monkeypatch.setattr(markdown.Markdown, "convert", boom)

    assert render_content("# Title", "markdown") == MARKDOWN_ERROR_HTML
    assert "Error parsing markdown" in caplog.text
    assert "tokenizer crashed" in caplog.text


def test_markdown_is_converted_then_sanitized():
    html = render_content("# Title\n\n<img src=x onerror=alert(1)>", "markdown")
    assert '<h1 id="title">Title</h1>' in html
    assert "<img" not in html


def test_html_is_sanitized_but_not_parsed_as_markdown():
    html = render_content('<p onclick="x()">Hi</p>\n# not a heading', "html")
    assert "onclick" not in html
    assert "<p>Hi</p>" in html
    assert "# not a heading" in html
    assert "<h1" not in html


def test_html_editor_renders_like_html():
    source = '<pre><code class="language-js">let a = {}</code></pre><p><em>x</em></p>'
    assert render_content(source, "html_editor") == render_content(source, "html")


def test_plaintext_paragraphs():
    html = render_content("Para one\n\nPara two", "plaintext")
    assert html == "<p>Para one</p><p>Para two</p>"
    assert html.count("<p>") == 2


def test_plaintext_bullet_list():
    html = render_content("- a\n- b\n- c", "plaintext")
    assert html == "<ul><li>a</li><li>b</li><li>c</li></ul>"


def test_plaintext_mixed_bullet_markers():
    html = render_content("Intro\n\n• one\n* two\n-three", "plaintext")
    assert html == "<p>Intro</p><ul><li>one</li><li>two</li><li>three</li></ul>"


def test_plaintext_single_newlines_become_breaks():
    assert render_content("line one\nline two", "plaintext") == "<p>line one<br>line two</p>"


def test_plaintext_is_escaped():
    assert render_content("a < b & c > d", "plaintext") == "<p>a &lt; b &amp; c &gt; d</p>"


def test_plaintext_normalises_windows_newlines():
    assert render_content("a\r\n\r\nb", "plaintext") == "<p>a</p><p>b</p>"


def test_plaintext_blank_paragraphs_are_dropped():
    assert render_content("\n\n\nonly\n\n\n", "plaintext") == "<p>only</p>"


def test_display_highlights_code_blocks():
    html = render_for_display("```js\nconst o = {a: {b: 1}};\n```", "markdown")
    assert 'data-highlighted="yes"' in html
    assert "bracket-depth-0" in html
    assert "bracket-depth-1" in html


def test_display_output_is_stable_under_second_pass():
    html = render_for_display("Text\n\n```python\nx = {1: [2]}\n```", "markdown")
    assert highlight_code_blocks(html) == html


def test_display_without_code_matches_render_content():
    source = "Just *words* here."
    assert render_for_display(source, "markdown") == render_content(source, "markdown")


def test_highlighting_can_be_disabled(settings):
    settings.CONTENT_HIGHLIGHT_ENABLED = False
    html = render_for_display("```python\nx = {}\n```", "markdown")
    assert "data-highlighted" not in html
    assert "bracket-depth" not in html
