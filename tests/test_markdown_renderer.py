from rendering.markdown.config import MarkdownConfig, get_markdown_config
from rendering.markdown.extensions import slugify_heading
from rendering.markdown.renderer import render_markdown


def test_raw_html_is_escaped_not_rendered():
    html = render_markdown("a <title>b</title> c")
    assert "<title>" not in html
    assert "&lt;title&gt;b&lt;/title&gt;" in html


def test_raw_script_block_is_shown_as_text():
    html = render_markdown("<script>alert(1)</script>")
    assert "<script" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html


def test_html_comment_is_escaped():
    html = render_markdown("before <!-- note --> after")
    assert "<!--" not in html
    assert "&lt;!-- note --&gt;" in html


def test_heading_gets_slug_id():
    assert '<h2 id="hello-world">Hello, World!</h2>' in render_markdown("## Hello, World!")


def test_heading_id_uses_inline_code_text():
    html = render_markdown("## Use `render()` now")
    assert '<h2 id="use-render-now">' in html


def test_heading_id_from_escaped_html():
    html = render_markdown("## Tips <kbd>")
    assert '<h2 id="tips-kbd">Tips &lt;kbd&gt;</h2>' in html


def test_duplicate_headings_keep_identical_ids():
    html = render_markdown("# Intro\n\ntext\n\n# Intro")
    assert html.count('id="intro"') == 2


def test_fenced_code_keeps_language_class():
    html = render_markdown("```python\nprint('x')\n```")
    assert '<pre><code class="language-python">' in html


def test_code_span_is_not_double_escaped():
    html = render_markdown("Use `<div>` here")
    assert "<code>&lt;div&gt;</code>" in html


def test_standard_markdown_constructs():
    html = render_markdown("Visit [site](https://example.com) *now*\n\n- one\n- two")
    assert '<a href="https://example.com">site</a>' in html
    assert "<em>now</em>" in html
    assert "<li>one</li>" in html


def test_tables_are_enabled():
    html = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |")
    assert "<table>" in html
    assert "<td>1</td>" in html


def test_javascript_links_are_sanitized():
    html = render_markdown("[x](javascript:alert(1))")
    assert "javascript:" not in html


def test_config_reads_django_settings(settings):
    settings.CONTENT_MARKDOWN_EXTENSIONS = ["tables"]
    assert get_markdown_config() == MarkdownConfig(extensions=("tables",))


def test_escaping_holds_without_extra_extensions():
    html = render_markdown("<b>x</b>", config=MarkdownConfig(extensions=()))
    assert "<b>" not in html
    assert "&lt;b&gt;x&lt;/b&gt;" in html


def test_slugify_heading():
    assert slugify_heading("Hello, World!") == "hello-world"
    assert slugify_heading("  Spaces   everywhere  ") == "spaces-everywhere"
    assert slugify_heading("--Edge-case--") == "edge-case"
    assert slugify_heading("!!!") == ""
