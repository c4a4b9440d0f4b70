# rendering/templatetags/content_tags.py

from django import template
from django.utils.safestring import mark_safe

from rendering import reading_time
from rendering.markdown.extensions.toc_extractor import extract_outline
from rendering.renderer import render_for_display

register = template.Library()


@register.filter(name="render_content")
def render_content_filter(value, content_format="markdown"):
    """{{ post.body|render_content:post.format }}"""
    return mark_safe(render_for_display(value, content_format))


@register.filter(name="reading_time")
def reading_time_filter(value):
    return reading_time.calculate(value)


@register.simple_tag
def content_outline(html):
    """{% content_outline rendered_html as outline %}"""
    return extract_outline(html or "")
