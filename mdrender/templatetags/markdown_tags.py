# mdrender/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from mdrender.markdown.codeblocks import plantuml_image_url
from mdrender.markdown.config import get_code_block_config
from mdrender.markdown.renderer import render_markdown

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    return mark_safe(render_markdown(value))


@register.filter(name="markdown_abstract")
def markdown_abstract_filter(value):
    """Render markdown for abstract sections (no block class on code blocks)"""
    return mark_safe(render_markdown(value, context={"is_abstract": True}))


@register.simple_tag(takes_context=True)
def markdown_with_context(context, value):
    """Template tag that passes template context to processors"""
    processor_context = {
        "user": context.get("user"),
        "request": context.get("request"),
        "post": context.get("post"),
    }
    return mark_safe(render_markdown(value, context=processor_context))


@register.filter(name="plantuml_url")
def plantuml_url_filter(value):
    """
    PlantUML server image URL for a diagram source string.

    Returns an empty string when PLANTUML_SERVER_URL is not configured.
    """
    config = get_code_block_config()
    if not config.plantuml_enabled or value is None:
        return ""
    return plantuml_image_url(config.plantuml_server_url, str(value))
