"""
Template tags and filters for rendering wiki content.
"""
from django import template
from django.utils.safestring import mark_safe
from wiki.services.content_renderer import ContentRenderer
from wiki.services.sanitizer_service import SanitizerService

register = template.Library()


@register.simple_tag
def render_content(text, entities=None, content_format=None, link_all=None):
    """
    Render a stored text field (Markdown or HTML) to safe HTML.

    Usage in templates:
        {% render_content entrepreneur.bio linkable_entities content_format=entrepreneur.bio_format %}

    The entity table must be passed in explicitly; without it no auto-links are added.
    """
    return ContentRenderer.render(text, entities=entities, content_format=content_format, link_all=link_all)


@register.filter(name='safe_html')
def safe_html(html, max_length=None):
    """
    Sanitize an HTML fragment for direct display, optionally truncated.

    Usage in templates:
        {{ company.description|safe_html }}
        {{ company.description|safe_html:200 }}
    """
    if not html:
        return ''

    try:
        max_length = int(max_length) if max_length else None
    except (TypeError, ValueError):
        max_length = None

    # SAFETY: sanitize_truncated() runs the full SanitizerService.sanitize() cascade.
    return mark_safe(SanitizerService.sanitize_truncated(html, max_length))


@register.filter(name='plain_text')
def plain_text(text):
    """Strip all markup, for titles and meta descriptions."""
    return SanitizerService.strip_tags(text)
