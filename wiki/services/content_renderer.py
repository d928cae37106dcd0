"""
Content rendering pipeline for wiki text fields.

Every user-authored text field (biographies, article bodies, descriptions)
reaches the page through ContentRenderer.render():

    detect format -> [markdown] -> sanitize -> auto-link -> mark_safe

The sanitizer runs on both the HTML and the Markdown path. This is the only
place in the project where a string is marked safe for raw injection.
"""
import logging

from django.conf import settings
from django.utils.safestring import mark_safe

from wiki.constants import HTML_TAG_START_PATTERN
from wiki.models import ContentFormat
from wiki.services.autolink_service import AutoLinkService
from wiki.services.markdown_service import MarkdownService
from wiki.services.sanitizer_service import SanitizerService

logger = logging.getLogger(__name__)


class ContentRenderer:
    """Turns stored text into a safe HTML fragment."""

    @staticmethod
    def is_html(text):
        """Heuristic used for legacy rows: anything containing a start tag is HTML."""
        if not text:
            return False
        match = HTML_TAG_START_PATTERN.search(text)
        return match is not None and '>' in text[match.end():]

    @staticmethod
    def resolve_format(text, content_format=None):
        """
        Decide how a piece of text should be interpreted.

        Args:
            text: Stored text
            content_format: Explicit ContentFormat value, or None to detect

        Returns:
            str: ContentFormat.HTML or ContentFormat.MARKDOWN
        """
        if content_format in ContentFormat.values:
            return content_format

        if content_format:
            logger.warning(f"Unknown content format {content_format!r}, falling back to detection")

        return ContentFormat.HTML if ContentRenderer.is_html(text) else ContentFormat.MARKDOWN

    @staticmethod
    def render(text, entities=None, content_format=None, link_all=None):
        """
        Render a text field to safe HTML.

        Args:
            text: Stored text (None or empty renders nothing)
            entities: Iterable of LinkableEntity to auto-link, or None for no auto-links
            content_format: Explicit ContentFormat, or None to detect
            link_all: Link every occurrence of each entity (defaults to the
                AFRIWIKI_AUTOLINK_ALL setting)

        Returns:
            SafeString: Rendered HTML (marked safe)
        """
        if not text:
            return mark_safe('')

        if ContentRenderer.resolve_format(text, content_format) == ContentFormat.MARKDOWN:
            html = MarkdownService.render_markdown(text)
        else:
            html = text

        html = SanitizerService.sanitize(html)
        if getattr(settings, 'AFRIWIKI_STRICT_SANITIZER', False):
            html = SanitizerService.clean_allowlist(html)

        if entities:
            if link_all is None:
                link_all = getattr(settings, 'AFRIWIKI_AUTOLINK_ALL', False)
            html = AutoLinkService.apply_auto_links(html, entities, link_all=link_all)

        # SAFETY: html went through SanitizerService.sanitize() above on every path,
        # and auto-links only insert escaped anchors between tags.
        return mark_safe(html)
