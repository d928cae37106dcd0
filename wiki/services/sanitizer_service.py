"""
HTML sanitization service for user-authored content.

This service handles:
- Removing script blocks and inline event handlers
- Neutralizing javascript: and non-image data: URIs
- Removing denylisted elements (iframes, forms, embeds, ...)
- Truncating long fragments before display
- Strict allowlist cleaning and plain-text stripping with bleach
"""
import html
import logging
from functools import partial

import bleach

from wiki.constants import (
    ALLOWED_HTML_ATTRS,
    ALLOWED_HTML_TAGS,
    ALLOWED_PROTOCOLS,
    CSS_EXPRESSION_PATTERN,
    DATA_URI_SRC_PATTERN,
    DENYLISTED_BLOCK_PATTERNS,
    DENYLISTED_TAG_PATTERN,
    EVENT_HANDLER_PATTERN,
    JAVASCRIPT_HREF_PATTERN,
    JAVASCRIPT_SCHEME_PATTERN,
    JAVASCRIPT_SRC_PATTERN,
    MAX_SANITIZE_PASSES,
    META_TAG_PATTERN,
    SCRIPT_BLOCK_PATTERNS,
    SCRIPT_TAG_PATTERN,
)

logger = logging.getLogger(__name__)


def _remove_blocks(content, block_patterns):
    """Remove every opening-tag-to-closing-tag span for each (opening, closing) pair."""
    for opening_pattern, closing_pattern in block_patterns:
        pieces = []
        position = 0
        while True:
            opening = opening_pattern.search(content, position)
            if not opening:
                break
            closing = closing_pattern.search(content, opening.end())
            # No closer left: stray openers are handled by the tag rules
            if not closing:
                break
            pieces.append(content[position:opening.start()])
            position = closing.end()
        pieces.append(content[position:])
        content = ''.join(pieces)
    return content


# Ordered rewrite cascade. Every rule removes text or replaces it with a
# strictly shorter string.
SANITIZE_RULES = [
    partial(_remove_blocks, block_patterns=SCRIPT_BLOCK_PATTERNS),
    partial(SCRIPT_TAG_PATTERN.sub, ''),
    partial(EVENT_HANDLER_PATTERN.sub, ''),
    partial(JAVASCRIPT_HREF_PATTERN.sub, 'href="#"'),
    partial(JAVASCRIPT_SRC_PATTERN.sub, 'src=""'),
    partial(_remove_blocks, block_patterns=DENYLISTED_BLOCK_PATTERNS),
    partial(DENYLISTED_TAG_PATTERN.sub, ''),
    partial(CSS_EXPRESSION_PATTERN.sub, ''),
    partial(JAVASCRIPT_SCHEME_PATTERN.sub, ''),
    partial(META_TAG_PATTERN.sub, ''),
    partial(DATA_URI_SRC_PATTERN.sub, 'src=""'),
]


class SanitizerService:
    """Removes script-capable markup from HTML fragments."""

    @staticmethod
    def sanitize(content):
        """
        Strip dangerous markup from an HTML string.

        The rule cascade is re-run until the output stops changing, so
        fragments reassembled by one removal (e.g. ``<scr<script></script>ipt>``)
        are caught by the next pass and the result is a fixed point. Input
        still changing after MAX_SANITIZE_PASSES passes is dropped entirely.

        Args:
            content: Arbitrary HTML string (None is treated as empty)

        Returns:
            str: Sanitized HTML
        """
        if not content:
            return ''

        previous = None
        sanitized = content
        passes = 0
        while sanitized != previous:
            if passes >= MAX_SANITIZE_PASSES:
                logger.warning(
                    f"Sanitizer gave up after {passes} passes on {len(content)} chars of input, content dropped"
                )
                return ''
            previous = sanitized
            sanitized = SanitizerService._apply_rules_once(sanitized)
            passes += 1

        if passes > 2:
            logger.debug(f"Sanitizer needed {passes} passes for {len(content)} chars of input")
        return sanitized

    @staticmethod
    def _apply_rules_once(content):
        for rule in SANITIZE_RULES:
            content = rule(content)
        return content

    @staticmethod
    def sanitize_truncated(content, max_length=None):
        """
        Truncate then sanitize an HTML string.

        Args:
            content: Arbitrary HTML string
            max_length: Maximum number of characters kept before "..." is appended

        Returns:
            str: Sanitized (possibly truncated) HTML
        """
        if not content:
            return ''

        if max_length and len(content) > max_length:
            content = content[:max_length] + '...'

        return SanitizerService.sanitize(content)

    @staticmethod
    def clean_allowlist(content):
        """
        Parse-and-allowlist cleaning with bleach.

        Only the tags and attributes the wiki renderer produces survive.
        Disallowed tags are stripped, keeping their text.
        """
        if not content:
            return ''

        return bleach.clean(
            content,
            tags=ALLOWED_HTML_TAGS,
            attributes=ALLOWED_HTML_ATTRS,
            protocols=ALLOWED_PROTOCOLS,
            strip=True,
        )

    @staticmethod
    def strip_tags(text):
        """
        Reduce user input to plain text.

        Uses bleach to strip every HTML tag, then html.unescape to restore
        characters like & that bleach encodes as HTML entities.

        Args:
            text: Raw user input

        Returns:
            str: Plain text
        """
        if not text:
            return ''

        cleaned = bleach.clean(text, tags=[], attributes={}, strip=True)
        return html.unescape(cleaned).strip()
