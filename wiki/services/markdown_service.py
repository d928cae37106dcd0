"""
Markdown rendering service for encyclopedia content.

This service handles:
- Splitting Markdown source into blank-line separated blocks
- Rendering ## / ### headings, bullet lists, numbered lists and paragraphs
- Inline emphasis and link classification (external, internal, malformed)

The dialect is intentionally small. Unrecognized syntax falls through to the
paragraph rule; nothing here raises.
"""
from wiki.constants import (
    ANY_LINK_PATTERN,
    BLOCK_SPLIT_PATTERN,
    BOLD_ITALIC_PATTERN,
    BOLD_PATTERN,
    BULLET_LINE_PATTERN,
    CSS_CLASS_H3,
    CSS_CLASS_H4,
    CSS_CLASS_LIST,
    CSS_CLASS_PARAGRAPH,
    EXTERNAL_LINK_PATTERN,
    INTERNAL_LINK_PATTERN,
    ITALIC_PATTERN,
    ORDERED_LINE_PATTERN,
)


def _quote_href(url):
    return url.replace('"', '%22')


class MarkdownService:
    """Converts the wiki's Markdown dialect to HTML fragments."""

    @staticmethod
    def render_markdown(text):
        """
        Render Markdown text to an HTML fragment.

        Args:
            text: Markdown source (None is treated as empty)

        Returns:
            str: Concatenated HTML blocks (not yet sanitized)
        """
        if not text:
            return ''

        text = text.replace('\r\n', '\n')
        blocks = [block.strip() for block in BLOCK_SPLIT_PATTERN.split(text)]

        rendered = [MarkdownService._render_block(block) for block in blocks if block]
        return ''.join(rendered)

    @staticmethod
    def _render_block(block):
        """Classify a single block and render it. First matching rule wins."""
        if block.startswith('### '):
            title = MarkdownService._render_heading_inline(block[4:])
            return f'<h4 class="{CSS_CLASS_H4}">{title}</h4>'

        if block.startswith('## '):
            title = MarkdownService._render_heading_inline(block[3:])
            return f'<h3 class="{CSS_CLASS_H3}">{title}</h3>'

        if BULLET_LINE_PATTERN.search(block):
            return MarkdownService._render_list(block, BULLET_LINE_PATTERN, 'ul')

        if ORDERED_LINE_PATTERN.search(block):
            return MarkdownService._render_list(block, ORDERED_LINE_PATTERN, 'ol')

        body = MarkdownService._render_inline(block).replace('\n', '<br>')
        return f'<p class="{CSS_CLASS_PARAGRAPH}">{body}</p>'

    @staticmethod
    def _render_list(block, marker_pattern, tag):
        """
        Render a list block.

        Lines carrying the list marker become <li> items; any other line is
        passed through as-is inside the list element.
        """
        items = []
        for line in block.split('\n'):
            if marker_pattern.match(line):
                content = MarkdownService._render_inline(marker_pattern.sub('', line, count=1))
                items.append(f'<li>{content}</li>')
            else:
                items.append(line)
        return f'<{tag} class="{CSS_CLASS_LIST}">{"".join(items)}</{tag}>'

    @staticmethod
    def _render_inline(text):
        """
        Apply the full inline cascade.

        Links are resolved before emphasis so the asterisk rules never see
        link syntax. Malformed link targets degrade to bold text.
        """
        text = EXTERNAL_LINK_PATTERN.sub(
            lambda m: (
                f'<a href="{_quote_href(m.group(2))}" target="_blank" '
                f'rel="noopener noreferrer">{m.group(1)}</a>'
            ),
            text,
        )
        text = INTERNAL_LINK_PATTERN.sub(
            lambda m: f'<a href="{_quote_href(m.group(2))}">{m.group(1)}</a>',
            text,
        )
        text = ANY_LINK_PATTERN.sub(r'<strong>\1</strong>', text)
        text = BOLD_ITALIC_PATTERN.sub(r'<strong><em>\1</em></strong>', text)
        text = BOLD_PATTERN.sub(r'<strong>\1</strong>', text)
        text = ITALIC_PATTERN.sub(r'<em>\1</em>', text)
        return text

    @staticmethod
    def _render_heading_inline(text):
        """Headings never carry live links: link syntax collapses to its text, then bold."""
        text = ANY_LINK_PATTERN.sub(r'\1', text)
        return BOLD_PATTERN.sub(r'<strong>\1</strong>', text)
