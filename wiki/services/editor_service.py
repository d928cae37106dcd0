"""
Rich text editor conversion helpers.

The contributor editor works on an HTML document but articles are stored as
Markdown. These two conversions keep the editor and the stored text in sync.
They are deliberately lossy: anything the editor cannot produce is dropped.
"""
import re

# Markdown -> editor HTML: line-level rules first, then inline emphasis and links
MD_TO_HTML_RULES = [
    (re.compile(r'^### (.+)$', re.MULTILINE), r'<h3>\1</h3>'),
    (re.compile(r'^## (.+)$', re.MULTILINE), r'<h2>\1</h2>'),
    (re.compile(r'^\* (.+)$', re.MULTILINE), r'<li>\1</li>'),
    (re.compile(r'^- (.+)$', re.MULTILINE), r'<li>\1</li>'),
    (re.compile(r'^\d+\. (.+)$', re.MULTILINE), r'<li>\1</li>'),
    (re.compile(r'^> (.+)$', re.MULTILINE), r'<blockquote>\1</blockquote>'),
    (re.compile(r'^---$', re.MULTILINE), '<hr>'),
    (re.compile(r'\*\*\*(.+?)\*\*\*'), r'<strong><em>\1</em></strong>'),
    (re.compile(r'\*\*(.+?)\*\*'), r'<strong>\1</strong>'),
    (re.compile(r'\*(.+?)\*'), r'<em>\1</em>'),
    (re.compile(r'\[([^\]]+)\]\(([^)]+)\)'), r'<a href="\2">\1</a>'),
]
BLOCK_LEVEL_PREFIXES = ('<h', '<li', '<blockquote', '<hr')
LIST_RUN_PATTERN = re.compile(r'(?:<li>.*?</li>\n?)+')

# Editor HTML -> Markdown, applied in order
HTML_TO_MD_RULES = [
    (re.compile(r'<h2[^>]*>([^<]+)</h2>', re.IGNORECASE), r'## \1\n\n'),
    (re.compile(r'<h3[^>]*>([^<]+)</h3>', re.IGNORECASE), r'### \1\n\n'),
    (re.compile(r'<strong><em>([^<]+)</em></strong>', re.IGNORECASE), r'***\1***'),
    (re.compile(r'<strong>([^<]+)</strong>', re.IGNORECASE), r'**\1**'),
    (re.compile(r'<em>([^<]+)</em>', re.IGNORECASE), r'*\1*'),
    (re.compile(r'<a[^>]+href="([^"]+)"[^>]*>([^<]+)</a>', re.IGNORECASE), r'[\2](\1)'),
    (re.compile(r'<ul>', re.IGNORECASE), ''),
    (re.compile(r'</ul>', re.IGNORECASE), '\n'),
    (re.compile(r'<ol>', re.IGNORECASE), ''),
    (re.compile(r'</ol>', re.IGNORECASE), '\n'),
    (re.compile(r'<li>([^<]+)</li>', re.IGNORECASE), r'* \1\n'),
    (re.compile(r'<blockquote>([^<]+)</blockquote>', re.IGNORECASE), r'> \1\n\n'),
    (re.compile(r'<hr\s*/?>', re.IGNORECASE), '---\n\n'),
    (re.compile(r'<p>([^<]*)</p>', re.IGNORECASE), r'\1\n\n'),
    (re.compile(r'<br\s*/?>', re.IGNORECASE), '\n'),
    (re.compile(r'<[^>]+>'), ''),
    (re.compile(r'\n{3,}'), '\n\n'),
]

EMPTY_EDITOR_DOCUMENT = '<p></p>'


class EditorService:
    """Converts between stored Markdown and the editor's HTML document."""

    @staticmethod
    def markdown_to_html(markdown_text):
        """
        Convert stored Markdown into the editor's HTML document.

        Args:
            markdown_text: Markdown source

        Returns:
            str: Editor HTML; an empty paragraph for empty input
        """
        if not markdown_text:
            return EMPTY_EDITOR_DOCUMENT

        text = markdown_text.replace('\r\n', '\n')
        for pattern, replacement in MD_TO_HTML_RULES:
            text = pattern.sub(replacement, text)

        blocks = []
        for block in re.split(r'\n\n+', text):
            if block.startswith(BLOCK_LEVEL_PREFIXES):
                blocks.append(block)
            else:
                blocks.append(f'<p>{block}</p>')

        return LIST_RUN_PATTERN.sub(
            lambda m: '<ul>' + m.group(0).replace('\n', '') + '</ul>',
            ''.join(blocks),
        )

    @staticmethod
    def html_to_markdown(html_text):
        """
        Convert the editor's HTML document back to Markdown for storage.

        Args:
            html_text: Editor HTML

        Returns:
            str: Markdown; empty for an empty document
        """
        if not html_text or html_text == EMPTY_EDITOR_DOCUMENT:
            return ''

        text = html_text
        for pattern, replacement in HTML_TO_MD_RULES:
            text = pattern.sub(replacement, text)
        return text.strip()
