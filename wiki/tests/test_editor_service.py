"""
Tests for the rich text editor conversions.
"""
from django.test import SimpleTestCase

from wiki.services.editor_service import EditorService


class MarkdownToHtmlTests(SimpleTestCase):

    def test_empty_document(self):
        self.assertEqual(EditorService.markdown_to_html(''), '<p></p>')
        self.assertEqual(EditorService.markdown_to_html(None), '<p></p>')

    def test_headings(self):
        self.assertEqual(EditorService.markdown_to_html('## Titre'), '<h2>Titre</h2>')
        self.assertEqual(EditorService.markdown_to_html('### Sous-titre'), '<h3>Sous-titre</h3>')

    def test_paragraph_with_emphasis_and_link(self):
        self.assertEqual(
            EditorService.markdown_to_html('Bonjour **monde** [ici](https://x.com)'),
            '<p>Bonjour <strong>monde</strong> <a href="https://x.com">ici</a></p>',
        )

    def test_list_items_grouped(self):
        self.assertEqual(EditorService.markdown_to_html('* a\n* b'), '<ul><li>a</li><li>b</li></ul>')

    def test_list_item_with_italics(self):
        self.assertEqual(EditorService.markdown_to_html('* a *b*'), '<ul><li>a <em>b</em></li></ul>')

    def test_quote_and_rule(self):
        self.assertEqual(
            EditorService.markdown_to_html('> citation\n\n---'),
            '<blockquote>citation</blockquote><hr>',
        )


class HtmlToMarkdownTests(SimpleTestCase):

    def test_empty_document(self):
        self.assertEqual(EditorService.html_to_markdown('<p></p>'), '')
        self.assertEqual(EditorService.html_to_markdown(''), '')

    def test_heading_and_paragraph(self):
        self.assertEqual(
            EditorService.html_to_markdown('<h2>Titre</h2><p>Texte <strong>gras</strong></p>'),
            '## Titre\n\nTexte **gras**',
        )

    def test_list(self):
        self.assertEqual(EditorService.html_to_markdown('<ul><li>a</li><li>b</li></ul>'), '* a\n* b')

    def test_link(self):
        self.assertEqual(
            EditorService.html_to_markdown('<p><a href="https://x.com" target="_blank">X</a></p>'),
            '[X](https://x.com)',
        )

    def test_unknown_tags_stripped(self):
        self.assertEqual(EditorService.html_to_markdown('<div><span>texte</span></div>'), 'texte')

    def test_line_breaks_and_blank_runs(self):
        self.assertEqual(EditorService.html_to_markdown('<p>a<br>b</p><p></p><p></p><p>c</p>'), 'a\nb\n\nc')
