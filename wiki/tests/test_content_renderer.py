"""
Test suite for ContentRenderer.

Covers format detection, the sanitize choke point on both paths, auto-link
composition, settings toggles and the end-to-end biography scenario.
"""
import re

from django.test import SimpleTestCase, override_settings
from django.utils.safestring import SafeString

from wiki.models import ContentFormat
from wiki.services.autolink_service import AutoLinkService, LinkableEntity
from wiki.services.content_renderer import ContentRenderer


class DetectionTests(SimpleTestCase):
    """Tests for the HTML vs Markdown heuristic."""

    def test_is_html(self):
        self.assertTrue(ContentRenderer.is_html('<p>Bonjour</p>'))
        self.assertTrue(ContentRenderer.is_html('texte <B>gras</B>'))
        self.assertFalse(ContentRenderer.is_html('a < b et c > d'))
        self.assertFalse(ContentRenderer.is_html('je <3 Dakar'))
        self.assertFalse(ContentRenderer.is_html('**gras**'))
        self.assertFalse(ContentRenderer.is_html(None))

    def test_is_html_on_long_unclosed_input(self):
        self.assertFalse(ContentRenderer.is_html('<a' * 50000))
        self.assertTrue(ContentRenderer.is_html('<a' * 50000 + '>'))

    def test_resolve_format_explicit(self):
        self.assertEqual(ContentRenderer.resolve_format('<p>x</p>', ContentFormat.MARKDOWN), ContentFormat.MARKDOWN)
        self.assertEqual(ContentRenderer.resolve_format('**x**', 'html'), 'html')

    def test_resolve_format_unknown_falls_back(self):
        with self.assertLogs('wiki.services.content_renderer', level='WARNING'):
            result = ContentRenderer.resolve_format('**x**', 'rtf')
        self.assertEqual(result, ContentFormat.MARKDOWN)


class RenderTests(SimpleTestCase):
    """Tests for render()."""

    def test_empty_renders_nothing(self):
        self.assertEqual(ContentRenderer.render(None), '')
        self.assertEqual(ContentRenderer.render(''), '')

    def test_result_marked_safe(self):
        self.assertIsInstance(ContentRenderer.render('**x**'), SafeString)
        self.assertIsInstance(ContentRenderer.render(''), SafeString)

    def test_html_skips_markdown(self):
        """Raw HTML is not wrapped in a second paragraph."""
        self.assertEqual(ContentRenderer.render('<p>Déjà du HTML</p>'), '<p>Déjà du HTML</p>')

    def test_markdown_rendered(self):
        self.assertEqual(ContentRenderer.render('## Parcours'), '<h3 class="wiki-h3">Parcours</h3>')

    def test_explicit_markdown_format(self):
        result = ContentRenderer.render('**x** <b>y</b>', content_format=ContentFormat.MARKDOWN)
        self.assertEqual(result, '<p class="wiki-paragraph"><strong>x</strong> <b>y</b></p>')

    def test_html_path_sanitized(self):
        result = ContentRenderer.render('<div onclick="x">Salut</div><script>alert(1)</script>')
        self.assertEqual(result, '<div>Salut</div>')

    def test_markdown_path_sanitized(self):
        """Markdown forced over HTML-looking input still goes through the sanitizer."""
        result = ContentRenderer.render('Salut <script>alert(1)</script>', content_format=ContentFormat.MARKDOWN)
        self.assertNotIn('<script', result.lower())

    def test_no_autolinks_without_entities(self):
        self.assertNotIn('wiki-autolink', ContentRenderer.render('Jean Dupont'))

    def test_autolink_skips_angle_bracket_in_attribute(self):
        entities = [LinkableEntity('Jean Dupont', 'jean-dupont')]
        result = ContentRenderer.render('<p title="a > Jean Dupont">Jean Dupont</p>', entities)
        self.assertEqual(
            result,
            '<p title="a > Jean Dupont"><a href="/e/jean-dupont" class="wiki-autolink" '
            'title="Voir la page Jean Dupont">Jean Dupont</a></p>',
        )

    def test_static_sector_abbreviation_linked(self):
        result = ContentRenderer.render("L'IA au Bénin", AutoLinkService.get_static_entities())
        self.assertIn('href="/secteur/ia"', result)
        self.assertIn('href="/pays/bj"', result)

    @override_settings(AFRIWIKI_STRICT_SANITIZER=True)
    def test_strict_sanitizer(self):
        result = ContentRenderer.render('<p>Hi <span style="color:red">x</span></p>')
        self.assertEqual(result, '<p>Hi x</p>')

    @override_settings(AFRIWIKI_STRICT_SANITIZER=False)
    def test_default_sanitizer_keeps_harmless_markup(self):
        result = ContentRenderer.render('<p>Hi <span style="color:red">x</span></p>')
        self.assertEqual(result, '<p>Hi <span style="color:red">x</span></p>')

    @override_settings(AFRIWIKI_AUTOLINK_ALL=True)
    def test_autolink_all_setting(self):
        entities = [LinkableEntity('Jean Dupont', 'jean-dupont')]
        result = ContentRenderer.render('Jean Dupont, encore Jean Dupont', entities)
        self.assertEqual(result.count('wiki-autolink'), 2)

    def test_link_all_argument_overrides_setting(self):
        entities = [LinkableEntity('Jean Dupont', 'jean-dupont')]
        result = ContentRenderer.render('Jean Dupont, encore Jean Dupont', entities, link_all=True)
        self.assertEqual(result.count('wiki-autolink'), 2)


class EndToEndTests(SimpleTestCase):
    """The full biography scenario."""

    SOURCE = (
        "Jean Dupont est un **entrepreneur**.\n\n"
        "## Parcours\n\n"
        "* [LinkedIn](https://linkedin.com/in/jean)"
    )

    def test_biography(self):
        result = ContentRenderer.render(self.SOURCE, [LinkableEntity('Jean Dupont', 'jean-dupont')])
        self.assertEqual(
            result,
            '<p class="wiki-paragraph">'
            '<a href="/e/jean-dupont" class="wiki-autolink" title="Voir la page Jean Dupont">Jean Dupont</a>'
            ' est un <strong>entrepreneur</strong>.</p>'
            '<h3 class="wiki-h3">Parcours</h3>'
            '<ul class="wiki-list"><li><a href="https://linkedin.com/in/jean" target="_blank" '
            'rel="noopener noreferrer">LinkedIn</a></li></ul>',
        )

    def test_adversarial_fields_never_executable(self):
        payloads = [
            '<img src=x onerror=alert(1)>',
            '<script>alert(1)</script>',
            '[clic](javascript:alert(1))',
            '[x](/a"onclick="alert(1))',
            '<a href="javascript:alert(1)">x</a>',
            '<iframe src="//evil"></iframe>',
        ]
        entities = [LinkableEntity('Jean Dupont', 'jean-dupont')]
        for payload in payloads:
            with self.subTest(payload=payload):
                result = ContentRenderer.render(f"{self.SOURCE}\n\n{payload}", entities)
                self.assertNotIn('<script', result.lower())
                self.assertNotIn('<iframe', result.lower())
                self.assertNotIn('javascript:', result.lower())
                self.assertIsNone(re.search(r'[\s/"\']on\w+\s*=', result, re.IGNORECASE))
