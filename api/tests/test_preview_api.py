"""
Tests for the editor content preview endpoint.
"""
from django.contrib.auth import get_user_model
from django.core.cache import cache
from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from wiki.models import Entrepreneur

User = get_user_model()


class ContentPreviewViewTests(TestCase):
    """Tests for POST /api/v1/preview/."""

    def setUp(self):
        cache.clear()
        self.client = APIClient()
        self.user = User.objects.create_user(username='contrib', email='c@example.com', password='testpass123')
        self.url = reverse('api:content-preview')
        Entrepreneur.objects.create(slug='jean-dupont', first_name='Jean', last_name='Dupont', is_published=True)

    def test_requires_authentication(self):
        response = self.client.post(self.url, {'content': '## Titre'}, format='json')
        self.assertEqual(response.status_code, 403)

    def test_markdown_preview(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.post(self.url, {'content': '## Titre'}, format='json')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['html'], '<h3 class="wiki-h3">Titre</h3>')
        self.assertEqual(response.data['content_format'], 'markdown')

    def test_html_preview_sanitized(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.post(
            self.url, {'content': '<p onclick="x">Salut</p><script>alert(1)</script>'}, format='json'
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['html'], '<p>Salut</p>')
        self.assertEqual(response.data['content_format'], 'html')

    def test_autolink_toggle(self):
        self.client.force_authenticate(user=self.user)

        linked = self.client.post(self.url, {'content': 'Bravo Jean Dupont'}, format='json')
        plain = self.client.post(self.url, {'content': 'Bravo Jean Dupont', 'autolink': False}, format='json')

        self.assertIn('href="/e/jean-dupont"', linked.data['html'])
        self.assertNotIn('wiki-autolink', plain.data['html'])

    def test_explicit_format(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.post(
            self.url, {'content': '<b>x</b>', 'content_format': 'markdown', 'autolink': False}, format='json'
        )
        self.assertEqual(response.data['html'], '<p class="wiki-paragraph"><b>x</b></p>')
        self.assertEqual(response.data['content_format'], 'markdown')

    def test_invalid_format_rejected(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.post(self.url, {'content': 'x', 'content_format': 'rtf'}, format='json')

        self.assertEqual(response.status_code, 400)
        self.assertIn('content_format', response.data['error'])

    def test_empty_content(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.post(self.url, {'content': ''}, format='json')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['html'], '')
        self.assertIsNone(response.data['content_format'])

    def test_markdown_output(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.post(
            f"{self.url}?output=markdown", {'content': '<h2>Titre</h2><p>Texte</p>'}, format='json'
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['markdown'], '## Titre\n\nTexte')
