from django.db import models
from django.urls import reverse
from django.utils import timezone


class ContentFormat(models.TextChoices):
    HTML = 'html', 'HTML'
    MARKDOWN = 'markdown', 'Markdown'


class Country(models.Model):
    code = models.CharField(max_length=2, primary_key=True)
    name = models.CharField(max_length=100)
    flag_emoji = models.CharField(max_length=8, blank=True)
    continent = models.CharField(max_length=50, blank=True, null=True)

    class Meta:
        ordering = ['name']
        verbose_name_plural = 'countries'

    def __str__(self):
        return f"{self.flag_emoji} {self.name}".strip()


class Sector(models.Model):
    name = models.CharField(max_length=100, unique=True)
    slug = models.SlugField(max_length=100, unique=True)
    icon = models.CharField(max_length=16, blank=True, null=True)
    description = models.TextField(blank=True, null=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name


class Entrepreneur(models.Model):
    slug = models.SlugField(max_length=150, unique=True)
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    photo_url = models.URLField(blank=True, null=True)
    headline = models.CharField(max_length=255, blank=True, null=True)
    bio = models.TextField(blank=True, null=True)
    bio_format = models.CharField(
        max_length=10,
        choices=ContentFormat.choices,
        blank=True,
        null=True,
        help_text="Leave empty for legacy content: the format is then detected when rendering.",
    )
    country = models.ForeignKey(Country, on_delete=models.SET_NULL, null=True, blank=True, related_name='entrepreneurs')
    city = models.CharField(max_length=100, blank=True, null=True)
    sector = models.ForeignKey(Sector, on_delete=models.SET_NULL, null=True, blank=True, related_name='entrepreneurs')
    verification_level = models.PositiveSmallIntegerField(default=1)
    is_published = models.BooleanField(default=False)
    is_featured = models.BooleanField(default=False)
    views_count = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['last_name', 'first_name']
        indexes = [
            models.Index(fields=['is_published'], name='entrepreneur_published_idx'),
            models.Index(fields=['last_name'], name='entrepreneur_last_name_idx'),
        ]

    def __str__(self):
        return self.full_name

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    def get_absolute_url(self):
        return reverse('entrepreneur_detail', kwargs={'slug': self.slug})


class Article(models.Model):
    STATUS_DRAFT = 'draft'
    STATUS_PENDING = 'pending'
    STATUS_PUBLISHED = 'published'
    STATUS_REJECTED = 'rejected'
    STATUS_CHOICES = [
        (STATUS_DRAFT, 'Brouillon'),
        (STATUS_PENDING, 'En attente'),
        (STATUS_PUBLISHED, 'Publié'),
        (STATUS_REJECTED, 'Rejeté'),
    ]

    entrepreneur = models.ForeignKey(Entrepreneur, on_delete=models.CASCADE, related_name='articles')
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    content = models.TextField(blank=True, null=True)
    content_format = models.CharField(max_length=10, choices=ContentFormat.choices, blank=True, null=True)
    category = models.CharField(max_length=50, default='biographie')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_DRAFT)
    published_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-published_at', '-created_at']
        indexes = [
            models.Index(fields=['status', 'published_at'], name='article_status_pub_idx'),
        ]

    def __str__(self):
        return self.title

    def publish(self):
        """Mark the article as published now."""
        self.status = self.STATUS_PUBLISHED
        self.published_at = timezone.now()
        self.save(update_fields=['status', 'published_at', 'updated_at'])
