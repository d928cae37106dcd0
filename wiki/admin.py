from django.contrib import admin
from .models import Country, Sector, Entrepreneur, Article
from .services.autolink_service import AutoLinkService
from .services.content_renderer import ContentRenderer

# Register your models here.
@admin.register(Country)
class CountryAdmin(admin.ModelAdmin):
    list_display = ('code', 'name', 'flag_emoji', 'continent')
    search_fields = ('code', 'name')
    ordering = ('name',)

@admin.register(Sector)
class SectorAdmin(admin.ModelAdmin):
    list_display = ('name', 'slug', 'description_preview')
    search_fields = ('name', 'slug')
    prepopulated_fields = {'slug': ('name',)}
    ordering = ('name',)

    def description_preview(self, obj):
        return obj.description[:50] + '...' if obj.description else ''
    description_preview.short_description = 'Description'

class ArticleInline(admin.TabularInline):
    model = Article
    extra = 0
    fields = ('title', 'status', 'published_at')
    readonly_fields = ('published_at',)
    show_change_link = True

@admin.register(Entrepreneur)
class EntrepreneurAdmin(admin.ModelAdmin):
    list_display = ('full_name', 'slug', 'country', 'sector', 'verification_level', 'is_published', 'is_featured', 'views_count')
    list_filter = ('is_published', 'is_featured', 'verification_level', 'country', 'sector')
    search_fields = ('first_name', 'last_name', 'slug', 'headline')
    prepopulated_fields = {'slug': ('first_name', 'last_name')}
    raw_id_fields = ('country', 'sector')
    readonly_fields = ('views_count', 'created_at', 'updated_at', 'bio_preview')
    inlines = [ArticleInline]
    ordering = ('last_name', 'first_name')

    def bio_preview(self, obj):
        return ContentRenderer.render(obj.bio, AutoLinkService.get_linkable_entities(), obj.bio_format)
    bio_preview.short_description = 'Rendered bio'

@admin.register(Article)
class ArticleAdmin(admin.ModelAdmin):
    list_display = ('title', 'entrepreneur', 'category', 'status', 'published_at', 'updated_at')
    list_filter = ('status', 'category', 'content_format')
    search_fields = ('title', 'content', 'entrepreneur__first_name', 'entrepreneur__last_name')
    prepopulated_fields = {'slug': ('title',)}
    raw_id_fields = ('entrepreneur',)
    readonly_fields = ('created_at', 'updated_at', 'content_preview')
    actions = ['publish_articles']
    ordering = ('-updated_at',)

    def content_preview(self, obj):
        return ContentRenderer.render(obj.content, AutoLinkService.get_linkable_entities(), obj.content_format)
    content_preview.short_description = 'Rendered content'

    @admin.action(description='Publish selected articles')
    def publish_articles(self, request, queryset):
        for article in queryset.exclude(status=Article.STATUS_PUBLISHED):
            article.publish()
