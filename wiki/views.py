from django.db.models import F
from django.http import Http404
from django.views.generic import DetailView

from wiki.constants import CSS_CLASS_CONTENT, VERIFICATION_LEVELS
from wiki.models import Article, Entrepreneur
from wiki.services.autolink_service import AutoLinkService


class EntrepreneurDetailView(DetailView):
    """
    Display an entrepreneur's encyclopedia page.

    Renders the biography and published articles through the content
    renderer, with auto-links to every other known page. Unpublished
    entrepreneurs are only visible to staff as a preview.
    """
    model = Entrepreneur
    template_name = 'wiki/entrepreneur_detail.html'
    slug_field = 'slug'
    slug_url_kwarg = 'slug'
    context_object_name = 'entrepreneur'

    def get_queryset(self):
        return Entrepreneur.objects.select_related('country', 'sector')

    def get_object(self, queryset=None):
        entrepreneur = super().get_object(queryset)
        if not entrepreneur.is_published and not self.request.user.is_staff:
            raise Http404("Entrepreneur not found")
        return entrepreneur

    def get(self, request, *args, **kwargs):
        response = super().get(request, *args, **kwargs)
        if self.object.is_published:
            Entrepreneur.objects.filter(pk=self.object.pk).update(views_count=F('views_count') + 1)
        return response

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        entrepreneur = self.object

        # A page never links to itself
        own_url = entrepreneur.get_absolute_url()
        context['linkable_entities'] = [
            entity for entity in AutoLinkService.get_linkable_entities()
            if entity.url.rstrip('/') != own_url.rstrip('/')
        ]
        context['articles'] = entrepreneur.articles.filter(status=Article.STATUS_PUBLISHED)
        context['verification_label'] = VERIFICATION_LEVELS.get(entrepreneur.verification_level)
        context['content_class'] = CSS_CLASS_CONTENT
        context['is_staff_preview'] = not entrepreneur.is_published
        return context
