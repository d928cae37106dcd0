import logging

from django.core.management.base import BaseCommand

from wiki.services.autolink_service import AutoLinkService

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Rebuild the cached table of linkable entities used for auto-linking'

    def add_arguments(self, parser):
        parser.add_argument('--show', action='store_true', help='Print every entity in the rebuilt table')

    def handle(self, *args, **options):
        AutoLinkService.invalidate_cache()
        try:
            entities = AutoLinkService.get_linkable_entities()
        except Exception as e:
            logger.exception("Failed to rebuild linkable entities")
            self.stdout.write(self.style.ERROR(f"Linkable entities failed: {e}"))
            return

        if options['show']:
            for entity in entities:
                self.stdout.write(f"{entity.name} -> {entity.url} ({entity.entity_type})")

        self.stdout.write(self.style.SUCCESS(f"Linkable entities cached: {len(entities)} entries"))
