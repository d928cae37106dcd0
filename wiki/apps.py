from django.apps import AppConfig
import logging

logger = logging.getLogger(__name__)

class WikiConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "wiki"

    def ready(self):
        import wiki.signals
        logger.debug("Wiki signals connected")
