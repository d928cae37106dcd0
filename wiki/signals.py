from django.db.models.signals import post_save, post_delete
from django.dispatch import receiver
from wiki.models import Entrepreneur, Sector
from wiki.services.autolink_service import AutoLinkService

@receiver(post_save, sender=Entrepreneur, dispatch_uid="invalidate_entities_on_entrepreneur_save")
def invalidate_entities_on_entrepreneur_save(sender, instance, update_fields=None, **kwargs):
    # View counter bumps do not change any linkable name
    if update_fields and set(update_fields) <= {'views_count'}:
        return
    AutoLinkService.invalidate_cache()

@receiver(post_delete, sender=Entrepreneur, dispatch_uid="invalidate_entities_on_entrepreneur_delete")
def invalidate_entities_on_entrepreneur_delete(sender, instance, **kwargs):
    AutoLinkService.invalidate_cache()

@receiver(post_save, sender=Sector, dispatch_uid="invalidate_entities_on_sector_save")
@receiver(post_delete, sender=Sector, dispatch_uid="invalidate_entities_on_sector_delete")
def invalidate_entities_on_sector_change(sender, instance, **kwargs):
    AutoLinkService.invalidate_cache()
