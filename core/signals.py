"""
Station audit signal handlers.

Listens to post_save / post_delete on Station so every mutation is logged,
whether it came from the API, a management command or the shell.
"""
import logging

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from core.models import Station

logger = logging.getLogger('subway.audit')


@receiver(post_save, sender=Station)
def log_station_saved(sender, instance, created, **kwargs):
    if not created:
        return
    logger.info(
        'STATION_CREATED | id=%s | name=%s',
        instance.pk,
        instance.name,
    )


@receiver(post_delete, sender=Station)
def log_station_deleted(sender, instance, **kwargs):
    logger.info(
        'STATION_DELETED | id=%s | name=%s',
        instance.pk,
        instance.name,
    )
