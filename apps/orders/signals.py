"""
Signals for orders: a move into completed/served prompts the customer for a rating
"""
from django.db import DatabaseError, transaction
from django.db.models.signals import pre_save, post_save
from django.dispatch import receiver
from .models import Order
import logging

logger = logging.getLogger(__name__)


@receiver(pre_save, sender=Order)
def remember_previous_status(sender, instance, raw=False, **kwargs):
    if raw or instance.pk is None:
        instance._previous_status = None
        return

    instance._previous_status = (
        Order.objects.filter(pk=instance.pk).values_list('status', flat=True).first()
    )


@receiver(post_save, sender=Order)
def prompt_rating_on_completion(sender, instance, created, raw=False, **kwargs):
    if created or raw:
        return

    from apps.notifications.services import NotificationService

    previous_status = getattr(instance, '_previous_status', None)
    try:
        with transaction.atomic():
            NotificationService().notify_rating_prompt(instance, previous_status)
    except DatabaseError:
        logger.exception(f"Failed to create rating prompt for order {instance.id}")
