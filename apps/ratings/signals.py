"""
Django signals for ratings app: keep Restaurant.rating in sync with customer ratings
"""
from django.db import DatabaseError, transaction
from django.db.models.signals import pre_save, post_save, post_delete
from django.dispatch import receiver
from .models import RestaurantRating
from .services import RatingAggregator
import logging

logger = logging.getLogger(__name__)


def _recalculate(*restaurant_ids):
    aggregator = RatingAggregator()
    for restaurant_id in dict.fromkeys(restaurant_ids):
        if restaurant_id is None:
            continue
        try:
            with transaction.atomic():
                aggregator.recalculate(restaurant_id)
        except DatabaseError:
            logger.exception(f"Failed to recalculate rating for restaurant {restaurant_id}")


@receiver(pre_save, sender=RestaurantRating)
def remember_previous_restaurant(sender, instance, raw=False, **kwargs):
    if raw or instance.pk is None:
        instance._previous_restaurant_id = None
        return

    instance._previous_restaurant_id = (
        RestaurantRating.objects.filter(pk=instance.pk).values_list('restaurant_id', flat=True).first()
    )


@receiver(post_save, sender=RestaurantRating)
def rating_created_or_updated(sender, instance, created, raw=False, **kwargs):
    """
    A rating moved to another restaurant refreshes both restaurants
    """
    if raw:
        return
    _recalculate(getattr(instance, '_previous_restaurant_id', None), instance.restaurant_id)


@receiver(post_delete, sender=RestaurantRating)
def rating_deleted(sender, instance, **kwargs):
    _recalculate(instance.restaurant_id)
