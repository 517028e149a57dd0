"""
Service layer for restaurant ratings
"""
from decimal import Decimal, ROUND_HALF_UP
from django.db import transaction
from rest_framework import status
from rest_framework.exceptions import NotFound, PermissionDenied
from apps.api.exception_handler import ServiceError
from apps.orders.selectors import OrderSelector
from apps.restaurants.models import Restaurant
from .models import RestaurantRating
import logging

logger = logging.getLogger(__name__)

ONE_DECIMAL = Decimal('0.1')


def average_rating(values):
    """
    Mean of the given ratings rounded half-up to one decimal, None when empty
    """
    values = list(values)
    if not values:
        return None
    mean = sum(values, Decimal('0')) / len(values)
    return mean.quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)


class RatingAggregator:
    """
    Keeps Restaurant.rating equal to the mean of its customer ratings

    A restaurant without customer ratings keeps whatever rating it has, so an
    admin-seeded value survives until the first customer rates it, and the
    last computed mean survives when every rating is removed.
    """

    def recalculate(self, restaurant_id):
        """Returns the new rating, or None when nothing was written"""
        values = RestaurantRating.objects.filter(restaurant_id=restaurant_id).values_list('rating', flat=True)
        average = average_rating(values)
        if average is None:
            logger.info(f"Restaurant {restaurant_id} has no customer ratings, rating left unchanged")
            return None

        Restaurant.objects.filter(id=restaurant_id).update(rating=average)
        logger.info(f"Restaurant {restaurant_id} rating recalculated: {average}")
        return average


class RatingService:
    """Service class for rating operations"""

    def __init__(self):
        self.order_selector = OrderSelector()

    @transaction.atomic
    def submit_rating(self, user, order_id, rating):
        """
        Rate the restaurant of a served or completed order. Rating the same
        order again replaces the earlier value.

        Returns:
            (RestaurantRating, created)
        """
        order = self.order_selector.get_order_by_id(order_id)
        if order is None or order.customer_id != user.id:
            raise NotFound("Order not found")
        if order.restaurant_id is None:
            raise ServiceError("This order is not linked to a restaurant")
        if not order.is_rateable:
            raise ServiceError(
                "Only served or completed orders can be rated",
                status_code=status.HTTP_409_CONFLICT
            )

        existing = RestaurantRating.objects.filter(
            restaurant_id=order.restaurant_id,
            customer=user,
            order=order,
        ).first()

        if existing:
            existing.rating = rating
            existing.save(update_fields=['rating', 'updated_at'])
            logger.info(f"Rating {existing.id} for order {order.id} updated to {rating}")
            return existing, False

        created = RestaurantRating.objects.create(
            restaurant_id=order.restaurant_id,
            customer=user,
            order=order,
            rating=rating,
        )
        logger.info(f"Order {order.id} rated {rating} by user {user.id}")
        return created, True

    @transaction.atomic
    def delete_rating(self, user, rating_id):
        rating = RestaurantRating.objects.filter(id=rating_id).first()
        if rating is None:
            raise NotFound("Rating not found")
        if rating.customer_id != user.id and not user.is_admin:
            raise PermissionDenied("You can only delete your own ratings")

        rating.delete()
        logger.info(f"Rating {rating_id} deleted by user {user.id}")
