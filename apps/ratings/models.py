from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal
from apps.api.mixins import TimestampMixin


class RestaurantRating(TimestampMixin):
    """
    Customer rating of a restaurant for one order (1.0 - 5.0, one decimal)
    """
    restaurant = models.ForeignKey(
        'restaurants.Restaurant',
        on_delete=models.CASCADE,
        related_name='ratings',
        help_text="Restaurant"
    )
    customer = models.ForeignKey(
        'users.User',
        on_delete=models.CASCADE,
        related_name='restaurant_ratings',
        help_text="Customer"
    )
    order = models.ForeignKey(
        'orders.Order',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='ratings',
        help_text="Rated order"
    )
    rating = models.DecimalField(
        max_digits=2,
        decimal_places=1,
        validators=[MinValueValidator(Decimal('1.0')), MaxValueValidator(Decimal('5.0'))],
        help_text="Rating from 1.0 to 5.0"
    )

    class Meta:
        db_table = 'restaurant_ratings'
        verbose_name = 'Restaurant rating'
        verbose_name_plural = 'Restaurant ratings'
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(
                fields=['restaurant', 'customer', 'order'],
                name='unique_rating_per_restaurant_customer_order'
            ),
        ]
        indexes = [
            models.Index(fields=['restaurant', 'customer'], name='rating_rest_customer_idx'),
        ]

    def __str__(self):
        return f"{self.restaurant_id} rated {self.rating} by {self.customer_id}"
