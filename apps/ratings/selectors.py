from django.db.models import Count
from .models import RestaurantRating


class RatingSelector:
    """Read-only queries for restaurant ratings"""

    def get_restaurant_ratings(self, restaurant_id):
        return (
            RestaurantRating.objects
            .filter(restaurant_id=restaurant_id)
            .select_related('customer', 'customer__profile')
            .order_by('-created_at')
        )

    def get_rating_distribution(self, restaurant_id):
        """Count of ratings per whole star, 1 to 5"""
        distribution = {star: 0 for star in range(1, 6)}
        counts = (
            RestaurantRating.objects
            .filter(restaurant_id=restaurant_id)
            .values('rating')
            .annotate(total=Count('id'))
        )
        for row in counts:
            distribution[int(row['rating'])] += row['total']
        return distribution

    def get_user_rating_for_order(self, user, order_id):
        return RestaurantRating.objects.filter(customer=user, order_id=order_id).first()
