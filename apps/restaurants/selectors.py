from django.db.models import Q
from .models import Restaurant, MenuItem


class RestaurantSelector:
    """
    Read-only queries for restaurants
    """

    def get_restaurant_by_id(self, restaurant_id):
        try:
            return Restaurant.objects.select_related('owner').get(id=restaurant_id, is_active=True)
        except Restaurant.DoesNotExist:
            return None

    def get_active_restaurants(self, filters=None):
        """
        Args:
            filters: {'search': str, 'cuisine': str}
        """
        queryset = Restaurant.objects.filter(is_active=True)
        if not filters:
            return queryset.order_by('name')

        if filters.get('search'):
            term = filters['search']
            queryset = queryset.filter(
                Q(name__icontains=term) |
                Q(description__icontains=term) |
                Q(cuisine__icontains=term)
            )
        if filters.get('cuisine'):
            queryset = queryset.filter(cuisine__iexact=filters['cuisine'])

        return queryset.order_by('name')

    def get_owned_restaurant_ids(self, user):
        """Ids of every restaurant the user owns"""
        if user is None or not user.is_authenticated:
            return []
        return list(Restaurant.objects.filter(owner=user).values_list('id', flat=True))

    def is_owner(self, user, restaurant_id):
        if user is None or not user.is_authenticated:
            return False
        return Restaurant.objects.filter(id=restaurant_id, owner=user).exists()

    def get_menu(self, restaurant_id, available_only=True):
        queryset = MenuItem.objects.filter(restaurant_id=restaurant_id)
        if available_only:
            queryset = queryset.filter(is_available=True)
        return queryset.order_by('category', 'name')
