from django.contrib import admin
from .models import RestaurantRating


@admin.register(RestaurantRating)
class RestaurantRatingAdmin(admin.ModelAdmin):
    list_display = ['restaurant', 'customer', 'order', 'rating', 'created_at']
    list_filter = ['rating', 'created_at']
    search_fields = ['restaurant__name', 'customer__username', 'customer__email']
    readonly_fields = ['created_at', 'updated_at']
    raw_id_fields = ['restaurant', 'customer', 'order']
