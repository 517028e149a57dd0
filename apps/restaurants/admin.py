from django.contrib import admin
from .models import Restaurant, MenuItem


class MenuItemInline(admin.TabularInline):
    model = MenuItem
    extra = 0
    fields = ['name', 'category', 'price', 'is_available']


@admin.register(Restaurant)
class RestaurantAdmin(admin.ModelAdmin):
    """
    Admin for restaurants. ``rating`` is editable so an admin can seed a value
    before any customer has rated the restaurant.
    """
    list_display = ['name', 'owner', 'cuisine', 'rating', 'is_active', 'created_at']
    list_filter = ['is_active', 'cuisine', 'created_at']
    search_fields = ['name', 'slug', 'owner__username', 'owner__email']
    prepopulated_fields = {'slug': ('name',)}
    readonly_fields = ['created_at', 'updated_at']
    inlines = [MenuItemInline]


@admin.register(MenuItem)
class MenuItemAdmin(admin.ModelAdmin):
    list_display = ['name', 'restaurant', 'category', 'price', 'is_available']
    list_filter = ['is_available', 'restaurant']
    search_fields = ['name', 'restaurant__name']
