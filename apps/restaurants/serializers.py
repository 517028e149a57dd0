from rest_framework import serializers
from .models import Restaurant, MenuItem


class RestaurantSerializer(serializers.ModelSerializer):
    rating = serializers.DecimalField(max_digits=2, decimal_places=1, read_only=True, coerce_to_string=False)

    class Meta:
        model = Restaurant
        fields = [
            'id',
            'name',
            'slug',
            'description',
            'cuisine',
            'phone_number',
            'address',
            'image_url',
            'rating',
            'owner',
            'created_at',
        ]
        read_only_fields = fields


class MenuItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = MenuItem
        fields = [
            'id',
            'restaurant',
            'name',
            'description',
            'category',
            'price',
            'image_url',
            'is_available',
        ]
        read_only_fields = fields
