from decimal import Decimal
from rest_framework import serializers
from .models import RestaurantRating


class RestaurantRatingSerializer(serializers.ModelSerializer):
    customer_name = serializers.SerializerMethodField()
    rating = serializers.DecimalField(max_digits=2, decimal_places=1, read_only=True, coerce_to_string=False)

    class Meta:
        model = RestaurantRating
        fields = ['id', 'restaurant', 'customer', 'customer_name', 'order', 'rating', 'created_at']
        read_only_fields = fields

    def get_customer_name(self, obj):
        return obj.customer.display_name or 'A customer'


class RatingSubmitSerializer(serializers.Serializer):
    order_id = serializers.IntegerField(min_value=1)
    rating = serializers.DecimalField(
        max_digits=2,
        decimal_places=1,
        min_value=Decimal('1.0'),
        max_value=Decimal('5.0')
    )


class RestaurantRatingSummarySerializer(serializers.Serializer):
    restaurant_id = serializers.IntegerField()
    rating = serializers.DecimalField(max_digits=2, decimal_places=1, allow_null=True, coerce_to_string=False)
    rating_count = serializers.IntegerField()
    distribution = serializers.DictField(child=serializers.IntegerField())
    ratings = RestaurantRatingSerializer(many=True)
