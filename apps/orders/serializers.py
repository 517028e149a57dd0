from rest_framework import serializers
from .models import Order


class OrderSerializer(serializers.ModelSerializer):
    restaurant_name = serializers.CharField(source='restaurant.name', read_only=True, default=None)
    status_display = serializers.CharField(source='get_status_display', read_only=True)

    class Meta:
        model = Order
        fields = [
            'id',
            'customer',
            'restaurant',
            'restaurant_name',
            'order_type',
            'payment_method',
            'total_amount',
            'status',
            'status_display',
            'qr_code',
            'order_items',
            'completed_at',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class OrderItemInputSerializer(serializers.Serializer):
    menu_item_id = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1, max_value=99)


class OrderCreateSerializer(serializers.Serializer):
    restaurant_id = serializers.IntegerField(min_value=1)
    order_type = serializers.ChoiceField(choices=Order.ORDER_TYPE_CHOICES)
    payment_method = serializers.ChoiceField(choices=Order.PAYMENT_METHOD_CHOICES)
    items = OrderItemInputSerializer(many=True, allow_empty=False)


class OrderUpdateStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Order.ORDER_STATUS_CHOICES)
