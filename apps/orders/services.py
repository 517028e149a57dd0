"""
Service layer for orders: checkout and status updates
"""
from decimal import Decimal
import uuid
from django.db import transaction
from django.utils import timezone
from rest_framework import status
from rest_framework.exceptions import NotFound, PermissionDenied
from apps.api.exception_handler import ServiceError
from apps.restaurants.models import MenuItem
from apps.restaurants.selectors import RestaurantSelector
from .models import Order
from .selectors import OrderSelector
import logging

logger = logging.getLogger(__name__)


class OrderService:
    """
    Business rules for orders
    """

    def __init__(self):
        self.order_selector = OrderSelector()
        self.restaurant_selector = RestaurantSelector()

    @staticmethod
    def build_qr_code(restaurant_id):
        """ALAN-<epoch ms>-<restaurant id>-<random hex>"""
        return f"ALAN-{int(timezone.now().timestamp() * 1000)}-{restaurant_id}-{uuid.uuid4().hex[:8]}"

    @transaction.atomic
    def create_order(self, user, data):
        """
        Create a paid order from the submitted cart

        Args:
            data: {
                'restaurant_id': int,
                'order_type': 'dine_in' | 'takeaway',
                'payment_method': str,
                'items': [{'menu_item_id': int, 'quantity': int}]
            }
        """
        restaurant = self.restaurant_selector.get_restaurant_by_id(data['restaurant_id'])
        if restaurant is None:
            raise NotFound("Restaurant not found")

        order_items, total = self._build_order_items(restaurant.id, data['items'])

        order = Order.objects.create(
            customer=user,
            restaurant=restaurant,
            order_type=data['order_type'],
            payment_method=data['payment_method'],
            total_amount=total,
            status='paid',
            qr_code=self.build_qr_code(restaurant.id),
            order_items=order_items,
        )
        logger.info(f"Order {order.id} placed by user {user.id} at restaurant {restaurant.id}: {total}")
        return order

    def _build_order_items(self, restaurant_id, items):
        quantities = {}
        for item in items:
            menu_item_id = item['menu_item_id']
            quantities[menu_item_id] = quantities.get(menu_item_id, 0) + item['quantity']

        menu_items = MenuItem.objects.filter(
            id__in=quantities.keys(),
            restaurant_id=restaurant_id,
            is_available=True,
        ).in_bulk()

        missing = sorted(set(quantities) - set(menu_items))
        if missing:
            raise ServiceError(
                "Some items are not available at this restaurant",
                errors={'items': missing}
            )

        snapshot = []
        total = Decimal('0.00')
        for menu_item_id, quantity in quantities.items():
            menu_item = menu_items[menu_item_id]
            total += menu_item.price * quantity
            snapshot.append({
                'menu_item_id': menu_item.id,
                'name': menu_item.name,
                'price': str(menu_item.price),
                'quantity': quantity,
            })
        return snapshot, total

    @transaction.atomic
    def update_order_status(self, user, order_id, new_status):
        """
        Restaurant owner (or admin) moves an order to a new status
        """
        order = self.order_selector.get_order_by_id(order_id)
        if order is None:
            raise NotFound("Order not found")
        if not self.order_selector.can_manage(user, order):
            raise PermissionDenied("Only the restaurant can update this order")

        if order.status == 'cancelled' and new_status != 'cancelled':
            raise ServiceError(
                "Cancelled orders cannot be reopened",
                status_code=status.HTTP_409_CONFLICT
            )

        order.status = new_status
        update_fields = ['status', 'updated_at']
        if new_status == 'completed' and order.completed_at is None:
            order.completed_at = timezone.now()
            update_fields.append('completed_at')

        order.save(update_fields=update_fields)
        logger.info(f"Order {order.id} status -> {new_status} by user {user.id}")
        return order
