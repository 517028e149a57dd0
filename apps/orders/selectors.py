from .models import Order


class OrderSelector:
    """
    Read-only queries for orders
    """

    def get_order_by_id(self, order_id):
        try:
            return Order.objects.select_related('customer', 'restaurant').get(id=order_id)
        except Order.DoesNotExist:
            return None

    def get_order_by_qr_code(self, user, qr_code):
        """
        Order behind a scanned pickup QR code, limited to the restaurants the
        user owns (any restaurant for admins)
        """
        if not qr_code:
            return None
        queryset = Order.objects.select_related('customer', 'restaurant').filter(qr_code=qr_code)
        if not user.is_admin:
            queryset = queryset.filter(restaurant__owner=user)
        return queryset.first()

    def get_customer_orders(self, user, status=None):
        queryset = Order.objects.filter(customer=user).select_related('restaurant')
        if status:
            queryset = queryset.filter(status=status)
        return queryset.order_by('-created_at')

    def get_restaurant_orders(self, user, status=None, restaurant_id=None):
        """Orders of the restaurants the user owns (every order for admins)"""
        queryset = Order.objects.select_related('customer', 'restaurant')
        if not user.is_admin:
            queryset = queryset.filter(restaurant__owner=user)
        if restaurant_id:
            queryset = queryset.filter(restaurant_id=restaurant_id)
        if status:
            queryset = queryset.filter(status=status)
        return queryset.order_by('-created_at')

    def can_view(self, user, order):
        if user.is_admin or order.customer_id == user.id:
            return True
        return order.restaurant is not None and order.restaurant.owner_id == user.id

    def can_manage(self, user, order):
        if user.is_admin:
            return True
        return order.restaurant is not None and order.restaurant.owner_id == user.id
