"""
Views for Orders app
"""
from rest_framework.views import APIView
from rest_framework import permissions
from drf_spectacular.utils import extend_schema, OpenApiParameter
from apps.api.mixins import StandardResponseMixin
from apps.api.pagination import StandardPageNumberPagination
from apps.api.response import ApiResponse
from .models import Order
from .serializers import OrderSerializer, OrderCreateSerializer, OrderUpdateStatusSerializer
from .services import OrderService
from .selectors import OrderSelector


STATUS_PARAMETER = OpenApiParameter(
    name='status',
    description='Filter by status (paid, preparing, ready, served, completed, cancelled)',
    required=False,
    type=str
)


def _read_status_filter(request):
    """Returns (status, error_response)"""
    order_status = request.query_params.get('status')
    if order_status and order_status not in dict(Order.ORDER_STATUS_CHOICES):
        return None, ApiResponse.validation_error(
            message="Invalid status filter",
            errors={'status': [f"'{order_status}' is not a valid status."]}
        )
    return order_status, None


class OrderListCreateView(StandardResponseMixin, APIView):
    """
    GET  /api/orders/  - my orders
    POST /api/orders/  - place a paid order
    """
    permission_classes = [permissions.IsAuthenticated]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.order_service = OrderService()
        self.order_selector = OrderSelector()

    @extend_schema(
        tags=['Orders'],
        summary="List my orders",
        parameters=[STATUS_PARAMETER],
        responses={200: OrderSerializer(many=True)}
    )
    def get(self, request):
        order_status, error = _read_status_filter(request)
        if error:
            return error

        orders = self.order_selector.get_customer_orders(request.user, order_status)
        paginator = StandardPageNumberPagination()
        page = paginator.paginate_queryset(orders, request, view=self)
        return paginator.get_paginated_response(OrderSerializer(page, many=True).data)

    @extend_schema(
        tags=['Orders'],
        summary="Place order",
        description="Creates a paid order for the submitted cart and returns its pickup QR payload",
        request=OrderCreateSerializer,
        responses={201: OrderSerializer}
    )
    def post(self, request):
        serializer = OrderCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return ApiResponse.validation_error(message="Invalid data", errors=serializer.errors)

        order = self.order_service.create_order(request.user, serializer.validated_data)
        return ApiResponse.created(data=OrderSerializer(order).data, message="Payment successful")


class RestaurantOrderListView(StandardResponseMixin, APIView):
    """
    GET /api/orders/restaurant/ - incoming orders of my restaurants
    """
    permission_classes = [permissions.IsAuthenticated]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.order_selector = OrderSelector()

    @extend_schema(
        tags=['Orders'],
        summary="List incoming orders (restaurant owner)",
        parameters=[
            STATUS_PARAMETER,
            OpenApiParameter(name='restaurant', description='Restaurant ID', required=False, type=int),
        ],
        responses={200: OrderSerializer(many=True)}
    )
    def get(self, request):
        if not (request.user.is_owner or request.user.is_admin):
            return ApiResponse.forbidden(message="Only restaurant owners can view incoming orders")

        order_status, error = _read_status_filter(request)
        if error:
            return error

        restaurant_id = request.query_params.get('restaurant')
        if restaurant_id and not restaurant_id.isdigit():
            return ApiResponse.bad_request(message="restaurant must be an integer")

        orders = self.order_selector.get_restaurant_orders(request.user, order_status, restaurant_id)
        paginator = StandardPageNumberPagination()
        page = paginator.paginate_queryset(orders, request, view=self)
        return paginator.get_paginated_response(OrderSerializer(page, many=True).data)


class OrderVerifyView(StandardResponseMixin, APIView):
    """
    GET /api/orders/verify/?qr_code=... - look up a scanned pickup code
    """
    permission_classes = [permissions.IsAuthenticated]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.order_selector = OrderSelector()

    @extend_schema(
        tags=['Orders'],
        summary="Verify pickup QR code (restaurant owner)",
        parameters=[
            OpenApiParameter(name='qr_code', description='Scanned QR payload', required=True, type=str),
        ],
        responses={200: OrderSerializer}
    )
    def get(self, request):
        if not (request.user.is_owner or request.user.is_admin):
            return ApiResponse.forbidden(message="Only restaurant owners can verify orders")

        qr_code = request.query_params.get('qr_code', '').strip()
        if not qr_code:
            return ApiResponse.validation_error(
                message="Invalid data",
                errors={'qr_code': ["This field is required."]}
            )

        order = self.order_selector.get_order_by_qr_code(request.user, qr_code)
        if order is None:
            return ApiResponse.not_found(message="Order not found")

        return ApiResponse.success(data=OrderSerializer(order).data, message="Order verified")


class OrderDetailView(StandardResponseMixin, APIView):
    """
    GET /api/orders/{order_id}/
    """
    permission_classes = [permissions.IsAuthenticated]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.order_selector = OrderSelector()

    @extend_schema(tags=['Orders'], summary="Order detail", responses={200: OrderSerializer})
    def get(self, request, order_id):
        order = self.order_selector.get_order_by_id(order_id)
        if not order or not self.order_selector.can_view(request.user, order):
            return ApiResponse.not_found(message="Order not found")

        return ApiResponse.success(data=OrderSerializer(order).data)


class OrderUpdateStatusView(StandardResponseMixin, APIView):
    """
    PATCH /api/orders/{order_id}/status/
    """
    permission_classes = [permissions.IsAuthenticated]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.order_service = OrderService()

    @extend_schema(
        tags=['Orders'],
        summary="Update order status (restaurant owner)",
        request=OrderUpdateStatusSerializer,
        responses={200: OrderSerializer}
    )
    def patch(self, request, order_id):
        serializer = OrderUpdateStatusSerializer(data=request.data)
        if not serializer.is_valid():
            return ApiResponse.validation_error(message="Invalid data", errors=serializer.errors)

        order = self.order_service.update_order_status(
            request.user, order_id, serializer.validated_data['status']
        )
        return ApiResponse.updated(data=OrderSerializer(order).data, message="Order status updated")
