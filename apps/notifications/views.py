"""
Views for notifications app
"""
from django.conf import settings
from rest_framework.views import APIView
from rest_framework import permissions
from drf_spectacular.utils import extend_schema, OpenApiParameter
from apps.api.mixins import StandardResponseMixin, LimitMixin
from apps.api.response import ApiResponse
from .filters import CustomerNotificationFilter, OwnerNotificationFilter
from .selectors import NotificationSelector
from .serializers import (
    CustomerNotificationSerializer,
    OwnerNotificationSerializer,
    UnreadCountSerializer,
    MarkAllReadResultSerializer,
)
from .services import NotificationService


class IsOwnerOrAdmin(permissions.BasePermission):
    message = "Only restaurant owners can access owner notifications"

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and (user.is_owner or user.is_admin))


LIMIT_PARAMETER = OpenApiParameter(name='limit', description='Max items (1-100)', required=False, type=int)
STATUS_PARAMETER = OpenApiParameter(name='status', description='unread | read', required=False, type=str)


class NotificationListView(LimitMixin, StandardResponseMixin, APIView):
    """
    GET /api/notifications/?limit=20&status=unread
    """
    permission_classes = [permissions.IsAuthenticated]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.notification_selector = NotificationSelector()

    @extend_schema(
        tags=['Notifications'],
        summary="List my notifications",
        parameters=[LIMIT_PARAMETER, STATUS_PARAMETER],
        responses={200: CustomerNotificationSerializer(many=True)}
    )
    def get(self, request):
        filterset = CustomerNotificationFilter(
            request.query_params,
            queryset=self.notification_selector.get_customer_notifications(request.user)
        )
        if not filterset.is_valid():
            return ApiResponse.validation_error(message="Invalid filters", errors=filterset.errors)

        notifications = filterset.qs[:self.get_limit(request)]
        return ApiResponse.success(
            data=CustomerNotificationSerializer(notifications, many=True).data,
            message="Notifications retrieved successfully"
        )


class UnreadCountView(StandardResponseMixin, APIView):
    """
    GET /api/notifications/unread-count/
    """
    permission_classes = [permissions.IsAuthenticated]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.notification_selector = NotificationSelector()

    @extend_schema(tags=['Notifications'], summary="Unread notification count", responses={200: UnreadCountSerializer})
    def get(self, request):
        return ApiResponse.success(
            data={'unread_count': self.notification_selector.get_unread_count(request.user)}
        )


class MarkNotificationReadView(StandardResponseMixin, APIView):
    """
    POST /api/notifications/{notification_id}/read/
    """
    permission_classes = [permissions.IsAuthenticated]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.notification_service = NotificationService()

    @extend_schema(tags=['Notifications'], summary="Mark notification as read", request=None,
                   responses={200: CustomerNotificationSerializer})
    def post(self, request, notification_id):
        notification = self.notification_service.mark_as_read(request.user, notification_id)
        return ApiResponse.updated(
            data=CustomerNotificationSerializer(notification).data,
            message="Notification marked as read"
        )


class MarkAllNotificationsReadView(StandardResponseMixin, APIView):
    """
    POST /api/notifications/read-all/
    """
    permission_classes = [permissions.IsAuthenticated]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.notification_service = NotificationService()

    @extend_schema(tags=['Notifications'], summary="Mark all notifications as read", request=None,
                   responses={200: MarkAllReadResultSerializer})
    def post(self, request):
        updated = self.notification_service.mark_all_as_read(request.user)
        return ApiResponse.updated(data={'updated': updated}, message="All notifications marked as read")


class OwnerNotificationListView(LimitMixin, StandardResponseMixin, APIView):
    """
    GET /api/notifications/owner/?limit=50&status=unread&restaurant=1
    """
    permission_classes = [IsOwnerOrAdmin]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.notification_selector = NotificationSelector()
        self.default_limit = settings.OWNER_NOTIFICATION_DEFAULT_LIMIT

    @extend_schema(
        tags=['Notifications'],
        summary="List blog comment notifications for my restaurants",
        parameters=[
            LIMIT_PARAMETER,
            STATUS_PARAMETER,
            OpenApiParameter(name='restaurant', description='Restaurant ID', required=False, type=int),
        ],
        responses={200: OwnerNotificationSerializer(many=True)}
    )
    def get(self, request):
        filterset = OwnerNotificationFilter(
            request.query_params,
            queryset=self.notification_selector.get_owner_notifications(request.user)
        )
        if not filterset.is_valid():
            return ApiResponse.validation_error(message="Invalid filters", errors=filterset.errors)

        notifications = filterset.qs[:self.get_limit(request)]
        return ApiResponse.success(
            data=OwnerNotificationSerializer(notifications, many=True).data,
            message="Notifications retrieved successfully"
        )


class OwnerMarkNotificationReadView(StandardResponseMixin, APIView):
    """
    POST /api/notifications/owner/{notification_id}/read/
    """
    permission_classes = [IsOwnerOrAdmin]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.notification_service = NotificationService()

    @extend_schema(tags=['Notifications'], summary="Mark owner notification as read", request=None,
                   responses={200: OwnerNotificationSerializer})
    def post(self, request, notification_id):
        notification = self.notification_service.mark_owner_notification_as_read(request.user, notification_id)
        return ApiResponse.updated(
            data=OwnerNotificationSerializer(notification).data,
            message="Notification marked as read"
        )


class OwnerMarkAllNotificationsReadView(StandardResponseMixin, APIView):
    """
    POST /api/notifications/owner/read-all/
    """
    permission_classes = [IsOwnerOrAdmin]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.notification_service = NotificationService()

    @extend_schema(
        tags=['Notifications'],
        summary="Mark all owner notifications as read",
        request=None,
        parameters=[OpenApiParameter(name='restaurant', description='Restaurant ID', required=False, type=int)],
        responses={200: MarkAllReadResultSerializer}
    )
    def post(self, request):
        restaurant_id = request.query_params.get('restaurant')
        if restaurant_id is not None and not restaurant_id.isdigit():
            return ApiResponse.bad_request(message="restaurant must be an integer")

        updated = self.notification_service.mark_all_owner_notifications_as_read(request.user, restaurant_id)
        return ApiResponse.updated(data={'updated': updated}, message="All notifications marked as read")
