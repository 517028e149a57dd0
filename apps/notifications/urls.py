from django.urls import path
from .views import (
    NotificationListView,
    UnreadCountView,
    MarkNotificationReadView,
    MarkAllNotificationsReadView,
    OwnerNotificationListView,
    OwnerMarkNotificationReadView,
    OwnerMarkAllNotificationsReadView,
)

app_name = 'notifications'

urlpatterns = [
    # Customer
    path('', NotificationListView.as_view(), name='list'),
    path('unread-count/', UnreadCountView.as_view(), name='unread-count'),
    path('read-all/', MarkAllNotificationsReadView.as_view(), name='read-all'),
    path('<int:notification_id>/read/', MarkNotificationReadView.as_view(), name='read'),

    # Restaurant owner
    path('owner/', OwnerNotificationListView.as_view(), name='owner-list'),
    path('owner/read-all/', OwnerMarkAllNotificationsReadView.as_view(), name='owner-read-all'),
    path('owner/<int:notification_id>/read/', OwnerMarkNotificationReadView.as_view(), name='owner-read'),
]
