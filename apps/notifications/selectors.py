from .models import CustomerNotification, OwnerNotification, NotificationStatus


class NotificationSelector:
    """
    Read-only queries for notifications, newest first
    """

    def get_customer_notifications(self, user):
        return (
            CustomerNotification.objects
            .filter(customer=user)
            .select_related('order', 'blog_post')
            .order_by('-created_at', '-id')
        )

    def get_unread_count(self, user):
        return CustomerNotification.objects.filter(
            customer=user,
            status=NotificationStatus.UNREAD,
        ).count()

    def get_owner_notifications(self, user):
        """Comment notifications for every restaurant the user owns (all for admins)"""
        queryset = OwnerNotification.objects.select_related('restaurant', 'post')
        if not user.is_admin:
            queryset = queryset.filter(restaurant__owner=user)
        return queryset.order_by('-created_at', '-id')

    def get_owner_unread_count(self, user):
        return self.get_owner_notifications(user).filter(status=NotificationStatus.UNREAD).count()
