"""
Service layer for notifications

Generators turn a freshly written row (comment, reply, order status change)
into a notification. Each generator returns ``(NotificationOutcome,
notification_or_None)`` so callers and tests can tell why nothing was written.
"""
import logging

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from django.conf import settings
from django.db import IntegrityError, models, transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound

from apps.blog.models import BlogComment
from apps.ratings.models import RestaurantRating
from .models import CustomerNotification, OwnerNotification, NotificationStatus

logger = logging.getLogger(__name__)

REPLY_TITLE = 'Comment Reply'
NEW_COMMENT_TITLE = 'New Blog Comment'
RATING_PROMPT_TITLE = 'Your order is completed'
RATING_PROMPT_MESSAGE = (
    'Your order is completed and it will be served in a short while. '
    'Please give us rating for our service.'
)
RATING_PROMPT_STATUSES = ('completed', 'served')


class NotificationOutcome(models.TextChoices):
    CREATED = 'created', 'Created'
    SKIPPED_NOT_REPLY = 'skipped_not_reply', 'Not a reply'
    SKIPPED_NOT_ROOT = 'skipped_not_root', 'Not a root comment'
    SKIPPED_MISSING_PARENT = 'skipped_missing_parent', 'Parent comment or its author missing'
    SKIPPED_MISSING_RESTAURANT = 'skipped_missing_restaurant', 'Restaurant missing'
    SKIPPED_DUPLICATE = 'skipped_duplicate', 'Already notified'
    SKIPPED_NO_TRANSITION = 'skipped_no_transition', 'No qualifying status change'
    SKIPPED_MISSING_CONTEXT = 'skipped_missing_context', 'Order has no customer or restaurant'
    SKIPPED_ALREADY_RATED = 'skipped_already_rated', 'Order already rated'


def truncate_preview(text, limit=None):
    """
    Shorten text for a notification message.

    Text up to ``limit`` characters is returned unchanged, longer text keeps
    its first ``limit - 3`` characters followed by ``...``.
    """
    limit = limit or settings.NOTIFICATION_PREVIEW_LENGTH
    text = text or ''
    if len(text) <= limit:
        return text
    return text[:limit - 3] + '...'


def customer_group_name(user_id):
    return f'notifications_customer_{user_id}'


def restaurant_group_name(restaurant_id):
    return f'notifications_restaurant_{restaurant_id}'


# Admins may act on every restaurant's owner notifications
OWNER_ADMIN_GROUP = 'notifications_owner_admin'


class NotificationService:
    """
    Generates notifications and handles read/unread updates
    """

    # ==================== GENERATORS ====================

    def notify_reply(self, reply):
        """
        Notify the author of the parent comment that the restaurant replied.

        The parent is read by id without the soft-delete filter, so a reply
        to a deleted comment still notifies its author.
        """
        if reply.parent_id is None:
            return NotificationOutcome.SKIPPED_NOT_REPLY, None

        parent = (
            BlogComment.objects
            .select_related('author')
            .filter(id=reply.parent_id)
            .first()
        )
        if parent is None or parent.author_id is None:
            logger.info(f"Reply {reply.id}: parent comment {reply.parent_id} or its author not found, skipping")
            return NotificationOutcome.SKIPPED_MISSING_PARENT, None

        restaurant = reply.post.restaurant if reply.post_id else None
        restaurant_name = restaurant.name if restaurant else None
        message = f'{restaurant_name or "Restaurant"} replied: "{truncate_preview(reply.content)}"'

        notification = CustomerNotification.objects.create(
            customer_id=parent.author_id,
            title=REPLY_TITLE,
            message=message,
            status=NotificationStatus.UNREAD,
            blog_post_id=reply.post_id,
            reply_content=reply.content,
            restaurant_name=restaurant_name,
        )
        logger.info(f"Reply {reply.id}: notified customer {parent.author_id} (notification {notification.id})")

        self.publish_customer_notification(notification)
        return NotificationOutcome.CREATED, notification

    def notify_new_comment(self, comment):
        """
        Notify the restaurant owning the post that a customer commented.

        Only one owner notification may exist per comment; a second attempt
        is reported as ``SKIPPED_DUPLICATE`` without touching the comment.
        """
        if comment.parent_id is not None:
            return NotificationOutcome.SKIPPED_NOT_ROOT, None

        post = comment.post
        restaurant = post.restaurant if post else None
        if restaurant is None:
            logger.info(f"Comment {comment.id}: post has no restaurant, skipping")
            return NotificationOutcome.SKIPPED_MISSING_RESTAURANT, None

        customer_name = (comment.author.display_name if comment.author_id else None) or 'A customer'
        post_title = post.title or 'a blog post'
        message = (
            f'{customer_name} commented on your blog post "{post_title}": '
            f'"{truncate_preview(comment.content)}"'
        )

        try:
            with transaction.atomic():
                notification = OwnerNotification.objects.create(
                    restaurant=restaurant,
                    customer_id=comment.author_id,
                    post=post,
                    comment=comment,
                    title=NEW_COMMENT_TITLE,
                    message=message,
                    comment_content=comment.content,
                    status=NotificationStatus.UNREAD,
                )
        except IntegrityError:
            logger.warning(f"Comment {comment.id}: owner notification already exists, skipping")
            return NotificationOutcome.SKIPPED_DUPLICATE, None

        logger.info(f"Comment {comment.id}: notified restaurant {restaurant.id} (notification {notification.id})")

        self.publish_owner_notification(notification)
        return NotificationOutcome.CREATED, notification

    def notify_rating_prompt(self, order, previous_status):
        """
        Ask the customer to rate the order when it becomes completed or served.

        Writing the same status twice is not a transition and does not fire.
        """
        if order.status not in RATING_PROMPT_STATUSES or order.status == previous_status:
            return NotificationOutcome.SKIPPED_NO_TRANSITION, None

        if order.customer_id is None or order.restaurant_id is None:
            logger.info(f"Order {order.id}: no customer or restaurant, skipping rating prompt")
            return NotificationOutcome.SKIPPED_MISSING_CONTEXT, None

        already_rated = RestaurantRating.objects.filter(
            restaurant_id=order.restaurant_id,
            customer_id=order.customer_id,
            order_id=order.id,
        ).exists()
        if already_rated:
            logger.info(f"Order {order.id}: already rated, skipping rating prompt")
            return NotificationOutcome.SKIPPED_ALREADY_RATED, None

        notification = CustomerNotification.objects.create(
            customer_id=order.customer_id,
            order=order,
            title=RATING_PROMPT_TITLE,
            message=RATING_PROMPT_MESSAGE,
            status=NotificationStatus.UNREAD,
        )
        logger.info(f"Order {order.id}: rating prompt sent to customer {order.customer_id}")

        self.publish_customer_notification(notification)
        return NotificationOutcome.CREATED, notification

    # ==================== READ STATE ====================

    def mark_as_read(self, user, notification_id):
        notification = CustomerNotification.objects.filter(id=notification_id, customer=user).first()
        if notification is None:
            raise NotFound("Notification not found")

        if notification.status != NotificationStatus.READ:
            notification.status = NotificationStatus.READ
            notification.save(update_fields=['status', 'updated_at'])
        return notification

    def mark_all_as_read(self, user):
        """Returns the number of notifications that changed"""
        return CustomerNotification.objects.filter(
            customer=user,
            status=NotificationStatus.UNREAD,
        ).update(status=NotificationStatus.READ, updated_at=timezone.now())

    def mark_owner_notification_as_read(self, user, notification_id):
        queryset = OwnerNotification.objects.filter(id=notification_id)
        if not user.is_admin:
            queryset = queryset.filter(restaurant__owner=user)

        notification = queryset.first()
        if notification is None:
            raise NotFound("Notification not found")

        if notification.status != NotificationStatus.READ:
            notification.status = NotificationStatus.READ
            notification.save(update_fields=['status', 'updated_at'])
        return notification

    def mark_all_owner_notifications_as_read(self, user, restaurant_id=None):
        queryset = OwnerNotification.objects.filter(status=NotificationStatus.UNREAD)
        if not user.is_admin:
            queryset = queryset.filter(restaurant__owner=user)
        if restaurant_id:
            queryset = queryset.filter(restaurant_id=restaurant_id)
        return queryset.update(status=NotificationStatus.READ, updated_at=timezone.now())

    # ==================== REALTIME ====================

    def publish_customer_notification(self, notification):
        from .serializers import CustomerNotificationSerializer

        self._publish_on_commit(
            [customer_group_name(notification.customer_id)],
            CustomerNotificationSerializer(notification).data,
            audience='customer',
        )

    def publish_owner_notification(self, notification):
        from .serializers import OwnerNotificationSerializer

        self._publish_on_commit(
            [restaurant_group_name(notification.restaurant_id), OWNER_ADMIN_GROUP],
            OwnerNotificationSerializer(notification).data,
            audience='owner',
        )

    def _publish_on_commit(self, group_names, payload, audience):
        def publish():
            for group_name in group_names:
                send_to_group(group_name, payload, audience)

        transaction.on_commit(publish)


def send_to_group(group_name, payload, audience):
    """
    Push a notification to a channel-layer group. Delivery is best effort:
    failures are logged and dropped.
    """
    channel_layer = get_channel_layer()
    if channel_layer is None:
        return

    try:
        async_to_sync(channel_layer.group_send)(
            group_name,
            {
                'type': 'notification',
                'audience': audience,
                'notification': dict(payload),
            }
        )
    except Exception:
        logger.exception(f"Failed to publish notification to {group_name}")
