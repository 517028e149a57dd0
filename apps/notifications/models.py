from django.db import models
from apps.api.mixins import TimestampMixin


class NotificationStatus(models.TextChoices):
    UNREAD = 'unread', 'Unread'
    READ = 'read', 'Read'


class CustomerNotification(TimestampMixin):
    """
    Notification shown to a customer

    Either order-linked (rating prompt) or post-linked (reply to one of the
    customer's comments). Both links may be empty for generic notices.
    """
    customer = models.ForeignKey(
        'users.User',
        on_delete=models.CASCADE,
        related_name='notifications',
        help_text="Recipient"
    )
    order = models.ForeignKey(
        'orders.Order',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='notifications',
        help_text="Related order"
    )
    title = models.CharField(max_length=200, help_text="Title")
    message = models.TextField(help_text="Message")
    status = models.CharField(
        max_length=10,
        choices=NotificationStatus.choices,
        default=NotificationStatus.UNREAD,
        help_text="Read status"
    )

    blog_post = models.ForeignKey(
        'blog.BlogPost',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='customer_notifications',
        help_text="Related blog post"
    )
    reply_content = models.TextField(blank=True, null=True, help_text="Full reply text")
    restaurant_name = models.CharField(max_length=200, blank=True, null=True, help_text="Replying restaurant")

    class Meta:
        db_table = 'notifications'
        verbose_name = 'Customer notification'
        verbose_name_plural = 'Customer notifications'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['customer', 'status'], name='notif_customer_status_idx'),
            models.Index(fields=['customer', '-created_at'], name='notif_customer_created_idx'),
        ]

    def __str__(self):
        return f"{self.title} -> {self.customer_id} ({self.status})"

    @property
    def is_read(self):
        return self.status == NotificationStatus.READ


class OwnerNotification(TimestampMixin):
    """
    Notification shown to a restaurant owner when a customer comments on
    one of the restaurant's blog posts. At most one per source comment.
    """
    restaurant = models.ForeignKey(
        'restaurants.Restaurant',
        on_delete=models.CASCADE,
        related_name='comment_notifications',
        help_text="Restaurant"
    )
    customer = models.ForeignKey(
        'users.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+',
        help_text="Commenting customer"
    )
    post = models.ForeignKey(
        'blog.BlogPost',
        on_delete=models.CASCADE,
        related_name='owner_notifications',
        help_text="Blog post"
    )
    comment = models.OneToOneField(
        'blog.BlogComment',
        on_delete=models.CASCADE,
        related_name='owner_notification',
        help_text="Source comment"
    )
    title = models.CharField(max_length=200, help_text="Title")
    message = models.TextField(help_text="Message")
    comment_content = models.TextField(blank=True, default='', help_text="Full comment text")
    status = models.CharField(
        max_length=10,
        choices=NotificationStatus.choices,
        default=NotificationStatus.UNREAD,
        help_text="Read status"
    )

    class Meta:
        db_table = 'blog_comment_notifications'
        verbose_name = 'Owner notification'
        verbose_name_plural = 'Owner notifications'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['restaurant', 'status'], name='owner_notif_rest_status_idx'),
        ]

    def __str__(self):
        return f"{self.title} -> restaurant {self.restaurant_id} ({self.status})"
