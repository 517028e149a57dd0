"""
Signals for blog comments: new comments and replies generate notifications
"""
from django.db import DatabaseError, transaction
from django.db.models.signals import post_save
from django.dispatch import receiver
from .models import BlogComment
import logging

logger = logging.getLogger(__name__)


@receiver(post_save, sender=BlogComment)
def notify_on_new_comment(sender, instance, created, raw=False, **kwargs):
    """
    Replies notify the parent comment's author, root comments notify the
    restaurant. A failed notification never undoes the comment.
    """
    if not created or raw:
        return

    from apps.notifications.services import NotificationService

    service = NotificationService()
    try:
        with transaction.atomic():
            if instance.parent_id is not None:
                service.notify_reply(instance)
            else:
                service.notify_new_comment(instance)
    except DatabaseError:
        logger.exception(f"Failed to create notification for comment {instance.id}")
