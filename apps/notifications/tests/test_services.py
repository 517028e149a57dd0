from decimal import Decimal
from unittest import mock

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.test import SimpleTestCase, TestCase

from apps.blog.models import BlogPost, BlogComment
from apps.orders.models import Order
from apps.ratings.models import RestaurantRating
from apps.restaurants.models import Restaurant
from ..models import CustomerNotification, OwnerNotification
from ..services import (
    NotificationOutcome,
    NotificationService,
    RATING_PROMPT_MESSAGE,
    truncate_preview,
)

User = get_user_model()


class TruncatePreviewTest(SimpleTestCase):
    """Test cases for truncate_preview"""

    def test_short_text_unchanged(self):
        self.assertEqual(truncate_preview('Great food!'), 'Great food!')

    def test_text_at_limit_unchanged(self):
        text = 'a' * 100
        self.assertEqual(truncate_preview(text), text)

    def test_long_text_truncated_with_ellipsis(self):
        preview = truncate_preview('x' * 101)
        self.assertEqual(preview, 'x' * 97 + '...')
        self.assertEqual(len(preview), 100)

    def test_empty_text(self):
        self.assertEqual(truncate_preview(None), '')


class BlogNotificationTestMixin:
    """Shared fixtures: owner, customer, restaurant and a published post"""

    def setUp(self):
        self.owner = User.objects.create_user(
            username='owner',
            email='owner@example.com',
            password='testpass123',
            user_type='owner'
        )
        self.customer = User.objects.create_user(
            username='customer',
            email='mya.thida@example.com',
            password='testpass123'
        )
        self.restaurant = Restaurant.objects.create(name='Yangon Bistro', owner=self.owner)
        self.post = BlogPost.objects.create(
            restaurant=self.restaurant,
            author=self.owner,
            title='New Monsoon Menu',
            content='Fresh dishes for the rainy season.'
        )
        self.service = NotificationService()


class NewCommentNotificationTest(BlogNotificationTestMixin, TestCase):
    """Root comments notify the restaurant that owns the post"""

    def test_root_comment_creates_owner_notification(self):
        comment = BlogComment.objects.create(post=self.post, author=self.customer, content='Great food!')

        notifications = OwnerNotification.objects.filter(comment=comment)
        self.assertEqual(notifications.count(), 1)

        notification = notifications.get()
        self.assertEqual(notification.restaurant_id, self.restaurant.id)
        self.assertEqual(notification.post_id, self.post.id)
        self.assertEqual(notification.customer_id, self.customer.id)
        self.assertEqual(notification.title, 'New Blog Comment')
        self.assertEqual(notification.status, 'unread')
        self.assertEqual(notification.comment_content, 'Great food!')
        self.assertEqual(
            notification.message,
            'mya.thida commented on your blog post "New Monsoon Menu": "Great food!"'
        )

    def test_profile_name_preferred_over_email(self):
        self.customer.profile.full_name = 'Mya Thida'
        self.customer.profile.save()

        comment = BlogComment.objects.create(post=self.post, author=self.customer, content='Lovely')

        message = OwnerNotification.objects.get(comment=comment).message
        self.assertTrue(message.startswith('Mya Thida commented on your blog post'))

    def test_customer_without_name_or_email(self):
        anonymous = User.objects.create_user(username='nameless', password='testpass123')

        comment = BlogComment.objects.create(post=self.post, author=anonymous, content='Hi')

        message = OwnerNotification.objects.get(comment=comment).message
        self.assertTrue(message.startswith('A customer commented on your blog post'))

    def test_long_comment_truncated_in_message_only(self):
        content = 'y' * 150
        comment = BlogComment.objects.create(post=self.post, author=self.customer, content=content)

        notification = OwnerNotification.objects.get(comment=comment)
        self.assertEqual(notification.comment_content, content)
        self.assertTrue(notification.message.endswith('"' + 'y' * 97 + '..."'))

    def test_duplicate_owner_notification_rejected(self):
        comment = BlogComment.objects.create(post=self.post, author=self.customer, content='Great food!')

        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                OwnerNotification.objects.create(
                    restaurant=self.restaurant,
                    post=self.post,
                    comment=comment,
                    title='New Blog Comment',
                    message='duplicate'
                )

        outcome, notification = self.service.notify_new_comment(comment)
        self.assertEqual(outcome, NotificationOutcome.SKIPPED_DUPLICATE)
        self.assertIsNone(notification)
        self.assertEqual(OwnerNotification.objects.filter(comment=comment).count(), 1)
        self.assertTrue(BlogComment.objects.filter(id=comment.id).exists())

    def test_post_without_restaurant_skipped(self):
        platform_post = BlogPost.objects.create(title='Platform news', content='Hello')

        comment = BlogComment.objects.create(post=platform_post, author=self.customer, content='Nice')

        self.assertFalse(OwnerNotification.objects.filter(comment=comment).exists())
        outcome, _ = self.service.notify_new_comment(comment)
        self.assertEqual(outcome, NotificationOutcome.SKIPPED_MISSING_RESTAURANT)

    def test_reply_is_not_a_root_comment(self):
        root = BlogComment.objects.create(post=self.post, author=self.customer, content='Great food!')
        reply = BlogComment.objects.create(post=self.post, author=self.owner, content='Thanks', parent=root)

        outcome, _ = self.service.notify_new_comment(reply)
        self.assertEqual(outcome, NotificationOutcome.SKIPPED_NOT_ROOT)
        self.assertEqual(OwnerNotification.objects.count(), 1)


class ReplyNotificationTest(BlogNotificationTestMixin, TestCase):
    """Replies notify the author of the parent comment"""

    def setUp(self):
        super().setUp()
        self.root = BlogComment.objects.create(post=self.post, author=self.customer, content='Great food!')

    def test_reply_creates_customer_notification(self):
        reply = BlogComment.objects.create(
            post=self.post, author=self.owner, content='Thank you for visiting!', parent=self.root
        )

        notifications = CustomerNotification.objects.filter(customer=self.customer)
        self.assertEqual(notifications.count(), 1)

        notification = notifications.get()
        self.assertEqual(notification.title, 'Comment Reply')
        self.assertEqual(notification.status, 'unread')
        self.assertEqual(notification.blog_post_id, self.post.id)
        self.assertEqual(notification.reply_content, reply.content)
        self.assertEqual(notification.restaurant_name, 'Yangon Bistro')
        self.assertEqual(notification.message, 'Yangon Bistro replied: "Thank you for visiting!"')

    def test_comment_and_long_reply_scenario(self):
        owner_notification = OwnerNotification.objects.get(comment=self.root)
        self.assertIn('commented on your blog post', owner_notification.message)
        self.assertIn('New Monsoon Menu', owner_notification.message)

        content = 'x' * 101
        BlogComment.objects.create(post=self.post, author=self.owner, content=content, parent=self.root)

        notification = CustomerNotification.objects.get(customer=self.customer)
        self.assertEqual(notification.reply_content, content)
        self.assertTrue(notification.message.endswith('"' + 'x' * 97 + '..."'))

    def test_every_reply_creates_a_notification(self):
        BlogComment.objects.create(post=self.post, author=self.owner, content='First', parent=self.root)
        BlogComment.objects.create(post=self.post, author=self.owner, content='Second', parent=self.root)

        self.assertEqual(CustomerNotification.objects.filter(customer=self.customer).count(), 2)

    def test_reply_to_soft_deleted_parent_still_notifies(self):
        self.root.is_deleted = True
        self.root.save()

        BlogComment.objects.create(post=self.post, author=self.owner, content='Sorry to see that', parent=self.root)

        self.assertEqual(CustomerNotification.objects.filter(customer=self.customer).count(), 1)

    def test_missing_restaurant_uses_generic_label(self):
        platform_post = BlogPost.objects.create(title='Platform news', content='Hello')
        root = BlogComment.objects.create(post=platform_post, author=self.customer, content='Hi')
        admin = User.objects.create_user(
            username='admin', email='admin@example.com', password='testpass123', user_type='admin'
        )

        BlogComment.objects.create(post=platform_post, author=admin, content='Welcome', parent=root)

        notification = CustomerNotification.objects.get(customer=self.customer)
        self.assertEqual(notification.message, 'Restaurant replied: "Welcome"')
        self.assertIsNone(notification.restaurant_name)

    def test_missing_parent_skipped(self):
        orphan = BlogComment(post=self.post, author=self.owner, content='Hello?', parent_id=999999)

        outcome, notification = self.service.notify_reply(orphan)

        self.assertEqual(outcome, NotificationOutcome.SKIPPED_MISSING_PARENT)
        self.assertIsNone(notification)
        self.assertFalse(CustomerNotification.objects.exists())

    def test_root_comment_is_not_a_reply(self):
        outcome, _ = self.service.notify_reply(self.root)
        self.assertEqual(outcome, NotificationOutcome.SKIPPED_NOT_REPLY)

    def test_failed_notification_keeps_the_comment(self):
        with mock.patch.object(
            CustomerNotification.objects, 'create', side_effect=IntegrityError('boom')
        ):
            reply = BlogComment.objects.create(post=self.post, author=self.owner, content='Hi', parent=self.root)

        self.assertTrue(BlogComment.objects.filter(id=reply.id).exists())
        self.assertFalse(CustomerNotification.objects.exists())


class RatingPromptTest(TestCase):
    """Orders moving into completed/served ask the customer for a rating"""

    def setUp(self):
        self.owner = User.objects.create_user(
            username='owner', email='owner@example.com', password='testpass123', user_type='owner'
        )
        self.customer = User.objects.create_user(
            username='customer', email='customer@example.com', password='testpass123'
        )
        self.restaurant = Restaurant.objects.create(name='Yangon Bistro', owner=self.owner)
        self.order = Order.objects.create(
            customer=self.customer,
            restaurant=self.restaurant,
            payment_method='kbzpay',
            total_amount=Decimal('12000.00'),
        )
        self.service = NotificationService()

    def _set_status(self, status):
        self.order.status = status
        self.order.save()

    def _prompts(self):
        return CustomerNotification.objects.filter(customer=self.customer, order=self.order)

    def test_status_scenario(self):
        self.assertEqual(self.order.status, 'paid')

        self._set_status('preparing')
        self.assertEqual(self._prompts().count(), 0)

        self._set_status('completed')
        self.assertEqual(self._prompts().count(), 1)
        prompt = self._prompts().get()
        self.assertEqual(prompt.title, 'Your order is completed')
        self.assertEqual(prompt.message, RATING_PROMPT_MESSAGE)
        self.assertEqual(prompt.status, 'unread')

        self._set_status('completed')
        self.assertEqual(self._prompts().count(), 1)

    def test_served_also_prompts(self):
        self._set_status('served')
        self.assertEqual(self._prompts().count(), 1)

    def test_already_rated_order_not_prompted(self):
        RestaurantRating.objects.create(
            restaurant=self.restaurant, customer=self.customer, order=self.order, rating=Decimal('4.5')
        )

        self._set_status('completed')

        self.assertEqual(self._prompts().count(), 0)
        outcome, _ = self.service.notify_rating_prompt(self.order, 'ready')
        self.assertEqual(outcome, NotificationOutcome.SKIPPED_ALREADY_RATED)

    def test_order_without_customer_skipped(self):
        self.order.customer = None
        self.order.save()

        self._set_status('completed')

        self.assertFalse(CustomerNotification.objects.exists())
        outcome, _ = self.service.notify_rating_prompt(self.order, 'ready')
        self.assertEqual(outcome, NotificationOutcome.SKIPPED_MISSING_CONTEXT)

    def test_non_terminal_status_is_no_transition(self):
        self.order.status = 'ready'
        outcome, _ = self.service.notify_rating_prompt(self.order, 'preparing')
        self.assertEqual(outcome, NotificationOutcome.SKIPPED_NO_TRANSITION)

    def test_update_fields_save_still_detects_transition(self):
        self.order.status = 'completed'
        self.order.save(update_fields=['status', 'updated_at'])

        self.assertEqual(self._prompts().count(), 1)


class ReadStateTest(TestCase):
    """Test cases for mark-as-read operations"""

    def setUp(self):
        self.customer = User.objects.create_user(
            username='customer', email='customer@example.com', password='testpass123'
        )
        self.other = User.objects.create_user(
            username='other', email='other@example.com', password='testpass123'
        )
        self.notifications = [
            CustomerNotification.objects.create(customer=self.customer, title='Hello', message=f'Message {i}')
            for i in range(3)
        ]
        self.service = NotificationService()

    def test_mark_as_read(self):
        notification = self.service.mark_as_read(self.customer, self.notifications[0].id)

        self.assertEqual(notification.status, 'read')
        self.notifications[0].refresh_from_db()
        self.assertTrue(self.notifications[0].is_read)

    def test_mark_as_read_other_users_notification(self):
        from rest_framework.exceptions import NotFound

        with self.assertRaises(NotFound):
            self.service.mark_as_read(self.other, self.notifications[0].id)

    def test_mark_all_as_read(self):
        self.service.mark_as_read(self.customer, self.notifications[0].id)

        updated = self.service.mark_all_as_read(self.customer)

        self.assertEqual(updated, 2)
        self.assertFalse(CustomerNotification.objects.filter(customer=self.customer, status='unread').exists())


class PublishTest(BlogNotificationTestMixin, TestCase):
    """New notifications are pushed to channel-layer groups after commit"""

    @mock.patch('apps.notifications.services.send_to_group')
    def test_reply_published_to_customer_group(self, send_to_group):
        root = BlogComment.objects.create(post=self.post, author=self.customer, content='Great food!')

        with self.captureOnCommitCallbacks(execute=True):
            BlogComment.objects.create(post=self.post, author=self.owner, content='Thanks', parent=root)

        groups = [call.args[0] for call in send_to_group.call_args_list]
        self.assertIn(f'notifications_customer_{self.customer.id}', groups)

    @mock.patch('apps.notifications.services.send_to_group')
    def test_comment_published_to_restaurant_group(self, send_to_group):
        with self.captureOnCommitCallbacks(execute=True):
            BlogComment.objects.create(post=self.post, author=self.customer, content='Great food!')

        groups = [call.args[0] for call in send_to_group.call_args_list]
        self.assertEqual(groups, [f'notifications_restaurant_{self.restaurant.id}', 'notifications_owner_admin'])
        for _, payload, audience in (call.args for call in send_to_group.call_args_list):
            self.assertEqual(audience, 'owner')
            self.assertEqual(payload['comment_content'], 'Great food!')

    @mock.patch('apps.notifications.services.send_to_group')
    def test_nothing_published_without_commit(self, send_to_group):
        BlogComment.objects.create(post=self.post, author=self.customer, content='Great food!')

        send_to_group.assert_not_called()
