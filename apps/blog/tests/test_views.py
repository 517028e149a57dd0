from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.notifications.models import CustomerNotification, OwnerNotification
from apps.restaurants.models import Restaurant
from ..models import BlogPost, BlogComment

User = get_user_model()


class BlogAPITestCase(APITestCase):
    """Shared fixtures for blog API tests"""

    def setUp(self):
        self.owner = User.objects.create_user(
            username='owner', email='owner@example.com', password='testpass123', user_type='owner'
        )
        self.other_owner = User.objects.create_user(
            username='other_owner', email='other_owner@example.com', password='testpass123', user_type='owner'
        )
        self.customer = User.objects.create_user(
            username='customer', email='customer@example.com', password='testpass123'
        )
        self.restaurant = Restaurant.objects.create(name='Yangon Bistro', owner=self.owner)
        self.post = BlogPost.objects.create(
            restaurant=self.restaurant, author=self.owner, title='New Monsoon Menu', content='...'
        )


class BlogPostAPITest(BlogAPITestCase):
    """Test cases for /api/blog/posts/"""

    def test_anonymous_sees_published_posts_only(self):
        BlogPost.objects.create(
            restaurant=self.restaurant, author=self.owner, title='Draft', content='...', is_published=False
        )

        response = self.client.get(reverse('blog:post-list'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([post['title'] for post in response.data['data']], ['New Monsoon Menu'])

    def test_owner_sees_own_drafts(self):
        BlogPost.objects.create(
            restaurant=self.restaurant, author=self.owner, title='Draft', content='...', is_published=False
        )
        self.client.force_authenticate(self.owner)

        response = self.client.get(reverse('blog:post-list'))

        self.assertEqual(len(response.data['data']), 2)

    def test_owner_creates_post(self):
        self.client.force_authenticate(self.owner)

        response = self.client.post(reverse('blog:post-list'), {
            'restaurant': self.restaurant.id,
            'title': 'Tea Leaf Salad',
            'content': 'Our signature dish.',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['data']['slug'], 'tea-leaf-salad')
        self.assertEqual(response.data['data']['author'], self.owner.id)

    def test_cannot_post_for_other_restaurant(self):
        self.client.force_authenticate(self.other_owner)

        response = self.client.post(reverse('blog:post-list'), {
            'restaurant': self.restaurant.id,
            'title': 'Hijack',
            'content': '...',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_owner_updates_and_deletes_post(self):
        self.client.force_authenticate(self.owner)
        url = reverse('blog:post-detail', args=[self.post.id])

        response = self.client.patch(url, {'is_pinned': True}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['data']['is_pinned'])

        response = self.client.delete(url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(BlogPost.objects.filter(id=self.post.id).exists())

    def test_customer_cannot_update_post(self):
        self.client.force_authenticate(self.customer)

        response = self.client.patch(reverse('blog:post-detail', args=[self.post.id]), {'title': 'x'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class CommentAPITest(BlogAPITestCase):
    """Test cases for comments and replies"""

    def test_customer_comments_and_owner_is_notified(self):
        self.client.force_authenticate(self.customer)

        response = self.client.post(
            reverse('blog:post-comments', args=[self.post.id]), {'content': 'Great food!'}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertFalse(response.data['data']['is_reply'])
        notification = OwnerNotification.objects.get(comment_id=response.data['data']['id'])
        self.assertEqual(notification.restaurant_id, self.restaurant.id)

    def test_blank_comment_rejected(self):
        self.client.force_authenticate(self.customer)

        response = self.client.post(
            reverse('blog:post-comments', args=[self.post.id]), {'content': '   '}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)

    def test_cannot_comment_on_draft(self):
        draft = BlogPost.objects.create(
            restaurant=self.restaurant, author=self.owner, title='Draft', content='...', is_published=False
        )
        self.client.force_authenticate(self.customer)

        response = self.client.post(reverse('blog:post-comments', args=[draft.id]), {'content': 'Hi'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_owner_replies_and_customer_is_notified(self):
        root = BlogComment.objects.create(post=self.post, author=self.customer, content='Great food!')
        self.client.force_authenticate(self.owner)

        response = self.client.post(
            reverse('blog:comment-reply', args=[root.id]), {'content': 'Thank you!'}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(response.data['data']['is_reply'])
        self.assertEqual(response.data['data']['parent'], root.id)
        notification = CustomerNotification.objects.get(customer=self.customer)
        self.assertEqual(notification.message, 'Yangon Bistro replied: "Thank you!"')

    def test_customer_cannot_reply(self):
        root = BlogComment.objects.create(post=self.post, author=self.owner, content='Welcome all')
        self.client.force_authenticate(self.customer)

        response = self.client.post(reverse('blog:comment-reply', args=[root.id]), {'content': 'Hi'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(BlogComment.objects.filter(parent=root).exists())

    def test_other_owner_cannot_reply(self):
        root = BlogComment.objects.create(post=self.post, author=self.customer, content='Great food!')
        self.client.force_authenticate(self.other_owner)

        response = self.client.post(reverse('blog:comment-reply', args=[root.id]), {'content': 'Hi'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_cannot_reply_to_deleted_comment(self):
        root = BlogComment.objects.create(
            post=self.post, author=self.customer, content='Great food!', is_deleted=True
        )
        self.client.force_authenticate(self.owner)

        response = self.client.post(reverse('blog:comment-reply', args=[root.id]), {'content': 'Hi'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_author_edits_comment(self):
        comment = BlogComment.objects.create(post=self.post, author=self.customer, content='Great food!')
        self.client.force_authenticate(self.customer)

        response = self.client.patch(
            reverse('blog:comment-detail', args=[comment.id]), {'content': 'Amazing food!'}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['data']['is_edited'])
        self.assertEqual(response.data['data']['content'], 'Amazing food!')

    def test_cannot_edit_others_comment(self):
        comment = BlogComment.objects.create(post=self.post, author=self.customer, content='Great food!')
        self.client.force_authenticate(self.owner)

        response = self.client.patch(
            reverse('blog:comment-detail', args=[comment.id]), {'content': 'Edited'}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_delete_is_soft(self):
        comment = BlogComment.objects.create(post=self.post, author=self.customer, content='Great food!')
        self.client.force_authenticate(self.customer)

        response = self.client.delete(reverse('blog:comment-detail', args=[comment.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        comment.refresh_from_db()
        self.assertTrue(comment.is_deleted)

        response = self.client.get(reverse('blog:post-comments', args=[self.post.id]))
        self.assertEqual(response.data['data'], [])

    def test_restaurant_can_hide_comment(self):
        comment = BlogComment.objects.create(post=self.post, author=self.customer, content='Spam')
        self.client.force_authenticate(self.owner)

        response = self.client.delete(reverse('blog:comment-detail', args=[comment.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_comments_listed_oldest_first(self):
        first = BlogComment.objects.create(post=self.post, author=self.customer, content='First')
        reply = BlogComment.objects.create(post=self.post, author=self.owner, content='Reply', parent=first)

        response = self.client.get(reverse('blog:post-comments', args=[self.post.id]))

        self.assertEqual([item['id'] for item in response.data['data']], [first.id, reply.id])
        self.assertEqual(response.data['data'][0]['author_name'], 'customer')
