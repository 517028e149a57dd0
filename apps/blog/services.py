"""
Service layer for the blog: posts, comments and restaurant replies
"""
from django.db import transaction
from rest_framework.exceptions import NotFound, PermissionDenied
from apps.restaurants.selectors import RestaurantSelector
from .models import BlogPost, BlogComment
from .selectors import BlogSelector
import logging

logger = logging.getLogger(__name__)


class BlogService:
    """
    Business rules for blog content

    - Posts are written by the owner of the restaurant (or an admin)
    - Root comments may be left by any signed-in user on a published post
    - Replies are restricted to the owner of the post's restaurant (or an admin)
    """

    def __init__(self):
        self.blog_selector = BlogSelector()
        self.restaurant_selector = RestaurantSelector()

    def can_manage_restaurant(self, user, restaurant_id):
        if user.is_admin:
            return True
        return restaurant_id is not None and self.restaurant_selector.is_owner(user, restaurant_id)

    # ==================== POSTS ====================

    def create_post(self, user, data):
        restaurant = data.get('restaurant')
        if not self.can_manage_restaurant(user, restaurant.id if restaurant else None):
            raise PermissionDenied("You can only write posts for your own restaurant")

        post = BlogPost.objects.create(author=user, **data)
        logger.info(f"Blog post {post.id} created by user {user.id}")
        return post

    def update_post(self, user, post_id, data):
        post = self._get_managed_post(user, post_id)
        if 'restaurant' in data:
            new_restaurant = data['restaurant']
            if not self.can_manage_restaurant(user, new_restaurant.id if new_restaurant else None):
                raise PermissionDenied("You can only move posts to your own restaurant")

        for field, value in data.items():
            setattr(post, field, value)
        post.save()
        return post

    def delete_post(self, user, post_id):
        post = self._get_managed_post(user, post_id)
        post.delete()
        logger.info(f"Blog post {post_id} deleted by user {user.id}")

    def _get_managed_post(self, user, post_id):
        post = BlogPost.objects.filter(id=post_id).first()
        if post is None:
            raise NotFound("Blog post not found")
        if not self.can_manage_restaurant(user, post.restaurant_id):
            raise PermissionDenied("You can only manage posts of your own restaurant")
        return post

    # ==================== COMMENTS ====================

    @transaction.atomic
    def add_comment(self, user, post_id, content):
        post = self.blog_selector.get_post_by_id(post_id, user)
        if post is None or not post.is_published:
            raise NotFound("Blog post not found")

        return BlogComment.objects.create(post=post, author=user, content=content)

    @transaction.atomic
    def reply_to_comment(self, user, comment_id, content):
        parent = self.blog_selector.get_comment_by_id(comment_id)
        if parent is None:
            raise NotFound("Comment not found")

        if not self.can_manage_restaurant(user, parent.post.restaurant_id):
            raise PermissionDenied("Only the restaurant can reply to comments on its posts")

        reply = BlogComment(post=parent.post, author=user, content=content, parent=parent)
        reply.full_clean()
        reply.save()
        return reply

    def edit_comment(self, user, comment_id, content):
        comment = self.blog_selector.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFound("Comment not found")
        if comment.author_id != user.id:
            raise PermissionDenied("You can only edit your own comments")

        comment.content = content
        comment.is_edited = True
        comment.save(update_fields=['content', 'is_edited', 'updated_at'])
        return comment

    def delete_comment(self, user, comment_id):
        """Hide a comment. Its author, the restaurant and admins may do this."""
        comment = self.blog_selector.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFound("Comment not found")
        if comment.author_id != user.id and not self.can_manage_restaurant(user, comment.post.restaurant_id):
            raise PermissionDenied("You cannot delete this comment")

        comment.is_deleted = True
        comment.save(update_fields=['is_deleted', 'updated_at'])
        return comment
