from django.core.exceptions import ValidationError
from django.db import models
from django.utils.text import slugify
from apps.api.mixins import TimestampMixin


class BlogPost(TimestampMixin):
    """
    Blog post published by a restaurant
    """
    restaurant = models.ForeignKey(
        'restaurants.Restaurant',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='blog_posts',
        help_text="Restaurant"
    )
    author = models.ForeignKey(
        'users.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='blog_posts',
        help_text="Author"
    )
    title = models.CharField(max_length=255, help_text="Title")
    slug = models.SlugField(max_length=255, blank=True, help_text="Derived from title")
    content = models.TextField(help_text="Content")
    excerpt = models.TextField(blank=True, null=True, help_text="Short teaser for listings")
    hero_image_url = models.URLField(blank=True, null=True, help_text="Cover image URL")
    is_published = models.BooleanField(default=True, help_text="Visible to customers")
    is_pinned = models.BooleanField(default=False, help_text="Pinned to the top")

    class Meta:
        db_table = 'blog_posts'
        verbose_name = 'Blog post'
        verbose_name_plural = 'Blog posts'
        ordering = ['-is_pinned', '-created_at']
        indexes = [
            models.Index(fields=['restaurant', '-created_at'], name='blog_post_rest_created_idx'),
            models.Index(fields=['is_published', '-created_at'], name='blog_post_pub_created_idx'),
        ]

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        self.slug = slugify(self.title)[:255]
        super().save(*args, **kwargs)


class BlogComment(TimestampMixin):
    """
    Comment on a blog post

    A null ``parent`` marks a root comment left by a customer; a reply points
    at a comment on the same post. Comments are flagged, never deleted.
    """
    post = models.ForeignKey(
        BlogPost,
        on_delete=models.CASCADE,
        related_name='comments',
        help_text="Blog post"
    )
    author = models.ForeignKey(
        'users.User',
        on_delete=models.CASCADE,
        related_name='blog_comments',
        help_text="Author"
    )
    content = models.TextField(help_text="Comment text")
    parent = models.ForeignKey(
        'self',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='replies',
        help_text="Parent comment (replies only)"
    )
    is_reply = models.BooleanField(default=False, help_text="Is a reply")
    is_edited = models.BooleanField(default=False, help_text="Edited by the author")
    is_deleted = models.BooleanField(default=False, help_text="Hidden (soft deleted)")

    class Meta:
        db_table = 'blog_comments'
        verbose_name = 'Blog comment'
        verbose_name_plural = 'Blog comments'
        ordering = ['created_at', 'id']
        indexes = [
            models.Index(fields=['post', 'created_at'], name='blog_comment_post_created_idx'),
            models.Index(fields=['author', '-created_at'], name='blog_comment_author_idx'),
        ]

    def __str__(self):
        kind = 'Reply' if self.parent_id else 'Comment'
        return f"{kind} by {self.author_id} on post {self.post_id}"

    def clean(self):
        if self.parent_id and self.parent.post_id != self.post_id:
            raise ValidationError({'parent': "Reply must belong to the same post as its parent comment."})

    def save(self, *args, **kwargs):
        self.is_reply = self.parent_id is not None
        super().save(*args, **kwargs)
