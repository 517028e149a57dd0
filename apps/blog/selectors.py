from django.db.models import Q, Count
from .models import BlogPost, BlogComment


class BlogSelector:
    """
    Read-only queries for blog posts and comments
    """

    def get_visible_posts(self, user=None, filters=None):
        """
        Published posts, plus unpublished ones the user may manage

        Args:
            filters: {'restaurant': int, 'search': str}
        """
        queryset = BlogPost.objects.select_related('restaurant', 'author').annotate(
            comment_count=Count('comments', filter=Q(comments__is_deleted=False))
        )

        if user is not None and user.is_authenticated and user.is_admin:
            pass
        elif user is not None and user.is_authenticated:
            queryset = queryset.filter(Q(is_published=True) | Q(restaurant__owner=user))
        else:
            queryset = queryset.filter(is_published=True)

        if filters:
            if filters.get('restaurant'):
                queryset = queryset.filter(restaurant_id=filters['restaurant'])
            if filters.get('search'):
                term = filters['search']
                queryset = queryset.filter(Q(title__icontains=term) | Q(content__icontains=term))

        return queryset.order_by('-is_pinned', '-created_at')

    def get_post_by_id(self, post_id, user=None):
        return self.get_visible_posts(user).filter(id=post_id).first()

    def get_post_comments(self, post_id):
        """Visible comments of a post, oldest first"""
        return (
            BlogComment.objects
            .filter(post_id=post_id, is_deleted=False)
            .select_related('author', 'author__profile')
            .order_by('created_at', 'id')
        )

    def get_comment_by_id(self, comment_id):
        return (
            BlogComment.objects
            .select_related('post', 'post__restaurant', 'author')
            .filter(id=comment_id, is_deleted=False)
            .first()
        )
