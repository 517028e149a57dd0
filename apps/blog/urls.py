from django.urls import path
from .views import (
    BlogPostListCreateView,
    BlogPostDetailView,
    PostCommentsView,
    CommentReplyView,
    CommentDetailView,
)

app_name = 'blog'

urlpatterns = [
    path('posts/', BlogPostListCreateView.as_view(), name='post-list'),
    path('posts/<int:post_id>/', BlogPostDetailView.as_view(), name='post-detail'),
    path('posts/<int:post_id>/comments/', PostCommentsView.as_view(), name='post-comments'),
    path('comments/<int:comment_id>/', CommentDetailView.as_view(), name='comment-detail'),
    path('comments/<int:comment_id>/reply/', CommentReplyView.as_view(), name='comment-reply'),
]
