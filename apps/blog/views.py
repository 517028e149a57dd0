"""
Views for blog app
"""
from rest_framework.views import APIView
from rest_framework import permissions
from drf_spectacular.utils import extend_schema, OpenApiParameter
from apps.api.mixins import StandardResponseMixin
from apps.api.pagination import StandardPageNumberPagination
from apps.api.response import ApiResponse
from .selectors import BlogSelector
from .serializers import (
    BlogPostSerializer,
    BlogPostWriteSerializer,
    BlogCommentSerializer,
    CommentContentSerializer,
)
from .services import BlogService


class ReadOnlyOrAuthenticated(permissions.BasePermission):
    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        return bool(request.user and request.user.is_authenticated)


class BlogPostListCreateView(StandardResponseMixin, APIView):
    """
    GET  /api/blog/posts/
    POST /api/blog/posts/
    """
    permission_classes = [ReadOnlyOrAuthenticated]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.blog_selector = BlogSelector()
        self.blog_service = BlogService()

    @extend_schema(
        tags=['Blog'],
        summary="List blog posts",
        parameters=[
            OpenApiParameter(name='restaurant', description='Restaurant ID', required=False, type=int),
            OpenApiParameter(name='search', description='Search title and content', required=False, type=str),
            OpenApiParameter(name='page', description='Page number', required=False, type=int),
        ],
        responses={200: BlogPostSerializer(many=True)}
    )
    def get(self, request):
        filters = {
            'restaurant': request.query_params.get('restaurant'),
            'search': request.query_params.get('search'),
        }
        if filters['restaurant'] and not filters['restaurant'].isdigit():
            return ApiResponse.bad_request(message="restaurant must be an integer")

        posts = self.blog_selector.get_visible_posts(request.user, filters)

        paginator = StandardPageNumberPagination()
        page = paginator.paginate_queryset(posts, request, view=self)
        return paginator.get_paginated_response(BlogPostSerializer(page, many=True).data)

    @extend_schema(
        tags=['Blog'],
        summary="Create blog post (restaurant owner)",
        request=BlogPostWriteSerializer,
        responses={201: BlogPostSerializer}
    )
    def post(self, request):
        serializer = BlogPostWriteSerializer(data=request.data)
        if not serializer.is_valid():
            return ApiResponse.validation_error(message="Invalid data", errors=serializer.errors)

        post = self.blog_service.create_post(request.user, serializer.validated_data)
        return ApiResponse.created(data=BlogPostSerializer(post).data, message="Blog post created successfully")


class BlogPostDetailView(StandardResponseMixin, APIView):
    """
    GET    /api/blog/posts/{post_id}/
    PATCH  /api/blog/posts/{post_id}/
    DELETE /api/blog/posts/{post_id}/
    """
    permission_classes = [ReadOnlyOrAuthenticated]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.blog_selector = BlogSelector()
        self.blog_service = BlogService()

    @extend_schema(tags=['Blog'], summary="Blog post detail", responses={200: BlogPostSerializer})
    def get(self, request, post_id):
        post = self.blog_selector.get_post_by_id(post_id, request.user)
        if not post:
            return ApiResponse.not_found(message="Blog post not found")
        return ApiResponse.success(data=BlogPostSerializer(post).data)

    @extend_schema(
        tags=['Blog'],
        summary="Update blog post (restaurant owner)",
        request=BlogPostWriteSerializer,
        responses={200: BlogPostSerializer}
    )
    def patch(self, request, post_id):
        serializer = BlogPostWriteSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return ApiResponse.validation_error(message="Invalid data", errors=serializer.errors)

        post = self.blog_service.update_post(request.user, post_id, serializer.validated_data)
        return ApiResponse.updated(data=BlogPostSerializer(post).data, message="Blog post updated successfully")

    @extend_schema(tags=['Blog'], summary="Delete blog post (restaurant owner)", responses={200: None})
    def delete(self, request, post_id):
        self.blog_service.delete_post(request.user, post_id)
        return ApiResponse.deleted(message="Blog post deleted successfully")


class PostCommentsView(StandardResponseMixin, APIView):
    """
    GET  /api/blog/posts/{post_id}/comments/
    POST /api/blog/posts/{post_id}/comments/
    """
    permission_classes = [ReadOnlyOrAuthenticated]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.blog_selector = BlogSelector()
        self.blog_service = BlogService()

    @extend_schema(tags=['Blog'], summary="List comments of a post", responses={200: BlogCommentSerializer(many=True)})
    def get(self, request, post_id):
        if not self.blog_selector.get_post_by_id(post_id, request.user):
            return ApiResponse.not_found(message="Blog post not found")

        comments = self.blog_selector.get_post_comments(post_id)
        return ApiResponse.success(data=BlogCommentSerializer(comments, many=True).data)

    @extend_schema(
        tags=['Blog'],
        summary="Comment on a post",
        request=CommentContentSerializer,
        responses={201: BlogCommentSerializer}
    )
    def post(self, request, post_id):
        serializer = CommentContentSerializer(data=request.data)
        if not serializer.is_valid():
            return ApiResponse.validation_error(message="Invalid data", errors=serializer.errors)

        comment = self.blog_service.add_comment(request.user, post_id, serializer.validated_data['content'])
        return ApiResponse.created(data=BlogCommentSerializer(comment).data, message="Comment posted successfully")


class CommentReplyView(StandardResponseMixin, APIView):
    """
    POST /api/blog/comments/{comment_id}/reply/
    """
    permission_classes = [permissions.IsAuthenticated]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.blog_service = BlogService()

    @extend_schema(
        tags=['Blog'],
        summary="Reply to a comment (restaurant owner)",
        request=CommentContentSerializer,
        responses={201: BlogCommentSerializer}
    )
    def post(self, request, comment_id):
        serializer = CommentContentSerializer(data=request.data)
        if not serializer.is_valid():
            return ApiResponse.validation_error(message="Invalid data", errors=serializer.errors)

        reply = self.blog_service.reply_to_comment(request.user, comment_id, serializer.validated_data['content'])
        return ApiResponse.created(data=BlogCommentSerializer(reply).data, message="Reply posted successfully")


class CommentDetailView(StandardResponseMixin, APIView):
    """
    PATCH  /api/blog/comments/{comment_id}/
    DELETE /api/blog/comments/{comment_id}/
    """
    permission_classes = [permissions.IsAuthenticated]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.blog_service = BlogService()

    @extend_schema(
        tags=['Blog'],
        summary="Edit my comment",
        request=CommentContentSerializer,
        responses={200: BlogCommentSerializer}
    )
    def patch(self, request, comment_id):
        serializer = CommentContentSerializer(data=request.data)
        if not serializer.is_valid():
            return ApiResponse.validation_error(message="Invalid data", errors=serializer.errors)

        comment = self.blog_service.edit_comment(request.user, comment_id, serializer.validated_data['content'])
        return ApiResponse.updated(data=BlogCommentSerializer(comment).data, message="Comment updated successfully")

    @extend_schema(tags=['Blog'], summary="Delete a comment", responses={200: None})
    def delete(self, request, comment_id):
        self.blog_service.delete_comment(request.user, comment_id)
        return ApiResponse.deleted(message="Comment deleted successfully")
