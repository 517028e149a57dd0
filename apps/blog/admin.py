from django.contrib import admin
from .models import BlogPost, BlogComment


@admin.register(BlogPost)
class BlogPostAdmin(admin.ModelAdmin):
    list_display = ['title', 'restaurant', 'author', 'is_published', 'is_pinned', 'created_at']
    list_filter = ['is_published', 'is_pinned', 'restaurant']
    search_fields = ['title', 'content', 'restaurant__name']
    readonly_fields = ['slug', 'created_at', 'updated_at']


@admin.register(BlogComment)
class BlogCommentAdmin(admin.ModelAdmin):
    list_display = ['id', 'post', 'author', 'is_reply', 'is_edited', 'is_deleted', 'created_at']
    list_filter = ['is_reply', 'is_deleted', 'created_at']
    search_fields = ['content', 'author__username', 'post__title']
    readonly_fields = ['is_reply', 'created_at', 'updated_at']
    raw_id_fields = ['post', 'author', 'parent']
