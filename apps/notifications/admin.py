from django.contrib import admin
from .models import CustomerNotification, OwnerNotification


@admin.register(CustomerNotification)
class CustomerNotificationAdmin(admin.ModelAdmin):
    list_display = ['title', 'customer', 'order', 'blog_post', 'status', 'created_at']
    list_filter = ['status', 'title', 'created_at']
    search_fields = ['title', 'message', 'customer__username', 'customer__email']
    readonly_fields = ['created_at', 'updated_at']
    raw_id_fields = ['customer', 'order', 'blog_post']


@admin.register(OwnerNotification)
class OwnerNotificationAdmin(admin.ModelAdmin):
    list_display = ['title', 'restaurant', 'customer', 'post', 'status', 'created_at']
    list_filter = ['status', 'restaurant', 'created_at']
    search_fields = ['message', 'comment_content', 'restaurant__name']
    readonly_fields = ['created_at', 'updated_at']
    raw_id_fields = ['restaurant', 'customer', 'post', 'comment']
