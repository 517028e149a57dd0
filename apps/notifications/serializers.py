from rest_framework import serializers
from .models import CustomerNotification, OwnerNotification


class CustomerNotificationSerializer(serializers.ModelSerializer):
    class Meta:
        model = CustomerNotification
        fields = [
            'id',
            'title',
            'message',
            'status',
            'order',
            'blog_post',
            'reply_content',
            'restaurant_name',
            'created_at',
        ]
        read_only_fields = fields


class OwnerNotificationSerializer(serializers.ModelSerializer):
    restaurant_name = serializers.CharField(source='restaurant.name', read_only=True)
    post_title = serializers.CharField(source='post.title', read_only=True)

    class Meta:
        model = OwnerNotification
        fields = [
            'id',
            'restaurant',
            'restaurant_name',
            'customer',
            'post',
            'post_title',
            'comment',
            'title',
            'message',
            'comment_content',
            'status',
            'created_at',
        ]
        read_only_fields = fields


class UnreadCountSerializer(serializers.Serializer):
    unread_count = serializers.IntegerField()


class MarkAllReadResultSerializer(serializers.Serializer):
    updated = serializers.IntegerField()
