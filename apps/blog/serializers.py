from rest_framework import serializers
from apps.restaurants.models import Restaurant
from .models import BlogPost, BlogComment


class BlogPostSerializer(serializers.ModelSerializer):
    restaurant_name = serializers.CharField(source='restaurant.name', read_only=True, default=None)
    comment_count = serializers.IntegerField(read_only=True, default=0)

    class Meta:
        model = BlogPost
        fields = [
            'id',
            'restaurant',
            'restaurant_name',
            'author',
            'title',
            'slug',
            'content',
            'excerpt',
            'hero_image_url',
            'is_published',
            'is_pinned',
            'comment_count',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class BlogPostWriteSerializer(serializers.ModelSerializer):
    restaurant = serializers.PrimaryKeyRelatedField(
        queryset=Restaurant.objects.filter(is_active=True),
        required=False,
        allow_null=True
    )

    class Meta:
        model = BlogPost
        fields = ['restaurant', 'title', 'content', 'excerpt', 'hero_image_url', 'is_published', 'is_pinned']

    def validate_title(self, value):
        if not value.strip():
            raise serializers.ValidationError("Title cannot be blank.")
        return value.strip()


class BlogCommentSerializer(serializers.ModelSerializer):
    author_name = serializers.SerializerMethodField()

    class Meta:
        model = BlogComment
        fields = [
            'id',
            'post',
            'author',
            'author_name',
            'content',
            'parent',
            'is_reply',
            'is_edited',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_author_name(self, obj):
        return obj.author.display_name or 'A customer'


class CommentContentSerializer(serializers.Serializer):
    content = serializers.CharField(max_length=5000, trim_whitespace=True)
