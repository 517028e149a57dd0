from django.contrib.auth import get_user_model
from rest_framework import serializers
from .models import Profile

User = get_user_model()


class ProfileSerializer(serializers.ModelSerializer):
    class Meta:
        model = Profile
        fields = ['full_name', 'phone_number', 'avatar_url']


class UserSerializer(serializers.ModelSerializer):
    """Current user with profile"""
    profile = ProfileSerializer(read_only=True)
    display_name = serializers.CharField(read_only=True)
    user_type_display = serializers.CharField(source='get_user_type_display', read_only=True)

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'user_type',
            'user_type_display',
            'display_name',
            'profile',
            'created_at',
        ]
        read_only_fields = fields


class UserUpdateSerializer(serializers.Serializer):
    """PATCH /api/users/me/"""
    email = serializers.EmailField(required=False, allow_null=True, allow_blank=True)
    full_name = serializers.CharField(required=False, allow_blank=True, max_length=150)
    phone_number = serializers.CharField(required=False, allow_null=True, allow_blank=True, max_length=20)
    avatar_url = serializers.URLField(required=False, allow_null=True, allow_blank=True)

    def validate_email(self, value):
        if not value:
            return None
        user = self.context.get('user')
        queryset = User.objects.filter(email__iexact=value)
        if user is not None:
            queryset = queryset.exclude(id=user.id)
        if queryset.exists():
            raise serializers.ValidationError("This email is already in use.")
        return value
