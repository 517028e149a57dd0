"""
Views for users app
"""
from rest_framework.views import APIView
from rest_framework import permissions
from drf_spectacular.utils import extend_schema
from apps.api.mixins import StandardResponseMixin
from apps.api.response import ApiResponse
from .serializers import UserSerializer, UserUpdateSerializer
from .services import UserService


class MeView(StandardResponseMixin, APIView):
    """
    GET   /api/users/me/
    PATCH /api/users/me/
    """
    permission_classes = [permissions.IsAuthenticated]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.user_service = UserService()

    @extend_schema(
        tags=['Users'],
        summary="Current user",
        responses={200: UserSerializer}
    )
    def get(self, request):
        return ApiResponse.success(
            data=UserSerializer(request.user).data,
            message="User retrieved successfully"
        )

    @extend_schema(
        tags=['Users'],
        summary="Update current user profile",
        request=UserUpdateSerializer,
        responses={200: UserSerializer}
    )
    def patch(self, request):
        serializer = UserUpdateSerializer(data=request.data, context={'user': request.user})
        if not serializer.is_valid():
            return ApiResponse.validation_error(
                message="Invalid data",
                errors=serializer.errors
            )

        user = self.user_service.update_me(request.user, serializer.validated_data)
        user.refresh_from_db()
        return ApiResponse.updated(
            data=UserSerializer(user).data,
            message="Profile updated successfully"
        )
