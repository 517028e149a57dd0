from django.conf import settings
from django.db import models
from rest_framework import status


# ==================== MODEL MIXINS ====================
class TimestampMixin(models.Model):
    """
    Adds created_at and updated_at to any model

    Usage:
        class YourModel(TimestampMixin):
            ...
    """
    created_at = models.DateTimeField(auto_now_add=True, help_text="Created at")
    updated_at = models.DateTimeField(auto_now=True, help_text="Last updated at")

    class Meta:
        abstract = True


# ==================== API VIEW MIXINS ====================
class StandardResponseMixin:
    """
    Standard response helpers for API views

    Usage:
        class YourView(StandardResponseMixin, APIView):
            def get(self, request):
                return self.success_response(data={...})
    """

    def success_response(self, data=None, message="Success", status_code=status.HTTP_200_OK):
        from apps.api.response import ApiResponse
        return ApiResponse.success(data, message, status_code)

    def error_response(self, message="Error", errors=None, status_code=status.HTTP_400_BAD_REQUEST):
        from apps.api.response import ApiResponse
        return ApiResponse.error(message, errors, status_code)

    def created_response(self, data=None, message="Resource created successfully"):
        return self.success_response(data, message, status.HTTP_201_CREATED)

    def not_found_response(self, message="Resource not found", errors=None):
        return self.error_response(message, errors, status.HTTP_404_NOT_FOUND)


class LimitMixin:
    """
    Reads a client-chosen ``limit`` query parameter, clamped to [1, max_limit]

    Usage:
        class YourView(LimitMixin, APIView):
            default_limit = 20
            ...
            items = queryset[:self.get_limit(request)]
    """
    default_limit = None
    max_limit = None

    def get_limit(self, request):
        default = self.default_limit or settings.NOTIFICATION_DEFAULT_LIMIT
        maximum = self.max_limit or settings.NOTIFICATION_MAX_LIMIT
        try:
            limit = int(request.query_params.get('limit', default))
        except (TypeError, ValueError):
            return default
        return max(1, min(limit, maximum))
