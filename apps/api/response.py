from rest_framework.response import Response
from rest_framework import status


class ApiResponse:
    """
    Standard response envelope shared by every endpoint

    {
        "success": bool,
        "message": str,
        "data": any,
        "error": any (only set when success=False)
    }

    Empty listings are returned as success with ``data: []`` so clients can
    tell "nothing yet" apart from "failed to load".
    """

    @staticmethod
    def success(data=None, message="Success", status_code=status.HTTP_200_OK):
        return Response({
            "success": True,
            "message": message,
            "data": data,
            "error": None
        }, status=status_code)

    @staticmethod
    def error(message="Error", errors=None, status_code=status.HTTP_400_BAD_REQUEST):
        return Response({
            "success": False,
            "message": message,
            "data": None,
            "error": errors
        }, status=status_code)

    @staticmethod
    def paginated(data, pagination_info, message="Success"):
        """
        Paginated success response

        Args:
            data: Items of the current page
            pagination_info: count, next, previous, current_page, total_pages, page_size
        """
        return Response({
            "success": True,
            "message": message,
            "data": data,
            "pagination": pagination_info,
            "error": None
        }, status=status.HTTP_200_OK)

    @staticmethod
    def created(data=None, message="Resource created successfully"):
        return ApiResponse.success(data, message, status.HTTP_201_CREATED)

    @staticmethod
    def updated(data=None, message="Resource updated successfully"):
        return ApiResponse.success(data, message, status.HTTP_200_OK)

    @staticmethod
    def deleted(message="Resource deleted successfully"):
        # 200 rather than 204 so the envelope body reaches the client
        return ApiResponse.success(None, message, status.HTTP_200_OK)

    @staticmethod
    def not_found(message="Resource not found", errors=None):
        return ApiResponse.error(message, errors, status.HTTP_404_NOT_FOUND)

    @staticmethod
    def unauthorized(message="Authentication required", errors=None):
        return ApiResponse.error(message, errors, status.HTTP_401_UNAUTHORIZED)

    @staticmethod
    def forbidden(message="Permission denied", errors=None):
        return ApiResponse.error(message, errors, status.HTTP_403_FORBIDDEN)

    @staticmethod
    def bad_request(message="Bad request", errors=None):
        return ApiResponse.error(message, errors, status.HTTP_400_BAD_REQUEST)

    @staticmethod
    def validation_error(message="Validation error", errors=None):
        """422 Unprocessable Entity"""
        return ApiResponse.error(message, errors, status.HTTP_422_UNPROCESSABLE_ENTITY)
