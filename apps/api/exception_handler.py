from rest_framework.views import exception_handler
from rest_framework import status
from django.http import Http404
from django.core.exceptions import PermissionDenied, ValidationError as DjangoValidationError
from django.conf import settings
from rest_framework.exceptions import (
    APIException,
    ValidationError,
    NotFound,
    PermissionDenied as DRFPermissionDenied,
    AuthenticationFailed,
    NotAuthenticated,
    ParseError
)
import logging
import traceback

logger = logging.getLogger(__name__)

SENSITIVE_KEYS = ('traceback', 'stack', 'file', 'path', 'sql', 'query',
                  'password', 'secret', 'key', 'token', 'credential')


def _sanitize_error_data(error_data, is_debug=False):
    """
    Strip stack traces, file paths and credentials from error payloads
    unless DEBUG is on.
    """
    if is_debug:
        return error_data

    if isinstance(error_data, dict):
        sanitized = {}
        for key, value in error_data.items():
            if any(sensitive in str(key).lower() for sensitive in SENSITIVE_KEYS):
                sanitized[key] = "[Hidden for security]"
            else:
                sanitized[key] = _sanitize_error_data(value, is_debug)
        return sanitized

    if isinstance(error_data, list):
        return [_sanitize_error_data(item, is_debug) for item in error_data]

    if isinstance(error_data, str) and ('/' in error_data or '\\' in error_data):
        return "An error occurred"

    return error_data


def _request_context(context):
    request = context.get('request') if context else None
    view = context.get('view') if context else None
    return {
        'view': view.__class__.__name__ if view else None,
        'request_path': request.path if request else None,
        'request_method': request.method if request else None,
        'user': str(request.user) if request is not None and hasattr(request, 'user') else None,
    }


def custom_exception_handler(exc, context):
    """
    DRF exception handler returning the ApiResponse envelope

    - Validation errors -> 422
    - Not found -> 404, permission -> 403, authentication -> 401
    - Malformed JSON -> 400
    - Anything unhandled -> 500 with details hidden outside DEBUG

    Registered via REST_FRAMEWORK['EXCEPTION_HANDLER'].
    """
    from apps.api.response import ApiResponse

    is_debug = getattr(settings, 'DEBUG', False)
    request_info = _request_context(context)

    response = exception_handler(exc, context)

    if response is not None:
        error_data = response.data
        error_message = str(exc)

        log = logger.warning if response.status_code < 500 else logger.error
        log(
            f"API Exception: {type(exc).__name__}",
            extra={
                'exception_type': type(exc).__name__,
                'exception_message': error_message,
                'error_data': error_data,
                **request_info,
            }
        )

        sanitized_error_data = _sanitize_error_data(error_data, is_debug)

        if isinstance(exc, ServiceError):
            # Business-rule messages are written for the client
            return ApiResponse.error(
                message=error_message,
                errors=exc.errors or None,
                status_code=exc.status_code
            )
        elif isinstance(exc, ValidationError):
            return ApiResponse.validation_error(
                message="Validation error",
                errors=error_data if is_debug else sanitized_error_data
            )
        elif isinstance(exc, (NotFound, Http404)):
            return ApiResponse.not_found(
                message=error_message if is_debug else "Resource not found",
                errors=sanitized_error_data
            )
        elif isinstance(exc, (DRFPermissionDenied, PermissionDenied)):
            return ApiResponse.forbidden(
                message=error_message if is_debug else "Permission denied",
                errors=sanitized_error_data
            )
        elif isinstance(exc, (NotAuthenticated, AuthenticationFailed)):
            return ApiResponse.unauthorized(
                message=error_message if is_debug else "Authentication required",
                errors=sanitized_error_data
            )
        elif isinstance(exc, ParseError):
            return ApiResponse.bad_request(
                message="Invalid JSON format. Please check your request body syntax.",
                errors={"detail": error_message} if is_debug else None
            )
        elif isinstance(exc, APIException):
            return ApiResponse.error(
                message=error_message if is_debug else "An error occurred",
                errors=sanitized_error_data,
                status_code=exc.status_code
            )
        return ApiResponse.error(
            message=error_message if is_debug else "An error occurred",
            errors=sanitized_error_data,
            status_code=response.status_code
        )

    # Django exceptions DRF does not translate
    if isinstance(exc, DjangoValidationError):
        error_data = exc.message_dict if hasattr(exc, 'message_dict') else exc.messages
        logger.warning(
            f"Django ValidationError: {exc}",
            extra={'exception_type': 'DjangoValidationError', 'error_data': error_data, **request_info}
        )
        return ApiResponse.validation_error(
            message="Validation error",
            errors=error_data if is_debug else _sanitize_error_data(error_data, is_debug)
        )

    logger.exception(
        "Unhandled exception in API",
        extra={
            'exception_type': type(exc).__name__,
            'exception_message': str(exc),
            **request_info,
        }
    )

    if is_debug:
        return ApiResponse.error(
            message=f"An unexpected error occurred: {exc}",
            errors={"detail": str(exc), "traceback": traceback.format_exc()},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    return ApiResponse.error(
        message="An unexpected error occurred. Please contact support if the problem persists.",
        errors=None,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


class ServiceError(APIException):
    """
    Business-rule failure raised from the service layer

    Usage:
        raise ServiceError("Order is not completed yet", status_code=status.HTTP_400_BAD_REQUEST)
    """
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "An error occurred"
    default_code = "error"

    def __init__(self, message=None, errors=None, status_code=None):
        if status_code is not None:
            self.status_code = status_code
        self.errors = errors or {}
        super().__init__(message or self.default_detail)
