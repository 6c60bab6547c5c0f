"""
Domain errors and the API error envelope.

Services raise DRF exceptions carrying their HTTP status (ValidationError,
NotFound, PermissionDenied, Conflict); the handler below turns every one of
them into `{"success": false, "message": ..., "errors": ...}`.
"""
import logging

from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class Conflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists."
    default_code = 'conflict'


def envelope_exception_handler(exc, context):
    response = exception_handler(exc, context)
    view = context.get('view')

    if response is None:
        logger.error(
            f"Unhandled exception in {view.__class__.__name__ if view else 'unknown view'}: {exc}",
            exc_info=exc,
        )
        return Response({
            'success': False,
            'message': "Internal server error.",
            'errors': None,
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    detail = response.data
    if response.status_code >= 500:
        logger.error(f"Server error in {view.__class__.__name__ if view else 'unknown view'}: {detail}")

    response.data = {
        'success': False,
        'message': first_message(detail),
        'errors': detail if isinstance(exc, ValidationError) else None,
    }
    return response


def first_message(detail):
    """Pick the first human readable message out of a DRF error payload."""
    if isinstance(detail, dict):
        if 'detail' in detail:
            return first_message(detail['detail'])
        for key, value in detail.items():
            message = first_message(value)
            return message if key == 'non_field_errors' else f"{key}: {message}"
        return ''
    if isinstance(detail, (list, tuple)):
        return first_message(detail[0]) if detail else ''
    return str(detail)
