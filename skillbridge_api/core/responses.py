from rest_framework import status
from rest_framework.response import Response


def success_response(data=None, message='', status_code=status.HTTP_200_OK):
    return Response({
        'success': True,
        'message': message,
        'data': data,
    }, status=status_code)


def created_response(data=None, message=''):
    return success_response(data, message, status.HTTP_201_CREATED)
