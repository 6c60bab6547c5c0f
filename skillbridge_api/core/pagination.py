import math

from django.conf import settings
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class StandardResultsPagination(PageNumberPagination):
    page_query_param = 'page'
    page_size_query_param = 'limit'  # allows ?limit=<int>
    max_page_size = settings.MAX_PAGE_SIZE

    def get_paginated_response(self, data, message=''):
        total = self.page.paginator.count
        limit = self.page.paginator.per_page
        return Response({
            'success': True,
            'message': message,
            'data': {
                'results': data,
                'total': total,
                'page': self.page.number,
                'limit': limit,
                'total_pages': math.ceil(total / limit) if limit else 0,
            },
        })

    def get_paginated_response_schema(self, schema):
        return {
            'type': 'object',
            'properties': {
                'success': {'type': 'boolean'},
                'message': {'type': 'string'},
                'data': {
                    'type': 'object',
                    'properties': {
                        'results': schema,
                        'total': {'type': 'integer'},
                        'page': {'type': 'integer'},
                        'limit': {'type': 'integer'},
                        'total_pages': {'type': 'integer'},
                    },
                },
            },
        }
