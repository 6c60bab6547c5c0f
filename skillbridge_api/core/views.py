from django.db import connection
from rest_framework import generics, permissions, views

from .responses import success_response


class HealthCheckAPIView(views.APIView):
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def get(self, request):
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        return success_response({'status': 'ok', 'database': 'ok'}, "Service is healthy.")


class EnvelopeListAPIView(generics.ListAPIView):
    """
    ListAPIView whose paginated body carries `success_message`.

    Subclasses parse their query string with `query_serializer_class` and
    read the result from `self.query`.
    """
    success_message = ''
    query_serializer_class = None

    @property
    def query(self):
        if not hasattr(self, '_query'):
            serializer = self.query_serializer_class(data=self.request.query_params)
            serializer.is_valid(raise_exception=True)
            self._query = serializer.validated_data
        return self._query

    def get_paginated_response(self, data):
        return self.paginator.get_paginated_response(data, self.success_message)


class PublicMethodsMixin:
    """Authenticated by default; HTTP methods listed in `public_methods` are open to anyone."""
    permission_classes = [permissions.IsAuthenticated]
    public_methods = ()

    def get_permissions(self):
        if self.request.method in self.public_methods:
            return [permissions.AllowAny()]
        return super().get_permissions()
