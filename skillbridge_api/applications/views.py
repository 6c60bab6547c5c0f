from rest_framework import views as drf_views, permissions
from drf_yasg.utils import swagger_auto_schema

from core.responses import success_response, created_response
from core.views import EnvelopeListAPIView
from notifications.services import get_notification_service
from . import serializers as my_serializers
from .services import ApplicationService, ApplicationFilters, ApplicationOrdering

ORDERING_KEYS = ('sort_by', 'sort_order')


class ApplicationServiceMixin:
    permission_classes = [permissions.IsAuthenticated]

    def get_service(self):
        return ApplicationService(notifications=get_notification_service())


class ApplicationListAPIView(ApplicationServiceMixin, EnvelopeListAPIView):
    """Base for paginated application listings driven by ApplicationQuerySerializer."""
    serializer_class = my_serializers.ApplicationSerializer
    query_serializer_class = my_serializers.ApplicationQuerySerializer

    @property
    def filters(self):
        return ApplicationFilters(**{k: v for k, v in self.query.items() if k not in ORDERING_KEYS})

    @property
    def ordering(self):
        return ApplicationOrdering(**{k: v for k, v in self.query.items() if k in ORDERING_KEYS})


class ApplicationCreateAPIView(ApplicationServiceMixin, drf_views.APIView):

    @swagger_auto_schema(
        operation_summary="Apply to a mission",
        request_body=my_serializers.ApplicationSerializer,
        responses={
            201: my_serializers.ApplicationSerializer,
            400: "Validation error or mission not open",
            404: "Mission not found",
            409: "Already applied"
        }
    )
    def post(self, request):
        serializer = my_serializers.ApplicationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        application = self.get_service().create_application(request.user, serializer.validated_data)
        return created_response(my_serializers.ApplicationSerializer(application).data, "Application submitted successfully")


class ApplicationDetailAPIView(ApplicationServiceMixin, drf_views.APIView):

    @swagger_auto_schema(operation_summary="Get an application", responses={200: my_serializers.ApplicationSerializer, 404: "Not found"})
    def get(self, request, pk):
        application = self.get_service().get_application(pk)
        return success_response(my_serializers.ApplicationSerializer(application).data, "Application retrieved successfully")

    @swagger_auto_schema(
        operation_summary="Update an application",
        request_body=my_serializers.ApplicationUpdateSerializer,
        responses={200: my_serializers.ApplicationSerializer, 400: "Validation error", 403: "Forbidden", 404: "Not found"}
    )
    def put(self, request, pk):
        serializer = my_serializers.ApplicationUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        application = self.get_service().update_application(pk, request.user, serializer.validated_data)
        return success_response(my_serializers.ApplicationSerializer(application).data, "Application updated successfully")

    @swagger_auto_schema(auto_schema=None)
    def patch(self, request, pk):
        return self.put(request, pk)

    @swagger_auto_schema(operation_summary="Delete an application", responses={200: "Deleted", 403: "Forbidden", 404: "Not found"})
    def delete(self, request, pk):
        self.get_service().delete_application(pk, request.user)
        return success_response(message="Application deleted successfully")


class MyApplicationsAPIView(ApplicationListAPIView):
    """Applications sent (freelancer) or received (company) by the caller."""
    success_message = "Applications retrieved successfully"

    @swagger_auto_schema(operation_summary="List the caller's applications", query_serializer=my_serializers.ApplicationQuerySerializer)
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)

    def get_queryset(self):
        return self.get_service().get_user_applications(self.request.user, self.filters, self.ordering)


class MissionApplicationsAPIView(ApplicationListAPIView):
    success_message = "Mission applications retrieved successfully"

    @swagger_auto_schema(operation_summary="List applications for a mission", query_serializer=my_serializers.ApplicationQuerySerializer)
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)

    def get_queryset(self):
        return self.get_service().get_mission_applications(
            self.kwargs['mission_id'], self.request.user, self.filters, self.ordering
        )


class ApplicationSearchAPIView(ApplicationListAPIView):
    success_message = "Applications retrieved successfully"

    @swagger_auto_schema(operation_summary="Search applications", query_serializer=my_serializers.ApplicationQuerySerializer)
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)

    def get_queryset(self):
        return self.get_service().search_applications(self.filters, self.ordering, user=self.request.user)


class ApplicationStatsAPIView(ApplicationServiceMixin, drf_views.APIView):

    @swagger_auto_schema(operation_summary="Get application statistics", responses={200: my_serializers.ApplicationStatsSerializer})
    def get(self, request):
        stats = self.get_service().get_application_stats(request.user)
        return success_response(my_serializers.ApplicationStatsSerializer(stats).data, "Application statistics retrieved successfully")
