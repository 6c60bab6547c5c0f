from rest_framework import views as drf_views
from drf_yasg.utils import swagger_auto_schema

from core.responses import success_response, created_response
from core.views import EnvelopeListAPIView, PublicMethodsMixin
from freelancers.serializers import FreelanceProfileSerializer
from notifications.services import get_notification_service
from . import serializers as my_serializers
from .services import MissionService, MissionFilters


class MissionServiceMixin(PublicMethodsMixin):

    def get_service(self):
        return MissionService(notifications=get_notification_service())


class MissionListCreateAPIView(MissionServiceMixin, EnvelopeListAPIView):
    """
    GET: public mission search, paginated.
    POST: create a mission for the caller's company profile.
    """
    serializer_class = my_serializers.MissionSerializer
    query_serializer_class = my_serializers.MissionSearchSerializer
    public_methods = ('GET',)
    success_message = "Missions retrieved successfully"

    @swagger_auto_schema(operation_summary="Search missions", query_serializer=my_serializers.MissionSearchSerializer)
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)

    @swagger_auto_schema(
        operation_summary="Create a mission",
        request_body=my_serializers.MissionSerializer,
        responses={201: my_serializers.MissionSerializer, 400: "Validation error"}
    )
    def post(self, request):
        serializer = my_serializers.MissionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        mission = self.get_service().create_mission(request.user, serializer.validated_data)
        return created_response(my_serializers.MissionSerializer(mission).data, "Mission created successfully")

    def get_queryset(self):
        return self.get_service().search_missions(MissionFilters(**self.query))


class MissionDetailAPIView(MissionServiceMixin, drf_views.APIView):
    public_methods = ('GET',)

    @swagger_auto_schema(operation_summary="Get a mission", responses={200: my_serializers.MissionSerializer, 404: "Mission not found"})
    def get(self, request, pk):
        mission = self.get_service().get_mission(pk)
        return success_response(my_serializers.MissionSerializer(mission).data, "Mission retrieved successfully")

    @swagger_auto_schema(
        operation_summary="Update a mission",
        request_body=my_serializers.MissionSerializer,
        responses={200: my_serializers.MissionSerializer, 400: "Validation error", 403: "Not the owner", 404: "Mission not found"}
    )
    def put(self, request, pk):
        serializer = my_serializers.MissionSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        mission = self.get_service().update_mission(pk, request.user, serializer.validated_data)
        return success_response(my_serializers.MissionSerializer(mission).data, "Mission updated successfully")

    @swagger_auto_schema(auto_schema=None)
    def patch(self, request, pk):
        return self.put(request, pk)

    @swagger_auto_schema(operation_summary="Delete a mission", responses={200: "Deleted", 403: "Not the owner", 404: "Mission not found"})
    def delete(self, request, pk):
        self.get_service().delete_mission(pk, request.user)
        return success_response(message="Mission deleted successfully")


class CompanyMissionsAPIView(MissionServiceMixin, drf_views.APIView):

    @swagger_auto_schema(operation_summary="List the caller's company missions", responses={200: my_serializers.MissionSerializer(many=True)})
    def get(self, request):
        missions = self.get_service().get_company_missions(request.user)
        return success_response(my_serializers.MissionSerializer(missions, many=True).data, "Company missions retrieved successfully")


class RecommendedFreelancersAPIView(MissionServiceMixin, drf_views.APIView):
    """Freelancers sharing at least one required skill with the mission."""
    public_methods = ('GET',)

    @swagger_auto_schema(operation_summary="Get recommended freelancers", responses={200: FreelanceProfileSerializer(many=True)})
    def get(self, request, pk):
        freelancers = self.get_service().get_recommended_freelancers(pk)
        return success_response(FreelanceProfileSerializer(freelancers, many=True).data, "Recommended freelancers retrieved successfully")
