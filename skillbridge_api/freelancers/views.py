from rest_framework import views as drf_views, permissions
from drf_yasg.utils import swagger_auto_schema

from core.responses import success_response, created_response
from core.views import EnvelopeListAPIView
from missions.serializers import MissionSerializer
from . import serializers as my_serializers
from .services import FreelanceService, FreelancerFilters


class FreelanceProfileAPIView(drf_views.APIView):
    """
    The caller's freelance profile.

    POST creates it, GET returns it, PUT/PATCH update it partially, DELETE removes it.
    """
    permission_classes = [permissions.IsAuthenticated]

    @swagger_auto_schema(
        operation_summary="Create freelance profile",
        request_body=my_serializers.FreelanceProfileSerializer,
        responses={201: my_serializers.FreelanceProfileSerializer, 400: "Validation error", 409: "Profile already exists"}
    )
    def post(self, request):
        serializer = my_serializers.FreelanceProfileSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        profile = FreelanceService().create_profile(request.user, serializer.validated_data)
        return created_response(my_serializers.FreelanceProfileSerializer(profile).data, "Freelance profile created successfully")

    @swagger_auto_schema(
        operation_summary="Get freelance profile",
        responses={200: my_serializers.FreelanceProfileSerializer, 404: "Profile not found"}
    )
    def get(self, request):
        profile = FreelanceService().get_profile(request.user)
        return success_response(my_serializers.FreelanceProfileSerializer(profile).data, "Freelance profile retrieved successfully")

    @swagger_auto_schema(
        operation_summary="Update freelance profile",
        request_body=my_serializers.FreelanceProfileSerializer,
        responses={200: my_serializers.FreelanceProfileSerializer, 400: "Validation error", 404: "Profile not found"}
    )
    def put(self, request):
        serializer = my_serializers.FreelanceProfileSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        profile = FreelanceService().update_profile(request.user, serializer.validated_data)
        return success_response(my_serializers.FreelanceProfileSerializer(profile).data, "Freelance profile updated successfully")

    @swagger_auto_schema(auto_schema=None)
    def patch(self, request):
        return self.put(request)

    @swagger_auto_schema(operation_summary="Delete freelance profile", responses={200: "Deleted", 404: "Profile not found"})
    def delete(self, request):
        FreelanceService().delete_profile(request.user)
        return success_response(message="Freelance profile deleted successfully")


class FreelancerSearchAPIView(EnvelopeListAPIView):
    serializer_class = my_serializers.FreelanceProfileSerializer
    query_serializer_class = my_serializers.FreelancerSearchSerializer
    permission_classes = [permissions.AllowAny]
    success_message = "Freelancers retrieved successfully"

    @swagger_auto_schema(operation_summary="Search freelancers", query_serializer=my_serializers.FreelancerSearchSerializer)
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)

    def get_queryset(self):
        return FreelanceService().search_freelancers(FreelancerFilters(**self.query))


class RecommendedMissionsAPIView(drf_views.APIView):
    """OPEN missions matching at least one of the caller's skills."""
    permission_classes = [permissions.IsAuthenticated]

    @swagger_auto_schema(operation_summary="Get recommended missions", responses={200: MissionSerializer(many=True)})
    def get(self, request):
        missions = FreelanceService().get_recommended_missions(request.user)
        return success_response(MissionSerializer(missions, many=True).data, "Recommended missions retrieved successfully")
