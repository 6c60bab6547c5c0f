from rest_framework import views as drf_views, permissions
from drf_yasg.utils import swagger_auto_schema

from core.responses import success_response, created_response
from core.views import EnvelopeListAPIView
from . import serializers as my_serializers
from .services import CompanyService, CompanyFilters


class CompanyProfileAPIView(drf_views.APIView):
    """
    The caller's company profile.

    POST creates it, GET returns it, PUT/PATCH update it partially, DELETE removes it.
    """
    permission_classes = [permissions.IsAuthenticated]
    service_class = CompanyService

    @swagger_auto_schema(
        operation_summary="Create company profile",
        request_body=my_serializers.CompanyProfileSerializer,
        responses={201: my_serializers.CompanyProfileSerializer, 400: "Validation error", 409: "Profile already exists"}
    )
    def post(self, request):
        serializer = my_serializers.CompanyProfileSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        profile = self.service_class().create_profile(request.user, serializer.validated_data)
        return created_response(my_serializers.CompanyProfileSerializer(profile).data, "Company profile created successfully")

    @swagger_auto_schema(
        operation_summary="Get company profile",
        responses={200: my_serializers.CompanyProfileSerializer, 404: "Profile not found"}
    )
    def get(self, request):
        profile = self.service_class().get_profile(request.user)
        return success_response(my_serializers.CompanyProfileSerializer(profile).data, "Company profile retrieved successfully")

    @swagger_auto_schema(
        operation_summary="Update company profile",
        request_body=my_serializers.CompanyProfileSerializer,
        responses={200: my_serializers.CompanyProfileSerializer, 400: "Validation error", 404: "Profile not found"}
    )
    def put(self, request):
        serializer = my_serializers.CompanyProfileSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        profile = self.service_class().update_profile(request.user, serializer.validated_data)
        return success_response(my_serializers.CompanyProfileSerializer(profile).data, "Company profile updated successfully")

    @swagger_auto_schema(auto_schema=None)
    def patch(self, request):
        return self.put(request)

    @swagger_auto_schema(operation_summary="Delete company profile", responses={200: "Deleted", 404: "Profile not found"})
    def delete(self, request):
        self.service_class().delete_profile(request.user)
        return success_response(message="Company profile deleted successfully")


class CompanySearchAPIView(EnvelopeListAPIView):
    """
    Public company search.

    Query Parameters:
        - industry, location (case-insensitive substring)
        - size (exact)
        - page, limit
    """
    serializer_class = my_serializers.CompanyProfileSerializer
    query_serializer_class = my_serializers.CompanySearchSerializer
    permission_classes = [permissions.AllowAny]
    success_message = "Companies retrieved successfully"

    @swagger_auto_schema(operation_summary="Search companies", query_serializer=my_serializers.CompanySearchSerializer)
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)

    def get_queryset(self):
        return CompanyService().search_companies(CompanyFilters(**self.query))


class CompanyStatsAPIView(drf_views.APIView):
    permission_classes = [permissions.IsAuthenticated]

    @swagger_auto_schema(operation_summary="Get company statistics", responses={200: my_serializers.CompanyStatsSerializer})
    def get(self, request):
        stats = CompanyService().get_company_stats(request.user)
        return success_response(stats, "Company statistics retrieved successfully")
