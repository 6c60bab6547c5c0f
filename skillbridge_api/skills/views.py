from rest_framework import views as drf_views, permissions
from drf_yasg.utils import swagger_auto_schema

from core.responses import success_response
from . import serializers as my_serializers
from .services import SkillsService


class SkillsAPIView(drf_views.APIView):
    permission_classes = [permissions.AllowAny]
    authentication_classes = []


class SkillListAPIView(SkillsAPIView):

    @swagger_auto_schema(operation_summary="List all predefined skills")
    def get(self, request):
        return success_response(SkillsService().get_all_skills(), "Skills retrieved successfully")


class SkillSearchAPIView(SkillsAPIView):
    """Autocomplete: `?q=` substring, `?limit=` cap (default 10)."""

    @swagger_auto_schema(operation_summary="Search skills", query_serializer=my_serializers.SkillSearchSerializer)
    def get(self, request):
        query = my_serializers.SkillSearchSerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        skills = SkillsService().search_skills(query.validated_data['q'], query.validated_data['limit'])
        return success_response(skills, "Skills retrieved successfully")


class SkillValidateAPIView(SkillsAPIView):

    @swagger_auto_schema(operation_summary="Validate skills against the catalogue", request_body=my_serializers.SkillValidationSerializer)
    def post(self, request):
        serializer = my_serializers.SkillValidationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = SkillsService().validate_skills(serializer.validated_data['skills'])
        return success_response(result, "Skills validated successfully")


class SkillCategoriesAPIView(SkillsAPIView):

    @swagger_auto_schema(operation_summary="Get skill categories")
    def get(self, request):
        return success_response(SkillsService().get_skill_categories(), "Skill categories retrieved successfully")


class PopularSkillsAPIView(SkillsAPIView):

    @swagger_auto_schema(operation_summary="Get popular skills")
    def get(self, request):
        return success_response(SkillsService().get_popular_skills(), "Popular skills retrieved successfully")
