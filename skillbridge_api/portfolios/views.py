from rest_framework import views as drf_views
from drf_yasg.utils import swagger_auto_schema

from core.responses import success_response, created_response
from core.views import EnvelopeListAPIView, PublicMethodsMixin
from . import serializers as my_serializers
from .services import PortfolioService, PortfolioFilters


class PortfolioCreateAPIView(drf_views.APIView):

    @swagger_auto_schema(
        operation_summary="Add a portfolio project",
        request_body=my_serializers.PortfolioProjectSerializer,
        responses={201: my_serializers.PortfolioProjectSerializer, 400: "Validation error"}
    )
    def post(self, request):
        serializer = my_serializers.PortfolioProjectSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        project = PortfolioService().create_project(request.user, serializer.validated_data)
        return created_response(my_serializers.PortfolioProjectSerializer(project).data, "Portfolio project created successfully")


class PortfolioDetailAPIView(PublicMethodsMixin, drf_views.APIView):
    public_methods = ('GET',)

    @swagger_auto_schema(operation_summary="Get a portfolio project", responses={200: my_serializers.PortfolioProjectSerializer, 404: "Not found"})
    def get(self, request, pk):
        project = PortfolioService().get_project(pk)
        return success_response(my_serializers.PortfolioProjectSerializer(project).data, "Portfolio project retrieved successfully")

    @swagger_auto_schema(
        operation_summary="Update a portfolio project",
        request_body=my_serializers.PortfolioProjectSerializer,
        responses={200: my_serializers.PortfolioProjectSerializer, 400: "Validation error", 403: "Forbidden", 404: "Not found"}
    )
    def put(self, request, pk):
        serializer = my_serializers.PortfolioProjectSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        project = PortfolioService().update_project(pk, request.user, serializer.validated_data)
        return success_response(my_serializers.PortfolioProjectSerializer(project).data, "Portfolio project updated successfully")

    @swagger_auto_schema(auto_schema=None)
    def patch(self, request, pk):
        return self.put(request, pk)

    @swagger_auto_schema(operation_summary="Delete a portfolio project", responses={200: "Deleted", 403: "Forbidden", 404: "Not found"})
    def delete(self, request, pk):
        PortfolioService().delete_project(pk, request.user)
        return success_response(message="Portfolio project deleted successfully")


class MyPortfolioAPIView(drf_views.APIView):

    @swagger_auto_schema(operation_summary="List the caller's portfolio", responses={200: my_serializers.PortfolioProjectSerializer(many=True)})
    def get(self, request):
        projects = PortfolioService().get_user_portfolio(request.user)
        return success_response(my_serializers.PortfolioProjectSerializer(projects, many=True).data, "Portfolio retrieved successfully")


class PortfolioSearchAPIView(PublicMethodsMixin, EnvelopeListAPIView):
    serializer_class = my_serializers.PortfolioProjectSerializer
    query_serializer_class = my_serializers.PortfolioSearchSerializer
    public_methods = ('GET',)
    success_message = "Portfolio projects retrieved successfully"

    @swagger_auto_schema(operation_summary="Search portfolio projects", query_serializer=my_serializers.PortfolioSearchSerializer)
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)

    def get_queryset(self):
        return PortfolioService().search_portfolios(PortfolioFilters(**self.query))
