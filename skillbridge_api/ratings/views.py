from rest_framework import views as drf_views
from drf_yasg.utils import swagger_auto_schema

from core.responses import success_response, created_response
from core.views import EnvelopeListAPIView, PublicMethodsMixin
from notifications.services import get_notification_service
from . import serializers as my_serializers
from .services import RatingService, RatingFilters


class RatingServiceMixin(PublicMethodsMixin):

    def get_service(self):
        return RatingService(notifications=get_notification_service())


class RatingCreateAPIView(RatingServiceMixin, drf_views.APIView):

    @swagger_auto_schema(
        operation_summary="Rate the other party of an accepted application",
        request_body=my_serializers.RatingSerializer,
        responses={
            201: my_serializers.RatingSerializer,
            400: "Validation error",
            403: "Not a party to the application",
            404: "Application not found",
            409: "Already rated"
        }
    )
    def post(self, request):
        serializer = my_serializers.RatingSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        rating = self.get_service().create_rating(request.user, serializer.validated_data)
        return created_response(my_serializers.RatingSerializer(rating).data, "Rating created successfully")


class RatingDetailAPIView(RatingServiceMixin, drf_views.APIView):
    public_methods = ('GET',)

    @swagger_auto_schema(operation_summary="Get a rating", responses={200: my_serializers.RatingSerializer, 404: "Not found"})
    def get(self, request, pk):
        rating = self.get_service().get_rating(pk)
        return success_response(my_serializers.RatingSerializer(rating).data, "Rating retrieved successfully")

    @swagger_auto_schema(
        operation_summary="Update a rating",
        request_body=my_serializers.RatingUpdateSerializer,
        responses={200: my_serializers.RatingSerializer, 400: "Validation error", 403: "Forbidden", 404: "Not found"}
    )
    def put(self, request, pk):
        serializer = my_serializers.RatingUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        rating = self.get_service().update_rating(pk, request.user, serializer.validated_data)
        return success_response(my_serializers.RatingSerializer(rating).data, "Rating updated successfully")

    @swagger_auto_schema(auto_schema=None)
    def patch(self, request, pk):
        return self.put(request, pk)

    @swagger_auto_schema(operation_summary="Delete a rating", responses={200: "Deleted", 403: "Forbidden", 404: "Not found"})
    def delete(self, request, pk):
        self.get_service().delete_rating(pk, request.user)
        return success_response(message="Rating deleted successfully")


class MyRatingsAPIView(RatingServiceMixin, drf_views.APIView):
    """Ratings received by the caller."""

    @swagger_auto_schema(operation_summary="List ratings received", responses={200: my_serializers.RatingSerializer(many=True)})
    def get(self, request):
        ratings = self.get_service().get_user_ratings(request.user)
        return success_response(my_serializers.RatingSerializer(ratings, many=True).data, "Ratings retrieved successfully")


class AverageRatingAPIView(RatingServiceMixin, drf_views.APIView):

    @swagger_auto_schema(operation_summary="Get the caller's average rating", responses={200: my_serializers.AverageRatingSerializer})
    def get(self, request):
        result = self.get_service().get_user_average_rating(request.user)
        return success_response(my_serializers.AverageRatingSerializer(result).data, "Average rating retrieved successfully")


class RatingSearchAPIView(RatingServiceMixin, EnvelopeListAPIView):
    serializer_class = my_serializers.RatingSerializer
    query_serializer_class = my_serializers.RatingSearchSerializer
    public_methods = ('GET',)
    success_message = "Ratings retrieved successfully"

    @swagger_auto_schema(operation_summary="Search ratings", query_serializer=my_serializers.RatingSearchSerializer)
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)

    def get_queryset(self):
        return self.get_service().search_ratings(RatingFilters(**self.query))
