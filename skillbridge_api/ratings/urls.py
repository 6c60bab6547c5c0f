from django.urls import path

from . import views as my_views


urlpatterns = [
    path('', my_views.RatingCreateAPIView.as_view(), name='rating-create'),
    path('search/', my_views.RatingSearchAPIView.as_view(), name='rating-search'),
    path('user/my-ratings/', my_views.MyRatingsAPIView.as_view(), name='my-ratings'),
    path('user/average/', my_views.AverageRatingAPIView.as_view(), name='average-rating'),
    path('<int:pk>/', my_views.RatingDetailAPIView.as_view(), name='rating-detail'),
]
