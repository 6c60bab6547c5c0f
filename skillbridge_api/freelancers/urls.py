from django.urls import path

from . import views as my_views


urlpatterns = [
    path('profile/', my_views.FreelanceProfileAPIView.as_view(), name='freelance-profile'),
    path('search/', my_views.FreelancerSearchAPIView.as_view(), name='freelance-search'),
    path('recommended-missions/', my_views.RecommendedMissionsAPIView.as_view(), name='recommended-missions'),
]
