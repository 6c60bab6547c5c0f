from django.urls import path

from . import views as my_views


urlpatterns = [
    path('', my_views.MissionListCreateAPIView.as_view(), name='mission-list-create'),
    path('company/my-missions/', my_views.CompanyMissionsAPIView.as_view(), name='company-missions'),
    path('<int:pk>/', my_views.MissionDetailAPIView.as_view(), name='mission-detail'),
    path('<int:pk>/recommended-freelancers/', my_views.RecommendedFreelancersAPIView.as_view(), name='recommended-freelancers'),
]
