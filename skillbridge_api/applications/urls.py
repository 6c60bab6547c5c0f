from django.urls import path

from . import views as my_views


urlpatterns = [
    path('', my_views.ApplicationCreateAPIView.as_view(), name='application-create'),
    path('search/', my_views.ApplicationSearchAPIView.as_view(), name='application-search'),
    path('stats/', my_views.ApplicationStatsAPIView.as_view(), name='application-stats'),
    path('user/my-applications/', my_views.MyApplicationsAPIView.as_view(), name='my-applications'),
    path('mission/<int:mission_id>/', my_views.MissionApplicationsAPIView.as_view(), name='mission-applications'),
    path('<int:pk>/', my_views.ApplicationDetailAPIView.as_view(), name='application-detail'),
]
