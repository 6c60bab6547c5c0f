from django.urls import path

from . import views as my_views


urlpatterns = [
    path('profile/', my_views.CompanyProfileAPIView.as_view(), name='company-profile'),
    path('search/', my_views.CompanySearchAPIView.as_view(), name='company-search'),
    path('stats/', my_views.CompanyStatsAPIView.as_view(), name='company-stats'),
]
