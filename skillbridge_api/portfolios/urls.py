from django.urls import path

from . import views as my_views


urlpatterns = [
    path('', my_views.PortfolioCreateAPIView.as_view(), name='portfolio-create'),
    path('search/', my_views.PortfolioSearchAPIView.as_view(), name='portfolio-search'),
    path('user/my-portfolio/', my_views.MyPortfolioAPIView.as_view(), name='my-portfolio'),
    path('<int:pk>/', my_views.PortfolioDetailAPIView.as_view(), name='portfolio-detail'),
]
