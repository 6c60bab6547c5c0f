from django.urls import path

from . import views as my_views


urlpatterns = [
    path('register/', my_views.RegistrationAPIView.as_view(), name='register'),
    path('login/', my_views.CustomTokenObtainPairView.as_view(), name='login'),
    path('refresh/', my_views.TokenRefreshView.as_view(), name='token-refresh'),
    path('logout/', my_views.LogoutAPIView.as_view(), name='logout'),
    path('me/', my_views.MeAPIView.as_view(), name='me'),
    path('change-password/', my_views.ChangePasswordAPIView.as_view(), name='change-password'),
    path('deactivate/', my_views.DeactivateAccountAPIView.as_view(), name='deactivate-account'),
    path('admin/users/', my_views.UserListAPIView.as_view(), name='list-user'),
    path('admin/users/<int:pk>/', my_views.AdminUserDetailAPIView.as_view(), name='user-detail'),
]
