from rest_framework_simplejwt import views as jwt_views
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError
from rest_framework import views as drf_views, generics, permissions
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework.filters import SearchFilter, OrderingFilter
from rest_framework.exceptions import ValidationError
from drf_yasg.utils import swagger_auto_schema

from core.responses import success_response, created_response
from . import serializers as my_serializers
from . import models as my_models, throttles
from .pagination import UserListPagination
from . import permissions as my_permissions
from .services import AuthService, UserService


class CustomTokenObtainPairView(jwt_views.TokenObtainPairView):
    """
    Authenticates a user by email and password.

    Returns the user together with an access and a refresh token.
    Attempts are throttled per email address.
    """
    serializer_class = my_serializers.CustomTokenObtainPairSerializer
    throttle_classes = [throttles.EmailRateThrottle]

    @swagger_auto_schema(
        operation_summary="Log in and obtain tokens",
        responses={
            200: "Login successful",
            400: "Invalid email or password",
            401: "Account is deactivated"
        }
    )
    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return success_response(serializer.validated_data, "Login successful")


class TokenRefreshView(jwt_views.TokenRefreshView):

    @swagger_auto_schema(operation_summary="Refresh an access token")
    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        try:
            serializer.is_valid(raise_exception=True)
        except TokenError as e:
            raise InvalidToken(e.args[0])
        return success_response(serializer.validated_data, "Token refreshed")


class RegistrationAPIView(generics.GenericAPIView):
    """
    Handles new user registration.

    Accepts a POST request with:
        - email, password, first_name, last_name, user_type (required)
        - company or freelance profile fields (optional)
    Creates the user (and profile when complete), and returns the user's data
    along with JWT access and refresh tokens.
    """
    serializer_class = my_serializers.RegistrationSerializer
    permission_classes = [permissions.AllowAny]

    @swagger_auto_schema(
        operation_summary="Register a new user",
        responses={
            201: my_serializers.UserSerializer,
            400: "Invalid input",
            409: "Email already registered"
        }
    )
    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user, tokens = AuthService().register(**serializer.validated_data)

        return created_response({
            'user': my_serializers.UserSerializer(user).data,
            **tokens,
        }, "User registered successfully")


class LogoutAPIView(drf_views.APIView):
    """
    Logs out the current user by blacklisting the refresh token sent in the body.
    """
    permission_classes = [permissions.IsAuthenticated]

    @swagger_auto_schema(
        operation_summary="Log out by blacklisting a refresh token",
        request_body=my_serializers.RefreshTokenSerializer,
        responses={
            200: "Logout successful",
            400: "Invalid token"
        }
    )
    def post(self, request):
        serializer = my_serializers.RefreshTokenSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        refresh_token = serializer.validated_data.get('refresh')
        if not refresh_token:
            raise ValidationError({'refresh': ["This field is required."]})

        AuthService().logout(refresh_token)
        return success_response(message="Logout successful")


class MeAPIView(drf_views.APIView):
    """
    GET: the authenticated user's account.
    PATCH: updates first_name / last_name. Email, role and user_type are read-only.
    """
    permission_classes = [permissions.IsAuthenticated]

    @swagger_auto_schema(
        operation_summary="Retrieve the current user",
        responses={200: my_serializers.UserSerializer}
    )
    def get(self, request):
        return success_response(my_serializers.UserSerializer(request.user).data, "User retrieved successfully")

    @swagger_auto_schema(
        operation_summary="Update the current user",
        request_body=my_serializers.UserUpdateSerializer,
        responses={200: my_serializers.UserSerializer, 400: "Invalid input"}
    )
    def patch(self, request):
        serializer = my_serializers.UserUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        user = UserService().update_me(request.user, serializer.validated_data)
        return success_response(my_serializers.UserSerializer(user).data, "User updated successfully")


class ChangePasswordAPIView(drf_views.APIView):
    """
    Allows an authenticated user to change their password.

    Request Body:
        - current_password, new_password, confirm_password (required)
    """
    serializer_class = my_serializers.ChangePasswordSerializer
    permission_classes = [permissions.IsAuthenticated]

    @swagger_auto_schema(
        operation_summary="Change the current user's password",
        request_body=my_serializers.ChangePasswordSerializer,
        responses={
            200: "Password updated successfully",
            400: "Invalid input"
        }
    )
    def post(self, request, *args, **kwargs):
        serializer = self.serializer_class(data=request.data, context={'request': request})
        serializer.is_valid(raise_exception=True)
        UserService().change_password(request.user, serializer.validated_data['new_password'])
        return success_response(message="Password updated successfully")


class DeactivateAccountAPIView(drf_views.APIView):
    """
    Soft-deletes the caller's account and blacklists the refresh token if one is sent.
    """
    permission_classes = [permissions.IsAuthenticated]

    @swagger_auto_schema(
        operation_summary="Deactivate the current user's account",
        request_body=my_serializers.RefreshTokenSerializer,
        responses={200: "Account deactivated"}
    )
    def post(self, request):
        serializer = my_serializers.RefreshTokenSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        AuthService().deactivate(request.user, serializer.validated_data.get('refresh'))
        return success_response(message="Account deactivated")


class UserListAPIView(generics.ListAPIView):
    """
    Allows admin users to list all users with filtering and searching.

    Query Parameters:
        - user_type, role, is_active (filter)
        - search (email, first_name, last_name)
        - ordering (id, last_name, first_name, user_type, created_at)
        - page, limit
    """
    serializer_class = my_serializers.UserListSerializer
    permission_classes = [my_permissions.IsAdminRole]

    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_fields = ['user_type', 'role', 'is_active']
    search_fields = ['email', 'first_name', 'last_name']
    ordering_fields = ['id', 'last_name', 'first_name', 'user_type', 'created_at']
    ordering = ['-created_at']
    pagination_class = UserListPagination

    @swagger_auto_schema(
        operation_summary="List all users (Admin only)",
        responses={
            200: my_serializers.UserListSerializer(many=True),
            403: "Forbidden"
        }
    )
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)

    def get_queryset(self):
        return my_models.CustomUser.objects.all()


class AdminUserDetailAPIView(drf_views.APIView):
    """
    Admin-only management of a single account.

    GET: the account. PUT/PATCH: email, names, role, is_active.
    DELETE: removes the account; administrators cannot delete themselves.
    """
    permission_classes = [my_permissions.IsAdminRole]

    @swagger_auto_schema(
        operation_summary="Retrieve a user (Admin only)",
        responses={200: my_serializers.UserListSerializer, 403: "Forbidden", 404: "User not found"}
    )
    def get(self, request, pk):
        user = UserService().get_user(pk)
        return success_response(my_serializers.UserListSerializer(user).data, "User retrieved successfully")

    @swagger_auto_schema(
        operation_summary="Update a user (Admin only)",
        request_body=my_serializers.AdminUserUpdateSerializer,
        responses={
            200: my_serializers.UserListSerializer,
            400: "Invalid input",
            403: "Forbidden",
            404: "User not found",
            409: "Email is already in use"
        }
    )
    def put(self, request, pk):
        serializer = my_serializers.AdminUserUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        user = UserService().update_user(pk, serializer.validated_data)
        return success_response(my_serializers.UserListSerializer(user).data, "User updated successfully")

    @swagger_auto_schema(auto_schema=None)
    def patch(self, request, pk):
        return self.put(request, pk)

    @swagger_auto_schema(
        operation_summary="Delete a user (Admin only)",
        responses={200: "Deleted", 403: "Forbidden", 404: "User not found"}
    )
    def delete(self, request, pk):
        UserService().delete_user(pk, request.user)
        return success_response(message="User deleted successfully")
