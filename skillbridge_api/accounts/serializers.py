from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoPasswordValidationError
from rest_framework import serializers
from rest_framework_simplejwt.exceptions import AuthenticationFailed
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from companies.models import CompanyProfile
from .models import CustomUser


class CustomTokenObtainPairSerializer(TokenObtainPairSerializer):
    """
    Serializer for user login and token generation.

    Fields:
        - email (required)
        - password (required)
    Rejects deactivated accounts with 401 and bad credentials with 400.
    """
    default_error_messages = {
        'no_active_account': "Invalid email or password",
    }

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token['email'] = user.email
        token['role'] = user.role
        return token

    def validate(self, attrs):
        email = attrs.get('email')
        user = CustomUser.objects.filter(email__iexact=email).first()

        if user is None or not user.check_password(attrs.get('password')):
            raise serializers.ValidationError("Invalid email or password")

        if not user.is_active:
            raise AuthenticationFailed("Account is deactivated")

        attrs['email'] = user.email

        data = super().validate(attrs)
        data['user'] = UserSerializer(self.user).data
        return data


class RegistrationSerializer(serializers.Serializer):
    """
    Serializer for user registration.

    Fields:
        required: first_name, last_name, email, password, user_type
        company profile: company_name, industry, size, description, website, location
        freelance profile: skills, daily_rate, availability, experience, bio, location
    A profile is only created when all of its required fields are present.
    """
    first_name = serializers.CharField(min_length=2, max_length=150)
    last_name = serializers.CharField(min_length=2, max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6)
    user_type = serializers.ChoiceField(choices=CustomUser.USER_TYPE_CHOICES)

    company_name = serializers.CharField(required=False, allow_blank=True)
    industry = serializers.CharField(required=False, allow_blank=True)
    size = serializers.ChoiceField(choices=CompanyProfile.SIZE_CHOICES, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    website = serializers.CharField(required=False, allow_blank=True)

    skills = serializers.ListField(child=serializers.CharField(), required=False)
    daily_rate = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)
    availability = serializers.IntegerField(required=False)
    experience = serializers.IntegerField(required=False)
    bio = serializers.CharField(required=False, allow_blank=True)
    location = serializers.CharField(required=False, allow_blank=True)

    def validate_email(self, value):
        return value.strip().lower()

    def validate(self, attrs):
        prospective_user = CustomUser(
            email=attrs.get('email'),
            first_name=attrs.get('first_name'),
            last_name=attrs.get('last_name'),
        )

        try:
            validate_password(attrs['password'], user=prospective_user)
        except DjangoPasswordValidationError as exc:
            raise serializers.ValidationError({'password': list(exc.messages)})

        return attrs


class UserSerializer(serializers.ModelSerializer):
    """
    Serializer for the current user's account.

    Fields:
        read-only: id, email, role, user_type, is_active, created_at
        - first_name, last_name
    """
    class Meta:
        model = CustomUser
        fields = ('id', 'email', 'first_name', 'last_name', 'role', 'user_type', 'is_active', 'created_at')
        read_only_fields = ('id', 'email', 'role', 'user_type', 'is_active', 'created_at')


class UserUpdateSerializer(serializers.Serializer):
    first_name = serializers.CharField(min_length=2, max_length=150, required=False)
    last_name = serializers.CharField(min_length=2, max_length=150, required=False)


class ChangePasswordSerializer(serializers.Serializer):
    """
    Serializer for changing user password.

    Fields (all are required):
        - current_password
        - new_password
        - confirm_password
    Validates the current password and ensures new passwords match.
    """
    current_password = serializers.CharField(required=True, write_only=True)
    new_password = serializers.CharField(required=True, write_only=True, min_length=6)
    confirm_password = serializers.CharField(required=True, write_only=True)

    def validate(self, attrs):
        user = self.context['request'].user

        if not user.check_password(attrs['current_password']):
            raise serializers.ValidationError("Current password is incorrect.")

        if attrs['new_password'] != attrs['confirm_password']:
            raise serializers.ValidationError("Passwords do not match.")

        try:
            validate_password(attrs['new_password'], user=user)
        except DjangoPasswordValidationError as exc:
            raise serializers.ValidationError({'new_password': list(exc.messages)})

        return attrs


class RefreshTokenSerializer(serializers.Serializer):
    """
    Fields:
        - refresh (required for logout, optional for deactivation)
    """
    refresh = serializers.CharField(required=False, allow_blank=True)


class UserListSerializer(serializers.ModelSerializer):
    """
    Serializer for listing users (admin only).

    Fields (all read-only):
        id, email, first_name, last_name, role, user_type, is_active,
        created_at, updated_at, deleted_at
    """
    class Meta:
        model = CustomUser
        fields = ['id', 'email', 'first_name', 'last_name', 'role', 'user_type', 'is_active', 'created_at', 'updated_at', 'deleted_at']


class AdminUserUpdateSerializer(serializers.Serializer):
    """
    Fields an administrator may change on another account (all optional):
        - email, first_name, last_name, role, is_active
    """
    email = serializers.EmailField(required=False)
    first_name = serializers.CharField(min_length=2, max_length=150, required=False)
    last_name = serializers.CharField(min_length=2, max_length=150, required=False)
    role = serializers.ChoiceField(choices=CustomUser.ROLE_CHOICES, required=False)
    is_active = serializers.BooleanField(required=False)
