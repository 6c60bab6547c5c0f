import logging

from django.db import IntegrityError, transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from core.exceptions import Conflict
from companies.services import CompanyService
from freelancers.services import FreelanceService
from .models import CustomUser

logger = logging.getLogger(__name__)

COMPANY_PROFILE_FIELDS = ('company_name', 'industry', 'size')
FREELANCE_PROFILE_FIELDS = ('skills', 'daily_rate', 'availability', 'experience')


def issue_tokens(user):
    refresh = RefreshToken.for_user(user)
    refresh['email'] = user.email
    refresh['role'] = user.role
    return {
        'access': str(refresh.access_token),
        'refresh': str(refresh),
    }


class AuthService:
    """
    Account creation and session handling.

    The profile services are injectable so registration can be exercised
    without touching their validation rules.
    """
    def __init__(self, company_service=None, freelance_service=None):
        self.company_service = company_service or CompanyService()
        self.freelance_service = freelance_service or FreelanceService()

    def register(self, *, email, password, first_name, last_name, user_type, **profile_data):
        """
        Create a user and, when every profile field for its type is supplied,
        the matching profile in the same transaction.

        Returns `(user, tokens)`.
        """
        if CustomUser.objects.filter(email__iexact=email).exists():
            logger.warning(f"Registration rejected, email already in use: {email}")
            raise Conflict("User with this email already exists")

        try:
            with transaction.atomic():
                user = CustomUser.objects.create_user(
                    email=email,
                    password=password,
                    first_name=first_name,
                    last_name=last_name,
                    user_type=user_type,
                )

                if user_type == 'COMPANY' and self._has_fields(profile_data, COMPANY_PROFILE_FIELDS):
                    self.company_service.create_profile(user, profile_data)
                elif user_type == 'FREELANCER' and self._has_fields(profile_data, FREELANCE_PROFILE_FIELDS):
                    self.freelance_service.create_profile(user, profile_data)
        except IntegrityError:
            # lost a race with a concurrent registration for the same email
            logger.warning(f"Registration rejected, email already in use: {email}")
            raise Conflict("User with this email already exists")

        logger.info(f"User registered: {user.email} ({user.user_type})")
        return user, issue_tokens(user)

    def logout(self, refresh_token):
        try:
            RefreshToken(refresh_token).blacklist()
        except TokenError:
            raise ValidationError("Token is invalid or expired.")

    def deactivate(self, user, refresh_token=None):
        """Soft-delete the account. A bad refresh token does not block deactivation."""
        if refresh_token:
            try:
                RefreshToken(refresh_token).blacklist()
            except TokenError:
                logger.warning(f"Ignoring invalid refresh token while deactivating {user.email}")

        user.is_active = False
        user.deleted_at = timezone.now()
        user.save(update_fields=['is_active', 'deleted_at', 'updated_at'])
        logger.info(f"User deactivated: {user.email}")
        return user

    @staticmethod
    def _has_fields(data, fields):
        return all(data.get(field) not in (None, '', []) for field in fields)


class UserService:

    def update_me(self, user, data):
        for field in ('first_name', 'last_name'):
            if field in data:
                setattr(user, field, data[field])
        user.save()
        return user

    def change_password(self, user, new_password):
        user.set_password(new_password)
        user.save(update_fields=['password', 'updated_at'])
        logger.info(f"Password changed for {user.email}")
        return user

    def promote_to_admin(self, email):
        user = CustomUser.active_objects.get(email__iexact=email)
        user.role = 'ADMIN'
        user.is_staff = True
        user.save(update_fields=['role', 'is_staff', 'updated_at'])
        logger.info(f"User promoted to admin: {user.email}")
        return user

    def get_user(self, user_id):
        try:
            return CustomUser.objects.get(pk=user_id)
        except CustomUser.DoesNotExist:
            raise NotFound("User not found")

    def update_user(self, user_id, data):
        """
        Administrative update of another account.

        Email stays unique case-insensitively. Toggling `is_active` keeps
        `deleted_at` in step the same way self-deactivation does.
        """
        user = self.get_user(user_id)

        email = data.get('email')
        if email is not None:
            email = email.strip().lower()
            if CustomUser.objects.filter(email__iexact=email).exclude(pk=user.pk).exists():
                raise Conflict("Email is already in use")
            user.email = email

        for field in ('first_name', 'last_name'):
            if field in data:
                setattr(user, field, data[field])

        if 'role' in data:
            user.role = data['role']
            user.is_staff = user.is_superuser or data['role'] == 'ADMIN'

        if 'is_active' in data and data['is_active'] != user.is_active:
            user.is_active = data['is_active']
            user.deleted_at = None if user.is_active else timezone.now()

        try:
            with transaction.atomic():
                user.save()
        except IntegrityError:
            raise Conflict("Email is already in use")
        logger.info(f"User {user.id} updated by an administrator")
        return user

    def delete_user(self, user_id, acting_user):
        user = self.get_user(user_id)
        if user.pk == acting_user.pk:
            raise PermissionDenied("Users cannot delete themselves")
        user.delete()
        logger.info(f"User {user_id} deleted by {acting_user.email}")
