from django.db import models
from django.contrib.auth.models import AbstractUser, BaseUserManager
from auditlog.registry import auditlog
from auditlog.models import AuditlogHistoryField


class CustomUserManager(BaseUserManager):
    """
    Manager for CustomUser. Handles user and superuser creation using email as the unique identifier.
    """
    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError("Email is required.")
        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('role', 'ADMIN')

        return self.create_user(email, password, **extra_fields)


class ActiveUserManager(CustomUserManager):
    """
    Manager for active users only (is_active=True, deleted_at=None).
    """
    def get_queryset(self):
        return super().get_queryset().filter(is_active=True, deleted_at__isnull=True)


class CustomUser(AbstractUser):
    """
    Platform account. Email is the login identifier; `user_type` decides
    which profile (company or freelance) the account may own.
    Deactivation is soft: `is_active` goes false and `deleted_at` is stamped.
    """
    ROLE_CHOICES = (
        ('USER', 'User'),
        ('ADMIN', 'Admin'),
    )

    USER_TYPE_CHOICES = (
        ('FREELANCER', 'Freelancer'),
        ('COMPANY', 'Company'),
    )

    email = models.EmailField(unique=True, blank=False)
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default='USER')
    user_type = models.CharField(max_length=20, choices=USER_TYPE_CHOICES)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    deleted_at = models.DateTimeField(null=True, blank=True)
    username = None

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['first_name', 'last_name']

    objects = CustomUserManager()
    active_objects = ActiveUserManager()

    history = AuditlogHistoryField()

    @property
    def is_admin(self):
        return self.role == 'ADMIN' or self.is_staff

    def __str__(self):
        return self.email


auditlog.register(CustomUser, exclude_fields=['password', 'last_login'])
