from django.db import models
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator


class FreelanceProfile(models.Model):
    """
    Freelancer side of a user: skills, pricing and weekly availability (hours).
    """
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='freelance_profile')
    skills = models.JSONField(default=list)
    daily_rate = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])
    availability = models.PositiveIntegerField(validators=[MinValueValidator(1), MaxValueValidator(168)])
    experience = models.PositiveIntegerField(default=0)
    bio = models.TextField(blank=True, null=True)
    location = models.CharField(max_length=255, blank=True, null=True)
    is_verified = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    @property
    def full_name(self):
        return f"{self.user.first_name} {self.user.last_name}".strip()

    def __str__(self):
        return f"{self.full_name} ({self.user.email})"
