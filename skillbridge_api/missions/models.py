from django.db import models
from django.core.validators import MinValueValidator
from auditlog.registry import auditlog

from companies.models import CompanyProfile


class Mission(models.Model):
    """
    A job posting owned by a company profile.

    Status moves OPEN -> IN_PROGRESS|CANCELLED and IN_PROGRESS -> COMPLETED|CANCELLED.
    COMPLETED, CANCELLED and EXPIRED are terminal.
    """
    STATUS_CHOICES = (
        ('OPEN', 'Open'),
        ('IN_PROGRESS', 'In Progress'),
        ('COMPLETED', 'Completed'),
        ('CANCELLED', 'Cancelled'),
        ('EXPIRED', 'Expired'),
    )

    URGENCY_CHOICES = (
        ('LOW', 'Low'),
        ('NORMAL', 'Normal'),
        ('HIGH', 'High'),
        ('URGENT', 'Urgent'),
    )

    ALLOWED_TRANSITIONS = {
        'OPEN': {'IN_PROGRESS', 'CANCELLED'},
        'IN_PROGRESS': {'COMPLETED', 'CANCELLED'},
    }

    company = models.ForeignKey(CompanyProfile, on_delete=models.CASCADE, related_name='missions')
    title = models.CharField(max_length=255)
    description = models.TextField()
    required_skills = models.JSONField(default=list)
    budget = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(0)])
    duration = models.PositiveIntegerField(help_text="Duration in weeks")
    location = models.CharField(max_length=255, blank=True, null=True)
    is_remote = models.BooleanField(default=False)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='OPEN')
    urgency = models.CharField(max_length=10, choices=URGENCY_CHOICES, default='NORMAL')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status'], name='mission_status_idx'),
        ]

    def can_transition_to(self, new_status):
        return new_status in self.ALLOWED_TRANSITIONS.get(self.status, set())

    def __str__(self):
        return self.title


auditlog.register(Mission)
