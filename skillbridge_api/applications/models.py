from django.db import models
from auditlog.registry import auditlog

from companies.models import CompanyProfile
from freelancers.models import FreelanceProfile
from missions.models import Mission


class Application(models.Model):
    """
    A freelancer's proposal for a mission. `company` is copied from the
    mission when the application is created.
    """
    STATUS_CHOICES = (
        ('PENDING', 'Pending'),
        ('ACCEPTED', 'Accepted'),
        ('REJECTED', 'Rejected'),
        ('WITHDRAWN', 'Withdrawn'),
    )

    mission = models.ForeignKey(Mission, on_delete=models.CASCADE, related_name='applications')
    freelancer = models.ForeignKey(FreelanceProfile, on_delete=models.CASCADE, related_name='applications')
    company = models.ForeignKey(CompanyProfile, on_delete=models.CASCADE, related_name='applications')
    proposal = models.TextField()
    proposed_rate = models.DecimalField(max_digits=10, decimal_places=2)
    estimated_duration = models.PositiveIntegerField(default=0, help_text="Estimated duration in weeks")
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='PENDING')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        unique_together = ('mission', 'freelancer')
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.freelancer} -> {self.mission}"


auditlog.register(Application)
