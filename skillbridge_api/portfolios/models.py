from django.db import models

from freelancers.models import FreelanceProfile


class PortfolioProject(models.Model):
    freelancer = models.ForeignKey(FreelanceProfile, on_delete=models.CASCADE, related_name='portfolio_projects')
    title = models.CharField(max_length=255)
    description = models.TextField()
    technologies = models.JSONField(default=list)
    image_url = models.URLField(max_length=500, blank=True, null=True)
    project_url = models.URLField(max_length=500, blank=True, null=True)
    github_url = models.URLField(max_length=500, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.title
