import logging
from dataclasses import dataclass, field
from typing import List, Optional

from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from core.querysets import json_list_overlaps
from freelancers.models import FreelanceProfile
from .models import PortfolioProject

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ('title', 'description', 'technologies', 'image_url', 'project_url', 'github_url')


@dataclass
class PortfolioFilters:
    technologies: List[str] = field(default_factory=list)
    freelancer_id: Optional[int] = None


def validate_project_fields(data, partial=False):
    if not partial or 'title' in data:
        if not (data.get('title') or '').strip():
            raise ValidationError("Project title is required")
    if not partial or 'description' in data:
        if not (data.get('description') or '').strip():
            raise ValidationError("Project description is required")
    if not partial or 'technologies' in data:
        if not [tech for tech in data.get('technologies') or [] if tech.strip()]:
            raise ValidationError("At least one technology is required")


class PortfolioService:

    def create_project(self, user, data):
        validate_project_fields(data)

        freelancer = FreelanceProfile.objects.filter(user=user).first()
        if freelancer is None:
            raise ValidationError("Freelance profile required to create portfolio projects")

        data = {name: data[name] for name in EDITABLE_FIELDS if name in data}
        project = PortfolioProject.objects.create(freelancer=freelancer, **data)
        logger.info(f"Portfolio project {project.id} created by freelancer {freelancer.id}")
        return project

    def get_project(self, project_id):
        try:
            return PortfolioProject.objects.select_related('freelancer__user').get(pk=project_id)
        except PortfolioProject.DoesNotExist:
            raise NotFound("Portfolio project not found")

    def update_project(self, project_id, user, data):
        project = self.get_project(project_id)
        if project.freelancer.user_id != user.id:
            raise PermissionDenied("Not authorized to update this project")

        validate_project_fields(data, partial=True)
        for name in EDITABLE_FIELDS:
            if name in data:
                setattr(project, name, data[name])
        project.save()
        logger.info(f"Portfolio project {project.id} updated")
        return project

    def delete_project(self, project_id, user):
        project = self.get_project(project_id)
        if project.freelancer.user_id != user.id:
            raise PermissionDenied("Not authorized to delete this project")
        project.delete()
        logger.info(f"Portfolio project {project_id} deleted")

    def get_user_portfolio(self, user):
        freelancer = FreelanceProfile.objects.filter(user=user).first()
        if freelancer is None:
            raise NotFound("Freelance profile not found")
        return freelancer.portfolio_projects.order_by('-created_at')

    def search_portfolios(self, filters=None):
        filters = filters or PortfolioFilters()
        queryset = PortfolioProject.objects.select_related('freelancer__user')

        if filters.technologies:
            queryset = queryset.filter(json_list_overlaps('technologies', filters.technologies))
        if filters.freelancer_id is not None:
            queryset = queryset.filter(freelancer_id=filters.freelancer_id)

        return queryset.order_by('-created_at')
