import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from django.db import transaction
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from companies.models import CompanyProfile
from core.querysets import json_list_overlaps
from freelancers.models import FreelanceProfile
from notifications.services import get_notification_service
from .models import Mission

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    'title', 'description', 'required_skills', 'budget', 'duration',
    'location', 'is_remote', 'status', 'urgency',
)


@dataclass
class MissionFilters:
    status: Optional[str] = None
    skills: List[str] = field(default_factory=list)
    min_budget: Optional[Decimal] = None
    max_budget: Optional[Decimal] = None
    location: Optional[str] = None
    is_remote: Optional[bool] = None
    urgency: Optional[str] = None
    company_id: Optional[int] = None


def validate_mission_fields(data, partial=False):
    """Field rules shared by create and update. With `partial`, absent fields are skipped."""
    if not partial or 'title' in data:
        if not (data.get('title') or '').strip():
            raise ValidationError("Mission title is required")
    if not partial or 'description' in data:
        if not (data.get('description') or '').strip():
            raise ValidationError("Mission description is required")
    if not partial or 'required_skills' in data:
        if not [skill for skill in data.get('required_skills') or [] if skill.strip()]:
            raise ValidationError("At least one required skill is needed")
    if not partial or 'budget' in data:
        if data.get('budget') is None or data['budget'] <= 0:
            raise ValidationError("Budget must be greater than 0")
    if not partial or 'duration' in data:
        if data.get('duration') is None or data['duration'] <= 0:
            raise ValidationError("Duration must be greater than 0")


class MissionService:
    """
    Mission CRUD and lifecycle.

    Status changes notify every applicant through the injected
    notification service; delivery failures are logged and do not undo
    the update.
    """
    def __init__(self, notifications=None):
        self.notifications = notifications or get_notification_service()

    def create_mission(self, user, data):
        validate_mission_fields(data)

        company = CompanyProfile.objects.filter(user=user).first()
        if company is None:
            raise ValidationError("Company profile required to create missions")

        data = {name: data[name] for name in EDITABLE_FIELDS if name in data and name != 'status'}
        mission = Mission.objects.create(company=company, status='OPEN', **data)
        logger.info(f"Mission {mission.id} created by company {company.id}")
        return mission

    def get_mission(self, mission_id):
        try:
            return Mission.objects.select_related('company').get(pk=mission_id)
        except Mission.DoesNotExist:
            raise NotFound("Mission not found")

    def update_mission(self, mission_id, user, data):
        with transaction.atomic():
            # the row stays locked until the transition is checked and saved
            try:
                mission = Mission.objects.select_for_update(of=('self',)).select_related('company').get(pk=mission_id)
            except Mission.DoesNotExist:
                raise NotFound("Mission not found")
            self._check_owner(mission, user, "Not authorized to update this mission")
            validate_mission_fields(data, partial=True)

            previous_status = mission.status
            new_status = data.get('status', previous_status)
            if new_status != previous_status and not mission.can_transition_to(new_status):
                logger.warning(f"Mission {mission.id}: rejected transition {previous_status} -> {new_status}")
                raise ValidationError(f"Cannot change mission status from {previous_status} to {new_status}")

            for name in EDITABLE_FIELDS:
                if name in data:
                    setattr(mission, name, data[name])
            mission.save()

        logger.info(f"Mission {mission.id} updated")

        if new_status != previous_status:
            self._notify_applicants(mission)

        return mission

    def delete_mission(self, mission_id, user):
        mission = self.get_mission(mission_id)
        self._check_owner(mission, user, "Not authorized to delete this mission")
        mission.delete()
        logger.info(f"Mission {mission_id} deleted")

    def search_missions(self, filters=None):
        filters = filters or MissionFilters()
        queryset = Mission.objects.select_related('company')

        if filters.status:
            queryset = queryset.filter(status=filters.status)
        if filters.skills:
            queryset = queryset.filter(json_list_overlaps('required_skills', filters.skills))
        if filters.min_budget is not None:
            queryset = queryset.filter(budget__gte=filters.min_budget)
        if filters.max_budget is not None:
            queryset = queryset.filter(budget__lte=filters.max_budget)
        if filters.location:
            queryset = queryset.filter(location__icontains=filters.location)
        if filters.is_remote is not None:
            queryset = queryset.filter(is_remote=filters.is_remote)
        if filters.urgency:
            queryset = queryset.filter(urgency=filters.urgency)
        if filters.company_id is not None:
            queryset = queryset.filter(company_id=filters.company_id)

        return queryset.order_by('-created_at')

    def get_company_missions(self, user):
        company = CompanyProfile.objects.filter(user=user).first()
        if company is None:
            raise NotFound("Company profile not found")
        return company.missions.order_by('-created_at')

    def get_recommended_freelancers(self, mission_id):
        mission = self.get_mission(mission_id)
        if not mission.required_skills:
            return FreelanceProfile.objects.none()

        return (
            FreelanceProfile.objects
            .filter(json_list_overlaps('skills', mission.required_skills))
            .select_related('user')
            .order_by('-created_at')
        )

    def _check_owner(self, mission, user, message):
        if mission.company.user_id != user.id:
            raise PermissionDenied(message)

    def _notify_applicants(self, mission):
        try:
            applicant_user_ids = (
                mission.applications
                .values_list('freelancer__user_id', flat=True)
                .distinct()
            )
            for user_id in applicant_user_ids:
                if mission.status == 'COMPLETED':
                    self.notifications.notify_mission_completed(user_id, mission.company.company_name, mission.title)
                else:
                    self.notifications.notify_mission_updated(
                        user_id, mission.title, f"Status changed to {mission.get_status_display()}"
                    )
        except Exception:
            logger.exception(f"Failed to notify applicants of mission {mission.id}")
