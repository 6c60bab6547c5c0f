import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from rest_framework.exceptions import NotFound, ValidationError

from core.exceptions import Conflict
from core.querysets import json_list_overlaps
from missions.models import Mission
from .models import FreelanceProfile

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ('skills', 'daily_rate', 'availability', 'experience', 'bio', 'location')


@dataclass
class FreelancerFilters:
    skills: List[str] = field(default_factory=list)
    min_rate: Optional[Decimal] = None
    max_rate: Optional[Decimal] = None
    location: Optional[str] = None
    min_experience: Optional[int] = None


def validate_profile_fields(data):
    if 'daily_rate' in data and (data['daily_rate'] is None or data['daily_rate'] <= 0):
        raise ValidationError("Daily rate must be greater than 0")
    if 'availability' in data and (data['availability'] is None or not 1 <= data['availability'] <= 168):
        raise ValidationError("Availability must be between 1 and 168 hours per week")
    if 'experience' in data and (data['experience'] is None or data['experience'] < 0):
        raise ValidationError("Experience cannot be negative")


class FreelanceService:

    def create_profile(self, user, data):
        if user.user_type != 'FREELANCER':
            raise ValidationError("Only freelancer accounts can create a freelance profile")

        if FreelanceProfile.objects.filter(user=user).exists():
            raise Conflict("Freelance profile already exists for this user")

        data = {name: data[name] for name in EDITABLE_FIELDS if name in data}
        for required in ('daily_rate', 'availability'):
            if required not in data:
                raise ValidationError(f"{required}: This field is required.")
        validate_profile_fields(data)

        profile = FreelanceProfile.objects.create(user=user, **data)
        logger.info(f"Freelance profile {profile.id} created for {user.email}")
        return profile

    def get_profile(self, user):
        try:
            return FreelanceProfile.objects.select_related('user').get(user=user)
        except FreelanceProfile.DoesNotExist:
            raise NotFound("Freelance profile not found")

    def update_profile(self, user, data):
        profile = self.get_profile(user)
        validate_profile_fields(data)

        for name in EDITABLE_FIELDS:
            if name in data:
                setattr(profile, name, data[name])
        profile.save()
        logger.info(f"Freelance profile {profile.id} updated")
        return profile

    def delete_profile(self, user):
        profile = self.get_profile(user)
        profile_id = profile.id
        profile.delete()
        logger.info(f"Freelance profile {profile_id} deleted")

    def search_freelancers(self, filters=None):
        filters = filters or FreelancerFilters()
        queryset = FreelanceProfile.objects.select_related('user')

        if filters.skills:
            queryset = queryset.filter(json_list_overlaps('skills', filters.skills))
        if filters.min_rate is not None:
            queryset = queryset.filter(daily_rate__gte=filters.min_rate)
        if filters.max_rate is not None:
            queryset = queryset.filter(daily_rate__lte=filters.max_rate)
        if filters.location:
            queryset = queryset.filter(location__icontains=filters.location)
        if filters.min_experience is not None:
            queryset = queryset.filter(experience__gte=filters.min_experience)

        return queryset.order_by('-created_at')

    def get_recommended_missions(self, user):
        """OPEN missions sharing at least one skill with the caller's profile."""
        profile = self.get_profile(user)
        if not profile.skills:
            return Mission.objects.none()

        return (
            Mission.objects
            .filter(status='OPEN')
            .filter(json_list_overlaps('required_skills', profile.skills))
            .select_related('company')
            .order_by('-created_at')
        )
