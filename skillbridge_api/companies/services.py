import logging
from dataclasses import dataclass
from typing import Optional

from django.db.models import Count, Q
from rest_framework.exceptions import NotFound, ValidationError

from core.exceptions import Conflict
from .models import CompanyProfile

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ('company_name', 'industry', 'size', 'description', 'website', 'location')


@dataclass
class CompanyFilters:
    industry: Optional[str] = None
    size: Optional[str] = None
    location: Optional[str] = None


class CompanyService:

    def create_profile(self, user, data):
        if user.user_type != 'COMPANY':
            raise ValidationError("Only company accounts can create a company profile")

        if CompanyProfile.objects.filter(user=user).exists():
            raise Conflict("Company profile already exists for this user")

        data = {field: data[field] for field in EDITABLE_FIELDS if field in data}
        if not (data.get('company_name') or '').strip():
            raise ValidationError("Company name is required")
        if not (data.get('industry') or '').strip():
            raise ValidationError("Industry is required")

        profile = CompanyProfile.objects.create(user=user, **data)
        logger.info(f"Company profile {profile.id} created for {user.email}")
        return profile

    def get_profile(self, user):
        try:
            return CompanyProfile.objects.select_related('user').get(user=user)
        except CompanyProfile.DoesNotExist:
            raise NotFound("Company profile not found")

    def update_profile(self, user, data):
        profile = self.get_profile(user)

        if 'company_name' in data and not (data['company_name'] or '').strip():
            raise ValidationError("Company name cannot be empty")
        if 'industry' in data and not (data['industry'] or '').strip():
            raise ValidationError("Industry cannot be empty")

        for field in EDITABLE_FIELDS:
            if field in data:
                setattr(profile, field, data[field])
        profile.save()
        logger.info(f"Company profile {profile.id} updated")
        return profile

    def delete_profile(self, user):
        profile = self.get_profile(user)
        profile_id = profile.id
        profile.delete()
        logger.info(f"Company profile {profile_id} deleted")

    def search_companies(self, filters=None):
        filters = filters or CompanyFilters()
        queryset = CompanyProfile.objects.select_related('user')

        if filters.industry:
            queryset = queryset.filter(industry__icontains=filters.industry)
        if filters.size:
            queryset = queryset.filter(size=filters.size)
        if filters.location:
            queryset = queryset.filter(location__icontains=filters.location)

        return queryset.order_by('-created_at')

    def get_company_stats(self, user):
        """Mission and application counts for the caller's company."""
        profile = self.get_profile(user)

        totals = profile.missions.aggregate(
            total_missions=Count('id', distinct=True),
            open_missions=Count('id', filter=Q(status='OPEN'), distinct=True),
        )
        total_applications = profile.applications.count()
        total_missions = totals['total_missions']

        return {
            'total_missions': total_missions,
            'open_missions': totals['open_missions'],
            'total_applications': total_applications,
            'average_applications_per_mission': (
                round(total_applications / total_missions, 2) if total_missions else 0
            ),
        }
