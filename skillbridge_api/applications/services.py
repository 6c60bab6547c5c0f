import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from django.db import IntegrityError, transaction
from django.db.models import Q
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from companies.models import CompanyProfile
from core.exceptions import Conflict
from freelancers.models import FreelanceProfile
from missions.models import Mission
from notifications.services import get_notification_service
from .models import Application

logger = logging.getLogger(__name__)

MIN_PROPOSAL_LENGTH = 10
CONTENT_FIELDS = ('proposal', 'proposed_rate', 'estimated_duration')
SORTABLE_FIELDS = ('created_at', 'updated_at', 'proposed_rate', 'estimated_duration', 'status')


@dataclass
class ApplicationFilters:
    mission_id: Optional[int] = None
    freelancer_id: Optional[int] = None
    company_id: Optional[int] = None
    status: Optional[str] = None
    min_rate: Optional[Decimal] = None
    max_rate: Optional[Decimal] = None
    min_duration: Optional[int] = None
    max_duration: Optional[int] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None


@dataclass
class ApplicationOrdering:
    sort_by: str = 'created_at'
    sort_order: str = 'desc'

    def as_order_by(self):
        if self.sort_by not in SORTABLE_FIELDS:
            raise ValidationError(f"Cannot sort by {self.sort_by}")
        prefix = '-' if self.sort_order == 'desc' else ''
        return (f'{prefix}{self.sort_by}', f'{prefix}id')


def validate_content(data):
    if 'proposal' in data:
        proposal = (data['proposal'] or '').strip()
        if not proposal:
            raise ValidationError("Proposal is required")
        if len(proposal) < MIN_PROPOSAL_LENGTH:
            raise ValidationError(f"Proposal must be at least {MIN_PROPOSAL_LENGTH} characters")
    if 'proposed_rate' in data and (data['proposed_rate'] is None or data['proposed_rate'] <= 0):
        raise ValidationError("Proposed rate must be positive")
    if 'estimated_duration' in data and data['estimated_duration'] is not None and data['estimated_duration'] < 0:
        raise ValidationError("Estimated duration cannot be negative")


class ApplicationService:
    """
    Applications to missions.

    Freelancers own the proposal content and may withdraw; the mission's
    company accepts or rejects pending applications.
    """
    def __init__(self, notifications=None):
        self.notifications = notifications or get_notification_service()

    def create_application(self, user, data):
        validate_content({name: data.get(name) for name in ('proposal', 'proposed_rate')})
        validate_content({name: data[name] for name in ('estimated_duration',) if name in data})

        freelancer = FreelanceProfile.objects.select_related('user').filter(user=user).first()
        if freelancer is None:
            raise ValidationError("Freelance profile required to apply to missions")

        try:
            mission = Mission.objects.select_related('company').get(pk=data['mission_id'])
        except Mission.DoesNotExist:
            raise NotFound("Mission not found")

        if mission.status != 'OPEN':
            raise ValidationError("Mission is not open for applications")

        if Application.objects.filter(mission=mission, freelancer=freelancer).exists():
            raise Conflict("You have already applied to this mission")

        try:
            with transaction.atomic():
                application = Application.objects.create(
                    mission=mission,
                    freelancer=freelancer,
                    company=mission.company,
                    proposal=data['proposal'].strip(),
                    proposed_rate=data['proposed_rate'],
                    estimated_duration=data.get('estimated_duration') or 0,
                )
        except IntegrityError:
            raise Conflict("You have already applied to this mission")

        logger.info(f"Application {application.id} created for mission {mission.id} by freelancer {freelancer.id}")
        self.notifications.notify_application_received(mission.company.user_id, freelancer.full_name, mission.title)
        return application

    def get_application(self, application_id):
        try:
            return (
                Application.objects
                .select_related('mission', 'freelancer__user', 'company__user')
                .get(pk=application_id)
            )
        except Application.DoesNotExist:
            raise NotFound("Application not found")

    def update_application(self, application_id, user, data):
        application = self.get_application(application_id)
        is_freelancer = application.freelancer.user_id == user.id
        is_company = application.company.user_id == user.id

        if not (is_freelancer or is_company):
            raise PermissionDenied("Not authorized to update this application")

        if any(name in data for name in CONTENT_FIELDS) and not is_freelancer:
            raise PermissionDenied("Only freelancer can update proposal and rate")

        new_status = data.get('status')
        status_changed = new_status is not None and new_status != application.status
        if status_changed:
            self._check_status_change(application, new_status, is_freelancer, is_company)

        validate_content(data)

        for name in CONTENT_FIELDS:
            if name in data:
                setattr(application, name, data[name])
        if status_changed:
            application.status = new_status
        application.save()

        logger.info(f"Application {application.id} updated by user {user.id}")

        if status_changed and new_status in ('ACCEPTED', 'REJECTED'):
            notify = (
                self.notifications.notify_application_accepted if new_status == 'ACCEPTED'
                else self.notifications.notify_application_rejected
            )
            notify(application.freelancer.user_id, application.company.company_name, application.mission.title)

        return application

    def _check_status_change(self, application, new_status, is_freelancer, is_company):
        if new_status == 'WITHDRAWN':
            if not is_freelancer:
                raise PermissionDenied("Only freelancer can withdraw their own application")
            if application.status != 'PENDING':
                raise ValidationError("Only pending applications can be withdrawn")
            return

        if not is_company:
            raise PermissionDenied("Only company can update application status")
        if new_status not in ('ACCEPTED', 'REJECTED'):
            raise ValidationError(f"Cannot set application status to {new_status}")
        if application.status != 'PENDING':
            logger.warning(f"Application {application.id}: rejected {application.status} -> {new_status}")
            raise ValidationError("Only pending applications can be accepted or rejected")

    def delete_application(self, application_id, user):
        application = self.get_application(application_id)
        if application.freelancer.user_id != user.id:
            raise PermissionDenied("Not authorized to delete this application")
        application.delete()
        logger.info(f"Application {application_id} deleted")

    def get_user_applications(self, user, filters=None, ordering=None):
        """The caller's applications as a freelancer, else those received as a company."""
        freelancer = FreelanceProfile.objects.filter(user=user).first()
        if freelancer is not None:
            queryset = Application.objects.filter(freelancer=freelancer)
        else:
            company = CompanyProfile.objects.filter(user=user).first()
            if company is None:
                raise NotFound("User profile not found")
            queryset = Application.objects.filter(company=company)

        return self._filter(queryset, filters, ordering)

    def get_mission_applications(self, mission_id, user, filters=None, ordering=None):
        try:
            mission = Mission.objects.select_related('company').get(pk=mission_id)
        except Mission.DoesNotExist:
            raise NotFound("Mission not found")

        if mission.company.user_id != user.id:
            raise PermissionDenied("Not authorized to view applications for this mission")

        return self._filter(Application.objects.filter(mission=mission), filters, ordering)

    def search_applications(self, filters=None, ordering=None, user=None):
        """
        Filtered application search. A non-admin `user` only sees the
        applications they are a party to.
        """
        queryset = Application.objects.all()
        if user is not None and not user.is_admin:
            queryset = queryset.filter(Q(freelancer__user=user) | Q(company__user=user))
        return self._filter(queryset, filters, ordering)

    def get_application_stats(self, user):
        freelancer = FreelanceProfile.objects.filter(user=user).first()
        if freelancer is not None:
            queryset = Application.objects.filter(freelancer=freelancer)
        else:
            company = CompanyProfile.objects.filter(user=user).first()
            if company is None:
                raise NotFound("User profile not found")
            queryset = Application.objects.filter(company=company)

        stats = {'total': 0, 'pending': 0, 'accepted': 0, 'rejected': 0, 'withdrawn': 0}
        rate_sum = Decimal('0')
        for status, proposed_rate in queryset.values_list('status', 'proposed_rate').iterator():
            stats['total'] += 1
            stats[status.lower()] += 1
            rate_sum += proposed_rate

        average = rate_sum / stats['total'] if stats['total'] else Decimal('0')
        stats['average_rate'] = average.quantize(Decimal('0.01'))
        return stats

    def _filter(self, queryset, filters, ordering):
        filters = filters or ApplicationFilters()
        ordering = ordering or ApplicationOrdering()

        if filters.mission_id is not None:
            queryset = queryset.filter(mission_id=filters.mission_id)
        if filters.freelancer_id is not None:
            queryset = queryset.filter(freelancer_id=filters.freelancer_id)
        if filters.company_id is not None:
            queryset = queryset.filter(company_id=filters.company_id)
        if filters.status:
            queryset = queryset.filter(status=filters.status)
        if filters.min_rate is not None:
            queryset = queryset.filter(proposed_rate__gte=filters.min_rate)
        if filters.max_rate is not None:
            queryset = queryset.filter(proposed_rate__lte=filters.max_rate)
        if filters.min_duration is not None:
            queryset = queryset.filter(estimated_duration__gte=filters.min_duration)
        if filters.max_duration is not None:
            queryset = queryset.filter(estimated_duration__lte=filters.max_duration)
        if filters.date_from is not None:
            queryset = queryset.filter(created_at__date__gte=filters.date_from)
        if filters.date_to is not None:
            queryset = queryset.filter(created_at__date__lte=filters.date_to)

        return (
            queryset
            .select_related('mission', 'freelancer__user', 'company')
            .order_by(*ordering.as_order_by())
        )
