import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from django.db import IntegrityError, transaction
from django.db.models import Avg, Count
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from applications.models import Application
from core.exceptions import Conflict
from notifications.services import get_notification_service
from .models import Rating

logger = logging.getLogger(__name__)


@dataclass
class RatingFilters:
    from_user_id: Optional[int] = None
    to_user_id: Optional[int] = None
    application_id: Optional[int] = None


def validate_score(value):
    if value is None or not 1 <= value <= 5:
        raise ValidationError("Rating must be between 1 and 5")


class RatingService:

    def __init__(self, notifications=None):
        self.notifications = notifications or get_notification_service()

    def create_rating(self, user, data):
        """
        Rate the other party of an accepted application.

        Checks run in order: score range, declared rater, existing rating,
        application lookup and status, caller and target involvement.
        """
        validate_score(data.get('rating'))

        from_user_id = data.get('from_user_id')
        if from_user_id is not None and from_user_id != user.id:
            raise PermissionDenied("You can only create ratings from your own account")

        application_id = data['application_id']
        if Rating.objects.filter(application_id=application_id).exists():
            raise Conflict("Rating already exists for this application")

        try:
            application = Application.objects.select_related('freelancer', 'company').get(pk=application_id)
        except Application.DoesNotExist:
            raise NotFound("Application not found")

        if application.status != 'ACCEPTED':
            raise ValidationError("Can only rate accepted applications")

        parties = {application.freelancer.user_id, application.company.user_id}
        if user.id not in parties:
            raise PermissionDenied("You can only rate applications you are involved in")

        to_user_id = data['to_user_id']
        if to_user_id not in parties or to_user_id == user.id:
            raise ValidationError("Invalid target user for rating")

        try:
            with transaction.atomic():
                rating = Rating.objects.create(
                    application=application,
                    from_user=user,
                    to_user_id=to_user_id,
                    rating=data['rating'],
                    comment=data.get('comment'),
                )
        except IntegrityError:
            raise Conflict("Rating already exists for this application")

        logger.info(f"Rating {rating.id} created for application {application.id}")
        from_name = f"{user.first_name} {user.last_name}".strip() or user.email
        self.notifications.notify_rating_received(to_user_id, from_name, rating.rating)
        return rating

    def get_rating(self, rating_id):
        try:
            return Rating.objects.select_related('from_user', 'to_user').get(pk=rating_id)
        except Rating.DoesNotExist:
            raise NotFound("Rating not found")

    def update_rating(self, rating_id, user, data):
        rating = self.get_rating(rating_id)
        if rating.from_user_id != user.id:
            raise PermissionDenied("Not authorized to update this rating")

        if 'rating' in data:
            validate_score(data['rating'])
            rating.rating = data['rating']
        if 'comment' in data:
            rating.comment = data['comment']
        rating.save()
        logger.info(f"Rating {rating.id} updated")
        return rating

    def delete_rating(self, rating_id, user):
        rating = self.get_rating(rating_id)
        if rating.from_user_id != user.id:
            raise PermissionDenied("Not authorized to delete this rating")
        rating.delete()
        logger.info(f"Rating {rating_id} deleted")

    def get_user_ratings(self, user):
        return Rating.objects.filter(to_user=user).select_related('from_user', 'to_user').order_by('-created_at')

    def get_user_average_rating(self, user):
        result = Rating.objects.filter(to_user=user).aggregate(average=Avg('rating'), count=Count('id'))
        average = Decimal(str(result['average'])) if result['average'] is not None else Decimal('0')
        return {
            'average': average.quantize(Decimal('0.01')),
            'count': result['count'],
        }

    def search_ratings(self, filters=None):
        filters = filters or RatingFilters()
        queryset = Rating.objects.select_related('from_user', 'to_user')

        if filters.from_user_id is not None:
            queryset = queryset.filter(from_user_id=filters.from_user_id)
        if filters.to_user_id is not None:
            queryset = queryset.filter(to_user_id=filters.to_user_id)
        if filters.application_id is not None:
            queryset = queryset.filter(application_id=filters.application_id)

        return queryset.order_by('-created_at')
