"""
In-process notification store.

Notifications live in memory only, keyed by user id, and are lost on
restart. One `NotificationService` is built when the app registry is ready
and handed to the services and views that need it.
"""
import logging
import threading
import uuid
from dataclasses import dataclass, field, asdict
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from django.apps import apps
from django.conf import settings
from django.utils import timezone
from rest_framework.exceptions import NotFound, ValidationError

logger = logging.getLogger(__name__)

APPLICATION_RECEIVED = 'APPLICATION_RECEIVED'
APPLICATION_ACCEPTED = 'APPLICATION_ACCEPTED'
APPLICATION_REJECTED = 'APPLICATION_REJECTED'
MISSION_COMPLETED = 'MISSION_COMPLETED'
RATING_RECEIVED = 'RATING_RECEIVED'
MISSION_UPDATED = 'MISSION_UPDATED'

NOTIFICATION_TYPES = (
    APPLICATION_RECEIVED,
    APPLICATION_ACCEPTED,
    APPLICATION_REJECTED,
    MISSION_COMPLETED,
    RATING_RECEIVED,
    MISSION_UPDATED,
)

# Upper bound for the pruning window; larger values overflow the cutoff date.
MAX_PRUNE_DAYS = 36500


@dataclass
class Notification:
    user_id: int
    type: str
    title: str
    message: str
    id: str = field(default_factory=lambda: f"notif_{uuid.uuid4().hex}")
    is_read: bool = False
    created_at: datetime = field(default_factory=timezone.now)
    data: Optional[Dict[str, Any]] = None

    def to_dict(self):
        return asdict(self)


class NotificationService:

    def __init__(self):
        self._notifications: Dict[int, List[Notification]] = {}
        self._lock = threading.Lock()

    def create_notification(self, user_id, type, title, message, data=None):
        if type not in NOTIFICATION_TYPES:
            raise ValueError(f"Unknown notification type: {type}")

        notification = Notification(user_id=user_id, type=type, title=title, message=message, data=data)
        with self._lock:
            self._notifications.setdefault(user_id, []).append(notification)

        logger.info(f"Notification {notification.id} ({type}) created for user {user_id}")
        return notification

    def get_user_notifications(self, user_id, limit=None):
        if limit is None:
            limit = settings.NOTIFICATION_LIST_LIMIT
        with self._lock:
            notifications = list(reversed(self._notifications.get(user_id, [])))
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[:limit]

    def get_unread_count(self, user_id):
        with self._lock:
            return sum(1 for n in self._notifications.get(user_id, []) if not n.is_read)

    def mark_as_read(self, user_id, notification_id):
        with self._lock:
            notification = self._find(user_id, notification_id)
            notification.is_read = True
        return notification

    def mark_all_as_read(self, user_id):
        with self._lock:
            for notification in self._notifications.get(user_id, []):
                notification.is_read = True

    def delete_notification(self, user_id, notification_id):
        with self._lock:
            notification = self._find(user_id, notification_id)
            self._notifications[user_id].remove(notification)

    def clear_old_notifications(self, user_id, days_old=None):
        """Drop the user's notifications created `days_old` days ago or earlier."""
        if days_old is None:
            days_old = settings.NOTIFICATION_PRUNE_DAYS
        if not 0 <= days_old <= MAX_PRUNE_DAYS:
            raise ValidationError({"days_old": [f"Must be between 0 and {MAX_PRUNE_DAYS}."]})
        cutoff = timezone.now() - timedelta(days=days_old)

        with self._lock:
            if user_id not in self._notifications:
                return 0
            kept = [n for n in self._notifications[user_id] if n.created_at > cutoff]
            removed = len(self._notifications[user_id]) - len(kept)
            self._notifications[user_id] = kept

        if removed:
            logger.info(f"Pruned {removed} notifications older than {days_old} days for user {user_id}")
        return removed

    def _find(self, user_id, notification_id):
        # caller holds the lock
        notifications = self._notifications.get(user_id)
        if notifications is None:
            raise NotFound("No notifications found")
        for notification in notifications:
            if notification.id == notification_id:
                return notification
        raise NotFound("Notification not found")

    def notify_application_received(self, company_user_id, freelancer_name, mission_title):
        return self.create_notification(
            company_user_id,
            APPLICATION_RECEIVED,
            "New Application Received",
            f'{freelancer_name} has applied to your mission: "{mission_title}"',
            {'freelancer_name': freelancer_name, 'mission_title': mission_title},
        )

    def notify_application_accepted(self, freelancer_user_id, company_name, mission_title):
        return self.create_notification(
            freelancer_user_id,
            APPLICATION_ACCEPTED,
            "Application Accepted",
            f'{company_name} has accepted your application for: "{mission_title}"',
            {'company_name': company_name, 'mission_title': mission_title},
        )

    def notify_application_rejected(self, freelancer_user_id, company_name, mission_title):
        return self.create_notification(
            freelancer_user_id,
            APPLICATION_REJECTED,
            "Application Update",
            f'{company_name} has declined your application for: "{mission_title}"',
            {'company_name': company_name, 'mission_title': mission_title},
        )

    def notify_mission_completed(self, freelancer_user_id, company_name, mission_title):
        return self.create_notification(
            freelancer_user_id,
            MISSION_COMPLETED,
            "Mission Completed",
            f'Congratulations! Your mission "{mission_title}" for {company_name} has been completed',
            {'company_name': company_name, 'mission_title': mission_title},
        )

    def notify_rating_received(self, user_id, from_user_name, rating):
        return self.create_notification(
            user_id,
            RATING_RECEIVED,
            "New Rating Received",
            f"{from_user_name} has given you a {rating}-star rating",
            {'from_user_name': from_user_name, 'rating': rating},
        )

    def notify_mission_updated(self, user_id, mission_title, update_type):
        return self.create_notification(
            user_id,
            MISSION_UPDATED,
            "Mission Updated",
            f'Your mission "{mission_title}" has been updated: {update_type}',
            {'mission_title': mission_title, 'update_type': update_type},
        )


def get_notification_service():
    return apps.get_app_config('notifications').service
