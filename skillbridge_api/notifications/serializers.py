from django.conf import settings
from rest_framework import serializers

from .services import NOTIFICATION_TYPES, MAX_PRUNE_DAYS


class NotificationSerializer(serializers.Serializer):
    id = serializers.CharField()
    user_id = serializers.IntegerField()
    type = serializers.ChoiceField(choices=NOTIFICATION_TYPES)
    title = serializers.CharField()
    message = serializers.CharField()
    is_read = serializers.BooleanField()
    created_at = serializers.DateTimeField()
    data = serializers.DictField(allow_null=True, required=False)


class NotificationListQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(required=False, min_value=1, max_value=settings.MAX_PAGE_SIZE)


class ClearOldQuerySerializer(serializers.Serializer):
    days_old = serializers.IntegerField(required=False, min_value=0, max_value=MAX_PRUNE_DAYS)
