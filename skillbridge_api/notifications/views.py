from rest_framework import views as drf_views
from drf_yasg.utils import swagger_auto_schema

from core.responses import success_response
from . import serializers as my_serializers
from .services import get_notification_service


class NotificationServiceMixin:
    notification_service = None

    def get_service(self):
        return self.notification_service or get_notification_service()


class NotificationListAPIView(NotificationServiceMixin, drf_views.APIView):
    """The caller's notifications, newest first. `?limit=` caps the list."""

    @swagger_auto_schema(
        operation_summary="List notifications",
        query_serializer=my_serializers.NotificationListQuerySerializer,
        responses={200: my_serializers.NotificationSerializer(many=True)}
    )
    def get(self, request):
        query = my_serializers.NotificationListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        notifications = self.get_service().get_user_notifications(request.user.id, query.validated_data.get('limit'))
        data = my_serializers.NotificationSerializer([n.to_dict() for n in notifications], many=True).data
        return success_response(data, "Notifications retrieved successfully")


class UnreadCountAPIView(NotificationServiceMixin, drf_views.APIView):

    @swagger_auto_schema(operation_summary="Count unread notifications")
    def get(self, request):
        count = self.get_service().get_unread_count(request.user.id)
        return success_response({'count': count}, "Unread count retrieved successfully")


class MarkAsReadAPIView(NotificationServiceMixin, drf_views.APIView):

    @swagger_auto_schema(operation_summary="Mark a notification as read", responses={200: "Marked", 404: "Not found"})
    def patch(self, request, notification_id):
        self.get_service().mark_as_read(request.user.id, notification_id)
        return success_response(message="Notification marked as read")


class MarkAllAsReadAPIView(NotificationServiceMixin, drf_views.APIView):

    @swagger_auto_schema(operation_summary="Mark all notifications as read")
    def patch(self, request):
        self.get_service().mark_all_as_read(request.user.id)
        return success_response(message="All notifications marked as read")


class DeleteNotificationAPIView(NotificationServiceMixin, drf_views.APIView):

    @swagger_auto_schema(operation_summary="Delete a notification", responses={200: "Deleted", 404: "Not found"})
    def delete(self, request, notification_id):
        self.get_service().delete_notification(request.user.id, notification_id)
        return success_response(message="Notification deleted successfully")


class ClearOldNotificationsAPIView(NotificationServiceMixin, drf_views.APIView):
    """Removes notifications older than `?days_old=` days (default from settings)."""

    @swagger_auto_schema(operation_summary="Clear old notifications", query_serializer=my_serializers.ClearOldQuerySerializer)
    def delete(self, request):
        query = my_serializers.ClearOldQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        removed = self.get_service().clear_old_notifications(request.user.id, query.validated_data.get('days_old'))
        return success_response({'removed': removed}, "Old notifications cleared successfully")
