from django.urls import path

from . import views as my_views


urlpatterns = [
    path('', my_views.NotificationListAPIView.as_view(), name='notification-list'),
    path('unread-count/', my_views.UnreadCountAPIView.as_view(), name='notification-unread-count'),
    path('mark-all-read/', my_views.MarkAllAsReadAPIView.as_view(), name='notification-mark-all-read'),
    path('clear-old/', my_views.ClearOldNotificationsAPIView.as_view(), name='notification-clear-old'),
    path('<str:notification_id>/read/', my_views.MarkAsReadAPIView.as_view(), name='notification-mark-read'),
    path('<str:notification_id>/', my_views.DeleteNotificationAPIView.as_view(), name='notification-delete'),
]
