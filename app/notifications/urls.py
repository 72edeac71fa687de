"""
URL configuration for notifications API.

Routes:
    Push:
        /digest/                          - Send activity digest (POST)
        /push/                            - Push to one user (POST)
        /push/batch/                      - Push to many users (POST)

    Webhooks:
        /webhooks/notification-created/   - Notification row inserted (POST)
        /webhooks/message-created/        - Message row inserted (POST)
"""

from django.urls import path

from notifications.views import BatchPushView, DigestView, PushView
from notifications.webhooks import (
    MessageCreatedWebhookView,
    NotificationCreatedWebhookView,
)

app_name = "notifications"
urlpatterns = [
    path("digest/", DigestView.as_view(), name="digest"),
    path("push/", PushView.as_view(), name="push"),
    path("push/batch/", BatchPushView.as_view(), name="push-batch"),
    path(
        "webhooks/notification-created/",
        NotificationCreatedWebhookView.as_view(),
        name="notification-created-webhook",
    ),
    path(
        "webhooks/message-created/",
        MessageCreatedWebhookView.as_view(),
        name="message-created-webhook",
    ),
]
