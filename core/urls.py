"""URL routing configuration for core application."""

from django.urls import path

from .views import (
    LivenessCheckView,
    MessageDetailView,
    MessageListView,
    MessageReadView,
    MessageUnreadCountView,
    ReadinessCheckView,
)

urlpatterns = [
    # Health check endpoints
    path("health/live", LivenessCheckView.as_view(), name="health-live"),
    path("health/ready", ReadinessCheckView.as_view(), name="health-ready"),
    # Message endpoints (specific routes before generic)
    path("messages", MessageListView.as_view(), name="message-list"),
    path("messages/read", MessageReadView.as_view(), name="message-read"),
    path(
        "messages/unread",
        MessageUnreadCountView.as_view(),
        name="message-unread-count",
    ),
    path(
        "messages/<int:message_id>",
        MessageDetailView.as_view(),
        name="message-detail",
    ),
]
