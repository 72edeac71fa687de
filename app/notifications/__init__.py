"""
Notifications app for push delivery to mobile devices.

This app provides:
- Notification model for in-app notifications written by other subsystems
- Database webhooks that turn inserted notifications and chat messages
  into Expo pushes, filtered by mute state and per-type preferences
- DigestService for rolling recent activity into a single push
- PushService and REST endpoints for caller-composed pushes
- Celery tasks for the scheduled daily digest

Usage:
    from notifications.handlers import NotificationCreatedHandler
    from notifications.types import NotificationEvent

    outcome = NotificationCreatedHandler.handle(
        NotificationEvent(user_id=user.id, type="follow", actor_id=actor.id)
    )
    # Skipped(reason=...) or Dispatched(result=DispatchResult(sent=1, failed=0))
"""
