"""
Celery configuration for the Django application.

Celery runs the scheduled digest work:
- send_daily_digests fans out one digest task per reachable user
- send_digest_notification sends a single user's digest

This configuration uses Redis as both the message broker and result backend.
Tasks are auto-discovered from all installed Django apps, and the beat
schedule lives in settings.CELERY_BEAT_SCHEDULE.

Usage:
    # Run a worker and the beat scheduler:
    celery -A config worker -l info
    celery -A config beat -l info

    # Send one digest in the background:
    from notifications.tasks import send_digest_notification
    send_digest_notification.delay(str(user.id))

For more information, see:
https://docs.celeryq.dev/en/stable/django/first-steps-with-django.html
"""

import os

from celery import Celery

# Set the default Django settings module for the Celery worker
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

# Create Celery application instance
# The name should match the Django project name
app = Celery("config")

# Load configuration from Django settings
# All Celery settings should be prefixed with CELERY_ in settings.py
app.config_from_object("django.conf:settings", namespace="CELERY")

# Auto-discover tasks from all registered Django apps
# Celery will look for a tasks.py module in each installed app
app.autodiscover_tasks()
