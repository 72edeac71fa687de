"""
Tests for the scheduled digest Celery tasks.

Tasks are called directly (synchronously); enqueueing is mocked.
"""

import pytest

from authentication.tests.factories import ProfileFactory, UserFactory
from notifications.tasks import send_daily_digests, send_digest_notification
from notifications.tests.factories import NotificationFactory


pytestmark = pytest.mark.django_db


class TestSendDigestNotification:
    """Tests for send_digest_notification."""

    def test_returns_serialized_outcome(self, recipient_profile, mock_expo):
        NotificationFactory(user=recipient_profile.user)

        assert send_digest_notification(str(recipient_profile.user_id)) == {
            "sent": 1,
            "failed": 0,
        }

    def test_no_unread(self, recipient_profile, mock_expo):
        assert send_digest_notification(str(recipient_profile.user_id)) == {
            "sent": False,
            "reason": "no_unread",
        }

    def test_no_token(self, user, mock_expo):
        assert send_digest_notification(str(user.id)) == {
            "error": "No push token for user",
            "error_code": "NO_PUSH_TOKEN",
        }


class TestSendDailyDigests:
    """Tests for send_daily_digests."""

    def test_enqueues_active_users_with_tokens(self, mocker):
        mock_delay = mocker.patch("notifications.tasks.send_digest_notification.delay")
        reachable = ProfileFactory()
        ProfileFactory(push_token=None)
        ProfileFactory(push_token="")
        ProfileFactory(user=UserFactory(is_active=False))

        count = send_daily_digests()

        assert count == 1
        mock_delay.assert_called_once_with(str(reachable.user_id))
