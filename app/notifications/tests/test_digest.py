"""
Tests for DigestService.

Tests cover:
- No token -> NO_PUSH_TOKEN failure
- Zero unread notifications -> no provider call
- Digest phrasing and the trailing window
"""

import uuid

import pytest
from freezegun import freeze_time

from authentication.tests.factories import UserFactory
from notifications.digest import DigestService
from notifications.tests.factories import NotificationFactory
from notifications.tests.helpers import sent_messages
from notifications.types import DispatchResult
from user_posts.tests.factories import UserFollowFactory, UserPostFactory


pytestmark = pytest.mark.django_db


class TestSendDigest:
    """Tests for DigestService.send_digest()."""

    def test_no_token_is_a_failure(self, user, mock_expo):
        result = DigestService.send_digest(user.id)

        assert not result
        assert result.error == "No push token for user"
        assert result.error_code == "NO_PUSH_TOKEN"
        mock_expo.assert_not_called()

    def test_unknown_user_is_a_failure(self, mock_expo):
        result = DigestService.send_digest(uuid.uuid4())

        assert result.error_code == "NO_PUSH_TOKEN"

    def test_zero_unread_never_calls_provider(self, recipient_profile, mock_expo):
        followed = UserFactory()
        UserFollowFactory(follower=recipient_profile.user, following=followed)
        UserPostFactory(user=followed)

        result = DigestService.send_digest(recipient_profile.user_id)

        assert result.success
        assert result.data.to_dict() == {"sent": False, "reason": "no_unread"}
        mock_expo.assert_not_called()

    def test_unread_only_digest(self, recipient_profile, mock_expo):
        NotificationFactory.create_batch(5, user=recipient_profile.user)

        result = DigestService.send_digest(recipient_profile.user_id)

        assert result.data.result == DispatchResult(sent=1, failed=0)
        assert result.data.to_dict() == {"sent": 1, "failed": 0}
        [message] = sent_messages(mock_expo)
        assert message["title"] == "KitchenSync"
        assert message["body"] == "5 new notifications"
        assert message["data"] == {"type": "digest"}

    def test_includes_posts_from_followed_accounts(self, recipient_profile, mock_expo):
        followed = UserFactory()
        UserFollowFactory(follower=recipient_profile.user, following=followed)
        NotificationFactory(user=recipient_profile.user)
        UserPostFactory.create_batch(2, user=followed)

        result = DigestService.send_digest(recipient_profile.user_id)

        assert result.data.unread_count == 1
        assert result.data.new_post_count == 2
        assert sent_messages(mock_expo)[0]["body"] == (
            "1 new notification and 2 new posts from people you follow"
        )

    def test_read_and_old_notifications_are_ignored(self, recipient_profile, mock_expo):
        with freeze_time("2026-03-01 08:00:00"):
            NotificationFactory(user=recipient_profile.user)
        with freeze_time("2026-03-03 08:00:00"):
            NotificationFactory(user=recipient_profile.user, is_read=True)

            result = DigestService.send_digest(recipient_profile.user_id)

        assert result.data.to_dict() == {"sent": False, "reason": "no_unread"}
        mock_expo.assert_not_called()

    def test_window_follows_setting(self, recipient_profile, mock_expo, settings):
        settings.DIGEST_WINDOW_HOURS = 72
        with freeze_time("2026-03-01 08:00:00"):
            NotificationFactory(user=recipient_profile.user)
        with freeze_time("2026-03-03 08:00:00"):
            result = DigestService.send_digest(recipient_profile.user_id)

        assert result.data.unread_count == 1
