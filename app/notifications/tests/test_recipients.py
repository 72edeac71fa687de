"""
Tests for RecipientStore lookups.

Tests cover:
- Profile and display name resolution
- Active participants excluding the sender
- Token filtering for profiles
- Unread and followed-post counters with time windows
"""

import uuid
from datetime import timedelta

import pytest
from django.utils import timezone
from freezegun import freeze_time

from authentication.tests.factories import ProfileFactory, UserFactory
from chat.tests.factories import ConversationFactory, ParticipantFactory
from notifications.recipients import RecipientStore
from notifications.tests.factories import NotificationFactory
from notifications.types import Participation
from user_posts.tests.factories import UserFollowFactory, UserPostFactory


pytestmark = pytest.mark.django_db


class TestResolveProfile:
    """Tests for resolve_profile() and resolve_display_name()."""

    def test_returns_profile(self, recipient_profile):
        profile = RecipientStore.resolve_profile(recipient_profile.user_id)

        assert profile == recipient_profile

    def test_unknown_user_returns_none(self):
        assert RecipientStore.resolve_profile(uuid.uuid4()) is None

    def test_display_name(self, actor_profile):
        assert RecipientStore.resolve_display_name(actor_profile.user_id) == "Ana"

    def test_blank_display_name_is_none(self):
        profile = ProfileFactory(display_name="")

        assert RecipientStore.resolve_display_name(profile.user_id) is None

    def test_missing_user_display_name_is_none(self):
        assert RecipientStore.resolve_display_name(uuid.uuid4()) is None
        assert RecipientStore.resolve_display_name(None) is None


class TestResolveParticipants:
    """Tests for resolve_participants()."""

    def test_excludes_sender_and_departed(self):
        conversation = ConversationFactory()
        sender = ParticipantFactory(conversation=conversation)
        muted = ParticipantFactory(conversation=conversation, is_muted=True)
        active = ParticipantFactory(conversation=conversation)
        ParticipantFactory(conversation=conversation, left_at=timezone.now())
        ParticipantFactory()  # another conversation

        participants = RecipientStore.resolve_participants(
            conversation.id, exclude=sender.user_id
        )

        assert sorted(participants, key=lambda p: str(p.user_id)) == sorted(
            [
                Participation(user_id=muted.user_id, is_muted=True),
                Participation(user_id=active.user_id, is_muted=False),
            ],
            key=lambda p: str(p.user_id),
        )

    def test_empty_conversation(self):
        assert RecipientStore.resolve_participants(uuid.uuid4(), exclude=None) == []


class TestResolveProfilesWithTokens:
    """Tests for resolve_profiles_with_tokens()."""

    def test_only_profiles_with_tokens(self):
        with_token = ProfileFactory()
        no_token = ProfileFactory(push_token=None)
        blank_token = ProfileFactory(push_token="")

        profiles = RecipientStore.resolve_profiles_with_tokens(
            [with_token.user_id, no_token.user_id, blank_token.user_id]
        )

        assert profiles == [with_token]

    def test_empty_ids_skip_query(self, django_assert_num_queries):
        with django_assert_num_queries(0):
            assert RecipientStore.resolve_profiles_with_tokens([]) == []


class TestCounters:
    """Tests for count_unread() and count_new_posts_from_followed()."""

    def test_count_unread(self, user):
        NotificationFactory.create_batch(3, user=user)
        NotificationFactory(user=user, is_read=True)
        NotificationFactory()

        assert RecipientStore.count_unread(user.id) == 3

    def test_count_unread_since(self, user):
        with freeze_time("2026-03-01 08:00:00"):
            NotificationFactory(user=user)
        with freeze_time("2026-03-02 08:00:00"):
            NotificationFactory(user=user)
            since = timezone.now() - timedelta(hours=12)

            assert RecipientStore.count_unread(user.id, since=since) == 1

    def test_posts_from_followed_accounts(self, user):
        followed = UserFactory()
        stranger = UserFactory()
        UserFollowFactory(follower=user, following=followed)

        with freeze_time("2026-03-01 07:00:00"):
            UserPostFactory(user=followed)
        with freeze_time("2026-03-02 08:00:00"):
            UserPostFactory.create_batch(2, user=followed)
            UserPostFactory(user=stranger)
            since = timezone.now() - timedelta(hours=24)

            assert RecipientStore.count_new_posts_from_followed(user.id, since) == 2

    def test_following_nobody_skips_posts_query(self, user, django_assert_num_queries):
        UserPostFactory()

        with django_assert_num_queries(1):
            count = RecipientStore.count_new_posts_from_followed(
                user.id, timezone.now() - timedelta(days=1)
            )

        assert count == 0
