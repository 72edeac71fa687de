"""
Tests for notification preference filtering.

Tests cover:
- Default-allow semantics (unset and True preferences pass)
- Explicitly disabled preferences are dropped
- Mute filtering for conversation-scoped events
- Token filtering
- PreferenceGate.apply() reason codes
"""

import uuid

import pytest

from notifications.models import NotificationKind, SkipReason
from notifications.preferences import GateResult, PreferenceGate
from notifications.types import Participation, Recipient


def make_recipient(push_token="ExponentPushToken[a]", is_muted=False, **preferences):
    return Recipient(
        user_id=uuid.uuid4(),
        push_token=push_token,
        preferences=preferences,
        is_muted=is_muted,
    )


class TestIsEnabled:
    """Tests for PreferenceGate.is_enabled()."""

    @pytest.mark.parametrize("value", [None, True])
    def test_unset_or_true_allows(self, value):
        recipient = make_recipient(notify_recipe_like=value)

        assert PreferenceGate.is_enabled(recipient, "like") is True

    def test_absent_column_allows(self):
        assert PreferenceGate.is_enabled(make_recipient(), "like") is True

    def test_explicit_false_disables(self):
        recipient = make_recipient(notify_recipe_like=False)

        assert PreferenceGate.is_enabled(recipient, "like") is False

    def test_other_columns_do_not_matter(self):
        recipient = make_recipient(notify_new_follower=False)

        assert PreferenceGate.is_enabled(recipient, "like") is True

    def test_unknown_kind_is_never_gated(self):
        recipient = make_recipient(**{"notify_recipe_like": False})

        assert PreferenceGate.is_enabled(recipient, "birthday") is True


class TestStages:
    """Tests for the individual gate stages."""

    def test_drop_muted_keeps_order(self):
        a = Participation(user_id=uuid.uuid4(), is_muted=False)
        b = Participation(user_id=uuid.uuid4(), is_muted=True)
        c = Participation(user_id=uuid.uuid4(), is_muted=False)

        assert PreferenceGate.drop_muted([a, b, c]) == [a, c]

    def test_drop_disabled(self):
        allowed = make_recipient(notify_direct_message=None)
        disabled = make_recipient(notify_direct_message=False)

        result = PreferenceGate.drop_disabled(
            [allowed, disabled], NotificationKind.MESSAGE
        )

        assert result == [allowed]

    @pytest.mark.parametrize("token", [None, ""])
    def test_drop_tokenless(self, token):
        reachable = make_recipient()
        unreachable = make_recipient(push_token=token)

        assert PreferenceGate.drop_tokenless([reachable, unreachable]) == [reachable]


class TestApply:
    """Tests for PreferenceGate.apply()."""

    def test_no_candidates(self):
        result = PreferenceGate.apply([], "like")

        assert not result
        assert result.reason == SkipReason.NO_RECIPIENTS

    def test_all_muted_in_conversation(self):
        result = PreferenceGate.apply(
            [make_recipient(is_muted=True)], "message", conversation_scoped=True
        )

        assert result.reason == SkipReason.ALL_MUTED

    def test_mute_ignored_outside_conversations(self):
        recipient = make_recipient(is_muted=True)

        result = PreferenceGate.apply([recipient], "like")

        assert result.recipients == [recipient]

    def test_all_preference_disabled(self):
        result = PreferenceGate.apply([make_recipient(notify_recipe_like=False)], "like")

        assert result.reason == SkipReason.ALL_PREFERENCE_DISABLED

    def test_no_push_tokens(self):
        result = PreferenceGate.apply([make_recipient(push_token=None)], "like")

        assert result.reason == SkipReason.NO_PUSH_TOKENS

    def test_survivors_and_tokens(self):
        keep = make_recipient(push_token="ExponentPushToken[keep]")
        muted = make_recipient(is_muted=True)
        disabled = make_recipient(notify_direct_message=False)

        result = PreferenceGate.apply(
            [keep, muted, disabled], "message", conversation_scoped=True
        )

        assert isinstance(result, GateResult)
        assert result
        assert result.reason is None
        assert result.tokens == ["ExponentPushToken[keep]"]

    def test_disabled_recipient_never_survives(self):
        """A recipient with the column set to False is dropped for every mix."""
        disabled = make_recipient(notify_mention=False)
        others = [make_recipient() for _ in range(3)]

        result = PreferenceGate.apply(others + [disabled], "mention")

        assert disabled not in result.recipients
        assert len(result.recipients) == 3
