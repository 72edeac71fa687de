"""
Tests for the database webhook endpoints.

Tests cover:
- Signature verification (missing, wrong, unconfigured secret)
- Envelope and bare records handled identically
- Skip responses with HTTP 200, including non-JSON bodies
- Unexpected handler exceptions mapped to HTTP 500
"""

import pytest
from django.urls import reverse
from rest_framework import status

from chat.tests.factories import ConversationFactory, ParticipantFactory
from authentication.tests.factories import ProfileFactory


pytestmark = pytest.mark.django_db


NOTIFICATION_URL = reverse("notifications:notification-created-webhook")
MESSAGE_URL = reverse("notifications:message-created-webhook")


class TestSignature:
    """Signature verification for both webhooks."""

    @pytest.mark.parametrize("url", [NOTIFICATION_URL, MESSAGE_URL])
    def test_wrong_signature_rejected(self, post_webhook, url, mock_expo):
        response = post_webhook(url, {"record": {}}, signature="0" * 64)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data == {"error": "Invalid signature"}
        mock_expo.assert_not_called()

    def test_missing_signature_rejected(self, api_client):
        response = api_client.post(NOTIFICATION_URL, {"record": {}}, format="json")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_unconfigured_secret_rejects_everything(self, post_webhook, settings):
        settings.DATABASE_WEBHOOK_SECRET = ""

        response = post_webhook(NOTIFICATION_URL, {"record": {}})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_non_ascii_signature_rejected(self, post_webhook, mock_expo):
        response = post_webhook(
            NOTIFICATION_URL, {"record": {}}, signature="\u00e9" * 64
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data == {"error": "Invalid signature"}
        mock_expo.assert_not_called()

    def test_get_not_allowed(self, api_client):
        response = api_client.get(NOTIFICATION_URL)

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED


class TestNotificationCreatedWebhook:
    """Tests for POST /api/v1/notifications/webhooks/notification-created/."""

    def test_envelope_and_bare_record_are_equivalent(
        self, post_webhook, recipient_profile, actor_profile, mock_expo
    ):
        record = {
            "id": 42,
            "user_id": str(recipient_profile.user_id),
            "type": "like",
            "actor_id": str(actor_profile.user_id),
            "target_id": "recipe-1",
            "target_type": "recipe",
            "is_read": False,
        }

        wrapped = post_webhook(
            NOTIFICATION_URL,
            {"type": "INSERT", "table": "notifications", "record": record},
        )
        bare = post_webhook(NOTIFICATION_URL, record)

        assert wrapped.status_code == status.HTTP_200_OK
        assert wrapped.data == bare.data == {"data": {"sent": 1, "failed": 0}}
        assert mock_expo.call_count == 2
        assert (
            mock_expo.call_args_list[0].kwargs["json"]
            == mock_expo.call_args_list[1].kwargs["json"]
        )

    def test_missing_user_id_is_a_skip(self, post_webhook, mock_expo):
        response = post_webhook(NOTIFICATION_URL, {"record": {"type": "like"}})

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {"skipped": True, "reason": "no user_id"}

    def test_malformed_record_is_a_skip(self, post_webhook, mock_expo):
        response = post_webhook(
            NOTIFICATION_URL, {"record": {"user_id": "not-a-uuid", "type": "like"}}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {"skipped": True, "reason": "invalid_record"}
        mock_expo.assert_not_called()

    def test_non_object_payload_is_a_skip(self, post_webhook, mock_expo):
        response = post_webhook(NOTIFICATION_URL, ["not", "a", "record"])

        assert response.status_code == status.HTTP_200_OK
        assert response.data["skipped"] is True

    def test_non_json_body_is_a_skip(self, post_webhook, mock_expo):
        response = post_webhook(NOTIFICATION_URL, b"{not json")

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {"skipped": True, "reason": "invalid_record"}
        mock_expo.assert_not_called()

    def test_long_unknown_type_uses_fallback(
        self, post_webhook, recipient_profile, mock_expo
    ):
        response = post_webhook(
            NOTIFICATION_URL,
            {"record": {"user_id": str(recipient_profile.user_id), "type": "x" * 60}},
        )

        assert response.data == {"data": {"sent": 1, "failed": 0}}
        [message] = mock_expo.call_args.kwargs["json"]
        assert message["body"] == "Someone sent you a notification"

    def test_preference_disabled_is_a_skip(self, post_webhook, mock_expo):
        profile = ProfileFactory(notify_new_follower=False)

        response = post_webhook(
            NOTIFICATION_URL,
            {"record": {"user_id": str(profile.user_id), "type": "follow"}},
        )

        assert response.data == {"skipped": True, "reason": "user_preference_disabled"}
        mock_expo.assert_not_called()

    def test_unexpected_error_returns_500(self, post_webhook, recipient_profile, mocker):
        mocker.patch(
            "notifications.handlers.RecipientStore.resolve_profile",
            side_effect=RuntimeError("database went away"),
        )

        response = post_webhook(
            NOTIFICATION_URL,
            {"record": {"user_id": str(recipient_profile.user_id), "type": "like"}},
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {"error": "Internal server error"}


class TestMessageCreatedWebhook:
    """Tests for POST /api/v1/notifications/webhooks/message-created/."""

    def test_pushes_to_other_participants(self, post_webhook, mock_expo):
        conversation = ConversationFactory()
        sender = ProfileFactory(display_name="Sam")
        recipient = ProfileFactory()
        ParticipantFactory(conversation=conversation, user=sender.user)
        ParticipantFactory(conversation=conversation, user=recipient.user)

        response = post_webhook(
            MESSAGE_URL,
            {
                "type": "INSERT",
                "record": {
                    "id": "6f1c1a4e-8d5b-4f7e-9a53-1d2b3c4d5e6f",
                    "conversation_id": str(conversation.id),
                    "sender_id": str(sender.user_id),
                    "content": "  Table for two?  ",
                    "message_type": "text",
                },
            },
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {"data": {"sent": 1, "failed": 0}}
        [message] = mock_expo.call_args.kwargs["json"]
        assert message["to"] == recipient.push_token
        assert message["title"] == "Sam"
        assert message["body"] == "  Table for two?  "

    def test_non_json_body_is_a_skip(self, post_webhook, mock_expo):
        response = post_webhook(MESSAGE_URL, b"{not json")

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {"skipped": True, "reason": "invalid_record"}
        mock_expo.assert_not_called()

    def test_missing_fields_is_a_skip(self, post_webhook, mock_expo):
        response = post_webhook(MESSAGE_URL, {"record": {"content": "hi"}})

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {"skipped": True, "reason": "missing fields"}
        mock_expo.assert_not_called()

    def test_unexpected_error_returns_500(self, post_webhook, mocker):
        mocker.patch(
            "notifications.handlers.RecipientStore.resolve_participants",
            side_effect=RuntimeError("boom"),
        )

        response = post_webhook(
            MESSAGE_URL,
            {
                "record": {
                    "conversation_id": "6f1c1a4e-8d5b-4f7e-9a53-1d2b3c4d5e6f",
                    "sender_id": "0b7e2f7c-3c1d-4b8e-a2f1-9e8d7c6b5a41",
                }
            },
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {"error": "Internal server error"}
