"""
Test configuration and fixtures for notification tests.

This module provides:
- Profiles with and without push tokens
- A mocked Expo push endpoint (requests.post)
- Signed webhook requests
- API client helpers for authenticated requests

Usage:
    def test_example(recipient_profile, mock_expo):
        NotificationCreatedHandler.handle(
            NotificationEvent(user_id=recipient_profile.user_id, type="like")
        )
        assert mock_expo.call_count == 1
"""

import json

import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from authentication.tests.factories import ProfileFactory, UserFactory
from notifications.tests.helpers import WEBHOOK_SECRET, expo_response, sign


# =============================================================================
# Settings
# =============================================================================


@pytest.fixture(autouse=True)
def push_settings(settings):
    """Pin push settings so tests never depend on the environment."""
    settings.EXPO_PUSH_URL = "https://exp.host/--/api/v2/push/send"
    settings.EXPO_ACCESS_TOKEN = ""
    settings.PUSH_API_TIMEOUT_SECONDS = 5
    settings.PUSH_APP_NAME = "KitchenSync"
    settings.DATABASE_WEBHOOK_SECRET = WEBHOOK_SECRET
    settings.DIGEST_WINDOW_HOURS = 24
    return settings


# =============================================================================
# User Fixtures
# =============================================================================


@pytest.fixture
def user(db):
    """Create a basic user (profile without push token)."""
    return UserFactory()


@pytest.fixture
def recipient_profile(db):
    """Profile with a push token and all preferences unset."""
    return ProfileFactory(
        display_name="Riley",
        push_token="ExponentPushToken[recipient]",
    )


@pytest.fixture
def actor_profile(db):
    """Profile of the user who triggers notifications."""
    return ProfileFactory(display_name="Ana", push_token=None)


# =============================================================================
# Push provider
# =============================================================================


@pytest.fixture
def mock_expo(mocker):
    """
    Patch requests.post in the dispatcher.

    Every call answers with one "ok" ticket per message sent.
    """

    def _respond(url, json=None, headers=None, timeout=None):
        return expo_response(["ok"] * len(json))

    return mocker.patch("notifications.push.requests.post", side_effect=_respond)


# =============================================================================
# API clients
# =============================================================================


@pytest.fixture
def api_client():
    """Unauthenticated API client."""
    return APIClient()


@pytest.fixture
def authenticated_client(user):
    """API client authenticated with JWT token for the default user fixture."""
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {refresh.access_token}")
    return client


@pytest.fixture
def post_webhook(api_client):
    """
    POST a JSON payload to a webhook with a valid signature.

    Usage:
        response = post_webhook(url, {"record": {...}})
        response = post_webhook(url, payload, signature="bad")
        response = post_webhook(url, b"raw body")  # bytes are sent as-is
    """

    def _post(url, payload, signature=None):
        if isinstance(payload, bytes):
            body = payload
        else:
            body = json.dumps(payload).encode("utf-8")
        return api_client.post(
            url,
            data=body,
            content_type="application/json",
            HTTP_X_WEBHOOK_SIGNATURE=sign(body) if signature is None else signature,
        )

    return _post
