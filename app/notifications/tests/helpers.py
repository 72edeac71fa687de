"""
Shared helpers for notification tests.

Kept out of conftest.py so test modules can import them directly.
"""

import hashlib
import hmac
import json


WEBHOOK_SECRET = "test-webhook-secret"


class FakeExpoResponse:
    """Minimal stand-in for the requests.Response the dispatcher reads."""

    def __init__(self, payload, status_code=200):
        self.status_code = status_code
        self.ok = 200 <= status_code < 300
        self.text = payload if isinstance(payload, str) else json.dumps(payload)

    def json(self):
        return json.loads(self.text)


def expo_response(statuses, status_code=200):
    """Build an Expo response with one ticket per status."""
    return FakeExpoResponse(
        {"data": [{"status": status} for status in statuses]},
        status_code=status_code,
    )


def sent_messages(mock_post, call_index=0):
    """Return the message list passed to a mocked requests.post call."""
    return mock_post.call_args_list[call_index].kwargs["json"]


def sign(body: bytes, secret: str = WEBHOOK_SECRET) -> str:
    return hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()
