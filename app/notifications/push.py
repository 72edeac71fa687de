"""
Expo push API client.

PushDispatcher sends one batch of push messages to the Expo push service
and reduces the response to sent/failed counts. Provider problems are
never raised: they are logged and reported as failed deliveries.

Configuration:
    Set in settings.py:
    - EXPO_PUSH_URL: Push endpoint (default https://exp.host/--/api/v2/push/send)
    - EXPO_ACCESS_TOKEN: Optional bearer token for enhanced push security
    - PUSH_API_TIMEOUT_SECONDS: Request timeout

Usage:
    from notifications.push import PushDispatcher

    result = PushDispatcher.dispatch(
        ["ExponentPushToken[abc]"],
        title="KitchenSync",
        body="Ana liked your recipe",
        data={"type": "like"},
    )
    # DispatchResult(sent=1, failed=0)
"""

from __future__ import annotations

from typing import Any, Iterable

import requests
from django.conf import settings

from core.services import BaseService

from notifications.types import DispatchResult


DEFAULT_EXPO_PUSH_URL = "https://exp.host/--/api/v2/push/send"
DEFAULT_TIMEOUT_SECONDS = 10


def build_messages(
    tokens: list[str],
    title: str,
    body: str,
    data: dict[str, Any] | None = None,
) -> list[dict[str, Any]]:
    """Build one Expo message per token, all sharing the same content."""
    return [
        {
            "to": token,
            "sound": "default",
            "title": title,
            "body": body,
            "data": data or {},
        }
        for token in tokens
    ]


class PushDispatcher(BaseService):
    """Sends push batches to the Expo push service."""

    @staticmethod
    def _headers() -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Accept-Encoding": "gzip, deflate",
            "Content-Type": "application/json",
        }
        access_token = getattr(settings, "EXPO_ACCESS_TOKEN", "")
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        return headers

    @classmethod
    def dispatch(
        cls,
        tokens: Iterable[str],
        title: str,
        body: str,
        data: dict[str, Any] | None = None,
    ) -> DispatchResult:
        """
        Send a push to every token in a single provider call.

        Args:
            tokens: Expo push tokens
            title: Notification title
            body: Notification body
            data: Payload delivered to the app (defaults to {})

        Returns:
            DispatchResult where sent + failed == len(tokens)
        """
        logger = cls.get_logger()
        tokens = list(tokens)
        if not tokens:
            return DispatchResult(sent=0, failed=0)

        all_failed = DispatchResult(sent=0, failed=len(tokens))
        url = getattr(settings, "EXPO_PUSH_URL", DEFAULT_EXPO_PUSH_URL)
        timeout = getattr(settings, "PUSH_API_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)

        try:
            response = requests.post(
                url,
                json=build_messages(tokens, title, body, data),
                headers=cls._headers(),
                timeout=timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Push request to {url} failed: {e}")
            return all_failed

        if not response.ok:
            logger.error(
                f"Push service returned HTTP {response.status_code}: {response.text[:200]}"
            )
            return all_failed

        try:
            payload = response.json()
        except ValueError:
            logger.error("Push service returned an unparseable response body")
            return all_failed

        tickets = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(tickets, list):
            logger.error("Push service response has no ticket list")
            return all_failed

        # Only one ticket per token counts; missing tickets are failures
        tickets = tickets[: len(tokens)]
        sent = sum(
            1
            for ticket in tickets
            if isinstance(ticket, dict) and ticket.get("status") == "ok"
        )
        result = DispatchResult(sent=sent, failed=len(tokens) - sent)

        if result.failed:
            errors = [
                ticket.get("message")
                for ticket in tickets
                if isinstance(ticket, dict) and ticket.get("status") != "ok"
            ]
            logger.warning(
                f"Push delivered {result.sent}/{len(tokens)}, ticket errors: {errors}"
            )
        else:
            logger.info(f"Push delivered to {result.sent} device(s)")

        return result
