"""
Database webhook endpoints for the push pipeline.

The database fires these webhooks after rows are inserted into the
notification and message tables. Each request is verified, parsed into
an event and handed to the matching handler.

Endpoints:
    POST /api/v1/notifications/webhooks/notification-created/
    POST /api/v1/notifications/webhooks/message-created/

Request body:
    Either the row wrapped in an envelope ({"type": "INSERT", "record": {...}})
    or the bare row itself. Both are handled identically.

Responses:
    200 {"skipped": true, "reason": ...} - no push was needed
    200 {"data": {"sent": n, "failed": m}} - provider was called
    401 {"error": "Invalid signature"} - signature check failed
    500 {"error": "Internal server error"} - unexpected failure

Security:
    - Requests carry an HMAC-SHA256 signature of the raw body in the
      X-Webhook-Signature header
    - Signatures are validated against DATABASE_WEBHOOK_SECRET
    - Invalid signatures return 401 Unauthorized

Usage:
    # In urls.py
    from notifications.webhooks import MessageCreatedWebhookView

    urlpatterns = [
        path(
            "webhooks/message-created/",
            MessageCreatedWebhookView.as_view(),
            name="message-created-webhook",
        ),
    ]
"""

from __future__ import annotations

import hashlib
import hmac
import logging
from collections.abc import Mapping
from typing import Any

from django.conf import settings

from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_spectacular.utils import extend_schema, OpenApiResponse, PolymorphicProxySerializer

from notifications.handlers import MessageCreatedHandler, NotificationCreatedHandler
from notifications.models import SkipReason
from notifications.serializers import (
    DispatchResponseSerializer,
    ErrorResponseSerializer,
    MessageRecordSerializer,
    NotificationRecordSerializer,
    SkipResponseSerializer,
)
from notifications.types import Skipped


logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Webhook-Signature"


# =============================================================================
# Helper Functions
# =============================================================================


def _verify_signature(
    payload: bytes,
    signature: str,
    secret: str,
) -> bool:
    """
    Verify HMAC-SHA256 signature.

    Args:
        payload: Raw request body
        signature: Hex digest from the request header
        secret: Shared secret for HMAC

    Returns:
        True if signature is valid
    """
    if not secret:
        logger.warning("Webhook secret not configured, rejecting request")
        return False

    expected = hmac.new(
        secret.encode("utf-8"),
        payload,
        hashlib.sha256,
    ).hexdigest()

    # Header values may carry non-ASCII characters; compare as bytes
    return hmac.compare_digest(
        expected.encode("utf-8"),
        signature.encode("utf-8", "ignore"),
    )


def unwrap_record(payload: Any) -> Any:
    """Return the inserted row from a webhook envelope, or the payload itself."""
    if isinstance(payload, Mapping) and isinstance(payload.get("record"), Mapping):
        return payload["record"]
    return payload


_webhook_responses = {
    200: PolymorphicProxySerializer(
        component_name="WebhookOutcome",
        serializers=[SkipResponseSerializer, DispatchResponseSerializer],
        resource_type_field_name=None,
    ),
    401: OpenApiResponse(
        response=ErrorResponseSerializer,
        description="Invalid or missing signature",
    ),
    500: OpenApiResponse(
        response=ErrorResponseSerializer,
        description="Unexpected failure while handling the event",
    ),
}


# =============================================================================
# Webhook Views
# =============================================================================


class RowInsertWebhookView(APIView):
    """
    Base view for row-insert webhooks.

    Subclasses set record_serializer_class and handler.
    """

    permission_classes = [AllowAny]
    authentication_classes = []  # No auth required - signature-based validation

    record_serializer_class = None
    handler = None

    def process(self, request):
        signature = request.headers.get(SIGNATURE_HEADER, "")
        secret = getattr(settings, "DATABASE_WEBHOOK_SECRET", "")

        if not _verify_signature(request.body, signature, secret):
            logger.warning(f"{self.__class__.__name__} signature verification failed")
            return Response(
                {"error": "Invalid signature"},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        try:
            record = unwrap_record(request.data)
        except ParseError as exc:
            logger.info(f"{self.__class__.__name__} received a non-JSON body: {exc}")
            return Response(Skipped(SkipReason.INVALID_RECORD).to_response())

        serializer = self.record_serializer_class(data=record)
        if not serializer.is_valid():
            logger.info(
                f"{self.__class__.__name__} received an unparseable record: "
                f"{serializer.errors}"
            )
            return Response(Skipped(SkipReason.INVALID_RECORD).to_response())

        try:
            outcome = self.handler.handle(serializer.to_event())
        except Exception:
            logger.exception(f"{self.handler.__name__} failed for record {record!r}")
            return Response(
                {"error": "Internal server error"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(outcome.to_response())


class NotificationCreatedWebhookView(RowInsertWebhookView):
    """Pushes newly inserted notifications to the recipient's device."""

    record_serializer_class = NotificationRecordSerializer
    handler = NotificationCreatedHandler

    @extend_schema(
        operation_id="notification_created_webhook",
        summary="Notification inserted",
        description=(
            "Database webhook fired after a notification row is inserted. "
            "Requires HMAC-SHA256 signature verification using the "
            "X-Webhook-Signature header."
        ),
        request=NotificationRecordSerializer,
        responses=_webhook_responses,
        tags=["Notifications - Webhooks"],
    )
    def post(self, request):
        """Handle a notification-created event."""
        return self.process(request)


class MessageCreatedWebhookView(RowInsertWebhookView):
    """Pushes newly inserted chat messages to the other participants."""

    record_serializer_class = MessageRecordSerializer
    handler = MessageCreatedHandler

    @extend_schema(
        operation_id="message_created_webhook",
        summary="Message inserted",
        description=(
            "Database webhook fired after a chat message row is inserted. "
            "Requires HMAC-SHA256 signature verification using the "
            "X-Webhook-Signature header."
        ),
        request=MessageRecordSerializer,
        responses=_webhook_responses,
        tags=["Notifications - Webhooks"],
    )
    def post(self, request):
        """Handle a message-created event."""
        return self.process(request)
