"""
Serializers for the notification push API.

This module provides DRF serializers for the webhook records and the
authenticated push endpoints.

Serializers:
    NotificationRecordSerializer: notification-created webhook record
    MessageRecordSerializer: message-created webhook record
    DigestRequestSerializer: Digest request body
    PushRequestSerializer: Single-user push request body
    BatchPushRequestSerializer: Multi-user push request body
    DispatchResultSerializer: {sent, failed} counts
    SkipResponseSerializer: {skipped, reason} webhook response
    ErrorResponseSerializer: {error} response

Usage:
    from notifications.serializers import NotificationRecordSerializer

    serializer = NotificationRecordSerializer(data=record)
    if serializer.is_valid():
        event = serializer.to_event()
"""

from __future__ import annotations

from rest_framework import serializers

from notifications.types import MessageEvent, NotificationEvent


# =============================================================================
# Webhook records
# =============================================================================


class NotificationRecordSerializer(serializers.Serializer):
    """
    Inserted notification row.

    Every field is optional here; a missing user_id is a handler skip,
    not a validation error.
    """

    user_id = serializers.UUIDField(required=False, allow_null=True)
    type = serializers.CharField(
        required=False,
        allow_null=True,
        allow_blank=True,
    )
    actor_id = serializers.UUIDField(required=False, allow_null=True)
    target_id = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    target_type = serializers.CharField(
        required=False,
        allow_null=True,
        allow_blank=True,
    )

    def to_event(self) -> NotificationEvent:
        data = self.validated_data
        return NotificationEvent(
            user_id=data.get("user_id"),
            type=data.get("type") or "",
            actor_id=data.get("actor_id"),
            target_id=data.get("target_id"),
            target_type=data.get("target_type"),
        )


class MessageRecordSerializer(serializers.Serializer):
    """Inserted message row."""

    id = serializers.UUIDField(required=False, allow_null=True)
    conversation_id = serializers.UUIDField(required=False, allow_null=True)
    sender_id = serializers.UUIDField(required=False, allow_null=True)
    content = serializers.CharField(
        required=False,
        allow_null=True,
        allow_blank=True,
        trim_whitespace=False,
    )
    message_type = serializers.CharField(
        required=False,
        allow_null=True,
        allow_blank=True,
        max_length=30,
    )

    def to_event(self) -> MessageEvent:
        data = self.validated_data
        return MessageEvent(
            conversation_id=data.get("conversation_id"),
            sender_id=data.get("sender_id"),
            content=data.get("content") or "",
            message_type=data.get("message_type") or "text",
            message_id=data.get("id"),
        )


# =============================================================================
# Push endpoints
# =============================================================================


class DigestRequestSerializer(serializers.Serializer):
    """Request body for the digest endpoint."""

    userId = serializers.UUIDField(help_text="User to send the digest to")


class PushRequestSerializer(serializers.Serializer):
    """Request body for a single-user push."""

    userId = serializers.UUIDField(help_text="Recipient user ID")
    title = serializers.CharField(max_length=255)
    body = serializers.CharField()
    data = serializers.DictField(required=False, help_text="Payload for the app")


class BatchPushRequestSerializer(serializers.Serializer):
    """Request body for a multi-user push."""

    userIds = serializers.ListField(
        child=serializers.UUIDField(),
        allow_empty=True,
        help_text="Recipient user IDs",
    )
    title = serializers.CharField(max_length=255)
    body = serializers.CharField()
    data = serializers.DictField(required=False, help_text="Payload for the app")


# =============================================================================
# Responses (schema only)
# =============================================================================


class DispatchResultSerializer(serializers.Serializer):
    """Provider outcome counts."""

    sent = serializers.IntegerField()
    failed = serializers.IntegerField()


class DispatchResponseSerializer(serializers.Serializer):
    data = DispatchResultSerializer()


class SkipResponseSerializer(serializers.Serializer):
    """Webhook response when no push was sent."""

    skipped = serializers.BooleanField(default=True)
    reason = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField(help_text="Error description")
