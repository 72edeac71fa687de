"""
Views for the authenticated push API.

Views:
    DigestView: Send an activity digest to a user
    PushView: Send a caller-composed push to one user
    BatchPushView: Send a caller-composed push to several users

Endpoints:
    POST /api/v1/notifications/digest/ - Send digest
    POST /api/v1/notifications/push/ - Push to one user
    POST /api/v1/notifications/push/batch/ - Push to many users

All endpoints require JWT authentication. The database webhooks live in
notifications.webhooks.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_spectacular.utils import extend_schema, OpenApiResponse

from notifications.digest import DigestService
from notifications.serializers import (
    BatchPushRequestSerializer,
    DigestRequestSerializer,
    DispatchResponseSerializer,
    ErrorResponseSerializer,
    PushRequestSerializer,
)
from notifications.services import PushService


def _invalid_payload(serializer) -> Response:
    return Response(
        {"error": "Invalid payload", "details": serializer.errors},
        status=status.HTTP_400_BAD_REQUEST,
    )


class DigestView(APIView):
    """Send a digest of the last day's activity to a user."""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="send_digest",
        summary="Send activity digest",
        description=(
            "Roll unread notifications and new posts from followed accounts "
            "over the digest window into one push. Returns "
            "{sent: false, reason: 'no_unread'} without sending when there "
            "are no unread notifications."
        ),
        request=DigestRequestSerializer,
        responses={
            200: OpenApiResponse(description="Digest outcome"),
            400: OpenApiResponse(
                response=ErrorResponseSerializer,
                description="Invalid request payload",
            ),
            404: OpenApiResponse(
                response=ErrorResponseSerializer,
                description="User has no push token",
            ),
        },
        tags=["Notifications - Push"],
    )
    def post(self, request):
        serializer = DigestRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return _invalid_payload(serializer)

        result = DigestService.send_digest(serializer.validated_data["userId"])
        if not result:
            return Response(
                {"error": result.error},
                status=status.HTTP_404_NOT_FOUND,
            )

        return Response({"data": result.data.to_dict()})


class PushView(APIView):
    """Send a push to one user."""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="send_push",
        summary="Push to user",
        description="Send a caller-composed push to a single user's device.",
        request=PushRequestSerializer,
        responses={
            200: DispatchResponseSerializer,
            400: OpenApiResponse(
                response=ErrorResponseSerializer,
                description="Invalid request payload",
            ),
            404: OpenApiResponse(
                response=ErrorResponseSerializer,
                description="User has no push token",
            ),
        },
        tags=["Notifications - Push"],
    )
    def post(self, request):
        serializer = PushRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return _invalid_payload(serializer)

        data = serializer.validated_data
        result = PushService.send_to_user(
            data["userId"],
            data["title"],
            data["body"],
            data.get("data"),
        )
        if not result:
            return Response(
                {"error": result.error},
                status=status.HTTP_404_NOT_FOUND,
            )

        return Response({"data": result.data.to_dict()})


class BatchPushView(APIView):
    """Send the same push to several users."""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="send_batch_push",
        summary="Push to users",
        description=(
            "Send a caller-composed push to every listed user that has a push "
            "token, in a single provider call."
        ),
        request=BatchPushRequestSerializer,
        responses={
            200: DispatchResponseSerializer,
            400: OpenApiResponse(
                response=ErrorResponseSerializer,
                description="Invalid request payload",
            ),
        },
        tags=["Notifications - Push"],
    )
    def post(self, request):
        serializer = BatchPushRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return _invalid_payload(serializer)

        data = serializer.validated_data
        result = PushService.send_to_users(
            data["userIds"],
            data["title"],
            data["body"],
            data.get("data"),
        )
        return Response({"data": result.data.to_dict()})
