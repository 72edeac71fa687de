"""
Model mixins providing reusable functionality for Django models.

Available Mixins:
    UUIDPrimaryKeyMixin: Use UUID as primary key

Usage:
    from core.models import BaseModel
    from core.model_mixins import UUIDPrimaryKeyMixin

    class Conversation(UUIDPrimaryKeyMixin, BaseModel):
        title = models.CharField(max_length=100)

Note:
    - Always list mixins before BaseModel in inheritance
    - Mixins are abstract and don't create database tables
"""

from __future__ import annotations

import uuid

from django.db import models


class UUIDPrimaryKeyMixin(models.Model):
    """
    Use UUID as primary key instead of auto-increment integer.

    Row-insert webhooks carry identifiers as UUID strings, so every model
    referenced by a webhook payload (users, conversations, posts) uses a
    UUID key that matches what the payload sends.

    Fields:
        id: UUIDField as primary key (auto-generated)

    Usage:
        class Conversation(UUIDPrimaryKeyMixin, BaseModel):
            title = models.CharField(max_length=100)

        conversation = Conversation.objects.create(title="Sunday brunch")
        print(conversation.id)  # 550e8400-e29b-41d4-a716-446655440000
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for this record",
    )

    class Meta:
        abstract = True
