"""
Authentication models.

This module defines the identity models the notification pipeline reads:
- User: Custom user model with email-based authentication (slim, auth-focused)
- Profile: Display name, push token and notification preference flags

Related files:
    - managers.py: Custom user manager for email-based creation
    - signals.py: Auto-create profile on user creation

Preference flags:
    Each notify_* column is a nullable boolean. NULL means the user never
    touched the setting, which the preference gate treats as enabled. Only
    an explicit False opts the user out of that notification type.
"""

from django.conf import settings
from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin
from django.db import models

from authentication.managers import UserManager
from core.model_mixins import UUIDPrimaryKeyMixin
from core.models import BaseModel


class User(UUIDPrimaryKeyMixin, AbstractBaseUser, PermissionsMixin):
    """
    Custom User model using email as the primary identifier.

    The UUID primary key matches the user ids carried by row-insert
    webhook payloads. Profile data lives on Profile.

    Fields:
        id: UUID primary key
        email: Primary identifier, unique, used for login
        is_active: Whether the user account is active
        is_staff: Whether the user can access Django admin
        date_joined: When the user account was created
        updated_at: When the user record was last modified
    """

    email = models.EmailField(
        unique=True,
        db_index=True,
        max_length=254,
        help_text="User's email address (primary identifier)",
    )

    is_active = models.BooleanField(
        default=True,
        help_text="Whether this user account is active. Deselect instead of deleting.",
    )
    is_staff = models.BooleanField(
        default=False,
        help_text="Whether the user can access the admin site.",
    )

    date_joined = models.DateTimeField(
        auto_now_add=True,
        help_text="When the user account was created",
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="When the user record was last modified",
    )

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    objects = UserManager()

    class Meta:
        verbose_name = "user"
        verbose_name_plural = "users"
        ordering = ["-date_joined"]

    def __str__(self):
        """Return the user's email as string representation."""
        return self.email


class Profile(BaseModel):
    """
    Public profile and notification settings for a user.

    Fields:
        user: OneToOne link to User (also serves as primary key)
        display_name: Name shown in push titles and bodies
        username: Handle shown in the app
        push_token: Expo push token for the user's device (null if none)
        notify_*: Per-type preference flags (null = unset = enabled)

    Usage:
        profile = Profile.objects.get(user=user)
        profile.push_token = "ExponentPushToken[xxxx]"
        profile.save(update_fields=["push_token", "updated_at"])

    Note:
        Profile is automatically created via signals when a User is created.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="profile",
        primary_key=True,
        help_text="User this profile belongs to",
    )

    display_name = models.CharField(
        max_length=150,
        blank=True,
        help_text="Name shown to other users",
    )
    username = models.CharField(
        max_length=30,
        blank=True,
        db_index=True,
        help_text="Public handle",
    )

    push_token = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        help_text="Expo push token of the user's device",
    )

    # Per-type preference flags
    notify_recipe_like = models.BooleanField(
        null=True,
        blank=True,
        help_text="Push when someone likes one of your recipes",
    )
    notify_recipe_comment = models.BooleanField(
        null=True,
        blank=True,
        help_text="Push when someone comments on one of your recipes",
    )
    notify_comment_reply = models.BooleanField(
        null=True,
        blank=True,
        help_text="Push when someone replies to your comment",
    )
    notify_new_follower = models.BooleanField(
        null=True,
        blank=True,
        help_text="Push when someone follows you",
    )
    notify_mention = models.BooleanField(
        null=True,
        blank=True,
        help_text="Push when someone mentions you",
    )
    notify_recipe_save = models.BooleanField(
        null=True,
        blank=True,
        help_text="Push when someone saves one of your recipes",
    )
    notify_order_update = models.BooleanField(
        null=True,
        blank=True,
        help_text="Push when a business updates your order",
    )
    notify_reservation_update = models.BooleanField(
        null=True,
        blank=True,
        help_text="Push when a business updates your reservation",
    )
    notify_direct_message = models.BooleanField(
        null=True,
        blank=True,
        help_text="Push for new direct messages (enabled when unset)",
    )

    class Meta:
        db_table = "authentication_profile"
        verbose_name = "profile"
        verbose_name_plural = "profiles"

    def __str__(self):
        """Return display name or user email."""
        return self.display_name or str(self.user)

    @property
    def has_push_token(self) -> bool:
        """True when the profile has a non-empty push token."""
        return bool(self.push_token)
