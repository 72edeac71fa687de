# Generated manually - initial schema for users and profiles

import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

import authentication.managers


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("password", models.CharField(max_length=128, verbose_name="password")),
                (
                    "last_login",
                    models.DateTimeField(blank=True, null=True, verbose_name="last login"),
                ),
                (
                    "is_superuser",
                    models.BooleanField(
                        default=False,
                        help_text="Designates that this user has all permissions without explicitly assigning them.",
                        verbose_name="superuser status",
                    ),
                ),
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for this record",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "email",
                    models.EmailField(
                        db_index=True,
                        help_text="User's email address (primary identifier)",
                        max_length=254,
                        unique=True,
                    ),
                ),
                (
                    "is_active",
                    models.BooleanField(
                        default=True,
                        help_text="Whether this user account is active. Deselect instead of deleting.",
                    ),
                ),
                (
                    "is_staff",
                    models.BooleanField(
                        default=False,
                        help_text="Whether the user can access the admin site.",
                    ),
                ),
                (
                    "date_joined",
                    models.DateTimeField(
                        auto_now_add=True,
                        help_text="When the user account was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="When the user record was last modified",
                    ),
                ),
                (
                    "groups",
                    models.ManyToManyField(
                        blank=True,
                        help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.group",
                        verbose_name="groups",
                    ),
                ),
                (
                    "user_permissions",
                    models.ManyToManyField(
                        blank=True,
                        help_text="Specific permissions for this user.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.permission",
                        verbose_name="user permissions",
                    ),
                ),
            ],
            options={
                "verbose_name": "user",
                "verbose_name_plural": "users",
                "ordering": ["-date_joined"],
            },
            managers=[
                ("objects", authentication.managers.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name="Profile",
            fields=[
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Timestamp when this record was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="Timestamp when this record was last modified",
                    ),
                ),
                (
                    "user",
                    models.OneToOneField(
                        help_text="User this profile belongs to",
                        on_delete=django.db.models.deletion.CASCADE,
                        primary_key=True,
                        related_name="profile",
                        serialize=False,
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "display_name",
                    models.CharField(
                        blank=True,
                        help_text="Name shown to other users",
                        max_length=150,
                    ),
                ),
                (
                    "username",
                    models.CharField(
                        blank=True,
                        db_index=True,
                        help_text="Public handle",
                        max_length=30,
                    ),
                ),
                (
                    "push_token",
                    models.CharField(
                        blank=True,
                        help_text="Expo push token of the user's device",
                        max_length=255,
                        null=True,
                    ),
                ),
                (
                    "notify_recipe_like",
                    models.BooleanField(
                        blank=True,
                        help_text="Push when someone likes one of your recipes",
                        null=True,
                    ),
                ),
                (
                    "notify_recipe_comment",
                    models.BooleanField(
                        blank=True,
                        help_text="Push when someone comments on one of your recipes",
                        null=True,
                    ),
                ),
                (
                    "notify_comment_reply",
                    models.BooleanField(
                        blank=True,
                        help_text="Push when someone replies to your comment",
                        null=True,
                    ),
                ),
                (
                    "notify_new_follower",
                    models.BooleanField(
                        blank=True,
                        help_text="Push when someone follows you",
                        null=True,
                    ),
                ),
                (
                    "notify_mention",
                    models.BooleanField(
                        blank=True,
                        help_text="Push when someone mentions you",
                        null=True,
                    ),
                ),
                (
                    "notify_recipe_save",
                    models.BooleanField(
                        blank=True,
                        help_text="Push when someone saves one of your recipes",
                        null=True,
                    ),
                ),
                (
                    "notify_order_update",
                    models.BooleanField(
                        blank=True,
                        help_text="Push when a business updates your order",
                        null=True,
                    ),
                ),
                (
                    "notify_reservation_update",
                    models.BooleanField(
                        blank=True,
                        help_text="Push when a business updates your reservation",
                        null=True,
                    ),
                ),
                (
                    "notify_direct_message",
                    models.BooleanField(
                        blank=True,
                        help_text="Push for new direct messages (enabled when unset)",
                        null=True,
                    ),
                ),
            ],
            options={
                "verbose_name": "profile",
                "verbose_name_plural": "profiles",
                "db_table": "authentication_profile",
            },
        ),
    ]
