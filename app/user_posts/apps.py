"""
User posts application configuration.
"""

from django.apps import AppConfig


class UserPostsConfig(AppConfig):
    """Configuration for the user posts application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "user_posts"
    verbose_name = "User Posts"
