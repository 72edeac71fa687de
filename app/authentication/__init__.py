"""
Authentication application.

Owns the identity rows the notification pipeline reads: the email-based
User and its Profile (display name, push token, preference flags).

Usage:
    from authentication.models import User, Profile
"""
