"""
Tests for authentication app.

This package contains test modules for:
- test_signals.py: Profile auto-creation
- test_managers.py: Email-based user creation

Usage:
    pytest authentication/tests/
"""
