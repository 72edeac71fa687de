"""
Tests for the user posts app.
"""
