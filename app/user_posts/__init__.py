"""
User posts app.

Owns recipe posts and follow edges. The notifications digest reads both
to count new posts from followed accounts.
"""
