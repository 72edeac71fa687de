"""
User post and follow models.

Models:
    UserPost: A recipe post published by a user
    UserFollow: Directed follow edge (follower -> following)

The digest counts posts published by followed accounts over a trailing
window, so both tables are indexed on the columns that query filters by.
"""

from django.conf import settings
from django.db import models

from core.model_mixins import UUIDPrimaryKeyMixin
from core.models import BaseModel


class UserPost(UUIDPrimaryKeyMixin, BaseModel):
    """
    A post published by a user.

    Fields:
        user: Author of the post
        caption: Free text shown with the post
        visibility: Who can see the post
    """

    PUBLIC = "PU"
    FRIENDS = "FR"
    PRIVATE = "PR"
    POST_VISIBILITY = {
        PUBLIC: "Public",
        FRIENDS: "Friends",
        PRIVATE: "Private",
    }

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="posts",
        help_text="User this post belongs to",
    )
    caption = models.TextField(blank=True)
    visibility = models.CharField(max_length=2, choices=POST_VISIBILITY, default=PUBLIC)

    class Meta:
        db_table = "user_posts_userpost"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "created_at"], name="userpost_user_created_idx"),
        ]

    def __str__(self):
        return f"Post {self.pk} by {self.user_id}"


class UserFollow(BaseModel):
    """
    A follow edge: follower receives updates from following.

    Fields:
        follower: User doing the following
        following: User being followed
    """

    follower = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="following_edges",
        help_text="User who follows",
    )
    following = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="follower_edges",
        help_text="User being followed",
    )

    class Meta:
        db_table = "user_posts_userfollow"
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["follower", "following"],
                name="unique_follow_edge",
            ),
        ]

    def __str__(self):
        return f"{self.follower_id} follows {self.following_id}"
