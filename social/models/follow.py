"""Model representing follower→followee relationships."""

from __future__ import annotations
from django.db import models
from django.db.models import Q, F


class Follow(models.Model):
    """Directed edge: `follower` receives notifications about `followee`'s activity."""

    follower = models.ForeignKey(
        "social.User",
        on_delete=models.CASCADE,
        related_name="following",      # user.following -> Follow rows this user created (outbound)
        db_column="follower_id",
    )
    followee = models.ForeignKey(
        "social.User",
        on_delete=models.CASCADE,
        related_name="followers",      # user.followers -> Follow rows pointing to this user (inbound)
        db_column="followee_id",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """DB metadata and constraints for follow edges."""
        db_table = "follows"
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(fields=["follower", "followee"], name="uniq_follows_follower_followee"),
            models.CheckConstraint(condition=~Q(follower=F("followee")), name="chk_follows_not_self"),
        ]
        indexes = [
            models.Index(fields=["follower"], name="idx_follows_follower"),
            models.Index(fields=["followee"], name="idx_follows_followee"),
        ]

    def __str__(self) -> str:
        """Readable representation for admin/debugging."""
        return f"Follow(follower={self.follower_id}, followee={self.followee_id})"
