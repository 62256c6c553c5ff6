from django.db import models

"""
Activity model

Append-only log of actions taken by users. Every follow, unfollow, blog post
and comment writes exactly one row here; notifications point back at the row
that caused them.

- `user`: who performed the action
- `activity_type`: follow / unfollow / blog / comment
- `content`: human readable summary (follow/unfollow) or the posted text (blog/comment)
"""

class Activity(models.Model):
    FOLLOW = "follow"
    UNFOLLOW = "unfollow"
    BLOG = "blog"
    COMMENT = "comment"

    TYPES = [
        (FOLLOW, 'Follow'),
        (UNFOLLOW, 'Unfollow'),
        (BLOG, 'Blog'),
        (COMMENT, 'Comment'),
    ]

    user = models.ForeignKey("social.User", related_name='activities', on_delete=models.CASCADE)
    activity_type = models.CharField(max_length=20, choices=TYPES, db_column="type")
    content = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "activities"
        ordering = ['-created_at', '-id']
        verbose_name_plural = "activities"

    def __str__(self):
        return f"Activity by {self.user_id}: {self.activity_type}"
