from django.db import models

"""
Notification model

Per-recipient delivery record created when an Activity fans out.

- `user`: who receives the notification
- `activity`: the Activity that triggered it
- `content`: the message shown to the recipient

Rows are never updated. There is no read/unread state.
Notifications are ordered newest-first (`-created_at`, then `-id` so rows
created in the same instant still have a stable order).
"""

class Notification(models.Model):
    user = models.ForeignKey("social.User", related_name='notifications', on_delete=models.CASCADE)
    activity = models.ForeignKey("social.Activity", related_name='notifications', on_delete=models.CASCADE)
    content = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "notifications"
        ordering = ['-created_at', '-id']
        constraints = [
            models.UniqueConstraint(fields=["user", "activity"], name="uniq_notifications_user_activity"),
        ]
        indexes = [
            models.Index(fields=["user", "-created_at"], name="idx_notifications_user_recent"),
        ]

    def __str__(self):
        return f"Notification for {self.user_id}: {self.content}"
