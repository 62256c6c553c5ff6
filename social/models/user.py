"""Member of the social graph."""

from django.db import models


class User(models.Model):
    """A named participant who can follow others, post and receive notifications."""

    name = models.CharField(max_length=100)

    class Meta:
        """Default ordering for users."""
        db_table = "users"
        ordering = ["id"]

    def __str__(self):
        return self.name
