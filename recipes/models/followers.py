"""Social graph edge: a follower subscribing to an author's recipes."""

from __future__ import annotations

from django.conf import settings
from django.db import models
from django.db.models import Q, F

from recipes.utils.uuid import uuid7_or_4


class Follower(models.Model):
    """`follower` follows `author`; one row per ordered pair, never self."""
    id = models.UUIDField(primary_key=True, default=uuid7_or_4, editable=False)

    follower = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="following",      # user.following -> rows this user created
        db_column="follower_id",
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="followers",      # user.followers -> rows pointing at this user
        db_column="author_id",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "followers"
        constraints = [
            models.UniqueConstraint(fields=["follower", "author"], name="uniq_followers_follower_author"),
            models.CheckConstraint(condition=~Q(follower=F("author")), name="chk_followers_not_self"),
        ]

    def __str__(self) -> str:
        return f"{self.follower_id} follows {self.author_id}"
