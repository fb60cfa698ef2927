import logging

from django.db import transaction

from recipes.exceptions import AuthorizationError, ValidationError
from recipes.repos.followers_repo import FollowersRepo

logger = logging.getLogger(__name__)


class FollowService:
    def __init__(self, actor, *, repo: FollowersRepo | None = None):
        self.actor = actor
        self.repo = repo or FollowersRepo()

    def _require_actor(self, target):
        if not self.actor or not getattr(self.actor, "is_authenticated", False):
            raise AuthorizationError("Sign in to follow other cooks")
        if self.actor.pk == target.pk:
            raise ValidationError("You cannot follow yourself", field="user")

    def is_following(self, target) -> bool:
        if not self.actor or not getattr(self.actor, "is_authenticated", False):
            return False
        return self.repo.is_following(follower_id=self.actor.pk, author_id=target.pk)

    @transaction.atomic
    def follow(self, target):
        self._require_actor(target)
        self.repo.follow(follower_id=self.actor.pk, author_id=target.pk)
        logger.info("User %s now follows %s", self.actor.pk, target.pk)
        return True

    @transaction.atomic
    def unfollow(self, target):
        self._require_actor(target)
        removed = self.repo.unfollow(follower_id=self.actor.pk, author_id=target.pk)
        return removed > 0
