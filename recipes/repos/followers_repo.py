"""Repository helpers for follower relationships."""

from typing import List

from recipes.db_accessor import DB_Accessor
from recipes.models.followers import Follower
from recipes.models.user import User


class FollowersRepo(DB_Accessor):
    """Repository wrapper for follower → author edges."""

    def __init__(self) -> None:
        super().__init__(Follower)

    def is_following(self, *, follower_id, author_id) -> bool:
        """Return True if follower_id follows author_id."""
        return self.exists(follower_id=follower_id, author_id=author_id)

    def follow(self, *, follower_id, author_id) -> Follower:
        """Create the edge when missing and return it."""
        edge, _ = self.model.objects.get_or_create(follower_id=follower_id, author_id=author_id)
        return edge

    def unfollow(self, *, follower_id, author_id) -> int:
        """Remove the edge; return how many rows went."""
        return self.delete(follower_id=follower_id, author_id=author_id)

    def followers_of(self, author_id) -> List[User]:
        return list(
            User.objects.filter(following__author_id=author_id).order_by("username")
        )

    def followed_by(self, follower_id) -> List[User]:
        return list(
            User.objects.filter(followers__follower_id=follower_id).order_by("username")
        )
