"""Service helpers for user lookups and public profiles."""

from recipes.repos.followers_repo import FollowersRepo
from recipes.repos.user_repo import UserRepo
from recipes.services.follow import FollowService

TOP_CHEFS_LIMIT = 6


class UserDirectoryService:
    """Encapsulate common user lookups."""

    def __init__(self, *, repo: UserRepo | None = None, followers_repo: FollowersRepo | None = None):
        self.repo = repo or UserRepo()
        self.followers_repo = followers_repo or FollowersRepo()

    def fetch_by_username(self, username):
        """Fetch a user by username or raise NotFoundError."""
        return self.repo.get_by_username(username)

    def profile(self, username, viewer=None):
        """Public profile data for `username` as seen by `viewer`."""
        user = self.fetch_by_username(username)
        follow = FollowService(viewer, repo=self.followers_repo)
        return {
            "user": user,
            "followers": self.followers_repo.followers_of(user.pk),
            "following": self.followers_repo.followed_by(user.pk),
            "is_following": follow.is_following(user),
            "public_recipe_count": user.count_public_recipes(),
        }

    def top_chefs(self, limit: int = TOP_CHEFS_LIMIT):
        """Authors ranked by public recipe count."""
        return self.repo.ranked_by_public_recipes(limit=limit)
