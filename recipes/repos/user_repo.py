"""Repository helpers for user lookups."""

from typing import Dict, Iterable, List

from django.db.models import Count, Q, Sum

from recipes.db_accessor import DB_Accessor
from recipes.models.user import User


class UserRepo(DB_Accessor):
    """Repository for account lookups and author rankings."""

    not_found_message = "User not found"

    def __init__(self) -> None:
        super().__init__(User)

    def get_by_id(self, user_id) -> User:
        return self.get(id=user_id)

    def get_by_username(self, username: str) -> User:
        return self.get(username=username)

    def first_by_email(self, email: str):
        """Return the user with this email (case-insensitive) or None."""
        return self.model.objects.filter(email__iexact=(email or "").strip()).first()

    def by_ids(self, user_ids: Iterable) -> Dict[int, User]:
        """Map id -> user for the given ids; unknown ids are absent."""
        ids = {int(uid) for uid in user_ids if str(uid).isdigit()}
        if not ids:
            return {}
        return {user.id: user for user in self.model.objects.filter(id__in=ids)}

    def ranked_by_public_recipes(self, limit: int = 6) -> List[User]:
        """Users with the most public recipes, then most likes received, then username."""
        public = Q(recipes__is_public=True)
        return list(
            self.model.objects.annotate(
                public_recipe_count=Count("recipes", filter=public),
                likes_received=Sum("recipes__likes_count", filter=public, default=0),
            )
            .filter(public_recipe_count__gt=0)
            .order_by("-public_recipe_count", "-likes_received", "username")[:limit]
        )
