"""Repository helpers for loading, saving and scoping recipe aggregates."""

from typing import Optional

from django.db.models import QuerySet

from recipes.db_accessor import DB_Accessor
from recipes.models.recipe import Recipe


class RecipeRepo(DB_Accessor):
    """Persistence handle for Recipe rows (one row per aggregate)."""

    not_found_message = "Recipe not found"

    def __init__(self) -> None:
        super().__init__(Recipe)

    def get_by_id(self, recipe_id) -> Recipe:
        """Return the recipe or raise NotFoundError (also for malformed ids)."""
        return self.get(id=recipe_id)

    def save(self, recipe: Recipe) -> Recipe:
        """Write the whole aggregate back."""
        recipe.save()
        return recipe

    def remove(self, recipe: Recipe) -> None:
        recipe.delete()

    def with_author(self, qs: Optional[QuerySet] = None) -> QuerySet:
        return (qs if qs is not None else self.all()).select_related("author")

    def public(self) -> QuerySet:
        """Recipes eligible for public search and browse."""
        return self.with_author(self.model.objects.filter(is_public=True))

    def for_author(self, author_id, *, include_private: bool = True) -> QuerySet:
        qs = self.model.objects.filter(author_id=author_id)
        if not include_private:
            qs = qs.filter(is_public=True)
        return self.with_author(qs)

    def favorites_of(self, user, *, public_only: bool = False) -> QuerySet:
        """Recipes referenced by the user's favorite list."""
        qs = user.favorites.all()
        if public_only:
            qs = qs.filter(is_public=True)
        return self.with_author(qs)
