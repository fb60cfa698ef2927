"""Service helpers for a user's favorite recipes."""

import logging

from django.db import transaction

from recipes.exceptions import NotFoundError
from recipes.repos.recipe_repo import RecipeRepo
from recipes.services.search import RecipeQuery, RecipeSearchService

logger = logging.getLogger(__name__)


class FavouriteService:
    """Encapsulate favorite toggling and listing."""

    def __init__(self, *, repo: RecipeRepo | None = None, search: RecipeSearchService | None = None):
        self.repo = repo or RecipeRepo()
        self.search = search or RecipeSearchService(repo=self.repo)

    @transaction.atomic
    def toggle(self, user, recipe_id):
        """Add or remove the recipe from the user's favorites; returns (recipe, favorited_now)."""
        recipe = self.repo.get_by_id(recipe_id)
        if not recipe.is_public and not recipe.is_authored_by(user.pk):
            raise NotFoundError("Recipe not found")
        if user.has_favorited(recipe):
            user.favorites.remove(recipe)
            favorited = False
        else:
            user.favorites.add(recipe)
            favorited = True
        logger.debug("User %s favorite %s -> %s", user.pk, recipe.pk, favorited)
        return recipe, favorited

    def list_for_user(self, user, query: RecipeQuery | None = None, *, public_only: bool = False):
        """Paged favorites of `user` with the usual filters and sorts applied."""
        return self.search.favorites(user, query or RecipeQuery(), public_only=public_only)
