"""Service layer for the recipe aggregate: lifecycle, reviews, likes and steps."""

import logging

from django.db import transaction

from recipes.exceptions import AuthorizationError, NotFoundError, ValidationError
from recipes.models.recipe import Recipe
from recipes.repos.recipe_repo import RecipeRepo
from recipes.validators import clean_recipe_fields, clean_review, coerce_int

logger = logging.getLogger(__name__)


class RecipeService:
    """
    Operations on one recipe aggregate.

    Every mutation loads the row, changes it through the model's own methods
    (which keep the rating and like caches in step) and writes the whole row
    back in one transaction. Concurrent writers are last-write-wins.
    """

    def __init__(self, *, repo: RecipeRepo | None = None) -> None:
        self.repo = repo or RecipeRepo()

    # --- reads -----------------------------------------------------------
    def get(self, recipe_id, viewer=None) -> Recipe:
        """Return the recipe; private recipes are only visible to their author."""
        recipe = self.repo.get_by_id(recipe_id)
        if not recipe.is_public and not self._is_author(recipe, viewer):
            raise NotFoundError("Recipe not found")
        return recipe

    # --- lifecycle -------------------------------------------------------
    @transaction.atomic
    def create(self, author, fields) -> Recipe:
        """Validate `fields` and create a recipe owned by `author`."""
        cleaned = clean_recipe_fields(fields)
        recipe = Recipe(author=author, **cleaned)
        recipe.refresh_rating_fields()
        recipe.likes_count = len(recipe.likes)
        self.repo.save(recipe)
        logger.info("Recipe %s created by user %s", recipe.id, author.pk)
        return recipe

    @transaction.atomic
    def update(self, recipe_id, author, patch) -> Recipe:
        """Apply a validated patch; only the author may do this."""
        recipe = self.repo.get_by_id(recipe_id)
        self._require_author(recipe, author)
        cleaned = clean_recipe_fields(patch, partial=True)
        for name, value in cleaned.items():
            setattr(recipe, name, value)
        return self.repo.save(recipe)

    @transaction.atomic
    def delete(self, recipe_id, author) -> None:
        recipe = self.repo.get_by_id(recipe_id)
        self._require_author(recipe, author)
        self.repo.remove(recipe)
        logger.info("Recipe %s deleted by user %s", recipe_id, author.pk)

    # --- engagement ------------------------------------------------------
    @transaction.atomic
    def add_or_replace_review(self, recipe_id, user, rating, comment=None) -> Recipe:
        """Record `user`'s review, replacing any earlier one, and refresh the rating caches."""
        rating, comment = clean_review(rating, comment)
        recipe = self.get(recipe_id, viewer=user)
        recipe.add_or_replace_review(user.pk, rating, comment)
        return self.repo.save(recipe)

    @transaction.atomic
    def toggle_like(self, recipe_id, user):
        """Flip `user`'s like; returns (recipe, liked_now)."""
        recipe = self.get(recipe_id, viewer=user)
        liked = recipe.toggle_like(user.pk)
        self.repo.save(recipe)
        return recipe, liked

    # --- instructions ----------------------------------------------------
    @transaction.atomic
    def remove_instruction(self, recipe_id, author, index) -> Recipe:
        """Drop one instruction (0-based index) and renumber the remaining steps."""
        recipe = self.repo.get_by_id(recipe_id)
        self._require_author(recipe, author)
        index = coerce_int(index, "index")
        if not 0 <= index < len(recipe.instructions):
            raise ValidationError(
                f"Instruction index must be between 0 and {len(recipe.instructions) - 1}",
                field="index",
            )
        recipe.remove_instruction(index)
        return self.repo.save(recipe)

    # --- helpers ---------------------------------------------------------
    def _is_author(self, recipe, user):
        return bool(user and getattr(user, "is_authenticated", False) and recipe.is_authored_by(user.pk))

    def _require_author(self, recipe, user):
        if not self._is_author(recipe, user):
            raise AuthorizationError("Only the author can modify this recipe")
