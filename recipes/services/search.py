"""Filtered, sorted and paginated views over the recipe collection."""

import math
import re
from dataclasses import dataclass, field
from typing import List, Optional

from django.db.models import F, Q, QuerySet
from rest_framework import serializers

from recipes.exceptions import ValidationError
from recipes.models.recipe import CATEGORIES, DIFFICULTIES
from recipes.repos.recipe_repo import RecipeRepo
from recipes.validators import error_messages, validate_in_order

SEARCH_PAGE_SIZE = 12
RECENT_PAGE_SIZE = 8
FEATURED_LIMIT = 6
MAX_PAGE_SIZE = 50
MAX_QUERY_NUMBER = 2147483647

# every ordering ends on id so pages stay stable between requests
SORT_ORDERINGS = {
    "newest": ("-created_at", "id"),
    "oldest": ("created_at", "id"),
    "rating": ("-average_rating", "-total_reviews", "id"),
    "time": ("total_minutes", "id"),
    "title": ("title", "id"),
    "popular": ("-likes_count", "id"),
}
DEFAULT_SORT = "newest"

VISIBILITY_FILTERS = ("all", "public", "private")

_TOKEN_RE = re.compile(r"\w+", re.UNICODE)


def _blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


def tokenize(text: Optional[str]) -> List[str]:
    """Lowercased word tokens of a free-text query, duplicates removed."""
    seen = []
    for token in _TOKEN_RE.findall((text or "").lower()):
        if token not in seen:
            seen.append(token)
    return seen


def _one_of(name, choices):
    return serializers.ChoiceField(
        choices=list(choices),
        error_messages=error_messages(name, invalid_choice=f"{name} must be one of: {', '.join(choices)}"),
    )


def _bounded(field_class, name, min_value, max_value):
    message = f"{name} must be between {min_value} and {max_value}"
    return field_class(
        min_value=min_value,
        max_value=max_value,
        error_messages=error_messages(name, invalid=f"{name} must be a number", min_value=message, max_value=message),
    )


class RecipeQueryInputSerializer(serializers.Serializer):
    """Filter, sort and paging parameters of the listing endpoints."""

    category = _one_of("category", CATEGORIES)
    difficulty = _one_of("difficulty", DIFFICULTIES)
    cuisine = serializers.CharField()
    max_time = _bounded(serializers.IntegerField, "max_time", 0, MAX_QUERY_NUMBER)
    min_rating = _bounded(serializers.FloatField, "min_rating", 0, 5)
    sort_by = _one_of("sort_by", SORT_ORDERINGS)
    page = _bounded(serializers.IntegerField, "page", 1, MAX_QUERY_NUMBER)
    limit = _bounded(serializers.IntegerField, "limit", 1, MAX_PAGE_SIZE)


@dataclass
class RecipeQuery:
    """Parsed filter, sort and paging parameters."""

    text: str = ""
    category: Optional[str] = None
    cuisine: Optional[str] = None
    difficulty: Optional[str] = None
    max_time: Optional[int] = None
    min_rating: Optional[float] = None
    sort_by: str = DEFAULT_SORT
    page: int = 1
    page_size: int = SEARCH_PAGE_SIZE

    @classmethod
    def from_params(cls, params, *, page_size: int = SEARCH_PAGE_SIZE, allow_limit: bool = False):
        """
        Build a query from request parameters.

        Blank values mean "not supplied". Malformed values raise
        ValidationError. `q` and `search` are both accepted for the text.
        With allow_limit=True a `limit` parameter overrides the page size.
        """
        text = params.get("q") or params.get("search") or ""
        serializer = RecipeQueryInputSerializer()
        supplied = {
            name: params.get(name)
            for name in serializer.fields
            if not _blank(params.get(name)) and (allow_limit or name != "limit")
        }
        cleaned = validate_in_order(serializer, supplied, partial=True)
        min_rating = cleaned.get("min_rating")
        if min_rating is not None and math.isnan(min_rating):
            raise ValidationError("min_rating must be between 0 and 5", field="min_rating")

        return cls(
            text=text.strip() if isinstance(text, str) else "",
            category=cleaned.get("category"),
            cuisine=cleaned.get("cuisine"),
            difficulty=cleaned.get("difficulty"),
            max_time=cleaned.get("max_time"),
            min_rating=min_rating,
            sort_by=cleaned.get("sort_by", DEFAULT_SORT),
            page=cleaned.get("page", 1),
            page_size=cleaned.get("limit", page_size),
        )


@dataclass
class RecipePage:
    """One page of results plus the total match count."""

    results: List = field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = SEARCH_PAGE_SIZE

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.page_size else 0


class RecipeSearchService:
    """Encapsulate recipe filtering, ordering and pagination."""

    def __init__(self, *, repo: RecipeRepo | None = None) -> None:
        self.repo = repo or RecipeRepo()

    # --- entry points ----------------------------------------------------
    def search(self, query: RecipeQuery) -> RecipePage:
        """Public search/browse: only `is_public` recipes are eligible."""
        return self._run(self.repo.public(), query)

    def recent(self, limit: int = RECENT_PAGE_SIZE) -> List:
        return list(self._ordered(self.repo.public(), "newest")[:limit])

    def featured(self, limit: int = FEATURED_LIMIT) -> List:
        qs = self.repo.public().filter(is_featured=True)
        return list(self._ordered(qs, "newest")[:limit])

    def for_author(self, author, query: RecipeQuery, *, include_private: bool = True, visibility: str = "all") -> RecipePage:
        """Recipes by `author`; the owner's own view bypasses `is_public`."""
        if visibility not in VISIBILITY_FILTERS:
            raise ValidationError(f"visibility must be one of: {', '.join(VISIBILITY_FILTERS)}", field="visibility")
        qs = self.repo.for_author(author.pk, include_private=include_private)
        if visibility == "public":
            qs = qs.filter(is_public=True)
        elif visibility == "private":
            qs = qs.filter(is_public=False)
        return self._run(qs, query)

    def favorites(self, user, query: RecipeQuery, *, public_only: bool = False) -> RecipePage:
        """Recipes on `user`'s favorite list; the owner's own view bypasses `is_public`."""
        return self._run(self.repo.favorites_of(user, public_only=public_only), query)

    # --- query building --------------------------------------------------
    def apply_filters(self, qs: QuerySet, query: RecipeQuery) -> QuerySet:
        if query.category:
            qs = qs.filter(category=query.category)
        if query.cuisine:
            qs = qs.filter(cuisine__iexact=query.cuisine)
        if query.difficulty:
            qs = qs.filter(difficulty=query.difficulty)
        if query.max_time is not None:
            qs = self._with_total_time(qs).filter(total_minutes__lte=query.max_time)
        if query.min_rating is not None:
            qs = qs.filter(average_rating__gte=query.min_rating)
        return self.apply_text_search(qs, query.text)

    def apply_text_search(self, qs: QuerySet, text: Optional[str]) -> QuerySet:
        """
        Match any token against title, description, cuisine or tags.

        Both sides are lowercased, so the match is case-insensitive for any
        script, including accented tags.
        """
        tokens = tokenize(text)
        if not tokens:
            return qs
        condition = Q()
        for token in tokens:
            condition |= Q(search_text__contains=token)
        return qs.filter(condition)

    # --- internal helpers ------------------------------------------------
    def _run(self, qs: QuerySet, query: RecipeQuery) -> RecipePage:
        qs = self._ordered(self.apply_filters(qs, query), query.sort_by)
        total = qs.count()
        start = (query.page - 1) * query.page_size
        results = list(self.repo.slice(qs, offset=start, limit=query.page_size)) if start < total else []
        return RecipePage(results=results, total=total, page=query.page, page_size=query.page_size)

    def _ordered(self, qs: QuerySet, sort_by: str) -> QuerySet:
        if sort_by == "time":
            qs = self._with_total_time(qs)
        return qs.order_by(*SORT_ORDERINGS[sort_by])

    def _with_total_time(self, qs: QuerySet) -> QuerySet:
        if "total_minutes" in qs.query.annotations:
            return qs
        return qs.annotate(total_minutes=F("prep_time") + F("cook_time"))
