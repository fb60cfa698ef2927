from typing import Any, Optional, Type

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import Model, QuerySet

from recipes.exceptions import NotFoundError


class DB_Accessor:
    """Generic data accessor wrapping basic queryset operations for one model."""

    not_found_message = "Not found"

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def all(self) -> QuerySet:
        return self.model.objects.all()

    def slice(self, qs: QuerySet, *, offset: int = 0, limit: Optional[int] = None) -> QuerySet:
        """Apply offset/limit without evaluating the queryset."""
        start = max(0, int(offset or 0))
        if limit is None:
            return qs[start:] if start else qs
        return qs[start:start + max(0, int(limit))]

    def get(self, **lookup: Any) -> Model:
        """Fetch a single object matching the lookup or raise NotFoundError."""
        try:
            return self.model.objects.get(**lookup)
        except (self.model.DoesNotExist, DjangoValidationError, ValueError, OverflowError):
            raise NotFoundError(self.not_found_message)

    def exists(self, **lookup: Any) -> bool:
        return self.model.objects.filter(**lookup).exists()

    def delete(self, **lookup: Any) -> int:
        """Delete objects matching lookup; return count deleted."""
        count, _ = self.model.objects.filter(**lookup).delete()
        return count
