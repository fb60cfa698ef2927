"""Typed failures raised by services and translated to HTTP by the API layer."""


class RecipeShareError(Exception):
    """Base class for errors surfaced to the route layer."""

    default_message = "Request failed"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(RecipeShareError):
    """A field is missing, out of range or malformed."""

    default_message = "Invalid input"

    def __init__(self, message=None, field=None):
        self.field = field
        super().__init__(message)


class AuthorizationError(RecipeShareError):
    """The caller may not perform this action on the target."""

    default_message = "Not authorized to perform this action"


class NotFoundError(RecipeShareError):
    """The target of the operation does not exist."""

    default_message = "Not found"
