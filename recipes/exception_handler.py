"""Translate domain errors into JSON API responses."""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from recipes.exceptions import AuthorizationError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _error_body(exc):
    body = {"success": False, "message": exc.message}
    if getattr(exc, "field", None):
        body["field"] = exc.field
    return body


def api_exception_handler(exc, context):
    """REST framework EXCEPTION_HANDLER aware of the recipes error family."""
    if isinstance(exc, ValidationError):
        return Response(_error_body(exc), status=status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, NotFoundError):
        return Response(_error_body(exc), status=status.HTTP_404_NOT_FOUND)
    if isinstance(exc, AuthorizationError):
        request = context.get("request")
        user = getattr(request, "user", None)
        logger.warning("Authorization failure for %s: %s", getattr(user, "pk", None), exc.message)
        anonymous = user is None or not user.is_authenticated
        code = status.HTTP_401_UNAUTHORIZED if anonymous else status.HTTP_403_FORBIDDEN
        return Response(_error_body(exc), status=code)

    response = exception_handler(exc, context)
    if response is None:
        return None
    if isinstance(response.data, dict):
        detail = response.data.get("detail")
        data = {"success": False, "message": str(detail) if detail is not None else "Invalid request"}
        if detail is None:
            data["errors"] = response.data
        response.data = data
    else:
        response.data = {"success": False, "message": "Invalid request", "errors": response.data}
    return response
