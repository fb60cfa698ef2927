from rest_framework import status
from rest_framework.response import Response

from recipes.exceptions import ValidationError
from recipes.repos.user_repo import UserRepo
from recipes.serializers import RecipeSummarySerializer


def envelope(data=None, *, code=status.HTTP_200_OK, **extra):
    """Wrap a payload in the API's {"success": True, ...} envelope."""
    body = {"success": True}
    if data is not None:
        body["data"] = data
    body.update(extra)
    return Response(body, status=code)


def page_response(page, request, serializer_class=RecipeSummarySerializer):
    """Envelope for a RecipePage with its paging metadata."""
    data = serializer_class(page.results, many=True, context={"request": request}).data
    return envelope(data, total=page.total, page=page.page, pages=page.pages, page_size=page.page_size)


def request_payload(request, *, exclude=("image",)):
    """
    Plain dict of the request body.

    Multipart bodies arrive as a QueryDict; the last value of each key wins
    and JSON-encoded list fields are left for the validators to decode.
    """
    data = request.data
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return {key: value for key, value in data.items() if key not in exclude}


def reviewer_context(request, recipe):
    """Serializer context with the users who reviewed `recipe` preloaded."""
    reviewers = UserRepo().by_ids(review.get("user") for review in recipe.reviews)
    return {"request": request, "reviewers": reviewers}
