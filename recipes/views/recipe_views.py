"""Recipe endpoints: search, create, read, edit, delete and engagement."""

import logging
import os

from django.core.files.storage import default_storage
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.views import APIView

from recipes.serializers import RecipeDetailSerializer, RecipeSummarySerializer
from recipes.services.favourites import FavouriteService
from recipes.services.recipes import RecipeService
from recipes.services.search import (
    FEATURED_LIMIT,
    RECENT_PAGE_SIZE,
    RecipeQuery,
    RecipeSearchService,
)
from recipes.utils.uuid import media_token
from recipes.validators import image_upload_field, run_field
from recipes.views.view_utils import envelope, page_response, request_payload, reviewer_context

logger = logging.getLogger(__name__)


def store_recipe_image(upload):
    """Check and save an uploaded picture under MEDIA_ROOT/recipes/, returning its URL."""
    upload = run_field(image_upload_field(), upload, "image")
    ext = os.path.splitext(upload.name)[1].lower()
    name = default_storage.save(f"recipes/{media_token()}{ext}", upload)
    logger.info("Stored recipe image %s", name)
    return default_storage.url(name)


def _recipe_payload(request):
    payload = request_payload(request)
    upload = request.FILES.get("image")
    if upload is not None:
        payload["image"] = store_recipe_image(upload)
    elif "image" in request.data:
        payload["image"] = request.data.get("image")
    return payload


def _detail(request, recipe, code=status.HTTP_200_OK):
    data = RecipeDetailSerializer(recipe, context=reviewer_context(request, recipe)).data
    return envelope(data, code=code)


class RecipeCollectionApi(APIView):
    """Search public recipes (GET) or create one (POST)."""
    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request):
        query = RecipeQuery.from_params(request.query_params)
        return page_response(RecipeSearchService().search(query), request)

    def post(self, request):
        recipe = RecipeService().create(request.user, _recipe_payload(request))
        return _detail(request, recipe, code=status.HTTP_201_CREATED)


class RecipeDetailApi(APIView):
    """Retrieve, update, or delete a recipe, respecting ownership."""
    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request, recipe_id):
        recipe = RecipeService().get(recipe_id, viewer=request.user)
        return _detail(request, recipe)

    def put(self, request, recipe_id):
        recipe = RecipeService().update(recipe_id, request.user, _recipe_payload(request))
        return _detail(request, recipe)

    patch = put

    def delete(self, request, recipe_id):
        RecipeService().delete(recipe_id, request.user)
        return envelope(message="Recipe deleted")


@api_view(['GET'])
def recent_recipes(request):
    query = RecipeQuery.from_params(request.query_params, page_size=RECENT_PAGE_SIZE, allow_limit=True)
    recipes = RecipeSearchService().recent(limit=query.page_size)
    return envelope(RecipeSummarySerializer(recipes, many=True, context={"request": request}).data)


@api_view(['GET'])
def featured_recipes(request):
    query = RecipeQuery.from_params(request.query_params, page_size=FEATURED_LIMIT, allow_limit=True)
    recipes = RecipeSearchService().featured(limit=query.page_size)
    return envelope(RecipeSummarySerializer(recipes, many=True, context={"request": request}).data)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def toggle_like(request, recipe_id):
    recipe, liked = RecipeService().toggle_like(recipe_id, request.user)
    return envelope({"liked": liked, "likes_count": recipe.likes_count})


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def toggle_favorite(request, recipe_id):
    _, favorited = FavouriteService().toggle(request.user, recipe_id)
    return envelope({"favorited": favorited})


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def add_review(request, recipe_id):
    """Create or replace the caller's review; one review per user."""
    recipe = RecipeService().add_or_replace_review(
        recipe_id,
        request.user,
        request.data.get("rating"),
        request.data.get("comment"),
    )
    return _detail(request, recipe)


@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def remove_instruction(request, recipe_id, index):
    recipe = RecipeService().remove_instruction(recipe_id, request.user, index)
    return _detail(request, recipe)
