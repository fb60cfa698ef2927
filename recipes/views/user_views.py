"""User directory endpoints: profiles, per-user listings, follows and top chefs."""

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from recipes.repos.user_repo import UserRepo
from recipes.serializers import PublicProfileSerializer, TopChefSerializer
from recipes.services.favourites import FavouriteService
from recipes.services.follow import FollowService
from recipes.services.search import RecipeQuery, RecipeQueryInputSerializer, RecipeSearchService
from recipes.services.users import TOP_CHEFS_LIMIT, UserDirectoryService
from recipes.validators import run_field
from recipes.views.view_utils import envelope, page_response


def _listing_query(request):
    return RecipeQuery.from_params(request.query_params, allow_limit=True)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_recipes(request):
    """The caller's recipes, private ones included; `visibility` narrows them."""
    visibility = (request.query_params.get("visibility") or "all").strip() or "all"
    page = RecipeSearchService().for_author(request.user, _listing_query(request), visibility=visibility)
    return page_response(page, request)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_favorites(request):
    page = FavouriteService().list_for_user(request.user, _listing_query(request))
    return page_response(page, request)


@api_view(['GET'])
def top_chefs(request):
    limit = request.query_params.get("limit")
    limit = TOP_CHEFS_LIMIT if not limit else run_field(RecipeQueryInputSerializer().fields["limit"], limit, "limit")
    chefs = UserDirectoryService().top_chefs(limit=limit)
    return envelope(TopChefSerializer(chefs, many=True, context={"request": request}).data)


@api_view(['GET'])
def user_profile(request, username):
    profile = UserDirectoryService().profile(username, viewer=request.user)
    return envelope(PublicProfileSerializer(profile, context={"request": request}).data)


@api_view(['GET'])
def user_recipes(request, username):
    """Public recipes of another user; the owner also sees private ones."""
    user = UserDirectoryService().fetch_by_username(username)
    own = request.user.is_authenticated and request.user.pk == user.pk
    page = RecipeSearchService().for_author(user, _listing_query(request), include_private=own)
    return page_response(page, request)


@api_view(['GET'])
def user_favorites(request, username):
    user = UserDirectoryService().fetch_by_username(username)
    own = request.user.is_authenticated and request.user.pk == user.pk
    page = FavouriteService().list_for_user(user, _listing_query(request), public_only=not own)
    return page_response(page, request)


@api_view(['POST', 'DELETE'])
@permission_classes([IsAuthenticated])
def follow_user(request, user_id):
    target = UserRepo().get_by_id(user_id)
    service = FollowService(request.user)
    if request.method == 'POST':
        service.follow(target)
        return envelope({"following": True}, code=status.HTTP_201_CREATED)
    service.unfollow(target)
    return envelope({"following": False})
