from .accounts import AccountService
from .favourites import FavouriteService
from .follow import FollowService
from .recipes import RecipeService
from .search import RecipePage, RecipeQuery, RecipeSearchService
from .users import UserDirectoryService

__all__ = [
    "AccountService",
    "FavouriteService",
    "FollowService",
    "RecipePage",
    "RecipeQuery",
    "RecipeSearchService",
    "RecipeService",
    "UserDirectoryService",
]
