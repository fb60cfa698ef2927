from .user import User
from .recipe import Recipe, CATEGORIES, DIFFICULTIES, rating_summary, renumber_instructions
from .followers import Follower

__all__ = [
    "User",
    "Recipe",
    "CATEGORIES",
    "DIFFICULTIES",
    "rating_summary",
    "renumber_instructions",
    "Follower",
]
