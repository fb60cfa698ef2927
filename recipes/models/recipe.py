"""
Recipe aggregate

One row holds one complete recipe. The ingredient, instruction, review, like
and tag sequences live inside the row as JSON lists, so a single save() writes
the whole aggregate.

Embedded list shapes:
- ingredients:  {"name", "amount", "unit"}
- instructions: {"step", "description"}, steps always 1..N in list order
- reviews:      {"user", "rating", "comment", "created_at"}, one per user id
- likes:        user ids, no duplicates
- tags:         plain strings

`average_rating`, `total_reviews` and `likes_count` are caches of the lists
above. Every mutation method on the model refreshes them before returning;
nothing else may write them.
`search_text` is rebuilt from the title, description, cuisine and tags on
every save.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone

from recipes.utils.uuid import uuid7_or_4


CATEGORIES = [
    "Breakfast",
    "Lunch",
    "Dinner",
    "Dessert",
    "Snack",
    "Beverage",
    "Appetizer",
    "Soup",
    "Salad",
    "Bread",
    "Other",
]

DIFFICULTIES = ["Easy", "Medium", "Hard"]


def rating_summary(reviews):
    """Return (average_rating, total_reviews) for a list of review dicts."""
    total = len(reviews or [])
    if not total:
        return 0.0, 0
    return sum(int(review["rating"]) for review in reviews) / total, total


def search_text_for(title, description, cuisine, tags):
    """Lowercased text that free-text search matches tokens against."""
    parts = [title or "", description or "", cuisine or ""] + [str(tag) for tag in tags or []]
    return "\n".join(parts).lower()


def renumber_instructions(instructions, removed_index=None):
    """
    Return a new instruction list with steps reassigned 1..N in list order.

    When `removed_index` is given, that entry is dropped first. An index
    outside the list raises IndexError.
    """
    instructions = list(instructions or [])
    if removed_index is not None and not 0 <= removed_index < len(instructions):
        raise IndexError(f"instruction index {removed_index} out of range")
    remaining = [item for i, item in enumerate(instructions) if i != removed_index]
    return [{**item, "step": position} for position, item in enumerate(remaining, start=1)]


class Recipe(models.Model):
    """A user's recipe with its embedded ingredients, steps, reviews and likes."""

    DIFFICULTY_MEDIUM = "Medium"

    DIFFICULTY_CHOICES = [(d, d) for d in DIFFICULTIES]
    CATEGORY_CHOICES = [(c, c) for c in CATEGORIES]

    id = models.UUIDField(primary_key=True, default=uuid7_or_4, editable=False)

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="recipes",
        db_column="author_id",
    )

    title = models.CharField(max_length=100)
    description = models.TextField(max_length=1000)
    image = models.CharField(max_length=500, blank=True, default="")

    # minutes
    prep_time = models.PositiveIntegerField()
    cook_time = models.PositiveIntegerField()
    servings = models.PositiveIntegerField()

    difficulty = models.CharField(max_length=10, choices=DIFFICULTY_CHOICES, default=DIFFICULTY_MEDIUM)
    cuisine = models.CharField(max_length=100)
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES)

    ingredients = models.JSONField(default=list, blank=True)
    instructions = models.JSONField(default=list, blank=True)
    tags = models.JSONField(default=list, blank=True)
    reviews = models.JSONField(default=list, blank=True)
    likes = models.JSONField(default=list, blank=True)

    # derived
    average_rating = models.FloatField(default=0)
    total_reviews = models.PositiveIntegerField(default=0)
    likes_count = models.PositiveIntegerField(default=0)
    search_text = models.TextField(blank=True, default="", editable=False)

    is_public = models.BooleanField(default=True)
    is_featured = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "recipe"
        indexes = [
            models.Index(fields=["is_public", "created_at"], name="recipe_public_created_idx"),
            models.Index(fields=["author"], name="recipe_author_idx"),
            models.Index(fields=["category"], name="recipe_category_idx"),
        ]

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        self.search_text = search_text_for(self.title, self.description, self.cuisine, self.tags)
        update_fields = kwargs.get("update_fields")
        if update_fields is not None:
            kwargs["update_fields"] = {*update_fields, "search_text"}
        super().save(*args, **kwargs)

    @property
    def total_time(self):
        return (self.prep_time or 0) + (self.cook_time or 0)

    def is_authored_by(self, user_id):
        return str(self.author_id) == str(user_id)

    def has_liked(self, user_id):
        return any(str(uid) == str(user_id) for uid in self.likes)

    def review_by(self, user_id):
        """Return the review left by `user_id`, or None."""
        for review in self.reviews:
            if str(review.get("user")) == str(user_id):
                return review
        return None

    def refresh_rating_fields(self):
        """Recompute the rating caches from the current reviews list."""
        self.average_rating, self.total_reviews = rating_summary(self.reviews)

    def add_or_replace_review(self, user_id, rating, comment=""):
        """Drop any earlier review by `user_id`, append the new one and refresh ratings."""
        review = {
            "user": user_id,
            "rating": rating,
            "comment": comment,
            "created_at": timezone.now().isoformat(),
        }
        self.reviews = [r for r in self.reviews if str(r.get("user")) != str(user_id)] + [review]
        self.refresh_rating_fields()
        return review

    def toggle_like(self, user_id):
        """Add `user_id` to likes when absent, otherwise remove it. Returns True when now liked."""
        if self.has_liked(user_id):
            self.likes = [uid for uid in self.likes if str(uid) != str(user_id)]
            liked = False
        else:
            self.likes = list(self.likes) + [user_id]
            liked = True
        self.likes_count = len(self.likes)
        return liked

    def remove_instruction(self, index):
        """Drop the instruction at `index` and renumber the rest."""
        self.instructions = renumber_instructions(self.instructions, removed_index=index)
        return self.instructions
