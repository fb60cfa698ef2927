"""Management command to seed the database with sample users, recipes and social data."""

from random import choice, randint, sample

from faker import Faker
from django.core.management.base import BaseCommand
from django.db import IntegrityError, transaction

from recipes.models import CATEGORIES, DIFFICULTIES, Follower, Recipe, User
from recipes.services.recipes import RecipeService
from .seed_data import (
    cuisines,
    ingredient_pool,
    review_phrases,
    step_verbs,
    tags_pool,
    user_fixtures,
)


class Command(BaseCommand):
    """Management command to seed the database with sample users/recipes/data."""
    USER_COUNT = 30
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample data'

    def add_arguments(self, parser):
        parser.add_argument("--users", type=int, default=self.USER_COUNT, help="Total number of users to reach.")
        parser.add_argument("--recipes-per-user", type=int, default=3, help="Recipes created for each new user.")

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating seed content."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')
        self.recipe_service = RecipeService()

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        users = self.create_users(options["users"])
        recipes = self.seed_recipes(users, per_user=options["recipes_per_user"])
        self.seed_follows(users, follow_k=5)
        self.seed_reviews_and_likes(users, recipes)
        self.seed_favorites(users, recipes, per_user=3)
        self.stdout.write(self.style.SUCCESS(
            f"Seeding complete: {len(users)} users, {len(recipes)} recipes"
        ))

    def create_users(self, target):
        """Create fixture users, then random ones until `target` users exist."""
        created = []
        for data in user_fixtures:
            user = self.try_create_user(data)
            if user:
                created.append(user)
        while User.objects.count() < target:
            first_name = self.faker.first_name()
            last_name = self.faker.last_name()
            user = self.try_create_user({
                'username': f"{first_name}{last_name}{randint(1, 999)}".lower()[:30],
                'email': f"{first_name}.{last_name}{randint(1, 9999)}@example.org".lower(),
                'first_name': first_name,
                'last_name': last_name,
            })
            if user:
                created.append(user)
        return created

    def try_create_user(self, data):
        """Create a user; returns None when the username or email is taken."""
        try:
            with transaction.atomic():
                return User.objects.create_user(
                    password=self.DEFAULT_PASSWORD,
                    bio=self.faker.sentence(nb_words=12),
                    **data,
                )
        except IntegrityError:
            return None

    def build_recipe_fields(self):
        ingredients = [
            {"name": name, "amount": str(randint(1, 500)), "unit": unit}
            for name, unit in sample(ingredient_pool, randint(3, 8))
        ]
        instructions = [
            f"{choice(step_verbs)} {self.faker.sentence(nb_words=8).lower()}"
            for _ in range(randint(3, 7))
        ]
        return {
            "title": self.faker.sentence(nb_words=4).rstrip(".")[:100],
            "description": self.faker.paragraph(nb_sentences=3)[:1000],
            "prep_time": randint(5, 45),
            "cook_time": randint(0, 120),
            "servings": choice([1, 2, 4, 6, 8]),
            "difficulty": choice(DIFFICULTIES),
            "cuisine": choice(cuisines),
            "category": choice(CATEGORIES),
            "ingredients": ingredients,
            "instructions": instructions,
            "tags": sample(tags_pool, randint(0, 4)),
            "is_public": randint(1, 6) != 1,
        }

    def seed_recipes(self, users, per_user=3):
        recipes = []
        for user in users:
            for _ in range(per_user):
                recipes.append(self.recipe_service.create(user, self.build_recipe_fields()))
        featured = [r.pk for r in recipes if r.is_public][:6]
        Recipe.objects.filter(pk__in=featured).update(is_featured=True)
        return recipes

    def seed_follows(self, users, follow_k=5):
        """Create follower/author edges between the new users."""
        ids = [u.pk for u in users]
        if len(ids) < 2:
            return
        k = min(follow_k, len(ids) - 1)
        rows = []
        for follower in ids:
            for author in sample([x for x in ids if x != follower], k):
                rows.append(Follower(follower_id=follower, author_id=author))
        Follower.objects.bulk_create(rows, ignore_conflicts=True, batch_size=1000)

    def seed_reviews_and_likes(self, users, recipes, max_reviews=5, max_likes=10):
        public = [r for r in recipes if r.is_public]
        for recipe in public:
            others = [u for u in users if u.pk != recipe.author_id]
            for reviewer in sample(others, min(len(others), randint(0, max_reviews))):
                self.recipe_service.add_or_replace_review(
                    recipe.pk, reviewer, randint(1, 5), choice(review_phrases)
                )
            for liker in sample(others, min(len(others), randint(0, max_likes))):
                self.recipe_service.toggle_like(recipe.pk, liker)

    def seed_favorites(self, users, recipes, per_user=3):
        public = [r for r in recipes if r.is_public]
        if not public:
            return
        for user in users:
            user.favorites.add(*sample(public, min(per_user, len(public))))
