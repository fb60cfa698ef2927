import io
import uuid

from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image

from recipes.models import Recipe, User


def make_user(**kwargs):
    username = kwargs.pop("username", "johndoe")
    email = kwargs.pop("email", f"{username}_{uuid.uuid4().hex[:6]}@example.org")
    password = kwargs.pop("password", "Password123")

    return User.objects.create_user(
        username=username,
        email=email,
        password=password,
        first_name=kwargs.pop("first_name", "John"),
        last_name=kwargs.pop("last_name", "Doe"),
        bio=kwargs.pop("bio", "Test bio"),
        **kwargs,
    )


def recipe_fields(**overrides):
    """Valid create payload; override any key."""
    fields = {
        "title": "Lemon Drizzle Cake",
        "description": "A zesty sponge soaked in lemon syrup.",
        "prep_time": 20,
        "cook_time": 45,
        "servings": 8,
        "difficulty": "Easy",
        "cuisine": "British",
        "category": "Dessert",
        "ingredients": [
            {"name": "flour", "amount": "225", "unit": "g"},
            {"name": "lemons", "amount": "2", "unit": ""},
        ],
        "instructions": ["Cream butter and sugar", "Fold in flour", "Bake"],
        "tags": ["baking", "citrus"],
    }
    fields.update(overrides)
    return fields


def make_recipe(*, author=None, **extra):
    """
    creates and returns a recipe row directly, bypassing validation.
    Rating and like caches are derived from any reviews/likes passed in.
    """
    if author is None:
        author = make_user(username=f"chef_{uuid.uuid4().hex[:6]}")
    values = {
        "title": "Test recipe",
        "description": "desc",
        "prep_time": 10,
        "cook_time": 20,
        "servings": 2,
        "cuisine": "Italian",
        "category": "Dinner",
    }
    values.update(extra)
    recipe = Recipe(author=author, **values)
    recipe.refresh_rating_fields()
    recipe.likes_count = len(recipe.likes)
    recipe.save()
    return recipe


def png_upload(name="picture.png"):
    """A small real PNG, as a browser would upload it."""
    buffer = io.BytesIO()
    Image.new("RGB", (2, 2), "white").save(buffer, "PNG")
    return SimpleUploadedFile(name, buffer.getvalue(), content_type="image/png")
