"""
Input validation for recipes, reviews, accounts and query parameters.

Inputs are described as DRF serializers and checked field by field in
declaration order, so the first violated constraint is the one reported.
Failures surface as `recipes.exceptions.ValidationError` naming the
offending field. Create and update share the same serializer; update passes
`partial=True` so only supplied keys are checked.
"""

import json

from django.core.validators import RegexValidator
from rest_framework import serializers

from recipes.exceptions import ValidationError
from recipes.models.recipe import CATEGORIES, DIFFICULTIES, renumber_instructions

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000
COMMENT_MAX_LENGTH = 500
IMAGE_MAX_LENGTH = 500
CUISINE_MAX_LENGTH = 100
NAME_MAX_LENGTH = 50
BIO_MAX_LENGTH = 500
MIN_PASSWORD_LENGTH = 6
MAX_UPLOAD_BYTES = 5 * 1024 * 1024

# one week, in minutes
MAX_MINUTES = 7 * 24 * 60
MAX_SERVINGS = 1000

# caches and lists that only their own operations may change; featuring is
# curated from the admin
READ_ONLY_FIELDS = ("average_rating", "total_reviews", "likes_count", "reviews", "likes", "author", "is_featured")

LABELS = {
    "title": "Recipe title",
    "description": "Recipe description",
    "prep_time": "Preparation time",
    "cook_time": "Cooking time",
    "servings": "Number of servings",
    "cuisine": "Cuisine type",
    "category": "Recipe category",
    "difficulty": "Difficulty",
    "image": "Image",
    "ingredients": "Ingredients",
    "instructions": "Instructions",
    "tags": "Tags",
}

ITEM_LABELS = {"ingredients": "Ingredient", "instructions": "Instruction", "tags": "Tag"}


def error_messages(label, **extra):
    """DRF error_messages that name the field the way API clients see it."""
    messages = {
        "required": f"{label} is required",
        "null": f"{label} is required",
        "blank": f"{label} is required",
        "invalid": f"{label} is not valid",
    }
    messages.update(extra)
    return messages


def _first_message(detail, item_label):
    """Dig the first message out of DRF error detail, naming list positions."""
    if isinstance(detail, dict):
        key, value = next(iter(detail.items()))
        message = _first_message(value, item_label)
        if isinstance(key, int):
            return f"{item_label} {key + 1}: {message}"
        return message
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0], item_label)
    return str(detail)


def run_field(field, value, name):
    """Run one serializer field over `value`, re-raising its first error for `name`."""
    try:
        return field.run_validation(value)
    except serializers.ValidationError as exc:
        raise ValidationError(_first_message(exc.detail, ITEM_LABELS.get(name, "Item")), field=name)


def validate_in_order(serializer, data, *, partial=False):
    """
    Validate `data` against `serializer`'s fields in declaration order.

    Unknown keys are ignored. A missing required field fails unless
    `partial` is set.
    """
    cleaned = {}
    for name, field in serializer.fields.items():
        if name not in data:
            if field.required and not partial:
                raise ValidationError(str(field.error_messages["required"]), field=name)
            continue
        cleaned[name] = run_field(field, data[name], name)
    return cleaned


def coerce_int(value, field):
    """Return `value` as an int; accepts integral strings and floats, never bools."""
    label = LABELS.get(field, field)
    number = serializers.IntegerField(
        error_messages=error_messages(label, invalid=f"{label} must be a whole number", null=f"{label} must be a whole number"),
    )
    return run_field(number, value, field)


def _text(label, max_length, **kwargs):
    return serializers.CharField(
        max_length=max_length,
        trim_whitespace=True,
        error_messages=error_messages(
            label,
            invalid=f"{label} must be text",
            max_length=f"{label} cannot exceed {max_length} characters",
        ),
        **kwargs,
    )


def _whole_number(label, min_value, max_value, too_small):
    return serializers.IntegerField(
        min_value=min_value,
        max_value=max_value,
        error_messages=error_messages(
            label,
            invalid=f"{label} must be a whole number",
            min_value=too_small,
            max_value=f"{label} cannot exceed {max_value}",
        ),
    )


def _choice(label, choices, **kwargs):
    return serializers.ChoiceField(
        choices=choices,
        error_messages=error_messages(label, invalid_choice=f"{label} must be one of: {', '.join(choices)}"),
        **kwargs,
    )


def _upload_size(upload):
    if upload.size > MAX_UPLOAD_BYTES:
        raise serializers.ValidationError("Image cannot be larger than 5 MB")


def image_upload_field(**kwargs):
    """An uploaded picture; Pillow must be able to open it."""
    return serializers.ImageField(
        validators=[_upload_size],
        error_messages=error_messages(
            "Image",
            invalid="Image must be an uploaded file",
            invalid_image="Image must be a JPEG, PNG, GIF or WebP file",
            empty="Image is empty",
        ),
        **kwargs,
    )


def password_field():
    return serializers.CharField(
        trim_whitespace=False,
        min_length=MIN_PASSWORD_LENGTH,
        error_messages=error_messages(
            "Password",
            invalid="Password must be text",
            min_length=f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
        ),
    )


class JSONListField(serializers.ListField):
    """A list that may also arrive JSON-encoded, as multipart forms send it."""

    def to_internal_value(self, data):
        if isinstance(data, str):
            try:
                data = json.loads(data)
            except ValueError:
                self.fail("not_a_list", input_type="str")
        return super().to_internal_value(data)


class IngredientSerializer(serializers.Serializer):
    name = serializers.CharField(error_messages=error_messages("name", invalid="name must be text"))
    amount = serializers.CharField(error_messages=error_messages("amount", invalid="amount must be text"))
    unit = serializers.CharField(allow_blank=True, default="", error_messages=error_messages("unit", invalid="unit must be text"))


class InstructionSerializer(serializers.Serializer):
    """One step; a bare string is taken as its description."""

    step = serializers.IntegerField(required=False, allow_null=True)
    description = serializers.CharField(error_messages=error_messages("description", invalid="description must be text"))

    def to_internal_value(self, data):
        if isinstance(data, str):
            data = {"description": data}
        return super().to_internal_value(data)


class IngredientListField(JSONListField):

    def __init__(self, **kwargs):
        kwargs.setdefault("error_messages", error_messages("Ingredients", not_a_list="Ingredients must be a list"))
        super().__init__(child=IngredientSerializer(error_messages={"invalid": "must be an object"}), **kwargs)

    def to_internal_value(self, data):
        return [dict(item) for item in super().to_internal_value(data)]


class InstructionListField(JSONListField):
    """Submitted steps, renumbered 1..N in list order."""

    def __init__(self, **kwargs):
        kwargs.setdefault("error_messages", error_messages("Instructions", not_a_list="Instructions must be a list"))
        super().__init__(child=InstructionSerializer(error_messages={"invalid": "must be an object"}), **kwargs)

    def to_internal_value(self, data):
        steps = super().to_internal_value(data)
        return renumber_instructions({"description": item["description"]} for item in steps)


class TagListField(JSONListField):
    """Tags as a list, a JSON list or a comma separated string; blanks dropped."""

    def __init__(self, **kwargs):
        kwargs.setdefault("error_messages", error_messages("Tags", not_a_list="Tags must be a list"))
        super().__init__(child=serializers.CharField(allow_blank=True), **kwargs)

    def to_internal_value(self, data):
        if isinstance(data, str) and not data.strip().startswith("["):
            data = data.split(",")
        return [tag for tag in super().to_internal_value(data) if tag]


class RecipeInputSerializer(serializers.Serializer):
    """Author-editable recipe fields, in the order they are checked."""

    title = _text(LABELS["title"], TITLE_MAX_LENGTH)
    description = _text(LABELS["description"], DESCRIPTION_MAX_LENGTH)
    prep_time = _whole_number(LABELS["prep_time"], 1, MAX_MINUTES, "Preparation time must be at least 1 minute")
    cook_time = _whole_number(LABELS["cook_time"], 0, MAX_MINUTES, "Cooking time cannot be negative")
    servings = _whole_number(LABELS["servings"], 1, MAX_SERVINGS, "Servings must be at least 1")
    difficulty = _choice(LABELS["difficulty"], DIFFICULTIES, required=False)
    cuisine = _text(LABELS["cuisine"], CUISINE_MAX_LENGTH)
    category = _choice(LABELS["category"], CATEGORIES)
    image = _text(LABELS["image"], IMAGE_MAX_LENGTH, required=False, allow_blank=True, allow_null=True)
    is_public = serializers.BooleanField(
        required=False,
        error_messages=error_messages("is_public", invalid="is_public must be true or false"),
    )
    ingredients = IngredientListField(required=False)
    instructions = InstructionListField(required=False)
    tags = TagListField(required=False)


def clean_ingredients(value):
    return run_field(IngredientListField(), value, "ingredients")


def clean_instructions(value):
    return run_field(InstructionListField(), value, "instructions")


def clean_tags(value):
    return run_field(TagListField(), value, "tags")


def clean_recipe_fields(data, *, partial=False):
    """
    Validate recipe input and return a dict of cleaned values.

    Unknown keys are ignored. Derived, engagement and curation fields are
    refused.
    """
    for name in READ_ONLY_FIELDS:
        if name in data:
            raise ValidationError(f"{name} cannot be set directly", field=name)

    cleaned = validate_in_order(RecipeInputSerializer(), data, partial=partial)
    if "image" in cleaned and cleaned["image"] is None:
        cleaned["image"] = ""
    return cleaned


class ReviewInputSerializer(serializers.Serializer):
    rating = serializers.IntegerField(
        min_value=1,
        max_value=5,
        error_messages=error_messages(
            "Rating",
            invalid="Rating must be a whole number",
            min_value="Rating must be between 1 and 5",
            max_value="Rating must be between 1 and 5",
        ),
    )
    comment = _text("Comment", COMMENT_MAX_LENGTH, required=False, allow_blank=True, allow_null=True)


def clean_review(rating, comment=None):
    """Return (rating, comment) for a review or raise on the first bad value."""
    cleaned = validate_in_order(ReviewInputSerializer(), {"rating": rating, "comment": comment})
    return cleaned["rating"], cleaned["comment"] or ""


class RegistrationInputSerializer(serializers.Serializer):
    username = serializers.CharField(
        validators=[RegexValidator(r"^\w{3,30}$", message="Username must be 3-30 letters, digits or underscores")],
        error_messages=error_messages("Username", invalid="Username must be text"),
    )
    email = serializers.EmailField(error_messages=error_messages("Email", invalid="Enter a valid email address"))
    first_name = _text("First name", NAME_MAX_LENGTH)
    last_name = _text("Last name", NAME_MAX_LENGTH)
    password = password_field()
    bio = _text("Bio", BIO_MAX_LENGTH, required=False, allow_blank=True)


class ProfileInputSerializer(serializers.Serializer):
    """Profile edits; always validated partially."""

    first_name = _text("First name", NAME_MAX_LENGTH)
    last_name = _text("Last name", NAME_MAX_LENGTH)
    bio = _text("Bio", BIO_MAX_LENGTH, allow_blank=True, allow_null=True)
    avatar = image_upload_field()
    remove_avatar = serializers.BooleanField(
        error_messages=error_messages("remove_avatar", invalid="remove_avatar must be true or false"),
    )
