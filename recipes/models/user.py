"""Custom user model with profile metadata, avatar helpers and favorite recipes."""

from django.core.validators import RegexValidator, MaxLengthValidator
from django.contrib.auth.models import AbstractUser
from django.db import models
from libgravatar import Gravatar


class User(AbstractUser):
    """Account record: credentials, profile fields and the favorite-recipe list."""

    username = models.CharField(
        max_length=30,
        unique=True,
        validators=[RegexValidator(
            regex=r'^\w{3,}$',
            message='Username must consist of at least three alphanumericals'
        )]
    )
    first_name = models.CharField(max_length=50, blank=False)
    last_name = models.CharField(max_length=50, blank=False)
    email = models.EmailField(unique=True, blank=False)
    bio = models.TextField(
        max_length=500,
        blank=True,
        help_text="short user bio shown on profile",
        validators=[MaxLengthValidator(500)]
    )
    avatar = models.ImageField(upload_to="avatars/", blank=True, null=True)

    # favorites live on the user, not on the recipe
    favorites = models.ManyToManyField(
        "recipes.Recipe",
        related_name="favorited_by",
        blank=True,
    )

    class Meta:
        """Default ordering for users."""
        ordering = ['last_name', 'first_name']

    def count_public_recipes(self):
        return self.recipes.filter(is_public=True).count()

    def has_favorited(self, recipe):
        """True when `recipe` is on this user's favorite list."""
        return self.favorites.filter(pk=recipe.pk).exists()

    def gravatar(self, size=120):
        """Return gravatar URL for the user's email."""
        gravatar_object = Gravatar(self.email)
        gravatar_url = gravatar_object.get_image(size=size, default='mp')
        return gravatar_url

    def avatar_or_gravatar(self, size=120):
        """Return uploaded avatar URL or a gravatar fallback."""
        if self.avatar:
            try:
                return self.avatar.url
            except ValueError:
                pass
        return self.gravatar(size=size)

    @property
    def avatar_url(self):
        """Preferred avatar URL for profile display."""
        return self.avatar_or_gravatar(size=200)

    def save(self, *args, **kwargs):
        """
        Override the save method to handle the 'remove_avatar' flag.
        """
        if kwargs.pop('remove_avatar', False):
            self.avatar = None
        super().save(*args, **kwargs)
