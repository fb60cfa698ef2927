"""Registration, login and profile maintenance for API clients."""

import logging

from django.contrib.auth import authenticate, password_validation
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from rest_framework.authtoken.models import Token

from recipes.exceptions import AuthorizationError, ValidationError
from recipes.models.user import User
from recipes.repos.user_repo import UserRepo
from recipes.validators import (
    ProfileInputSerializer,
    RegistrationInputSerializer,
    password_field,
    run_field,
    validate_in_order,
)

logger = logging.getLogger(__name__)


class AccountService:
    """Encapsulate account creation, token issue and profile edits."""

    def __init__(self, *, repo: UserRepo | None = None) -> None:
        self.repo = repo or UserRepo()

    @staticmethod
    def token_for(user) -> str:
        token, _ = Token.objects.get_or_create(user=user)
        return token.key

    @transaction.atomic
    def register(self, data):
        """Create an account and return (user, token)."""
        cleaned = validate_in_order(RegistrationInputSerializer(), data)
        cleaned["email"] = cleaned["email"].lower()
        self._check_password(cleaned["password"], field="password")

        if User.objects.filter(username__iexact=cleaned["username"]).exists():
            raise ValidationError("A user with that username already exists", field="username")
        if self.repo.first_by_email(cleaned["email"]) is not None:
            raise ValidationError("A user with that email already exists", field="email")

        user = User.objects.create_user(**cleaned)
        logger.info("Registered user %s", user.pk)
        return user, self.token_for(user)

    def login(self, email, password):
        """Check credentials and return (user, token)."""
        user = self.repo.first_by_email(email or "")
        authed = None
        if user is not None:
            authed = authenticate(username=user.username, password=password or "")
        if authed is None:
            logger.warning("Failed login for %s", email)
            raise AuthorizationError("Invalid email or password")
        return authed, self.token_for(authed)

    @transaction.atomic
    def update_profile(self, user, data, avatar=None):
        """Update names, bio and avatar; only supplied keys change."""
        if avatar is not None:
            data = {**data, "avatar": avatar}
        cleaned = validate_in_order(ProfileInputSerializer(), data, partial=True)
        remove_avatar = cleaned.pop("remove_avatar", False)
        if cleaned.get("bio", "") is None:
            cleaned["bio"] = ""
        for name, value in cleaned.items():
            setattr(user, name, value)
        user.save(remove_avatar=remove_avatar)
        return user

    @transaction.atomic
    def change_password(self, user, current, new):
        if not user.check_password(current or ""):
            raise AuthorizationError("Current password is incorrect")
        new = run_field(password_field(), new, "new_password")
        self._check_password(new, field="new_password", user=user)
        user.set_password(new)
        user.save(update_fields=["password"])
        # old tokens stop working once the password changes
        Token.objects.filter(user=user).delete()
        logger.info("Password changed for user %s", user.pk)
        return self.token_for(user)

    def _check_password(self, password, *, field, user=None):
        try:
            password_validation.validate_password(password, user=user)
        except DjangoValidationError as exc:
            raise ValidationError(" ".join(exc.messages), field=field)
