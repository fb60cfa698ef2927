from django.test import TestCase
from rest_framework.authtoken.models import Token

from recipes.exceptions import AuthorizationError, ValidationError
from recipes.models import User
from recipes.services.accounts import AccountService
from recipes.tests.helpers import make_user


class AccountServiceTestCase(TestCase):

    def setUp(self):
        self.service = AccountService()
        self.data = {
            "username": "newcook",
            "email": "NewCook@Example.org",
            "password": "Password123",
            "first_name": "New",
            "last_name": "Cook",
        }

    def test_register_creates_user_and_token(self):
        user, token = self.service.register(self.data)
        self.assertEqual(user.email, "newcook@example.org")
        self.assertTrue(user.check_password("Password123"))
        self.assertEqual(Token.objects.get(user=user).key, token)

    def test_register_rejects_duplicates(self):
        make_user(username="newcook")
        with self.assertRaises(ValidationError) as ctx:
            self.service.register(self.data)
        self.assertIn("already exists", ctx.exception.message)
        self.assertEqual(ctx.exception.field, "username")

    def test_register_rejects_duplicate_email(self):
        make_user(username="someone", email="newcook@example.org")
        with self.assertRaises(ValidationError) as ctx:
            self.service.register(self.data)
        self.assertEqual(ctx.exception.field, "email")

    def test_register_validates_fields(self):
        for key, value in (("username", "a b"), ("email", "nope"), ("password", "123"), ("first_name", "")):
            with self.subTest(key=key):
                with self.assertRaises(ValidationError) as ctx:
                    self.service.register({**self.data, key: value})
                self.assertEqual(ctx.exception.field, key)
        self.assertFalse(User.objects.exists())

    def test_login(self):
        user, _ = self.service.register(self.data)
        logged_in, token = self.service.login("newcook@example.org", "Password123")
        self.assertEqual(logged_in, user)
        self.assertTrue(token)

    def test_login_with_bad_credentials(self):
        self.service.register(self.data)
        with self.assertRaises(AuthorizationError):
            self.service.login("newcook@example.org", "wrong-password")
        with self.assertRaises(AuthorizationError):
            self.service.login("ghost@example.org", "Password123")

    def test_update_profile_only_changes_supplied_keys(self):
        user = make_user(first_name="Old", bio="old bio")
        self.service.update_profile(user, {"bio": "  fresh bio "})
        user.refresh_from_db()
        self.assertEqual((user.first_name, user.bio), ("Old", "fresh bio"))

    def test_change_password(self):
        user = make_user()
        old_token = self.service.token_for(user)

        new_token = self.service.change_password(user, "Password123", "Secret456")

        user.refresh_from_db()
        self.assertTrue(user.check_password("Secret456"))
        self.assertNotEqual(old_token, new_token)

    def test_change_password_errors(self):
        user = make_user()
        with self.assertRaises(AuthorizationError):
            self.service.change_password(user, "wrong", "Secret456")
        with self.assertRaises(ValidationError):
            self.service.change_password(user, "Password123", "short")
