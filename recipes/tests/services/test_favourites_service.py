import uuid

from django.test import TestCase

from recipes.exceptions import NotFoundError
from recipes.services.favourites import FavouriteService
from recipes.services.search import RecipeQuery
from recipes.tests.helpers import make_recipe, make_user


class FavouriteServiceTestCase(TestCase):

    def setUp(self):
        self.service = FavouriteService()
        self.user = make_user(username="eater")
        self.chef = make_user(username="chef")
        self.recipe = make_recipe(author=self.chef, title="Stew")

    def test_toggle_adds_then_removes(self):
        _, favorited = self.service.toggle(self.user, self.recipe.pk)
        self.assertTrue(favorited)
        self.assertTrue(self.user.has_favorited(self.recipe))

        _, favorited = self.service.toggle(self.user, self.recipe.pk)
        self.assertFalse(favorited)
        self.assertFalse(self.user.has_favorited(self.recipe))

    def test_toggle_missing_recipe(self):
        with self.assertRaises(NotFoundError):
            self.service.toggle(self.user, uuid.uuid4())

    def test_cannot_favorite_someone_elses_private_recipe(self):
        private = make_recipe(author=self.chef, is_public=False)
        with self.assertRaises(NotFoundError):
            self.service.toggle(self.user, private.pk)
        _, favorited = self.service.toggle(self.chef, private.pk)
        self.assertTrue(favorited)

    def test_list_for_user_pages_results(self):
        other = make_recipe(author=self.chef, title="Curry")
        self.user.favorites.add(self.recipe, other)

        page = self.service.list_for_user(self.user, RecipeQuery(sort_by="title"))

        self.assertEqual([r.title for r in page.results], ["Curry", "Stew"])
        self.assertEqual(page.total, 2)
