import uuid

from django.test import TestCase
from recipes.db_accessor import DB_Accessor
from recipes.exceptions import NotFoundError
from recipes.models import Recipe, User
from recipes.tests.helpers import make_recipe, make_user


class DBAccessorTests(TestCase):

    def setUp(self):
        self.user = make_user()
        self.obj1 = make_recipe(author=self.user, title="Soup", category="Soup")
        self.obj2 = make_recipe(author=self.user, title="Cake", category="Dessert")
        self.repo = DB_Accessor(Recipe)

    # ---------- slice() ----------

    def test_slice_limit_and_offset(self):
        qs = Recipe.objects.order_by("title")
        self.assertEqual([r.title for r in self.repo.slice(qs, limit=1)], ["Cake"])
        self.assertEqual([r.title for r in self.repo.slice(qs, offset=1, limit=1)], ["Soup"])

    def test_slice_offset_no_limit(self):
        self.assertEqual(len(self.repo.slice(self.repo.all(), offset=1)), 1)

    # ---------- get() ----------

    def test_get_returns_object(self):
        self.assertEqual(self.repo.get(id=self.obj1.id), self.obj1)

    def test_get_missing_raises_not_found(self):
        with self.assertRaises(NotFoundError):
            self.repo.get(id=uuid.uuid4())

    def test_get_malformed_id_raises_not_found(self):
        with self.assertRaises(NotFoundError):
            self.repo.get(id="not-a-uuid")

    def test_get_out_of_range_id_raises_not_found(self):
        with self.assertRaises(NotFoundError):
            DB_Accessor(User).get(id=10 ** 20)

    # ---------- delete() ----------

    def test_delete_returns_count(self):
        self.assertEqual(self.repo.delete(title="Cake"), 1)
        self.assertFalse(self.repo.exists(title="Cake"))
