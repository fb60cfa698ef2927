import shutil
import tempfile
import uuid

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from django.urls import reverse
from rest_framework.test import APIClient

from recipes.models import Recipe
from recipes.tests.helpers import make_recipe, make_user, png_upload, recipe_fields


class RecipeApiViewTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = make_user(username="johndoe")
        self.other_user = make_user(username="other")
        self.client.force_authenticate(user=self.user)
        self.list_url = reverse("recipe_list_api")

    def _detail_url(self, recipe_id):
        return reverse("recipe_detail_api", args=[recipe_id])

    def test_search_is_public(self):
        make_recipe(author=self.other_user, title="Garlic butter pasta")
        response = APIClient().get(self.list_url)
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.data["success"])
        self.assertEqual(response.data["total"], 1)
        self.assertEqual(response.data["data"][0]["author"]["username"], "other")

    def test_search_filters_and_envelope(self):
        make_recipe(author=self.user, title="Garlic butter pasta", cuisine="Italian")
        make_recipe(author=self.user, title="Tomato soup", cuisine="British", category="Soup")
        response = self.client.get(self.list_url, {"q": "garlic"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual([r["title"] for r in response.data["data"]], ["Garlic butter pasta"])
        self.assertEqual((response.data["page"], response.data["pages"], response.data["page_size"]), (1, 1, 12))

    def test_bad_query_parameter_is_400(self):
        response = self.client.get(self.list_url, {"max_time": "soon"})
        self.assertEqual(response.status_code, 400)
        self.assertFalse(response.data["success"])
        self.assertEqual(response.data["field"], "max_time")

    def test_create_requires_authentication(self):
        response = APIClient().post(self.list_url, recipe_fields(), format="json")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(Recipe.objects.count(), 0)

    def test_user_can_create_recipe(self):
        response = self.client.post(self.list_url, recipe_fields(), format="json")
        self.assertEqual(response.status_code, 201)
        recipe = Recipe.objects.get()
        self.assertEqual(recipe.author, self.user)
        self.assertEqual(response.data["data"]["id"], str(recipe.id))
        self.assertEqual(response.data["data"]["total_time"], 65)
        self.assertEqual(response.data["data"]["average_rating"], 0)

    def test_create_with_invalid_field(self):
        response = self.client.post(self.list_url, recipe_fields(cook_time=-1), format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["field"], "cook_time")
        self.assertEqual(response.data["message"], "Cooking time cannot be negative")

    def test_create_with_uploaded_image(self):
        media_root = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, media_root, ignore_errors=True)
        data = recipe_fields(
            ingredients='[{"name": "flour", "amount": "200", "unit": "g"}]',
            instructions='["Mix", "Bake"]',
            tags="baking",
        )
        data["image"] = png_upload("cake.png")

        with override_settings(MEDIA_ROOT=media_root):
            response = self.client.post(self.list_url, data, format="multipart")

        self.assertEqual(response.status_code, 201)
        recipe = Recipe.objects.get()
        self.assertTrue(recipe.image.startswith("/media/recipes/"))
        self.assertEqual(recipe.instructions[1], {"description": "Bake", "step": 2})

    def test_create_rejects_non_image_upload(self):
        data = recipe_fields(ingredients="[]", instructions="[]", tags="")
        data["image"] = SimpleUploadedFile("notes.txt", b"hello", content_type="text/plain")
        response = self.client.post(self.list_url, data, format="multipart")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["field"], "image")

    def test_create_rejects_file_that_is_not_really_an_image(self):
        data = recipe_fields(ingredients="[]", instructions="[]", tags="")
        data["image"] = SimpleUploadedFile("cake.png", b"not a png", content_type="image/png")
        response = self.client.post(self.list_url, data, format="multipart")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["field"], "image")
        self.assertEqual(Recipe.objects.count(), 0)

    def test_create_rejects_oversized_times(self):
        response = self.client.post(self.list_url, recipe_fields(cook_time=10 ** 20), format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["field"], "cook_time")

    def test_author_cannot_set_featured_flag(self):
        response = self.client.post(self.list_url, recipe_fields(is_featured=True), format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["field"], "is_featured")
        self.assertEqual(Recipe.objects.count(), 0)

    def test_detail_populates_reviewers(self):
        recipe = make_recipe(author=self.other_user)
        recipe.add_or_replace_review(self.user.pk, 4, "good")
        recipe.add_or_replace_review(999999, 2, "ghost")
        recipe.save()

        response = self.client.get(self._detail_url(recipe.pk))

        self.assertEqual(response.status_code, 200)
        reviews = response.data["data"]["reviews"]
        self.assertEqual(reviews[0]["user"]["username"], "johndoe")
        self.assertIsNone(reviews[1]["user"])
        self.assertFalse(response.data["data"]["is_liked"])

    def test_private_recipe_is_404_for_others(self):
        recipe = make_recipe(author=self.other_user, is_public=False)
        self.assertEqual(self.client.get(self._detail_url(recipe.pk)).status_code, 404)

        owner = APIClient()
        owner.force_authenticate(user=self.other_user)
        self.assertEqual(owner.get(self._detail_url(recipe.pk)).status_code, 200)

    def test_missing_recipe_is_404(self):
        response = self.client.get(self._detail_url(uuid.uuid4()))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["message"], "Recipe not found")

    def test_author_can_patch(self):
        recipe = make_recipe(author=self.user)
        response = self.client.patch(self._detail_url(recipe.pk), {"title": "Renamed"}, format="json")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["data"]["title"], "Renamed")

    def test_non_author_update_is_403(self):
        recipe = make_recipe(author=self.other_user)
        response = self.client.put(self._detail_url(recipe.pk), {"title": "Mine now"}, format="json")
        self.assertEqual(response.status_code, 403)

    def test_non_author_delete_is_403(self):
        recipe = make_recipe(author=self.other_user)
        response = self.client.delete(self._detail_url(recipe.pk))
        self.assertEqual(response.status_code, 403)
        self.assertTrue(Recipe.objects.filter(pk=recipe.pk).exists())

    def test_author_can_delete(self):
        recipe = make_recipe(author=self.user)
        response = self.client.delete(self._detail_url(recipe.pk))
        self.assertEqual(response.status_code, 200)
        self.assertFalse(Recipe.objects.exists())


class RecipeEngagementApiTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = make_user(username="johndoe")
        self.chef = make_user(username="chef")
        self.client.force_authenticate(user=self.user)
        self.recipe = make_recipe(author=self.chef)

    def test_like_toggles(self):
        url = reverse("toggle_like", args=[self.recipe.pk])
        response = self.client.post(url)
        self.assertEqual(response.data["data"], {"liked": True, "likes_count": 1})
        response = self.client.post(url)
        self.assertEqual(response.data["data"], {"liked": False, "likes_count": 0})

    def test_like_requires_authentication(self):
        response = APIClient().post(reverse("toggle_like", args=[self.recipe.pk]))
        self.assertEqual(response.status_code, 401)

    def test_favorite_toggles(self):
        url = reverse("toggle_favorite", args=[self.recipe.pk])
        self.assertTrue(self.client.post(url).data["data"]["favorited"])
        self.assertTrue(self.user.favorites.filter(pk=self.recipe.pk).exists())
        self.assertFalse(self.client.post(url).data["data"]["favorited"])

    def test_review_create_and_replace(self):
        url = reverse("add_review", args=[self.recipe.pk])
        self.client.post(url, {"rating": 5, "comment": "great"}, format="json")
        response = self.client.post(url, {"rating": 3}, format="json")
        self.assertEqual(response.status_code, 200)
        data = response.data["data"]
        self.assertEqual((data["average_rating"], data["total_reviews"]), (3.0, 1))

    def test_review_rating_out_of_range(self):
        url = reverse("add_review", args=[self.recipe.pk])
        response = self.client.post(url, {"rating": 9}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["field"], "rating")

    def test_remove_instruction(self):
        self.recipe.instructions = [
            {"step": 1, "description": "one"},
            {"step": 2, "description": "two"},
        ]
        self.recipe.save()
        owner = APIClient()
        owner.force_authenticate(user=self.chef)

        response = owner.delete(reverse("remove_instruction", args=[self.recipe.pk, 0]))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["data"]["instructions"], [{"step": 1, "description": "two"}])

    def test_remove_instruction_out_of_range(self):
        owner = APIClient()
        owner.force_authenticate(user=self.chef)
        response = owner.delete(reverse("remove_instruction", args=[self.recipe.pk, 5]))
        self.assertEqual(response.status_code, 400)

    def test_recent_and_featured(self):
        make_recipe(author=self.chef, title="Star", is_featured=True)
        featured = self.client.get(reverse("featured_recipes"))
        self.assertEqual([r["title"] for r in featured.data["data"]], ["Star"])
        recent = self.client.get(reverse("recent_recipes"), {"limit": "1"})
        self.assertEqual(len(recent.data["data"]), 1)
