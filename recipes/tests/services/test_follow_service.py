from django.contrib.auth.models import AnonymousUser
from django.test import TestCase

from recipes.exceptions import AuthorizationError, ValidationError
from recipes.models import Follower
from recipes.services import FollowService
from recipes.tests.helpers import make_user


class FollowServiceTestCase(TestCase):

    def setUp(self):
        self.alice = make_user(username="alice")
        self.bob = make_user(username="bob")

    def test_follow_creates_relation(self):
        service = FollowService(self.alice)
        self.assertTrue(service.follow(self.bob))
        self.assertTrue(Follower.objects.filter(follower=self.alice, author=self.bob).exists())
        self.assertTrue(service.is_following(self.bob))

    def test_follow_twice_keeps_one_edge(self):
        service = FollowService(self.alice)
        service.follow(self.bob)
        service.follow(self.bob)
        self.assertEqual(Follower.objects.count(), 1)

    def test_unfollow(self):
        service = FollowService(self.alice)
        service.follow(self.bob)
        self.assertTrue(service.unfollow(self.bob))
        self.assertFalse(service.unfollow(self.bob))
        self.assertFalse(service.is_following(self.bob))

    def test_cannot_follow_self(self):
        with self.assertRaises(ValidationError):
            FollowService(self.alice).follow(self.alice)

    def test_anonymous_actor(self):
        service = FollowService(AnonymousUser())
        self.assertFalse(service.is_following(self.bob))
        with self.assertRaises(AuthorizationError):
            service.follow(self.bob)
