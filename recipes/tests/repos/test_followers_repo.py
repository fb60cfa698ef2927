from django.test import TestCase

from recipes.repos.followers_repo import FollowersRepo
from recipes.tests.helpers import make_user


class FollowersRepoTestCase(TestCase):

    def setUp(self):
        self.repo = FollowersRepo()
        self.alice = make_user(username="alice")
        self.bob = make_user(username="bob")
        self.cara = make_user(username="cara")

    def test_follow_is_idempotent(self):
        first = self.repo.follow(follower_id=self.alice.pk, author_id=self.bob.pk)
        second = self.repo.follow(follower_id=self.alice.pk, author_id=self.bob.pk)
        self.assertEqual(first.pk, second.pk)
        self.assertTrue(self.repo.is_following(follower_id=self.alice.pk, author_id=self.bob.pk))
        self.assertFalse(self.repo.is_following(follower_id=self.bob.pk, author_id=self.alice.pk))

    def test_unfollow_returns_removed_count(self):
        self.repo.follow(follower_id=self.alice.pk, author_id=self.bob.pk)
        self.assertEqual(self.repo.unfollow(follower_id=self.alice.pk, author_id=self.bob.pk), 1)
        self.assertEqual(self.repo.unfollow(follower_id=self.alice.pk, author_id=self.bob.pk), 0)

    def test_followers_and_following_lists(self):
        self.repo.follow(follower_id=self.alice.pk, author_id=self.bob.pk)
        self.repo.follow(follower_id=self.cara.pk, author_id=self.bob.pk)
        self.repo.follow(follower_id=self.bob.pk, author_id=self.cara.pk)

        self.assertEqual(self.repo.followers_of(self.bob.pk), [self.alice, self.cara])
        self.assertEqual(self.repo.followed_by(self.bob.pk), [self.cara])
