from unittest.mock import patch

from django.db import IntegrityError
from django.test import TestCase

from social.exceptions import (
    ConflictError,
    DuplicateEdgeError,
    EdgeNotFoundError,
    NotFoundError,
    SelfReferenceError,
    UnknownUserError,
    ValidationError,
)
from social.models import Activity, Follow, Notification
from social.services import FollowReadService, FollowService
from social.tests.helpers import make_follow, make_users


class FollowServiceTestCase(TestCase):
    def setUp(self):
        self.alice, self.bob, self.charlie = make_users("Alice", "Bob", "Charlie")
        self.service = FollowService()

    def test_follow_creates_edge_activity_and_notification(self):
        activity = self.service.follow(self.bob.id, self.alice.id)

        self.assertTrue(Follow.objects.filter(follower=self.bob, followee=self.alice).exists())
        self.assertEqual(activity.activity_type, Activity.FOLLOW)
        self.assertEqual(activity.user, self.bob)
        self.assertEqual(activity.content, f"Bob followed User {self.alice.id}")
        note = Notification.objects.get()
        self.assertEqual(note.user, self.alice)
        self.assertEqual(note.activity, activity)
        self.assertEqual(note.content, "You have a new follower: Bob!")

    def test_following_list_contains_followee_once(self):
        self.service.follow(self.alice.id, self.bob.id)
        self.assertEqual(FollowReadService().following_ids(self.alice.id), [self.bob.id])

    def test_duplicate_follow_is_conflict_and_has_no_side_effects(self):
        self.service.follow(self.bob.id, self.alice.id)

        with self.assertRaises(DuplicateEdgeError) as ctx:
            self.service.follow(self.bob.id, self.alice.id)

        self.assertIsInstance(ctx.exception, ConflictError)
        self.assertEqual(Follow.objects.count(), 1)
        self.assertEqual(Activity.objects.count(), 1)
        self.assertEqual(Notification.objects.count(), 1)

    def test_self_follow_is_validation_error(self):
        make_follow(self.bob, self.alice)
        for action in (self.service.follow, self.service.unfollow):
            with self.subTest(action=action.__name__):
                with self.assertRaises(SelfReferenceError) as ctx:
                    action(self.alice.id, self.alice.id)
                self.assertIsInstance(ctx.exception, ValidationError)
        self.assertFalse(Activity.objects.exists())

    def test_self_follow_checked_before_user_lookup(self):
        with self.assertRaises(SelfReferenceError):
            self.service.follow(999, 999)

    def test_follow_unknown_user_is_not_found(self):
        with self.assertRaises(UnknownUserError):
            self.service.follow(self.bob.id, 999)
        with self.assertRaises(UnknownUserError):
            self.service.follow(999, self.bob.id)
        self.assertFalse(Follow.objects.exists())

    def test_unfollow_removes_edge_and_notifies_followee(self):
        make_follow(self.bob, self.alice)

        activity = self.service.unfollow(self.bob.id, self.alice.id)

        self.assertFalse(Follow.objects.exists())
        self.assertEqual(activity.activity_type, Activity.UNFOLLOW)
        self.assertEqual(activity.content, f"Bob unfollowed User {self.alice.id}")
        note = Notification.objects.get()
        self.assertEqual(note.user, self.alice)
        self.assertEqual(note.content, "Bob unfollowed you")

    def test_unfollow_missing_edge_is_not_found_without_side_effects(self):
        with self.assertRaises(EdgeNotFoundError) as ctx:
            self.service.unfollow(self.bob.id, self.alice.id)

        self.assertIsInstance(ctx.exception, NotFoundError)
        self.assertFalse(Activity.objects.exists())
        self.assertFalse(Notification.objects.exists())

    def test_follow_after_unfollow_is_allowed(self):
        self.service.follow(self.bob.id, self.alice.id)
        self.service.unfollow(self.bob.id, self.alice.id)
        self.service.follow(self.bob.id, self.alice.id)

        self.assertEqual(Follow.objects.count(), 1)
        self.assertEqual(Activity.objects.count(), 3)
        self.assertEqual(Notification.objects.filter(user=self.alice).count(), 3)

    def test_race_on_insert_reported_as_duplicate(self):
        with patch.object(self.service.follows, "is_following", return_value=False), \
                patch.object(self.service.follows, "follow", side_effect=IntegrityError("unique")):
            with self.assertRaises(DuplicateEdgeError):
                self.service.follow(self.bob.id, self.alice.id)

        self.assertFalse(Activity.objects.exists())
        self.assertFalse(Notification.objects.exists())
