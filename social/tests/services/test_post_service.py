from django.test import TestCase

from social.exceptions import NotFoundError, UnknownUserError
from social.models import Activity, Notification
from social.services import PostService
from social.tests.helpers import make_follow, make_users


class PostServiceTestCase(TestCase):
    def setUp(self):
        self.alice, self.bob, self.charlie, self.dana = make_users("Alice", "Bob", "Charlie", "Dana")
        self.service = PostService()

    def test_blog_fans_out_to_every_follower(self):
        make_follow(self.bob, self.alice)
        make_follow(self.charlie, self.alice)
        make_follow(self.alice, self.dana)

        result = self.service.post_blog(self.alice.id, "hello")

        self.assertEqual(result.notified, 2)
        self.assertEqual(result.activity.activity_type, Activity.BLOG)
        self.assertEqual(result.activity.content, "hello")
        notes = Notification.objects.filter(activity=result.activity)
        self.assertCountEqual([n.user_id for n in notes], [self.bob.id, self.charlie.id])
        self.assertEqual({n.content for n in notes}, {"Alice posted a new blog: hello"})

    def test_poster_is_not_notified(self):
        make_follow(self.bob, self.alice)
        self.service.post_blog(self.alice.id, "hello")
        self.assertFalse(Notification.objects.filter(user=self.alice).exists())

    def test_comment_message(self):
        make_follow(self.bob, self.alice)

        result = self.service.post_comment(self.alice.id, "nice")

        self.assertEqual(result.activity.activity_type, Activity.COMMENT)
        self.assertEqual(Notification.objects.get().content, "Alice commented: nice")

    def test_post_without_followers_creates_activity_only(self):
        result = self.service.post_blog(self.dana.id, "")

        self.assertEqual(result.notified, 0)
        self.assertEqual(Activity.objects.count(), 1)
        self.assertEqual(result.activity.content, "")
        self.assertFalse(Notification.objects.exists())

    def test_unknown_user_is_not_found_and_writes_nothing(self):
        with self.assertRaises(UnknownUserError) as ctx:
            self.service.post_blog(self.dana.id + 100, "ghost")

        self.assertIsInstance(ctx.exception, NotFoundError)
        self.assertFalse(Activity.objects.exists())

    def test_fan_out_uses_followers_at_call_time(self):
        edge = make_follow(self.bob, self.alice)
        self.service.post_blog(self.alice.id, "first")
        edge.delete()
        make_follow(self.charlie, self.alice)

        result = self.service.post_blog(self.alice.id, "second")

        self.assertEqual(
            list(Notification.objects.filter(activity=result.activity).values_list("user_id", flat=True)),
            [self.charlie.id],
        )
