from django.test import TestCase

from social.repos import UserRepo
from social.tests.helpers import make_user


class UserRepoTests(TestCase):
    def setUp(self):
        self.repo = UserRepo()
        self.u1 = make_user("Alpha")
        self.u2 = make_user("Bravo")

    def test_list_all_returns_users_by_id(self):
        self.assertEqual(self.repo.list_all(), [self.u1, self.u2])

    def test_find_by_id_missing_returns_none(self):
        self.assertIsNone(self.repo.find_by_id(self.u2.id + 100))

    def test_create_many_keeps_order(self):
        created = self.repo.create_many(["X", "Y"])
        self.assertEqual([u.name for u in created], ["X", "Y"])
        self.assertTrue(all(u.pk for u in created))
