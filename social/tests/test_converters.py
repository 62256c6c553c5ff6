from django.test import SimpleTestCase

from social.converters import MAX_ID, UserIdConverter


class UserIdConverterTests(SimpleTestCase):
    def setUp(self):
        self.converter = UserIdConverter()

    def test_accepts_values_up_to_max_id(self):
        self.assertEqual(self.converter.to_python("42"), 42)
        self.assertEqual(self.converter.to_python(str(MAX_ID)), MAX_ID)

    def test_rejects_values_past_max_id(self):
        with self.assertRaises(ValueError):
            self.converter.to_python(str(MAX_ID + 1))
