from django.test import SimpleTestCase
from rest_framework import exceptions as drf_exceptions

from social.exceptions import (
    DuplicateEdgeError,
    EdgeNotFoundError,
    SelfReferenceError,
    UnknownUserError,
    api_exception_handler,
)


class ExceptionHandlerTests(SimpleTestCase):
    def test_domain_errors_map_to_status_and_kind(self):
        cases = [
            (SelfReferenceError("follow"), 400, "validation_error"),
            (DuplicateEdgeError(1, 2), 409, "conflict"),
            (EdgeNotFoundError(1, 2), 404, "not_found"),
            (UnknownUserError(9), 404, "not_found"),
        ]
        for exc, status_code, kind in cases:
            with self.subTest(exc=type(exc).__name__):
                response = api_exception_handler(exc, {})
                self.assertEqual(response.status_code, status_code)
                self.assertEqual(response.data["error"]["kind"], kind)
                self.assertEqual(response.data["error"]["message"], exc.message)

    def test_to_dict(self):
        self.assertEqual(
            UnknownUserError(9).to_dict(),
            {"kind": "not_found", "message": "User 9 does not exist"},
        )

    def test_drf_validation_error_is_flattened(self):
        exc = drf_exceptions.ValidationError({"userId": ["A valid integer is required."]})
        response = api_exception_handler(exc, {})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"]["message"], "userId: A valid integer is required.")
