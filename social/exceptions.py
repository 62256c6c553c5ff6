"""
Domain errors for the social app and the DRF handler that renders them.

Services raise these without knowing about HTTP; `api_exception_handler`
turns them (and anything else that escapes a view) into
`{"error": {"kind": ..., "message": ...}}` payloads.
"""

import logging

from django.conf import settings
from django.http import Http404
from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class SocialError(Exception):
    """Base exception for the social app."""
    kind = "social_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self):
        return {"kind": self.kind, "message": self.message}


class ValidationError(SocialError):
    """Request is well formed but violates a domain rule."""
    kind = "validation_error"


class ConflictError(SocialError):
    """Operation would break a uniqueness invariant."""
    kind = "conflict"


class NotFoundError(SocialError):
    """A referenced user or edge does not exist."""
    kind = "not_found"


class ResetDisabledError(SocialError):
    """Storage reset was requested while it is switched off."""
    kind = "forbidden"

    def __init__(self, message: str = "Storage reset is disabled"):
        super().__init__(message)


class SelfReferenceError(ValidationError):
    def __init__(self, action: str = "follow"):
        super().__init__(f"Can't {action} self")


class DuplicateEdgeError(ConflictError):
    def __init__(self, follower_id, followee_id):
        self.follower_id = follower_id
        self.followee_id = followee_id
        super().__init__("Already following this user")


class EdgeNotFoundError(NotFoundError):
    def __init__(self, follower_id, followee_id):
        self.follower_id = follower_id
        self.followee_id = followee_id
        super().__init__("Not following this user")


class UnknownUserError(NotFoundError):
    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__(f"User {user_id} does not exist")


UNHANDLED_KIND = "unhandled_error"

STATUS_BY_KIND = {
    ValidationError.kind: status.HTTP_400_BAD_REQUEST,
    ConflictError.kind: status.HTTP_409_CONFLICT,
    NotFoundError.kind: status.HTTP_404_NOT_FOUND,
    ResetDisabledError.kind: status.HTTP_403_FORBIDDEN,
}


def error_response(body, status_code, **extra):
    """Wrap an error body (`kind`, `message`, extras) in the JSON payload shared by every failure path."""
    return Response({"error": {**body, **extra}}, status=status_code)


def _drf_message(detail):
    """Flatten DRF error details (str, list or dict of lists) into one line."""
    if isinstance(detail, dict):
        parts = []
        for field, errors in detail.items():
            text = _drf_message(errors)
            parts.append(text if field == "non_field_errors" else f"{field}: {text}")
        return "; ".join(parts)
    if isinstance(detail, (list, tuple)):
        return " ".join(_drf_message(item) for item in detail)
    return str(detail)


def api_exception_handler(exc, context):
    """
    DRF EXCEPTION_HANDLER for the JSON API.

    - SocialError subclasses map to their status via STATUS_BY_KIND.
    - DRF parse/validation errors become `validation_error`.
    - Other DRF APIExceptions keep their status code.
    - Anything else is logged and reported as a generic 500.
    """
    if isinstance(exc, SocialError):
        logger.warning("Rejected %s: %s", exc.kind, exc.message)
        status_code = STATUS_BY_KIND.get(exc.kind, status.HTTP_400_BAD_REQUEST)
        return error_response(exc.to_dict(), status_code)

    if isinstance(exc, (drf_exceptions.ValidationError, drf_exceptions.ParseError)):
        return error_response(
            {"kind": ValidationError.kind, "message": _drf_message(exc.detail)},
            status.HTTP_400_BAD_REQUEST,
            fields=exc.detail if isinstance(exc.detail, dict) else None,
        )

    if isinstance(exc, Http404):
        return error_response(NotFoundError("Not found").to_dict(), status.HTTP_404_NOT_FOUND)

    response = exception_handler(exc, context)
    if response is not None:
        kind = getattr(exc, "default_code", "error")
        return error_response(
            {"kind": kind, "message": _drf_message(response.data.get("detail", response.data))},
            response.status_code,
        )

    view = context.get("view")
    logger.error("Unhandled exception in %s", type(view).__name__ if view else "view", exc_info=exc)
    extra = {"details": str(exc)} if settings.DEBUG else {}
    return error_response(
        {"kind": UNHANDLED_KIND, "message": "Internal Server Error"},
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        **extra,
    )
