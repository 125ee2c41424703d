"""
DRF exception handler converting every failure into one JSON error shape.

Configured as REST_FRAMEWORK["EXCEPTION_HANDLER"].

Error bodies:
    {"error": "<message>"}
        Domain errors, authentication failures, 404s, parse errors.
    {"errors": [{"field": "<name>", "message": "<text>"}, ...]}
        Field validation failures (DRF serializers or core.ValidationError).

Anything that is neither a domain error nor a DRF APIException is logged
with its traceback and reported as an opaque 500.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rest_framework import exceptions as drf_exceptions
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from core.exceptions import BaseApplicationError, InternalError

if TYPE_CHECKING:
    from typing import Any

logger = logging.getLogger(__name__)


def flatten_validation_errors(detail: Any, prefix: str = "") -> list[dict[str, str]]:
    """
    Flatten a DRF ValidationError detail into a list of field errors.

    Nested fields are joined with dots ("usernames.0").
    Errors not tied to a field use "non_field_errors".

    Example:
        >>> flatten_validation_errors({"email": ["Enter a valid email address."]})
        [{"field": "email", "message": "Enter a valid email address."}]
    """
    if isinstance(detail, dict):
        errors = []
        for key, value in detail.items():
            field = f"{prefix}.{key}" if prefix else str(key)
            errors.extend(flatten_validation_errors(value, field))
        return errors

    if isinstance(detail, list):
        errors = []
        for item in detail:
            if isinstance(item, (dict, list)):
                errors.extend(flatten_validation_errors(item, prefix))
            else:
                errors.append(
                    {"field": prefix or "non_field_errors", "message": str(item)}
                )
        return errors

    return [{"field": prefix or "non_field_errors", "message": str(detail)}]


def api_exception_handler(exc: Exception, context: dict) -> Response:
    """
    Convert an exception raised inside a DRF view into an error response.

    Args:
        exc: The exception raised by the view
        context: DRF handler context (contains "view" and "request")

    Returns:
        Response with an {"error"} or {"errors"} body. Never None, so DRF
        never re-raises and every failure path produces a response.
    """
    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "unknown view"

    if isinstance(exc, BaseApplicationError):
        if exc.status_code >= 500:
            logger.error(f"{view_name}: {exc}", exc_info=exc)
        else:
            logger.info(f"{view_name}: {exc}")
        return Response(exc.to_dict(), status=exc.status_code)

    if isinstance(exc, drf_exceptions.ValidationError):
        return Response(
            {"errors": flatten_validation_errors(exc.detail)},
            status=exc.status_code,
        )

    response = drf_exception_handler(exc, context)
    if response is not None:
        detail = response.data
        if isinstance(detail, dict) and "detail" in detail:
            detail = detail["detail"]
        response.data = {"error": str(detail)}
        return response

    logger.exception(f"Unhandled error in {view_name}")
    error = InternalError()
    return Response(error.to_dict(), status=error.status_code)
