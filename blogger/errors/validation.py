"""Rendering of validation failures into single-message error bodies."""

from logging import getLogger
from typing import Any, cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from blogger.configs import DEFAULT_ERROR_MESSAGE, file_logger
from blogger.errors.base import error_response
from blogger.utils.helpers import host

logger = file_logger(getLogger(__name__))

# Request sections FastAPI prefixes onto error locations.
_LOCATION_SECTIONS = frozenset({"body", "query", "path", "header", "cookie"})


def format_error(error: dict[str, Any]) -> str:
    """
    Render one pydantic error entry as a human-readable sentence.

    Args:
        error: A single item from ``ValidationError.errors()``.

    Returns:
        str: Message such as ``"title" String should have at least 3 characters``.
    """
    loc = [str(part) for part in error.get("loc", ()) if part not in _LOCATION_SECTIONS]
    msg = error.get("msg", "Invalid value")
    if error.get("type") == "missing":
        msg = "is required"
    elif error.get("type") == "extra_forbidden":
        msg = "is not allowed"
    if not loc:
        return msg
    return f'"{".".join(loc)}" {msg}'


def first_error_message(exc: PydanticValidationError | RequestValidationError) -> str:
    """Return the message of the first validation error."""
    errors = exc.errors()
    if not errors:
        return "Invalid Request Data."
    return format_error(dict(errors[0]))


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle request validation errors with a single message.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with status 400 and ``{"message": ...}``.
    """
    message = first_error_message(cast(RequestValidationError, exc))
    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {message}",
    )
    return error_response(message, HTTP_400_BAD_REQUEST)


async def http_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Render framework HTTP errors (unknown route, bad method) as ``{"message"}``."""
    http_exc = cast(StarletteHTTPException, exc)
    logger.warning(
        f"{http_exc.status_code} {http_exc.detail} for ip: {host(request)} "
        f"for endpoint {request.url.path}",
    )
    return error_response(str(http_exc.detail), http_exc.status_code)


async def unhandled_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Last-resort handler: log everything, reveal nothing."""
    logger.error(
        f"Unhandled {type(exc).__name__} for ip: {host(request)} "
        f"for endpoint {request.url.path}",
        exc_info=exc,
    )
    return error_response(DEFAULT_ERROR_MESSAGE, HTTP_500_INTERNAL_SERVER_ERROR)
