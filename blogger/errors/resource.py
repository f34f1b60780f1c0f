"""Errors raised by the blog and comment resource services."""

from logging import getLogger

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
)

from blogger.configs import file_logger
from blogger.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class ResourceError(BaseAppError):
    """Base exception for business rule violations on a resource."""


class ValidationError(ResourceError):
    """Malformed or missing input."""

    def __init__(self, detail: str = "Invalid Request Data.") -> None:
        super().__init__(detail, HTTP_400_BAD_REQUEST)


class BadRequestError(ResourceError):
    """Well-formed input that breaks a rule (page size, publish state)."""

    def __init__(self, detail: str = "Bad Request.") -> None:
        super().__init__(detail, HTTP_400_BAD_REQUEST)


class NotFoundError(ResourceError):
    """Missing resource, invalid id, or an empty result page."""

    def __init__(self, detail: str = "Not Found.") -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


class ConflictError(ResourceError):
    """Duplicate resource."""

    def __init__(self, detail: str = "Resource Already Exists.") -> None:
        super().__init__(detail, HTTP_409_CONFLICT)


resource_exception_handler = create_exception_handler(logger)
