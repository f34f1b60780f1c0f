from collections.abc import Awaitable, Callable
from logging import Logger

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from blogger.configs.settings import DEFAULT_ERROR_MESSAGE
from blogger.utils.helpers import host


class BaseAppError(Exception):
    """Base exception class for application errors."""

    def __init__(
        self,
        detail: str = DEFAULT_ERROR_MESSAGE,
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code

    def __str__(self) -> str:
        return self.detail


def error_response(message: str, status_code: int) -> ORJSONResponse:
    """Build the ``{"message": ...}`` error body used by every service."""
    return ORJSONResponse(content={"message": message}, status_code=status_code)


def create_exception_handler(
    logger: Logger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create a standardized exception handler for the application.

    Server-side failures (status >= 500) are logged with their detail but
    answered with a generic message so that query text or driver errors
    never reach the client.

    Args:
        logger: Logger instance to use for logging exceptions.

    Returns:
        A callable exception handler.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        status_code = getattr(exc, "status_code", HTTP_500_INTERNAL_SERVER_ERROR)
        detail = getattr(exc, "detail", DEFAULT_ERROR_MESSAGE)

        if status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                f"{type(exc).__name__}: {exc} for ip: {host(request)} "
                f"for endpoint {request.url.path}",
                exc_info=exc,
            )
            return error_response(DEFAULT_ERROR_MESSAGE, status_code)

        logger.warning(f"{detail} for ip: {host(request)} for endpoint {request.url.path}")
        return error_response(str(detail), status_code)

    return handler
