from blogger.errors.base import BaseAppError, create_exception_handler, error_response
from blogger.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    TransactionError,
    database_exception_handler,
)
from blogger.errors.resource import (
    BadRequestError,
    ConflictError,
    NotFoundError,
    ResourceError,
    ValidationError,
    resource_exception_handler,
)
from blogger.errors.validation import (
    first_error_message,
    format_error,
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "BadRequestError",
    "BaseAppError",
    "ConflictError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "NotFoundError",
    "ResourceError",
    "TransactionError",
    "ValidationError",
    "create_exception_handler",
    "database_exception_handler",
    "error_response",
    "first_error_message",
    "format_error",
    "http_exception_handler",
    "resource_exception_handler",
    "unhandled_exception_handler",
    "validation_exception_handler",
]
