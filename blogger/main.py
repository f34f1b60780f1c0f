# blogger/main.py

"""Blogger Backend - blog and comment services sharing one database."""

from collections.abc import Sequence

from fastapi import APIRouter, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from blogger.configs import settings
from blogger.errors import (
    BaseAppError,
    DatabaseError,
    ResourceError,
    database_exception_handler,
    http_exception_handler,
    resource_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from blogger.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from blogger.routes import blog_router, comment_router, create_health_router

errors = [
    (ResourceError, resource_exception_handler),
    (DatabaseError, database_exception_handler),
    (BaseAppError, resource_exception_handler),
    (RequestValidationError, validation_exception_handler),
    (StarletteHTTPException, http_exception_handler),
    (Exception, unhandled_exception_handler),
]


def create_app(
    title: str,
    description: str,
    routers: Sequence[APIRouter],
    service_name: str,
) -> FastAPI:
    """
    Build one service application.

    Parameters
    ----------
    title : str
        OpenAPI title, also used in startup logs.
    description : str
        OpenAPI description.
    routers : Sequence[APIRouter]
        Resource routers mounted under ``settings.API_PREFIX``.
    service_name : str
        Name reported by ``GET /health``.

    Returns
    -------
    FastAPI
        Configured application.
    """
    app = FastAPI(
        title=title,
        description=description,
        version=settings.APP_VERSION,
        lifespan=lifespan,
        swagger_ui_parameters={
            "docExpansion": "none",
            "operationsSorter": "method",
        },
    )

    configure_cors(app)

    app.add_middleware(LoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    for router in routers:
        app.include_router(router, prefix=settings.API_PREFIX)
    app.include_router(create_health_router(service_name))

    for exc_type, handler in errors:
        app.add_exception_handler(exc_type, handler)

    return app


blog_app = create_app(
    title=f"{settings.APP_NAME} - Blogs",
    description="Create, publish, list and delete blog posts.",
    routers=[blog_router],
    service_name="blog",
)

comment_app = create_app(
    title=f"{settings.APP_NAME} - Comments",
    description="Comment on published blog posts.",
    routers=[comment_router],
    service_name="comment",
)
