"""Per-service health endpoint."""

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse

from blogger.configs import settings
from blogger.db import check_db_connection
from blogger.dependencies import SessionDep
from blogger.schemas import HealthCheckResponse
from blogger.utils.helpers import today_str


def create_health_router(service: str) -> APIRouter:
    """
    Build the `/health` router for one service.

    Parameters
    ----------
    service : str
        Service name reported in the payload.

    Returns
    -------
    APIRouter
        Router exposing `GET /health`.
    """
    router = APIRouter(tags=["🩺 Health"])

    @router.get(
        "/health",
        response_class=ORJSONResponse,
        response_model=HealthCheckResponse,
        summary="Health check endpoint",
        responses={
            200: {
                "content": {
                    "application/json": {
                        "example": {
                            "service": service,
                            "version": settings.APP_VERSION,
                            "status": "ok",
                            "database": "connected",
                            "timestamp": "2025-01-01 10:00:00",
                        },
                    },
                },
            },
        },
        operation_id=f"{service}_health_check",
    )
    async def health_check(session: SessionDep) -> HealthCheckResponse:
        """Report service status and database connectivity."""
        connected = await check_db_connection(session)
        return HealthCheckResponse(
            service=service,
            version=settings.APP_VERSION,
            status="ok" if connected else "degraded",
            database="connected" if connected else "disconnected",
            timestamp=today_str(),
        )

    return router
