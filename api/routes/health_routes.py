"""Health check endpoints."""

from fastapi import APIRouter, HTTPException, Request
from starlette import status

from core.config import get_settings
from core.database import check_db_connection
from schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness check. Does not touch the database."""
    return HealthResponse(status="healthy", service=get_settings().service_name)


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"description": "Init failed or database unreachable"}},
)
async def ready(request: Request) -> HealthResponse:
    """Readiness endpoint.

    Returns 200 only when startup completed and the database is reachable.
    """
    init_error = getattr(request.app.state, "init_error", None)
    if init_error:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Initialization failed: {init_error}",
        )

    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Starting",
        )

    try:
        await check_db_connection(engine)
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database unavailable",
        ) from e

    return HealthResponse(status="ready", service=get_settings().service_name)
