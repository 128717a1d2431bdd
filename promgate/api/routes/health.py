"""Health and readiness endpoints, served in both modes."""

from fastapi import APIRouter, Request

from promgate.api.models.status import HealthResponse

router = APIRouter(prefix="/-", tags=["health"])


@router.get("/healthy", response_model=HealthResponse)
async def healthy(request: Request) -> HealthResponse:
    """Return liveness status."""
    return HealthResponse(status="healthy", mode=request.app.state.mode.value)


@router.get("/ready", response_model=HealthResponse)
async def ready(request: Request) -> HealthResponse:
    """Return readiness status.

    The app only exists after an accepted startup verdict, so answering at
    all means the process is ready.
    """
    return HealthResponse(status="ready", mode=request.app.state.mode.value)
