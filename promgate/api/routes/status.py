"""Status endpoints of the query API, mounted in server mode only."""

from fastapi import APIRouter, Request

from promgate.api.models.status import FlagsResponse

router = APIRouter(prefix="/api/v1/status", tags=["status"])


@router.get("/flags", response_model=FlagsResponse)
async def get_flags(request: Request) -> FlagsResponse:
    """Return the command-line flags the process was started with."""
    flags = request.app.state.flags
    return FlagsResponse(data=dict(sorted(flags.items())))
