"""Response models for health and status endpoints."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness/readiness status.

    Attributes:
        status: Always "healthy" or "ready" when the endpoint answers.
        mode: Operating mode the process runs in.
    """

    status: str
    mode: str


class FlagsResponse(BaseModel):
    """Command-line flags the process was started with.

    Attributes:
        status: "success" when the flags could be listed.
        data: Flag name to value mapping.
    """

    status: str = "success"
    data: dict[str, str]
