"""FastAPI application factory for promgate.

The app is only built after an accepted startup verdict. Its capability
surface follows the resolved mode: both modes serve health, readiness and
``/metrics``; only the server mounts the status API.
"""

from fastapi import FastAPI

from promgate import __version__
from promgate.api.routes.health import router as health_router
from promgate.api.routes.metrics import router as metrics_router
from promgate.api.routes.status import router as status_router
from promgate.domain.models.flag_set import FlagSet
from promgate.domain.models.mode import Mode
from promgate.domain.models.verdict import Accepted


def create_app(verdict: Accepted, flags: FlagSet) -> FastAPI:
    """Build the HTTP application for an accepted startup.

    Args:
        verdict: Accepted startup verdict.
        flags: Flags the process was started with.

    Returns:
        The FastAPI application for the verdict's mode.
    """
    app = FastAPI(
        title="promgate",
        description=f"Metrics server ({verdict.mode.value} mode)",
        version=__version__,
    )
    app.state.mode = verdict.mode
    app.state.flags = flags
    app.state.external_url = verdict.external_url

    app.include_router(health_router)
    app.include_router(metrics_router)
    if verdict.mode is Mode.SERVER:
        app.include_router(status_router)

    return app
