"""Metrics endpoint for Prometheus scraping.

Exposes operational metrics in Prometheus exposition format, including
the ``prometheus_time_seconds`` gauge that external health checks look
for.
"""

from fastapi import APIRouter, Response

from promgate.bootstrap.metrics import get_startup_metrics

router = APIRouter(tags=["metrics"])


@router.get(
    "/metrics",
    summary="Prometheus metrics endpoint",
    response_class=Response,
    responses={
        200: {
            "description": "Metrics in Prometheus format",
            "content": {"text/plain": {}},
        }
    },
)
async def get_metrics() -> Response:
    """Get operational metrics in Prometheus format."""
    startup_metrics = get_startup_metrics()
    return Response(
        content=startup_metrics.render(),
        media_type=startup_metrics.content_type,
    )
