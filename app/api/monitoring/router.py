"""
Monitoring router: Prometheus metrics.
"""
from fastapi import APIRouter
from fastapi.responses import Response

from app.utils.prometheus_metrics import get_metrics, CONTENT_TYPE_LATEST

router_public = APIRouter(
    prefix="/api/monitoring",
    tags=["Monitoring"]
)


@router_public.get("/metrics")
async def metrics():
    """
    Prometheus metrics endpoint.
    Available at: /api/monitoring/metrics
    """
    return Response(content=get_metrics(), media_type=CONTENT_TYPE_LATEST)
