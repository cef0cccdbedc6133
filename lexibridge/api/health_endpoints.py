"""
Health check endpoint.

Reports whether the dictionary is loaded, the result cache statistics,
per-operation latency percentiles and error counts.
"""

from fastapi import APIRouter, Request
import logging
import time
from datetime import datetime, timezone

from lexibridge.config.settings import get_settings
from lexibridge.core.error_handlers import error_handler
from lexibridge.core.metrics import get_metrics_snapshot
from lexibridge.schemas.base import Envelope, ok

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["health"])

# Application start time for uptime calculation
_app_start_time = time.time()


@router.get("/health", response_model=Envelope[dict])
async def health_check(request: Request):
    """
    Overall status is ``healthy`` once any dictionary table has loaded,
    ``degraded`` while none has, and ``unhealthy`` without a service container.
    """
    container = getattr(request.app.state, 'service_container', None)
    settings = container.settings if container is not None else get_settings()

    details = {
        "version": settings.app_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime_seconds": round(time.time() - _app_start_time, 3),
    }

    if container is None:
        return ok({"status": "unhealthy", "message": "Service container not initialized", **details})

    try:
        engine = container.get_engine()
    except RuntimeError as e:
        logger.error(f"Health check failed: {e}")
        return ok({"status": "unhealthy", "message": str(e), **details})

    ready = engine.is_ready()
    return ok({
        "status": "healthy" if ready else "degraded",
        "dictionary": engine.store.status(),
        "cache": engine.get_cache_stats(),
        "fallback_configured": engine.fallback is not None,
        "latency": get_metrics_snapshot(),
        "errors": error_handler.get_error_statistics(),
        **details,
    })
