"""
Crowd Zone Monitor Application
==============================

FastAPI entry point for the zone analytics and alerting service.

The service loads one zone snapshot at startup and evaluates it afresh
on every request. Callers may also POST their own snapshot for a
one-off evaluation. Nothing is stored between requests.

Endpoints:
    GET  /          - Service information
    GET  /health    - Liveness probe
    GET  /zones     - Zone views (tier, color, flow arrow)
    GET  /alerts    - Alerts for the loaded snapshot
    GET  /metrics   - Aggregate snapshot metrics
    GET  /output    - Full dashboard output
    POST /evaluate  - Evaluate a caller-supplied snapshot
"""

import logging
import os
import time
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, List, Optional

from fastapi import Body, FastAPI
from fastapi.responses import JSONResponse

from crowd_zones.config import settings
from crowd_zones.dashboard import SnapshotEvaluator
from crowd_zones.models.zone import InvalidZone, Zone
from crowd_zones.snapshot import load_snapshot, parse_snapshot


logger = logging.getLogger(__name__)


# =============================================================================
# Global State
# =============================================================================

_evaluator: Optional[SnapshotEvaluator] = None
_zones: List[Zone] = []
_startup_time: float = 0.0


def get_evaluator() -> SnapshotEvaluator:
    global _evaluator
    if _evaluator is None:
        _evaluator = SnapshotEvaluator.from_settings(settings)
    return _evaluator


def get_zones() -> List[Zone]:
    return _zones


# =============================================================================
# Lifespan Management
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load the snapshot and build the evaluator."""
    global _zones, _startup_time

    _startup_time = time.time()
    logger.info(f"Starting {settings.service.name} {settings.service.version}")

    get_evaluator()
    _zones = load_snapshot(settings.snapshot.path)

    yield

    logger.info("Shutdown complete")


# =============================================================================
# FastAPI Application
# =============================================================================

app = FastAPI(
    title="Crowd Zone Monitor",
    description="Zone density classification, flow indicators and alerts",
    version=settings.service.version,
    lifespan=lifespan,
)


# =============================================================================
# HTTP Endpoints
# =============================================================================

@app.get("/")
async def root() -> JSONResponse:
    """Service information endpoint."""
    return JSONResponse({
        "service": "crowd-zones",
        "version": settings.service.version,
        "name": settings.service.name,
        "status": "running",
        "snapshot_path": settings.snapshot.path,
        "zones_loaded": len(get_zones()),
    })


@app.get("/health")
async def health() -> JSONResponse:
    """
    Liveness probe - is the process alive?

    Always returns 200 if the service is running.
    """
    return JSONResponse({
        "status": "healthy",
        "uptime_seconds": round(time.time() - _startup_time, 1),
    })


@app.get("/zones")
async def zones() -> JSONResponse:
    """Zone views for the loaded snapshot."""
    evaluator = get_evaluator()
    return JSONResponse([
        evaluator.zone_view(zone).model_dump(mode="json") for zone in get_zones()
    ])


@app.get("/alerts")
async def alerts() -> JSONResponse:
    """Alerts for the loaded snapshot."""
    generated = get_evaluator().alert_engine.generate(get_zones())
    return JSONResponse([alert.model_dump(mode="json") for alert in generated])


@app.get("/metrics")
async def metrics() -> JSONResponse:
    """Aggregate metrics for the loaded snapshot."""
    output = get_evaluator().evaluate(get_zones())
    return JSONResponse(output.metrics.model_dump(mode="json"))


@app.get("/output")
async def output() -> JSONResponse:
    """Full dashboard output for the loaded snapshot."""
    return JSONResponse(get_evaluator().evaluate(get_zones()).model_dump(mode="json"))


@app.post("/evaluate")
async def evaluate(snapshot: Any = Body(...)) -> JSONResponse:
    """
    Evaluate a caller-supplied snapshot.

    Accepts a list of zones or {"zones": [...]}.
    Returns 422 if any zone is malformed.
    """
    try:
        zones = parse_snapshot(snapshot)
    except InvalidZone as e:
        logger.warning(f"Rejected snapshot: {e}")
        return JSONResponse(
            {"error": "InvalidZone", "detail": str(e), "index": e.index},
            status_code=422,
        )

    return JSONResponse(get_evaluator().evaluate(zones).model_dump(mode="json"))


# =============================================================================
# Main Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    # Cloud Run uses PORT env var
    port = int(os.environ.get("PORT", settings.server.port))

    uvicorn.run(
        "crowd_zones.main:app",
        host=settings.server.host,
        port=port,
        reload=False,
    )
