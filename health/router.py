# ============================================================================
# HEALTH CHECK ROUTER
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Infrastructure - FastAPI health check endpoints
# PURPOSE: Liveness and readiness probes for the hosting application
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Check Router

Endpoints:
    GET /livez   - Liveness probe (is the process alive?)
    GET /readyz  - Readiness probe (did bindings resolve?)
                   200 if all required checks pass, 503 otherwise.
    GET /health  - Full health status of all registered checks

Response Codes:
    200 - Healthy
    206 - Degraded (bound, some services skipped as unsupported)
    503 - Unhealthy (service unavailable)
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from health.registry import get_registry
from health.executor import HealthCheckExecutor
from __version__ import __version__, BUILD_DATE

logger = logging.getLogger(__name__)

health_router = APIRouter(tags=["Health"])


@health_router.get("/livez")
async def liveness_probe():
    """Liveness probe. No external checks."""
    return {"status": "alive", "version": __version__, "build_date": BUILD_DATE}


@health_router.get("/readyz")
async def readiness_probe():
    """
    Readiness probe.

    Runs checks marked required_for_ready (the bindings check). Ready
    means startup resolution reached READY, with or without skipped
    unsupported services.
    """
    registry = get_registry()

    if len(registry) == 0:
        return {"status": "ready", "message": "No checks registered"}

    result = await HealthCheckExecutor(registry=registry).execute_required()
    failing = result.failing()

    if failing:
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "checks": failing,
                "total_duration_ms": round(result.total_duration_ms, 2),
            },
        )

    return {
        "status": "ready",
        "checks_passed": len(result.checks),
        "total_duration_ms": round(result.total_duration_ms, 2),
    }


@health_router.get("/health")
async def full_health_check():
    """Run all registered health checks and return detailed status."""
    registry = get_registry()

    if len(registry) == 0:
        return {"status": "healthy", "message": "No checks registered", "checks": {}}

    result = await HealthCheckExecutor(registry=registry).execute_all()

    response_body = result.to_dict()
    response_body["version"] = __version__
    response_body["build_date"] = BUILD_DATE

    return JSONResponse(status_code=result.status.http_status, content=response_body)


__all__ = [
    "health_router",
]
