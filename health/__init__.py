# ============================================================================
# HEALTH CHECK MODULE
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Infrastructure - Health check plugin system
# PURPOSE: Liveness/readiness probes reporting binding state
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Check Module

Plugin-based health checks for the hosting application:
- /livez: Process alive
- /readyz: Bindings resolved (required checks pass)
- /health: All checks with details

Usage:
    from health import health_router, get_registry
    import health.checks  # registers built-in checks

    app.include_router(health_router)
"""

from health.core import (
    HealthStatus,
    HealthCheckResult,
    HealthCheckPlugin,
    HealthCheckCategory,
)
from health.registry import (
    HealthCheckRegistry,
    register_check,
    get_registry,
)
from health.executor import HealthCheckExecutor
from health.router import health_router

__all__ = [
    # Core types
    "HealthStatus",
    "HealthCheckResult",
    "HealthCheckPlugin",
    "HealthCheckCategory",
    # Registry
    "HealthCheckRegistry",
    "register_check",
    "get_registry",
    # Executor
    "HealthCheckExecutor",
    # Router
    "health_router",
]
