# ============================================================================
# BINDING HEALTH CHECKS
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Infrastructure - Resolution state check
# PURPOSE: Report whether backing services were bound at startup
# CREATED: 19 OCT 2026
# ============================================================================
"""
Binding Health Checks

Bindings checks (priority 20):
- BindingsCheck: The startup resolution run finished READY
  (degraded when unsupported services were skipped)

Reports the one-shot resolution outcome. It does not ping the bound
services again.
"""

import logging
from typing import Optional

from health.core import (
    HealthCheckPlugin,
    HealthCheckResult,
    HealthStatus,
)
from health.registry import register_check
from orchestrator import BindingOrchestrator

logger = logging.getLogger(__name__)


# Global reference to the startup resolution run (set by main app)
_orchestrator: Optional[BindingOrchestrator] = None


def set_orchestrator(orchestrator: Optional[BindingOrchestrator]) -> None:
    """Set orchestrator reference for health checks."""
    global _orchestrator
    _orchestrator = orchestrator


@register_check(category="bindings")
class BindingsCheck(HealthCheckPlugin):
    """Healthy only once the resolution run has reached READY."""

    name = "bindings"
    timeout_seconds = 2.0

    async def check(self) -> HealthCheckResult:
        if _orchestrator is None:
            return HealthCheckResult.unhealthy(
                message="Bindings not initialized",
                hint="Orchestrator reference not set",
            )

        outcome = _orchestrator.outcome
        if outcome is None:
            return HealthCheckResult.unhealthy(
                message="Bindings still resolving",
                state=_orchestrator.state.value,
            )

        namespace = _orchestrator.namespace
        details = {
            "state": outcome.state.value,
            "aliases": sorted(namespace.aliases),
            "bound": len(namespace),
        }
        if outcome.warnings:
            details["warnings"] = [str(w) for w in outcome.warnings]

        status = HealthStatus.for_outcome(outcome)
        if status == HealthStatus.UNHEALTHY:
            return HealthCheckResult.unhealthy(
                message=str(outcome.error),
                error_code=outcome.error_code,
                **details,
            )
        if status == HealthStatus.DEGRADED:
            return HealthCheckResult.degraded(
                message=f"Bindings ready, {len(outcome.warnings)} unsupported service(s) skipped",
                **details,
            )
        return HealthCheckResult.healthy(message="Bindings ready", **details)
