# ============================================================================
# HEALTH CHECK EXECUTOR
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Infrastructure - Parallel health check execution
# PURPOSE: Execute health checks with timeouts and aggregation
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Check Executor

Executes health checks with:
- Parallel execution
- Per-check timeouts
- Result aggregation with 'worst wins' semantics
"""

import asyncio
import logging
import time
from typing import Dict, List, Optional

from health.core import (
    HealthStatus,
    HealthCheckResult,
    HealthCheckPlugin,
    AggregatedHealthResult,
)
from health.registry import HealthCheckRegistry, get_registry

logger = logging.getLogger(__name__)


class HealthCheckExecutor:
    """Executes registered health checks in parallel."""

    def __init__(self, registry: Optional[HealthCheckRegistry] = None):
        """
        Args:
            registry: Health check registry (uses global if None)
        """
        self.registry = registry or get_registry()

    async def execute_all(self) -> AggregatedHealthResult:
        """Execute all registered health checks."""
        return await self._execute(self.registry.get_checks_by_priority())

    async def execute_required(self) -> AggregatedHealthResult:
        """Execute only checks required for /readyz."""
        return await self._execute(self.registry.get_required_checks())

    async def _execute(self, checks: List[HealthCheckPlugin]) -> AggregatedHealthResult:
        start_time = time.monotonic()

        outcomes = await asyncio.gather(*(self._execute_check(c) for c in checks))
        results: Dict[str, HealthCheckResult] = {
            check.name: result for check, result in zip(checks, outcomes)
        }

        total_duration_ms = (time.monotonic() - start_time) * 1000
        overall_status = HealthStatus.aggregate([r.status for r in results.values()])

        return AggregatedHealthResult(
            status=overall_status,
            checks=results,
            total_duration_ms=total_duration_ms,
        )

    async def _execute_check(self, check: HealthCheckPlugin) -> HealthCheckResult:
        """Execute a single check with timeout."""
        start_time = time.monotonic()

        try:
            result = await asyncio.wait_for(
                check.check(),
                timeout=check.timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning(
                f"Health check {check.name} timed out after {check.timeout_seconds}s"
            )
            result = HealthCheckResult.unhealthy(
                f"Timeout after {check.timeout_seconds}s"
            )
        except Exception as e:
            logger.error(f"Health check {check.name} failed: {e}")
            result = HealthCheckResult.from_exception(e)

        result.duration_ms = (time.monotonic() - start_time) * 1000
        logger.debug(
            f"Health check {check.name}: {result.status.value} "
            f"({result.duration_ms:.1f}ms)"
        )
        return result


__all__ = [
    "HealthCheckExecutor",
]
