# ============================================================================
# HEALTH CHECK CORE TYPES
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Infrastructure - Base classes for health checks
# PURPOSE: Health check plugin interface, results and probe status codes
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Check Core Types

Status of a check, worst wins when aggregated:
- healthy: bindings resolved cleanly
- degraded: bindings resolved, but some bound services were skipped as
  unsupported (still ready)
- unhealthy: resolution failed or has not finished (not ready)

Categories run in priority order: startup (10), then bindings (20).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from core.contracts import ResolutionOutcome


class HealthStatus(str, Enum):
    """Health check status values."""
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    @property
    def http_status(self) -> int:
        """Status code for /health: 206 signals partial content."""
        return _HTTP_STATUS[self]

    @classmethod
    def aggregate(cls, statuses: List["HealthStatus"]) -> "HealthStatus":
        """Worst status wins; no statuses counts as healthy."""
        return max(statuses, key=lambda s: s.severity, default=cls.HEALTHY)

    @classmethod
    def for_outcome(cls, outcome: Optional[ResolutionOutcome]) -> "HealthStatus":
        """Map a resolution outcome (None while pending) to a status."""
        if outcome is None or outcome.failed:
            return cls.UNHEALTHY
        if outcome.warnings:
            return cls.DEGRADED
        return cls.HEALTHY


_SEVERITY = {
    HealthStatus.HEALTHY: 0,
    HealthStatus.DEGRADED: 1,
    HealthStatus.UNHEALTHY: 2,
}

_HTTP_STATUS = {
    HealthStatus.HEALTHY: 200,
    HealthStatus.DEGRADED: 206,
    HealthStatus.UNHEALTHY: 503,
}


class HealthCheckCategory(str, Enum):
    """Health check categories with default priorities."""
    STARTUP = "startup"
    BINDINGS = "bindings"

    @property
    def default_priority(self) -> int:
        return 10 if self is HealthCheckCategory.STARTUP else 20


@dataclass
class HealthCheckResult:
    """Result from a single health check."""
    status: HealthStatus
    message: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)
    duration_ms: float = 0.0

    @classmethod
    def healthy(cls, message: str = None, **details) -> "HealthCheckResult":
        return cls(HealthStatus.HEALTHY, message, details)

    @classmethod
    def degraded(cls, message: str, **details) -> "HealthCheckResult":
        return cls(HealthStatus.DEGRADED, message, details)

    @classmethod
    def unhealthy(cls, message: str, **details) -> "HealthCheckResult":
        return cls(HealthStatus.UNHEALTHY, message, details)

    @classmethod
    def from_exception(cls, e: Exception) -> "HealthCheckResult":
        """A check that raised is unhealthy."""
        return cls.unhealthy(str(e), exception_type=type(e).__name__)

    @property
    def blocks_readiness(self) -> bool:
        return self.status == HealthStatus.UNHEALTHY

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "status": self.status.value,
            "duration_ms": round(self.duration_ms, 2),
        }
        if self.message:
            result["message"] = self.message
        if self.details:
            result["details"] = self.details
        return result


@dataclass
class AggregatedHealthResult:
    """Results of one probe run across several checks."""
    status: HealthStatus
    checks: Dict[str, HealthCheckResult]
    total_duration_ms: float
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def failing(self) -> Dict[str, Dict[str, Any]]:
        """Serialized checks that block readiness."""
        return {
            name: result.to_dict()
            for name, result in self.checks.items()
            if result.blocks_readiness
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "checks": {name: result.to_dict() for name, result in self.checks.items()},
            "total_duration_ms": round(self.total_duration_ms, 2),
            "checked_at": self.checked_at.isoformat(),
        }


class HealthCheckPlugin(ABC):
    """
    Base class for health check plugins.

    Attributes:
        name: Unique identifier for the check
        category: Check category (sets the default priority)
        priority: Execution priority (lower runs first)
        timeout_seconds: Max execution time before timeout
        required_for_ready: If True, an unhealthy result fails /readyz
    """

    name: str = "unnamed"
    category: HealthCheckCategory = HealthCheckCategory.STARTUP
    priority: int = 10
    timeout_seconds: float = 10.0
    required_for_ready: bool = True

    @abstractmethod
    async def check(self) -> HealthCheckResult:
        pass


__all__ = [
    "HealthStatus",
    "HealthCheckCategory",
    "HealthCheckResult",
    "AggregatedHealthResult",
    "HealthCheckPlugin",
]
