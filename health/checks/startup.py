# ============================================================================
# STARTUP HEALTH CHECKS
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Infrastructure - Process checks
# PURPOSE: Basic process liveness details
# CREATED: 19 OCT 2026
# ============================================================================
"""
Startup Health Checks

Startup checks (priority 10):
- ProcessCheck: Process is running
"""

import os
import platform
import sys

from health.core import (
    HealthCheckPlugin,
    HealthCheckResult,
)
from health.registry import register_check


@register_check(category="startup", required_for_ready=False)
class ProcessCheck(HealthCheckPlugin):
    """
    Basic process health check.

    Always returns healthy if the check runs (proves process is alive).
    """

    name = "process"
    timeout_seconds = 1.0

    async def check(self) -> HealthCheckResult:
        return HealthCheckResult.healthy(
            message="Process running",
            python_version=sys.version,
            platform=platform.platform(),
            pid=os.getpid(),
        )
