# ============================================================================
# HEALTH CHECK PLUGINS
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Infrastructure - Health check implementations
# PURPOSE: Specific health checks for service binding
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Check Plugins

Startup Checks (priority 10):
- process: Basic process health (always healthy if running)

Bindings Checks (priority 20):
- bindings: Startup resolution reached READY

Import this module to register all checks:
    import health.checks
"""

from health.checks.startup import ProcessCheck
from health.checks.bindings import BindingsCheck, set_orchestrator

__all__ = [
    "ProcessCheck",
    "BindingsCheck",
    "set_orchestrator",
]
