# ============================================================================
# ORCHESTRATOR MODULE
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Core - Binding resolution
# PURPOSE: Resolve a service catalog into bound handles
# CREATED: 19 OCT 2026
# ============================================================================
"""
Orchestrator Module

Usage:
    from orchestrator import BindingOrchestrator, ServiceCatalog

    catalog = ServiceCatalog.from_mapping(config.services)
    orchestrator = BindingOrchestrator(catalog, default_registry())
    outcome = await orchestrator.resolve(["db"])
"""

from .catalog import ServiceCatalog
from .resolver import BindingOrchestrator, resolve

__all__ = ["ServiceCatalog", "BindingOrchestrator", "resolve"]
