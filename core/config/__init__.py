# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Module

Provides platform configuration and handler defaults for service binding.
"""

from core.config.defaults import (
    BindingDefaults,
    get_defaults,
    reset_defaults,
)
from core.config.platform import PlatformConfig

__all__ = [
    "BindingDefaults",
    "get_defaults",
    "reset_defaults",
    "PlatformConfig",
]
