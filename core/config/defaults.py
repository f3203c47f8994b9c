# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Core - Default configuration values
# PURPOSE: Centralized defaults for built-in handlers and connect timeouts
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Defaults

Provides defaults for the built-in binding handlers.
These can be overridden via environment variables.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides
- Type-safe access
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Optional

from core.errors import ConfigurationError


@dataclass(frozen=True)
class BindingDefaults:
    """
    Defaults for binding handlers.

    Versions are matched exactly against descriptor labels
    ("<family>-<version>"), so "5.5" does not match "mysql-5.5.1".
    """
    # Built-in handler versions, in registration order
    handler_versions: Dict[str, str] = field(default_factory=lambda: {
        "mongodb": "2.2",
        "rabbitmq": "2.8",
        "mysql": "5.5",
        "redis": "2.6",
    })

    # Upper bound on a single connect call (seconds)
    connect_timeout_seconds: float = 30.0

    def get_version(self, family: str) -> str:
        """Get the configured label version for a handler family."""
        return self.handler_versions[family]

    @classmethod
    def from_env(cls) -> "BindingDefaults":
        """
        Create from environment variables.

        BINDINGS_CONNECT_TIMEOUT: seconds per connect call
        BINDINGS_<FAMILY>_VERSION: label version, e.g. BINDINGS_MYSQL_VERSION=5.6
        """
        base = cls()
        versions = {
            family: os.getenv(f"BINDINGS_{family.upper()}_VERSION", version)
            for family, version in base.handler_versions.items()
        }
        raw_timeout = os.getenv("BINDINGS_CONNECT_TIMEOUT", str(base.connect_timeout_seconds))
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigurationError(
                f"BINDINGS_CONNECT_TIMEOUT must be a number, got {raw_timeout!r}"
            )
        return cls(handler_versions=versions, connect_timeout_seconds=timeout)


_defaults: Optional[BindingDefaults] = None


def get_defaults() -> BindingDefaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = BindingDefaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "BindingDefaults",
    "get_defaults",
    "reset_defaults",
]
