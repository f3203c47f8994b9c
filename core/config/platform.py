# ============================================================================
# PLATFORM CONFIGURATION
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Core - Platform environment parsing
# PURPOSE: Read VCAP_* and runtime location hints from the environment
# CREATED: 19 OCT 2026
# ============================================================================
"""
Platform Configuration

Loads the two JSON structures the platform injects (VCAP_SERVICES and
VCAP_APPLICATION) plus runtime location hints. Only `services` and
`required_services` are interpreted by the resolver; the rest is passed
through to the hosting application untouched.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List

from core.errors import ConfigurationError

logger = logging.getLogger(__name__)


def _load_json(var: str) -> Dict[str, Any]:
    raw = os.environ.get(var) or "{}"
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"{var} is not valid JSON: {e}") from e
    if not isinstance(value, dict):
        raise ConfigurationError(f"{var} must be a JSON object, got {type(value).__name__}")
    return value


@dataclass
class PlatformConfig:
    """
    Configuration supplied by the hosting platform.

    Loaded from environment variables.
    """
    # Service catalog: label -> list of bound service entries
    services: Dict[str, Any] = field(default_factory=dict)

    # Application metadata (opaque)
    app_info: Dict[str, Any] = field(default_factory=dict)

    # Runtime location hints (opaque)
    tmp_dir: str = "/tmp"
    host: str = "localhost"
    port: int = 3000

    # Aliases that must be bound for the app to be ready
    required_services: List[str] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> "PlatformConfig":
        """
        Load configuration from environment variables.

            VCAP_SERVICES: JSON service catalog (default {})
            VCAP_APPLICATION: JSON application metadata (default {})
            TMPDIR: Temp directory (default /tmp)
            VCAP_APP_HOST: Bind host (default localhost)
            VCAP_APP_PORT: Bind port (default 3000)
            BINDINGS_REQUIRED: Comma-separated required aliases, e.g. "db,redis"
        """
        raw_port = os.environ.get("VCAP_APP_PORT") or "3000"
        try:
            port = int(raw_port)
        except ValueError:
            raise ConfigurationError(f"VCAP_APP_PORT must be an integer, got {raw_port!r}")

        required = [
            alias.strip()
            for alias in os.environ.get("BINDINGS_REQUIRED", "").split(",")
            if alias.strip()
        ]

        config = cls(
            services=_load_json("VCAP_SERVICES"),
            app_info=_load_json("VCAP_APPLICATION"),
            tmp_dir=os.environ.get("TMPDIR") or "/tmp",
            host=os.environ.get("VCAP_APP_HOST") or "localhost",
            port=port,
            required_services=required,
        )
        logger.debug(
            f"Platform config loaded: {len(config.services)} service labels, "
            f"required={config.required_services}"
        )
        return config
