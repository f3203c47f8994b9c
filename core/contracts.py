# ============================================================================
# BASE CONTRACTS & ENUMS
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Foundation - Core enums and binding contracts
# PURPOSE: Define descriptors, service kinds and resolution outcomes
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: ServiceDescriptor, ServiceKind, BindingErrorCode, ResolutionState,
#          ResolutionOutcome
# DEPENDENCIES: enum, pydantic
# ============================================================================
"""
Base contracts for the service binding system.

These define the data that crosses the resolution boundary:
- Platform input (VCAP_SERVICES entries)
- Binding handlers (descriptor in, handle out)
- Hosting application (terminal outcome)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field, model_validator


# ============================================================================
# ENUMS
# ============================================================================

class ServiceKind(str, Enum):
    """
    Backing-service families supported by the built-in handlers.

    Closed set: every binding handler is tagged with exactly one kind.
    """
    DOCUMENT_STORE = "document-store"    # mongodb
    MESSAGE_BROKER = "message-broker"    # rabbitmq
    RELATIONAL_DB = "relational-db"      # mysql
    KEY_VALUE_CACHE = "key-value-cache"  # redis


class BindingErrorCode(str, Enum):
    """Stable codes for binding failures and diagnostics."""
    INVALID_SERVICE = "invalid_service"
    NO_HANDLE = "no_handle"
    CONNECTION_ERROR = "connection_error"
    MISSING_REQUIRED_ALIAS = "missing_required_alias"
    UNSUPPORTED_SERVICE = "unsupported_service"


class ResolutionState(str, Enum):
    """
    Resolution run lifecycle.

    State transitions:
        IDLE -> MATCHING -> INITIALIZING -> CHECKING -> READY
                                         -> FAILED
                                                    -> FAILED
    """
    IDLE = "idle"
    MATCHING = "matching"
    INITIALIZING = "initializing"
    CHECKING = "checking"
    READY = "ready"
    FAILED = "failed"

    def is_terminal(self) -> bool:
        """Check if this is a terminal state (no further transitions)."""
        return self in (ResolutionState.READY, ResolutionState.FAILED)


# ============================================================================
# SERVICE DESCRIPTOR
# ============================================================================

class ServiceDescriptor(BaseModel):
    """
    One bound backing service as supplied by the platform.

    Fields are optional at parse time so that a malformed entry reaches
    its handler and fails there with invalid_service instead of aborting
    catalog construction. Extra platform fields (plan, tags, provider)
    are kept.
    """
    name: Optional[str] = Field(None, description="Instance name chosen at bind time")
    label: Optional[str] = Field(None, description="Service offering, e.g. mysql-5.5")
    credentials: Dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True, "extra": "allow"}

    @model_validator(mode="before")
    @classmethod
    def coerce_malformed_fields(cls, data: Any) -> Any:
        """
        Normalize platform JSON of the wrong structure instead of rejecting it.

        A non-object entry becomes an empty descriptor, numeric name/label
        values become strings, any other non-string name/label becomes
        None, and a credentials block that is not an object becomes {}.
        """
        if not isinstance(data, Mapping):
            return {}
        data = dict(data)
        for key in ("name", "label"):
            data[key] = _coerce_text(data.get(key))
        if not isinstance(data.get("credentials"), Mapping):
            data["credentials"] = {}
        return data

    @property
    def is_valid(self) -> bool:
        """True if name, label and credentials are all present and non-empty."""
        return bool(self.name) and bool(self.label) and bool(self.credentials)

    def has_credentials(self, *fields: str) -> bool:
        """Check that every named credential field is present and non-empty."""
        return all(_present(self.credentials.get(f)) for f in fields)

    def missing_credentials(self, *fields: str) -> List[str]:
        """Names of the given credential fields that are absent or empty."""
        return [f for f in fields if not _present(self.credentials.get(f))]


def _coerce_text(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _present(value: Any) -> bool:
    # Port 0 is not a usable port, so falsy numbers count as missing too
    return value is not None and value != "" and value != 0


# ============================================================================
# RESOLUTION OUTCOME
# ============================================================================

@dataclass
class ResolutionOutcome:
    """
    Terminal result of one resolution run: Ready or Failed(error).

    Warnings carry non-fatal diagnostics (unsupported services).
    """
    state: ResolutionState
    error: Optional[Exception] = None
    warnings: List[Exception] = field(default_factory=list)

    @property
    def ready(self) -> bool:
        return self.state == ResolutionState.READY

    @property
    def failed(self) -> bool:
        return self.state == ResolutionState.FAILED

    @property
    def error_code(self) -> Optional[str]:
        """Code of the carried error, if it is a binding error."""
        code = getattr(self.error, "code", None)
        return code.value if isinstance(code, BindingErrorCode) else None

    @classmethod
    def ready_outcome(cls, warnings: Optional[List[Exception]] = None) -> "ResolutionOutcome":
        """Create a Ready outcome."""
        return cls(state=ResolutionState.READY, warnings=list(warnings or []))

    @classmethod
    def failed_outcome(
        cls,
        error: Exception,
        warnings: Optional[List[Exception]] = None,
    ) -> "ResolutionOutcome":
        """Create a Failed outcome carrying one error."""
        return cls(state=ResolutionState.FAILED, error=error, warnings=list(warnings or []))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON response."""
        result: Dict[str, Any] = {"state": self.state.value}
        if self.error is not None:
            result["error"] = str(self.error)
            if self.error_code:
                result["error_code"] = self.error_code
        if self.warnings:
            result["warnings"] = [str(w) for w in self.warnings]
        return result
