# ============================================================================
# BINDING ERRORS
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Foundation - Error taxonomy
# PURPOSE: Exceptions carried as failure values by init tasks and outcomes
# CREATED: 19 OCT 2026
# ============================================================================
"""
Binding Errors

Handler-local failures are never raised past an init task; they are
returned as values and surfaced in the ResolutionOutcome. Only malformed
input (catalog, config) and misuse of the orchestrator are raised.
"""

from typing import Any, List, Optional, Sequence

from core.contracts import BindingErrorCode


class BindingError(Exception):
    """Base exception for binding failures."""
    code: BindingErrorCode = BindingErrorCode.CONNECTION_ERROR

    def __init__(self, message: str, label: Optional[str] = None, name: Optional[str] = None):
        self.label = label
        self.name = name
        super().__init__(message)


class InvalidServiceError(BindingError):
    """Descriptor lacks the shape required by its matched handler."""
    code = BindingErrorCode.INVALID_SERVICE

    def __init__(
        self,
        label: Optional[str],
        name: Optional[str],
        missing: Sequence[str] = (),
    ):
        self.missing = list(missing)
        detail = f" (missing: {', '.join(self.missing)})" if self.missing else ""
        super().__init__(f"invalid_service: {label}/{name}{detail}", label=label, name=name)


class NoHandleError(BindingError):
    """Connect reported success but produced no usable handle."""
    code = BindingErrorCode.NO_HANDLE

    def __init__(self, label: Optional[str], name: Optional[str]):
        super().__init__(f"no_handle: {label}/{name}", label=label, name=name)


class ConnectionFailedError(BindingError):
    """
    Underlying connect call failed or raised.

    The original exception is kept verbatim in `original` and chained
    as __cause__ by the task that creates this error.
    """
    code = BindingErrorCode.CONNECTION_ERROR

    def __init__(self, original: BaseException, label: Optional[str] = None, name: Optional[str] = None):
        self.original = original
        super().__init__(str(original) or type(original).__name__, label=label, name=name)


class MissingRequiredAliasError(BindingError):
    """One or more required aliases were never populated."""
    code = BindingErrorCode.MISSING_REQUIRED_ALIAS

    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(f"missing service {', '.join(self.missing)}")


class UnsupportedServiceError(BindingError):
    """Descriptor matched no registered handler. Warning only."""
    code = BindingErrorCode.UNSUPPORTED_SERVICE

    def __init__(self, label: Optional[str], key: Any):
        self.key = key
        super().__init__(f"Unsupported service {label}/{key}", label=label)


class ResolutionStateError(Exception):
    """Raised when a resolution run is started twice."""
    pass


class CatalogError(ValueError):
    """Raised when the service catalog input is not catalog-shaped."""
    pass


class ConfigurationError(ValueError):
    """Raised when platform environment variables cannot be parsed."""
    pass


__all__ = [
    "BindingError",
    "InvalidServiceError",
    "NoHandleError",
    "ConnectionFailedError",
    "MissingRequiredAliasError",
    "UnsupportedServiceError",
    "ResolutionStateError",
    "CatalogError",
    "ConfigurationError",
]
