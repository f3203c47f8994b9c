# ============================================================================
# CORE MODULE
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Core module initialization
# PURPOSE: Export binding contracts and errors
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================

from core.contracts import (
    ServiceDescriptor,
    ServiceKind,
    BindingErrorCode,
    ResolutionState,
    ResolutionOutcome,
)
from core.errors import (
    BindingError,
    InvalidServiceError,
    NoHandleError,
    ConnectionFailedError,
    MissingRequiredAliasError,
    UnsupportedServiceError,
    ResolutionStateError,
    CatalogError,
    ConfigurationError,
)

__all__ = [
    # Enums
    "ServiceKind",
    "BindingErrorCode",
    "ResolutionState",
    # Models
    "ServiceDescriptor",
    "ResolutionOutcome",
    # Errors
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
