# ============================================================================
# BINDING HANDLER BASE
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Core - Handler interface and init task
# PURPOSE: Match descriptors and turn them into live client handles
# CREATED: 19 OCT 2026
# ============================================================================
"""
Binding Handler Base

A binding handler knows one backing-service family at one version:

- match(descriptor): exact label equality with "<family>-<version>"
- init(namespace, descriptor): an InitTask that validates, connects and
  publishes the handle into the namespace

Failures never escape an InitTask. Shape problems, connect errors and
empty handles all come back from run() as BindingError values.

Subclass example:
    class MemcachedHandler(BindingHandler):
        family = "memcached"
        kind = ServiceKind.KEY_VALUE_CACHE
        required_credentials = ("servers",)

        async def connect(self, credentials):
            ...
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

from core.config import get_defaults
from core.contracts import ServiceDescriptor, ServiceKind
from core.errors import (
    BindingError,
    ConnectionFailedError,
    InvalidServiceError,
    NoHandleError,
)
from core.logging import get_logger, log_context, ComponentType
from core.namespace import Namespace

logger = get_logger(__name__, ComponentType.HANDLER)

# Replacement for a handler's connect(), e.g. a stub in tests
Connector = Callable[[Dict[str, Any]], Awaitable[Any]]

DoneCallback = Callable[[Optional[BindingError]], None]


def _is_empty_handle(handle: Any) -> bool:
    """True for None and falsy handles. Objects that refuse truth tests count as present."""
    if handle is None:
        return True
    try:
        return not handle
    except (TypeError, NotImplementedError):
        # pymongo Database and Collection raise from __bool__
        return False


class BindingHandler(ABC):
    """
    Base class for binding handlers.

    Attributes:
        family: Label prefix and family alias (e.g. "mysql")
        kind: ServiceKind tag
        required_credentials: Credential fields that must be non-empty
        category_alias: Shared alias for the kind (e.g. "db"), or None
    """

    family: str = ""
    kind: ServiceKind = ServiceKind.DOCUMENT_STORE
    required_credentials: Tuple[str, ...] = ()
    category_alias: Optional[str] = None

    def __init__(
        self,
        version: str,
        connector: Optional[Connector] = None,
        connect_timeout_seconds: Optional[float] = None,
    ):
        """
        Args:
            version: Exact label version to match (e.g. "5.5")
            connector: Override for connect(), called with the credentials
            connect_timeout_seconds: Connect timeout (defaults from env)
        """
        self.version = version
        self._connector = connector
        self._connect_timeout_seconds = connect_timeout_seconds

    @property
    def label(self) -> str:
        return f"{self.family}-{self.version}"

    @property
    def aliases(self) -> Tuple[str, ...]:
        """Aliases written on success: category first, then family."""
        return tuple(a for a in (self.category_alias, self.family) if a)

    @property
    def connect_timeout_seconds(self) -> float:
        if self._connect_timeout_seconds is not None:
            return self._connect_timeout_seconds
        return get_defaults().connect_timeout_seconds

    def match(self, descriptor: Optional[ServiceDescriptor]) -> bool:
        """True if descriptor.label is exactly this handler's label."""
        return descriptor is not None and descriptor.label == self.label

    def validate(self, descriptor: ServiceDescriptor) -> Optional[InvalidServiceError]:
        """Return an InvalidServiceError if the descriptor lacks required shape."""
        missing = descriptor.missing_credentials(*self.required_credentials)
        if descriptor.is_valid and not missing:
            return None
        if not descriptor.name:
            missing.insert(0, "name")
        return InvalidServiceError(descriptor.label, descriptor.name, missing)

    def init(self, namespace: Namespace, descriptor: ServiceDescriptor) -> "InitTask":
        """Create the init task for one descriptor."""
        return InitTask(self, namespace, descriptor)

    @abstractmethod
    async def connect(self, credentials: Dict[str, Any]) -> Any:
        """
        Open a client handle from validated credentials.

        Raise on failure. Returning None or a falsy value is reported
        as no_handle.
        """
        pass

    async def open(self, credentials: Dict[str, Any]) -> Any:
        """Connect through the injected connector if one was given."""
        if self._connector is not None:
            return await self._connector(credentials)
        return await self.connect(credentials)

    def publish(self, namespace: Namespace, descriptor: ServiceDescriptor, handle: Any) -> None:
        """Write handle to its aliases (first writer wins) and its slot."""
        for alias in self.aliases:
            if namespace.set_if_absent(alias, handle):
                logger.info(f"{descriptor.label}/{descriptor.name} bound as '{alias}'")
        namespace.bind(descriptor.label, descriptor.name, handle)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.label!r})"


class InitTask:
    """
    One descriptor's initialization, closed over (namespace, descriptor).

    run() settles exactly once: the connect is attempted at most once and
    every caller (and every done callback) sees the same result.
    """

    def __init__(
        self,
        handler: BindingHandler,
        namespace: Namespace,
        descriptor: ServiceDescriptor,
    ):
        self.handler = handler
        self.namespace = namespace
        self.descriptor = descriptor
        self._runner: Optional[asyncio.Future] = None
        self._settled = False
        self._error: Optional[BindingError] = None
        self._callbacks: List[DoneCallback] = []

    @property
    def done(self) -> bool:
        return self._settled

    @property
    def error(self) -> Optional[BindingError]:
        return self._error

    def add_done_callback(self, fn: DoneCallback) -> None:
        """Call fn(error_or_None) once the task settles."""
        if self._settled:
            fn(self._error)
        else:
            self._callbacks.append(fn)

    async def run(self) -> Optional[BindingError]:
        """
        Execute the task.

        Returns:
            None on success, otherwise the BindingError
        """
        if self._runner is None:
            self._runner = asyncio.ensure_future(self._execute())
        error = await self._runner
        self._settle(error)
        return self._error

    def _settle(self, error: Optional[BindingError]) -> None:
        if self._settled:
            return
        self._settled = True
        self._error = error
        callbacks, self._callbacks = self._callbacks, []
        for fn in callbacks:
            fn(error)

    async def _execute(self) -> Optional[BindingError]:
        descriptor = self.descriptor
        handler = self.handler

        with log_context(service_label=descriptor.label, service_name=descriptor.name):
            invalid = handler.validate(descriptor)
            if invalid is not None:
                logger.warning(f"Rejected {descriptor.label}/{descriptor.name}: {invalid}")
                return invalid

            logger.debug(f"Connecting {descriptor.label}/{descriptor.name}")
            try:
                handle = await asyncio.wait_for(
                    handler.open(dict(descriptor.credentials)),
                    timeout=handler.connect_timeout_seconds,
                )
            except Exception as e:
                logger.error(f"Connect failed for {descriptor.label}/{descriptor.name}: {e!r}")
                error = ConnectionFailedError(e, descriptor.label, descriptor.name)
                error.__cause__ = e
                return error

            if _is_empty_handle(handle):
                logger.error(f"Connect for {descriptor.label}/{descriptor.name} returned no handle")
                return NoHandleError(descriptor.label, descriptor.name)

            handler.publish(self.namespace, descriptor, handle)
            logger.info(f"Bound {descriptor.label}/{descriptor.name}")
            return None

    def __repr__(self) -> str:
        return f"InitTask({self.descriptor.label}/{self.descriptor.name})"


__all__ = [
    "BindingHandler",
    "InitTask",
    "Connector",
]
