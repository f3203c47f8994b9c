# ============================================================================
# BINDING ORCHESTRATOR
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Core - Resolution run
# PURPOSE: Match descriptors, run init tasks concurrently, check readiness
# CREATED: 19 OCT 2026
# ============================================================================
"""
Binding Orchestrator

One resolution run:
1. MATCHING      - query the registry for every descriptor; unmatched
                   descriptors become unsupported_service warnings
2. INITIALIZING  - launch every init task on the event loop at once;
                   stop at the first failure, or continue when all succeed
3. CHECKING      - every required alias must be bound; all missing
                   aliases are reported together, in declaration order
4. READY | FAILED

Tasks still running after an early failure are not cancelled. They keep
running in the background and may still add handles to the namespace.
A run is single-use: call resolve() on a new orchestrator to try again.

Usage:
    orchestrator = BindingOrchestrator(catalog, default_registry(), Namespace())
    outcome = await orchestrator.resolve(required_aliases=["db"])
    if outcome.ready:
        app.state.services = orchestrator.namespace
"""

import asyncio
from typing import Any, List, Mapping, Optional, Sequence, Set, Union

from core.contracts import ResolutionOutcome, ResolutionState
from core.errors import (
    BindingError,
    MissingRequiredAliasError,
    ResolutionStateError,
    UnsupportedServiceError,
)
from core.logging import get_logger, log_checkpoint, ComponentType
from core.namespace import Namespace
from handlers.base import InitTask
from handlers.registry import HandlerRegistry
from orchestrator.catalog import ServiceCatalog

logger = get_logger(__name__, ComponentType.ORCHESTRATOR)

# Init tasks still running after their run reported; kept referenced
# until they finish so the event loop does not drop them
_background: Set[asyncio.Future] = set()


class BindingOrchestrator:
    """
    Drives a single resolution run over a catalog.

    The namespace is owned by the caller; the orchestrator only adds to it.
    """

    def __init__(
        self,
        catalog: Union[ServiceCatalog, Mapping[str, Any]],
        registry: HandlerRegistry,
        namespace: Optional[Namespace] = None,
    ):
        """
        Initialize orchestrator.

        Args:
            catalog: ServiceCatalog, or decoded VCAP_SERVICES data
            registry: Handlers to match descriptors against
            namespace: Result object (a new one if omitted)
        """
        if not isinstance(catalog, ServiceCatalog):
            catalog = ServiceCatalog.from_mapping(catalog)
        self.catalog = catalog
        self.registry = registry
        self.namespace = namespace if namespace is not None else Namespace()

        self.state = ResolutionState.IDLE
        self.outcome: Optional[ResolutionOutcome] = None
        self.warnings: List[UnsupportedServiceError] = []
        self._futures: List[asyncio.Future] = []

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------

    async def resolve(
        self,
        required_aliases: Optional[Union[str, Sequence[str]]] = None,
    ) -> ResolutionOutcome:
        """
        Resolve all bindings.

        Args:
            required_aliases: Aliases that must be bound for READY. A single
                alias may be passed as a plain string.

        Returns:
            ResolutionOutcome (READY or FAILED)

        Raises:
            ResolutionStateError: If this orchestrator already ran
        """
        if self.state != ResolutionState.IDLE:
            raise ResolutionStateError(
                f"Resolution already {self.state.value}; create a new orchestrator to retry"
            )

        self._transition(ResolutionState.MATCHING)
        tasks = self._match()

        if tasks:
            self._transition(ResolutionState.INITIALIZING)
            error = await self._run_tasks(tasks)
            if error is not None:
                return self._finish(ResolutionOutcome.failed_outcome(error, self.warnings))

        self._transition(ResolutionState.CHECKING)
        missing = self._missing_aliases(required_aliases or [])
        if missing:
            error = MissingRequiredAliasError(missing)
            logger.error(str(error))
            return self._finish(ResolutionOutcome.failed_outcome(error, self.warnings))

        return self._finish(ResolutionOutcome.ready_outcome(self.warnings))

    async def drain(self) -> None:
        """Wait for init tasks left running after an early failure."""
        pending = [f for f in self._futures if not f.done()]
        if pending:
            await asyncio.wait(pending)

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _match(self) -> List[InitTask]:
        tasks: List[InitTask] = []
        for key, descriptor in self.catalog.descriptors():
            handler = self.registry.find(descriptor)
            if handler is None:
                warning = UnsupportedServiceError(descriptor.label, key)
                self.warnings.append(warning)
                logger.warning(str(warning))
                continue
            tasks.append(handler.init(self.namespace, descriptor))

        logger.info(
            f"Matched {len(tasks)} service(s), {len(self.warnings)} unsupported"
        )
        return tasks

    async def _run_tasks(self, tasks: List[InitTask]) -> Optional[BindingError]:
        """Run tasks concurrently; return the first failure observed, if any."""
        for task in tasks:
            future = asyncio.ensure_future(task.run())
            _background.add(future)
            future.add_done_callback(_background.discard)
            self._futures.append(future)

        for next_done in asyncio.as_completed(self._futures):
            error = await next_done
            if error is not None:
                still_running = sum(1 for f in self._futures if not f.done())
                logger.error(
                    f"Binding failed: {error} "
                    f"({still_running} task(s) left running)"
                )
                return error
        return None

    def _missing_aliases(self, required_aliases: Union[str, Sequence[str]]) -> List[str]:
        # A bare string is one alias, not a sequence of characters
        if isinstance(required_aliases, str):
            required_aliases = [required_aliases]
        missing = []
        for alias in required_aliases:
            if not self.namespace.has_alias(alias):
                missing.append(alias)
        return missing

    def _transition(self, state: ResolutionState) -> None:
        logger.debug(f"Resolution state: {self.state.value} -> {state.value}")
        self.state = state

    def _finish(self, outcome: ResolutionOutcome) -> ResolutionOutcome:
        self._transition(outcome.state)
        self.outcome = outcome
        if outcome.ready:
            log_checkpoint("bindings_resolved", {
                "bound": len(self.namespace),
                "aliases": sorted(self.namespace.aliases),
                "warnings": len(outcome.warnings),
            })
        else:
            log_checkpoint("bindings_failed", {
                "error": str(outcome.error),
                "error_code": outcome.error_code,
            })
        return outcome


async def resolve(
    catalog: Union[ServiceCatalog, Mapping[str, Any]],
    registry: HandlerRegistry,
    namespace: Namespace,
    required_aliases: Optional[Union[str, Sequence[str]]] = None,
) -> ResolutionOutcome:
    """Run one resolution over catalog and return its outcome."""
    orchestrator = BindingOrchestrator(catalog, registry, namespace)
    return await orchestrator.resolve(required_aliases)


__all__ = [
    "BindingOrchestrator",
    "resolve",
]
