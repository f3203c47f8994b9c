# ============================================================================
# HANDLER REGISTRY
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Core - Handler registration and lookup
# PURPOSE: Ordered, first-match-wins lookup of binding handlers
# CREATED: 19 OCT 2026
# ============================================================================
"""
Handler Registry

Ordered list of binding handlers. find() scans in registration order
and returns the first handler whose match() accepts the descriptor.

Design:
- Registries are plain objects passed to the orchestrator (no global)
- register() appends; register(..., first=True) puts a handler ahead of
  everything already registered, which is how an application overrides a
  built-in for a label
- No match is not an error here; the orchestrator turns it into a warning

Usage:
    registry = default_registry()
    registry.register(MySQLHandler("5.5", connector=my_connect), first=True)
    handler = registry.find(descriptor)
"""

import logging
from typing import Iterator, List, Optional

from core.config import BindingDefaults, get_defaults
from core.contracts import ServiceDescriptor
from handlers.base import BindingHandler
from handlers.mongodb import MongoDBHandler
from handlers.mysql import MySQLHandler
from handlers.rabbitmq import RabbitMQHandler
from handlers.redis import RedisHandler

logger = logging.getLogger(__name__)


class HandlerRegistry:
    """Ordered collection of binding handlers."""

    def __init__(self, handlers: Optional[List[BindingHandler]] = None):
        self._handlers: List[BindingHandler] = []
        for handler in handlers or []:
            self.register(handler)

    def register(self, handler: BindingHandler, first: bool = False) -> None:
        """
        Register a binding handler.

        Args:
            handler: Handler instance
            first: Put the handler ahead of all registered handlers
        """
        if first:
            self._handlers.insert(0, handler)
        else:
            self._handlers.append(handler)
        logger.debug(f"Registered binding handler: {handler!r} (first={first})")

    def find(self, descriptor: ServiceDescriptor) -> Optional[BindingHandler]:
        """
        Find the first handler matching descriptor.

        Returns:
            Handler or None if nothing matches
        """
        for handler in self._handlers:
            if handler.match(descriptor):
                return handler
        return None

    def labels(self) -> List[str]:
        """Labels handled, in registration order."""
        return [h.label for h in self._handlers]

    def __iter__(self) -> Iterator[BindingHandler]:
        return iter(list(self._handlers))

    def __len__(self) -> int:
        return len(self._handlers)


def default_registry(defaults: Optional[BindingDefaults] = None) -> HandlerRegistry:
    """
    Create a registry holding the built-in handlers.

    Order: mongodb, rabbitmq, mysql, redis. Versions come from
    BindingDefaults (BINDINGS_<FAMILY>_VERSION overrides).
    """
    defaults = defaults or get_defaults()
    return HandlerRegistry([
        MongoDBHandler(defaults.get_version("mongodb")),
        RabbitMQHandler(defaults.get_version("rabbitmq")),
        MySQLHandler(defaults.get_version("mysql")),
        RedisHandler(defaults.get_version("redis")),
    ])


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "HandlerRegistry",
    "default_registry",
]
