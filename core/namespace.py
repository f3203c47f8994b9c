# ============================================================================
# BINDING NAMESPACE
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Core - Shared result object for bound handles
# PURPOSE: Hold client handles under aliases and fully-qualified slots
# CREATED: 19 OCT 2026
# ============================================================================
"""
Binding Namespace

The shared output of a resolution run. Two kinds of keys:

- Aliases ("db", "mysql", "redis", ...): first-writer-wins. The first
  handle bound for an alias keeps it; later writes are ignored.
- Fully-qualified slots (namespace[label][name]): written for every
  successful binding.

Entries are only ever added. There is no remove or reset.

All writes are plain dict assignments made between awaits on the event
loop, so set_if_absent is atomic with respect to other init tasks.

Usage:
    namespace = Namespace()
    ...resolve...
    namespace.db                     # primary database alias
    namespace["mysql-5.5"]["orders"]   # fully-qualified slot
"""

import logging
from typing import Any, Dict, Iterator, Optional

logger = logging.getLogger(__name__)


class Namespace:
    """Monotonic container for bound service handles."""

    def __init__(self):
        self._aliases: Dict[str, Any] = {}
        self._slots: Dict[str, Dict[str, Any]] = {}

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def set_if_absent(self, alias: str, handle: Any) -> bool:
        """
        Bind handle to alias unless the alias is already taken.

        Returns:
            True if this call won the alias
        """
        if alias in self._aliases:
            return False
        self._aliases[alias] = handle
        logger.debug(f"Alias bound: {alias}")
        return True

    def bind(self, label: str, name: str, handle: Any) -> None:
        """Store handle under its fully-qualified slot."""
        self._slots.setdefault(label, {})[name] = handle
        logger.debug(f"Slot bound: {label}/{name}")

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def has_alias(self, alias: str) -> bool:
        """True if a non-None handle is bound to alias."""
        return self._aliases.get(alias) is not None

    def get(self, key: str, default: Any = None) -> Any:
        """Look up an alias, then a label; return default if neither exists."""
        try:
            return self[key]
        except KeyError:
            return default

    def slot(self, label: str, name: str) -> Optional[Any]:
        """Get the handle bound at namespace[label][name], if any."""
        return self._slots.get(label, {}).get(name)

    @property
    def aliases(self) -> Dict[str, Any]:
        """Copy of the alias table."""
        return dict(self._aliases)

    @property
    def slots(self) -> Dict[str, Dict[str, Any]]:
        """Copy of the fully-qualified slot table."""
        return {label: dict(names) for label, names in self._slots.items()}

    def __getitem__(self, key: str) -> Any:
        if key in self._aliases:
            return self._aliases[key]
        if key in self._slots:
            return dict(self._slots[key])
        raise KeyError(key)

    def __getattr__(self, key: str) -> Any:
        # Only reached for names not found normally
        if key.startswith("_"):
            raise AttributeError(key)
        try:
            return self._aliases[key]
        except KeyError:
            raise AttributeError(f"No service bound to alias '{key}'") from None

    def __contains__(self, key: str) -> bool:
        return key in self._aliases or key in self._slots

    def __iter__(self) -> Iterator[str]:
        yield from self._aliases
        yield from self._slots

    def __len__(self) -> int:
        return sum(len(names) for names in self._slots.values())

    def __repr__(self) -> str:
        return (
            f"Namespace(aliases={sorted(self._aliases)}, "
            f"slots={ {label: sorted(names) for label, names in self._slots.items()} })"
        )


__all__ = ["Namespace"]
