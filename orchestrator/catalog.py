# ============================================================================
# SERVICE CATALOG
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Core - Read-only view of bound services
# PURPOSE: Parse VCAP_SERVICES-shaped data and look services up by type
# CREATED: 19 OCT 2026
# ============================================================================
"""
Service Catalog

Ordered, read-only mapping of catalog key (a label such as "mysql-5.5",
or a category key) to the descriptors bound under it.

Usage:
    catalog = ServiceCatalog.from_mapping(config.services)

    catalog.get_services_by_type("mysql-5.5")       # exact key
    catalog.get_services_by_type(re.compile("^redis"))  # pattern
    catalog.get_service("orders-db")               # by descriptor name
"""

import logging
from typing import Any, Dict, Iterator, List, Mapping, Optional, Pattern, Tuple, Union

from core.contracts import ServiceDescriptor
from core.errors import CatalogError

logger = logging.getLogger(__name__)

TypeMatcher = Union[str, Pattern]


class ServiceCatalog:
    """
    Catalog of bound services, keyed by label or category key.

    Constructed once; never mutated.
    """

    def __init__(self, entries: Optional[Mapping[str, Tuple[ServiceDescriptor, ...]]] = None):
        self._entries: Dict[str, Tuple[ServiceDescriptor, ...]] = dict(entries or {})

    @classmethod
    def from_mapping(cls, data: Any) -> "ServiceCatalog":
        """
        Build a catalog from decoded VCAP_SERVICES data.

        Raises:
            CatalogError: If data is not a mapping of key -> list.
                Malformed items are kept as (possibly invalid) descriptors.
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise CatalogError(
                f"Service catalog must be a mapping, got {type(data).__name__}"
            )

        entries: Dict[str, Tuple[ServiceDescriptor, ...]] = {}
        for key, items in data.items():
            if not isinstance(items, (list, tuple)):
                raise CatalogError(
                    f"Catalog entry '{key}' must be a list, got {type(items).__name__}"
                )
            entries[key] = tuple(ServiceDescriptor.model_validate(item) for item in items)

        catalog = cls(entries)
        logger.debug(f"Service catalog built: {len(catalog)} descriptors under {len(entries)} keys")
        return catalog

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------

    def descriptors(self) -> Iterator[Tuple[str, ServiceDescriptor]]:
        """Yield (key, descriptor) pairs in catalog order."""
        for key, items in self._entries.items():
            for descriptor in items:
                yield key, descriptor

    def keys(self) -> List[str]:
        return list(self._entries)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_services_by_type(self, type_matcher: TypeMatcher) -> Optional[List[ServiceDescriptor]]:
        """
        Find the first catalog entry matching type_matcher.

        A string matches a catalog key exactly, or the name of any
        descriptor in the entry. A compiled pattern is searched against
        the same candidates.

        Returns:
            Descriptors of the first matching entry, or None
        """
        for key, items in self._entries.items():
            if self._entry_matches(type_matcher, key, items):
                return list(items)
        return None

    def get_service(self, type_matcher: TypeMatcher) -> Optional[ServiceDescriptor]:
        """First descriptor of the first matching entry, or None."""
        services = self.get_services_by_type(type_matcher)
        return services[0] if services else None

    @staticmethod
    def _entry_matches(
        type_matcher: TypeMatcher,
        key: str,
        items: Tuple[ServiceDescriptor, ...],
    ) -> bool:
        candidates = [key] + [d.name for d in items if d.name]
        if isinstance(type_matcher, str):
            return type_matcher in candidates
        return any(type_matcher.search(c) for c in candidates)

    def __len__(self) -> int:
        return sum(len(items) for items in self._entries.values())

    def __contains__(self, key: str) -> bool:
        return key in self._entries


__all__ = ["ServiceCatalog", "TypeMatcher"]
