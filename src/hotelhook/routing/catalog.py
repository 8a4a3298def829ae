"""Registry of use case operations keyed by identifier."""

import logging

from hotelhook.operations.base import Operation
from hotelhook.utils.exceptions import CatalogFrozenError

logger = logging.getLogger(__name__)


class OperationCatalog:
    """Mapping of operation key -> Operation, preserving registration order.

    Several keys may point to the same Operation instance (aliases kept for
    renamed identifiers). Re-registering a key replaces the previous entry.
    """

    def __init__(self, log: logging.Logger | None = None):
        self._operations: dict[str, Operation] = {}
        self._frozen = False
        self._logger = log or logger

    def register(self, key: str, operation: Operation) -> None:
        """Register an operation under ``key``.

        Raises:
            CatalogFrozenError: If the catalog was already frozen
        """
        if self._frozen:
            raise CatalogFrozenError(f"Cannot register '{key}': catalog is frozen")

        if key in self._operations:
            # the key keeps its original position in keys()
            self._logger.warning("catalog.replaced: %s", key)

        self._operations[key] = operation
        self._logger.info("catalog.registered: %s -> %s", key, operation.name)

    def lookup(self, key: str) -> Operation | None:
        """Return the operation registered under ``key``, if any."""
        return self._operations.get(key)

    def keys(self) -> tuple[str, ...]:
        """Registered keys in registration order."""
        return tuple(self._operations)

    def items(self) -> tuple[tuple[str, Operation], ...]:
        return tuple(self._operations.items())

    def freeze(self) -> None:
        """Reject any further registration."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, key: object) -> bool:
        return key in self._operations

    def __len__(self) -> int:
        return len(self._operations)


class CatalogBuilder:
    """Collects registrations during startup and produces a frozen catalog."""

    def __init__(self, log: logging.Logger | None = None):
        self._log = log
        self._entries: list[tuple[str, Operation]] = []

    def add(self, key: str, operation: Operation, *aliases: str) -> "CatalogBuilder":
        """Register ``operation`` under ``key`` and any alias keys."""
        for name in (key, *aliases):
            self._entries.append((name, operation))
        return self

    def build(self) -> OperationCatalog:
        """Create the catalog with every collected entry and freeze it."""
        catalog = OperationCatalog(self._log)
        for key, operation in self._entries:
            catalog.register(key, operation)
        catalog.freeze()
        return catalog
