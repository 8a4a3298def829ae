"""Base class for use case operations."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar


class Operation(ABC):
    """A named business action invocable from a webhook.

    Subclasses set ``name`` to a human-readable label (used for logging and
    introspection only, never for matching) and implement ``execute``.
    """

    name: ClassVar[str] = "Operation"

    @abstractmethod
    def execute(self, arguments: Mapping[str, Any]) -> Any:
        """Run the operation.

        Args:
            arguments: Loosely-typed argument bag from the caller

        Returns:
            Response text. Non-text values are serialized by the dispatcher.
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
