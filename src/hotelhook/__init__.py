"""HotelHook - webhook backend simulating hotel operations."""

__version__ = "0.1.0"

from hotelhook.core.config import HotelHookConfig  # noqa: E402
from hotelhook.operations.base import Operation  # noqa: E402
from hotelhook.routing import (  # noqa: E402
    CatalogBuilder,
    OperationCatalog,
    UseCaseDispatcher,
)
from hotelhook.wiring import HotelRuntime, bootstrap  # noqa: E402

__all__ = [
    "HotelHookConfig",
    "Operation",
    "OperationCatalog",
    "CatalogBuilder",
    "UseCaseDispatcher",
    "HotelRuntime",
    "bootstrap",
]
