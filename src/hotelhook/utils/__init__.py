"""Utility functions and exceptions."""

from hotelhook.utils.exceptions import (
    CatalogFrozenError,
    ConfigurationError,
    HotelHookError,
    OperationError,
    ReservationError,
)
from hotelhook.utils.logging import configure_logging

__all__ = [
    "HotelHookError",
    "ConfigurationError",
    "CatalogFrozenError",
    "OperationError",
    "ReservationError",
    "configure_logging",
]
