"""Custom exceptions for HotelHook."""


class HotelHookError(Exception):
    """Base exception for HotelHook errors."""

    pass


class ConfigurationError(HotelHookError):
    """Invalid configuration value."""

    pass


class CatalogFrozenError(HotelHookError):
    """Registration attempted on a catalog that was already built."""

    pass


class OperationError(HotelHookError):
    """Error executing a business operation."""

    pass


class ReservationError(OperationError):
    """Error creating a reservation."""

    pass
