"""Core module for HotelHook."""

from hotelhook.core.config import HotelHookConfig
from hotelhook.core.models import (
    AppliedPromotion,
    Contact,
    Promotion,
    Reservation,
    Room,
    WebhookPayload,
)

__all__ = [
    "HotelHookConfig",
    "Promotion",
    "Room",
    "Reservation",
    "AppliedPromotion",
    "Contact",
    "WebhookPayload",
]
