"""Hotel business services."""

from hotelhook.services.directory import PhoneDirectoryService
from hotelhook.services.promotions import PromotionsService
from hotelhook.services.reservations import ReservationsService
from hotelhook.services.rooms import RoomQuote, RoomsService

__all__ = [
    "PromotionsService",
    "RoomsService",
    "RoomQuote",
    "ReservationsService",
    "PhoneDirectoryService",
]
