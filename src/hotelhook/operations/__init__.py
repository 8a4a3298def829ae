"""Business operations invocable through the use case dispatcher."""

from hotelhook.operations.base import Operation
from hotelhook.operations.directory import GetPhoneDirectoryOperation
from hotelhook.operations.promotions import GetPromotionsOperation
from hotelhook.operations.reservations import (
    CreateReservationOperation,
    GetReservationsOperation,
)
from hotelhook.operations.rooms import GetRoomPricesOperation

__all__ = [
    "Operation",
    "GetPromotionsOperation",
    "GetRoomPricesOperation",
    "CreateReservationOperation",
    "GetReservationsOperation",
    "GetPhoneDirectoryOperation",
]
