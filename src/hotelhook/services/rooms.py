"""Room pricing and availability."""

import math
from datetime import datetime

from pydantic import BaseModel

from hotelhook.core.models import Room
from hotelhook.store.repository import HotelRepository
from hotelhook.utils.exceptions import OperationError, ReservationError

SECONDS_PER_DAY = 24 * 60 * 60


class RoomQuote(BaseModel):
    """A room with its price for a given stay length."""

    room: Room
    nights: int | None = None
    total_price: float | None = None


def parse_stay_date(value: str) -> datetime:
    """Parse an ISO 8601 date or datetime.

    Raises:
        OperationError: If the value is not a valid date
    """
    try:
        return datetime.fromisoformat(str(value).strip())
    except ValueError as e:
        raise OperationError(f"Fecha inválida: '{value}'") from e


def stay_nights(check_in_date: str, check_out_date: str) -> int:
    """Number of nights between two dates, rounding partial days up."""
    check_in = parse_stay_date(check_in_date)
    check_out = parse_stay_date(check_out_date)
    try:
        delta = check_out - check_in
    except TypeError as e:
        # one date carries a timezone and the other does not
        raise OperationError(
            f"Fechas incompatibles: '{check_in_date}' y '{check_out_date}'"
        ) from e
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


class RoomsService:
    """Room catalog queries."""

    def __init__(self, repository: HotelRepository):
        self.repository = repository

    def get_room_prices(
        self, room_type: str | None = None, nights: int | None = None
    ) -> list[RoomQuote]:
        """Quote every room, or only ``room_type``.

        Args:
            room_type: Room type key to filter on
            nights: Stay length; when given, totals are included
        """
        rooms = self.repository.list_rooms()
        if room_type:
            rooms = [r for r in rooms if r.type == room_type]

        return [
            RoomQuote(
                room=room,
                nights=nights or None,
                total_price=room.base_price_per_night * nights if nights else None,
            )
            for room in rooms
        ]

    def check_availability(self, room_type: str) -> Room:
        """Return the room if at least one is available.

        Raises:
            ReservationError: If the type is unknown or sold out
        """
        room = self.repository.get_room(room_type)

        if room is None:
            raise ReservationError(f'Tipo de habitación "{room_type}" no encontrado')

        if room.available_count <= 0:
            raise ReservationError(f"No hay habitaciones {room.name} disponibles")

        return room

    def get_all_rooms(self) -> list[Room]:
        return self.repository.list_rooms()
