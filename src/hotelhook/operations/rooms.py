"""Room prices use case."""

import logging
from collections.abc import Mapping
from typing import Any

from hotelhook.operations.arguments import RoomPriceArguments, parse_arguments
from hotelhook.operations.base import Operation
from hotelhook.services.rooms import RoomQuote, RoomsService, stay_nights

logger = logging.getLogger(__name__)


def _format_quote(quote: RoomQuote) -> str:
    room = quote.room
    price = f"Precio por noche: ${room.base_price_per_night:.2f}"
    if quote.nights and quote.total_price is not None:
        price += f" | Total ({quote.nights} noches): ${quote.total_price:.2f}"

    return (
        f"- {room.name} ({room.type}): {room.description}. {price}. "
        f"Capacidad: {room.max_occupancy} personas. Disponibles: {room.available_count}"
    )


class GetRoomPricesOperation(Operation):
    """Quotes nightly rates, and stay totals when the length is known."""

    name = "Consultar Costos de Habitaciones"

    def __init__(self, rooms: RoomsService):
        self.rooms = rooms

    def execute(self, arguments: Mapping[str, Any]) -> str:
        args = parse_arguments(RoomPriceArguments, arguments)

        nights = args.nights
        if args.check_in_date and args.check_out_date:
            nights = stay_nights(args.check_in_date, args.check_out_date)
        if nights is not None and nights <= 0:
            nights = None

        logger.info("rooms.query: room_type=%s nights=%s", args.room_type, nights)

        quotes = self.rooms.get_room_prices(args.room_type, nights)
        if not quotes:
            if args.room_type:
                return f'No se encontraron habitaciones del tipo "{args.room_type}".'
            return "No hay habitaciones disponibles."

        return f"Habitaciones disponibles ({len(quotes)}):\n" + "\n".join(
            _format_quote(q) for q in quotes
        )
