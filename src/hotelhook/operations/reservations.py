"""Reservation use cases: create a booking, query bookings."""

import json
import logging
import time
from collections.abc import Callable, Mapping
from typing import Any

from hotelhook.core.models import Reservation
from hotelhook.operations.arguments import (
    ReservationArguments,
    ReservationQueryArguments,
    parse_arguments,
)
from hotelhook.operations.base import Operation
from hotelhook.services.reservations import ReservationsService
from hotelhook.store.repository import RESERVATION_PREFIX
from hotelhook.utils.exceptions import ReservationError

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = (
    "Error: Se requieren los siguientes datos: nombre del huésped, email, teléfono, "
    "tipo de habitación, fecha de entrada y fecha de salida."
)

_BASE36 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


def _epoch_millis() -> int:
    return time.time_ns() // 1_000_000


def generate_reception_code(reservation_id: str, millis: int) -> str:
    """Build a front desk code such as ``REC-1000-K2XQ``.

    The middle part is the reservation number padded to four digits; the
    suffix is the last four base-36 digits of the booking time in ms.
    """
    number = reservation_id.removeprefix(RESERVATION_PREFIX).zfill(4)
    return f"REC-{number}-{_to_base36(millis)[-4:]}"


def _dump(payload: dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False)


class CreateReservationOperation(Operation):
    """Books a room and hands out a reception code."""

    name = "Crear Reservación y Generar Código de Recepción"

    def __init__(
        self,
        reservations: ReservationsService,
        clock_millis: Callable[[], int] = _epoch_millis,
    ):
        self.reservations = reservations
        self.clock_millis = clock_millis

    def execute(self, arguments: Mapping[str, Any]) -> str:
        args = parse_arguments(ReservationArguments, arguments)
        logger.info(
            "reservation.request: guest=%s room_type=%s check_in=%s check_out=%s promotion=%s",
            args.guest_name,
            args.room_type,
            args.check_in_date,
            args.check_out_date,
            args.promotion_id,
        )

        missing = args.missing_required()
        if missing:
            logger.warning("reservation.rejected: missing %s", ", ".join(missing))
            return MISSING_FIELDS_MESSAGE

        try:
            reservation = self.reservations.create_reservation(
                guest_name=args.guest_name,
                guest_email=args.guest_email,
                guest_phone=args.guest_phone,
                room_type=args.room_type,
                check_in_date=args.check_in_date,
                check_out_date=args.check_out_date,
                promotion_id=args.promotion_id,
            )
        except ReservationError as e:
            logger.warning("reservation.rejected: %s", e)
            return str(e)

        code = generate_reception_code(reservation.reservation_id, self.clock_millis())
        logger.info("reservation.confirmed: %s code=%s", reservation.reservation_id, code)

        return _dump(
            {
                "message": self._confirmation(reservation, code),
                "reservation": reservation.model_dump(mode="json", exclude={"created_at"}),
                "reception_code": code,
                "reception_code_format": "alphanumeric",
            }
        )

    def _confirmation(self, reservation: Reservation, code: str) -> str:
        lines = [
            "Reservación confirmada exitosamente.",
            f"ID de Reservación: {reservation.reservation_id}",
            f"Huésped: {reservation.guest_name}",
            f"Habitación: {reservation.room_name} ({reservation.room_type})",
            f"Check-in: {reservation.check_in_date}",
            f"Check-out: {reservation.check_out_date}",
            f"Noches: {reservation.nights}",
            f"Precio total: ${reservation.total_price:.2f}",
        ]
        if reservation.promotion:
            lines.append(
                f"Promoción aplicada: {reservation.promotion.name} "
                f"({reservation.promotion.discount_percentage:g}% descuento)"
            )
        lines.append("")
        lines.append(f"📋 Código de Recepción: {code}")
        lines.append(
            "Presenta este código en recepción al llegar al hotel para agilizar tu check-in."
        )
        return "\n".join(lines)


class GetReservationsOperation(Operation):
    """Looks up reservations by id, by guest email, or lists recent ones."""

    name = "Consultar Reservaciones"

    def __init__(self, reservations: ReservationsService):
        self.reservations = reservations

    def execute(self, arguments: Mapping[str, Any]) -> str:
        args = parse_arguments(ReservationQueryArguments, arguments)

        if args.reservation_id:
            return self._by_id(args.reservation_id)
        if args.guest_email:
            return self._by_email(args.guest_email)
        return self._listing(args.status, args.limit)

    def _by_id(self, reservation_id: str) -> str:
        logger.info("reservations.lookup: %s", reservation_id)
        reservation = self.reservations.get_reservation(reservation_id)

        if reservation is None:
            return _dump(
                {
                    "success": False,
                    "message": f"Reservación {reservation_id} no encontrada",
                    "reservation": None,
                }
            )

        return _dump(
            {
                "success": True,
                "message": f"Reservación {reservation_id} encontrada",
                "reservation": reservation.model_dump(mode="json"),
                "total": 1,
            }
        )

    def _by_email(self, guest_email: str) -> str:
        logger.info("reservations.by_email: %s", guest_email)
        found = self.reservations.get_reservations_by_email(guest_email)

        if not found:
            return _dump(
                {
                    "success": False,
                    "message": f"No se encontraron reservaciones para el email: {guest_email}",
                    "reservations": [],
                    "total": 0,
                }
            )

        return _dump(
            {
                "success": True,
                "message": f"Se encontraron {len(found)} reservación(es) para {guest_email}",
                "reservations": [r.model_dump(mode="json") for r in found],
                "total": len(found),
            }
        )

    def _listing(self, status: str | None, limit: int) -> str:
        logger.info("reservations.list: limit=%d status=%s", limit, status or "todos")
        filtered = self.reservations.get_all_reservations()
        if status:
            filtered = [r for r in filtered if r.status == status]

        limited = filtered[:limit]

        message = f"Reservaciones encontradas: {len(limited)}"
        if status:
            message += f" (filtradas por status: {status})"
        if len(filtered) > len(limited):
            message += f" (mostrando {len(limited)} de {len(filtered)} totales)"

        return _dump(
            {
                "success": True,
                "message": message,
                "reservations": [r.model_dump(mode="json") for r in limited],
                "total": len(filtered),
                "showing": len(limited),
                "filters": {"limit": limit, "status": status},
            }
        )
