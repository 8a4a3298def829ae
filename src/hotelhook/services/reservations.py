"""Reservation creation and lookup."""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from hotelhook.core.models import AppliedPromotion, Reservation, Room
from hotelhook.services.promotions import PromotionsService
from hotelhook.services.rooms import RoomsService, stay_nights
from hotelhook.store.repository import HotelRepository
from hotelhook.utils.exceptions import ReservationError

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ReservationsService:
    """Creates reservations and answers reservation queries."""

    def __init__(
        self,
        repository: HotelRepository,
        rooms: RoomsService,
        promotions: PromotionsService,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.repository = repository
        self.rooms = rooms
        self.promotions = promotions
        self.clock = clock

    def create_reservation(
        self,
        guest_name: str,
        guest_email: str,
        guest_phone: str,
        room_type: str,
        check_in_date: str,
        check_out_date: str,
        promotion_id: str | None = None,
    ) -> Reservation:
        """Book a room and store the reservation.

        The promotion is applied only when it exists and covers the room type;
        otherwise the reservation is created at full price.

        Raises:
            ReservationError: If the room is unknown or sold out, or the
                stay is not at least one night long
            OperationError: If a date cannot be parsed
        """
        room = self.rooms.check_availability(room_type)

        nights = stay_nights(check_in_date, check_out_date)
        if nights <= 0:
            raise ReservationError("La fecha de salida debe ser posterior a la fecha de entrada")

        base_price = room.base_price_per_night * nights
        discount = 0.0
        applied: AppliedPromotion | None = None

        if promotion_id:
            promotion = self.promotions.get_promotion(promotion_id)
            if promotion and room_type in promotion.applicable_room_types:
                discount = base_price * (promotion.discount_percentage / 100)
                applied = AppliedPromotion(
                    id=promotion.id,
                    name=promotion.name,
                    discount_percentage=promotion.discount_percentage,
                )
            else:
                logger.info(
                    "reservation.promotion_ignored: %s does not apply to %s",
                    promotion_id,
                    room_type,
                )

        def build(reservation_id: str, booked: Room) -> Reservation:
            return Reservation(
                reservation_id=reservation_id,
                guest_name=guest_name,
                guest_email=guest_email,
                guest_phone=guest_phone,
                room_type=booked.type,
                room_name=booked.name,
                check_in_date=check_in_date,
                check_out_date=check_out_date,
                nights=nights,
                base_price=base_price,
                discount=discount,
                total_price=base_price - discount,
                promotion=applied,
                created_at=self.clock().isoformat(),
            )

        reservation = self.repository.reserve_room(room_type, build)
        if reservation is None:
            # Sold out between the availability check and the booking
            raise ReservationError(f"No hay habitaciones {room.name} disponibles")

        logger.info(
            "reservation.created: %s (%s, %d nights)",
            reservation.reservation_id,
            room_type,
            nights,
        )
        return reservation

    def get_reservation(self, reservation_id: str) -> Reservation | None:
        return self.repository.get_reservation(reservation_id)

    def get_reservations_by_email(self, guest_email: str) -> list[Reservation]:
        """Return reservations for an email, compared case-insensitively."""
        email = guest_email.lower()
        return [
            r
            for r in self.repository.list_reservations()
            if r.guest_email and r.guest_email.lower() == email
        ]

    def get_all_reservations(self) -> list[Reservation]:
        """Return all reservations, newest first."""
        return self.repository.list_reservations()
