"""Persistence backends for hotel data."""

import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from hotelhook.core.models import Contact, Promotion, Reservation, Room

RESERVATION_PREFIX = "RES-"

# Builds a reservation from the assigned id and the room being booked
ReservationFactory = Callable[[str, Room], Reservation]


class HotelRepository(ABC):
    """Abstract base class for hotel data backends."""

    @abstractmethod
    def add_promotion(self, promotion: Promotion) -> None:
        """Store a promotion, replacing one with the same id."""
        pass

    @abstractmethod
    def get_promotion(self, promotion_id: str) -> Promotion | None:
        """Return a promotion by id."""
        pass

    @abstractmethod
    def list_promotions(self) -> list[Promotion]:
        """Return all promotions in insertion order."""
        pass

    @abstractmethod
    def add_room(self, room: Room) -> None:
        """Store a room type, replacing one with the same type."""
        pass

    @abstractmethod
    def get_room(self, room_type: str) -> Room | None:
        """Return a room by its type key."""
        pass

    @abstractmethod
    def list_rooms(self) -> list[Room]:
        """Return all rooms in insertion order."""
        pass

    @abstractmethod
    def reserve_room(self, room_type: str, factory: ReservationFactory) -> Reservation | None:
        """Atomically book one room of ``room_type``.

        Assigns the next reservation id, stores the reservation built by
        ``factory`` and decrements availability as a single step.

        Returns:
            The stored reservation, or None if the room type is unknown or
            sold out
        """
        pass

    @abstractmethod
    def get_reservation(self, reservation_id: str) -> Reservation | None:
        """Return a reservation by id."""
        pass

    @abstractmethod
    def list_reservations(self) -> list[Reservation]:
        """Return all reservations, newest first."""
        pass

    @abstractmethod
    def add_contact(self, contact: Contact) -> None:
        """Store a phone directory entry."""
        pass

    @abstractmethod
    def list_contacts(self, query: dict[str, Any] | None = None) -> list[Contact]:
        """Return directory entries whose fields equal every value in ``query``."""
        pass

    def is_empty(self) -> bool:
        """Check whether the backend holds no catalog data yet."""
        return not self.list_promotions() and not self.list_rooms()


class InMemoryHotelRepository(HotelRepository):
    """In-memory backend for the simulator and for tests."""

    def __init__(self, reservation_start_id: int = 1000):
        self._promotions: dict[str, Promotion] = {}
        self._rooms: dict[str, Room] = {}
        self._reservations: dict[str, Reservation] = {}
        self._contacts: list[Contact] = []
        self._next_reservation_id = reservation_start_id
        self._lock = threading.Lock()

    def add_promotion(self, promotion: Promotion) -> None:
        self._promotions[promotion.id] = promotion.model_copy(deep=True)

    def get_promotion(self, promotion_id: str) -> Promotion | None:
        promotion = self._promotions.get(promotion_id)
        return promotion.model_copy(deep=True) if promotion else None

    def list_promotions(self) -> list[Promotion]:
        return [p.model_copy(deep=True) for p in self._promotions.values()]

    def add_room(self, room: Room) -> None:
        with self._lock:
            self._rooms[room.type] = room.model_copy(deep=True)

    def get_room(self, room_type: str) -> Room | None:
        with self._lock:
            room = self._rooms.get(room_type)
            return room.model_copy(deep=True) if room else None

    def list_rooms(self) -> list[Room]:
        with self._lock:
            return [r.model_copy(deep=True) for r in self._rooms.values()]

    def reserve_room(self, room_type: str, factory: ReservationFactory) -> Reservation | None:
        with self._lock:
            room = self._rooms.get(room_type)
            if room is None or room.available_count <= 0:
                return None

            reservation = factory(self._allocate_reservation_id(), room.model_copy(deep=True))
            self._reservations[reservation.reservation_id] = reservation
            room.available_count -= 1

            return reservation.model_copy(deep=True)

    def _allocate_reservation_id(self) -> str:
        """Return the next RES-XXXX id. Caller holds the lock."""
        reservation_id = f"{RESERVATION_PREFIX}{self._next_reservation_id}"
        self._next_reservation_id += 1
        return reservation_id

    def get_reservation(self, reservation_id: str) -> Reservation | None:
        with self._lock:
            reservation = self._reservations.get(reservation_id)
        return reservation.model_copy(deep=True) if reservation else None

    def list_reservations(self) -> list[Reservation]:
        # stored reservations are never mutated after insertion
        with self._lock:
            snapshot = list(self._reservations.values())
        return [r.model_copy(deep=True) for r in reversed(snapshot)]

    def add_contact(self, contact: Contact) -> None:
        self._contacts.append(contact.model_copy())

    def list_contacts(self, query: dict[str, Any] | None = None) -> list[Contact]:
        if query is None:
            return [c.model_copy() for c in self._contacts]

        return [c.model_copy() for c in self._contacts if self._matches(c, query)]

    def clear(self) -> None:
        """Remove all data."""
        with self._lock:
            self._promotions.clear()
            self._rooms.clear()
            self._reservations.clear()
            self._contacts.clear()

    def _matches(self, record: Contact, query: dict[str, Any]) -> bool:
        """Check if a record matches a query."""
        data = record.model_dump()
        for key, value in query.items():
            if key not in data or data[key] != value:
                return False
        return True
