"""Unit tests for the in-memory hotel repository and seed data."""

import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest

from hotelhook.core.models import Contact, Promotion, Reservation, Room
from hotelhook.services import PromotionsService
from hotelhook.store.repository import InMemoryHotelRepository
from hotelhook.store.seed import CONTACTS, PROMOTIONS, ROOMS, promotions_for_year, seed_repository


def make_reservation(reservation_id: str, room: Room) -> Reservation:
    """Reservation factory used by reserve_room."""
    return Reservation(
        reservation_id=reservation_id,
        guest_name="Test",
        guest_email="test@example.com",
        guest_phone="555",
        room_type=room.type,
        room_name=room.name,
        check_in_date="2026-03-10",
        check_out_date="2026-03-11",
        nights=1,
        base_price=room.base_price_per_night,
        total_price=room.base_price_per_night,
    )


class TestInMemoryHotelRepository:
    """Tests for InMemoryHotelRepository."""

    @pytest.fixture
    def repo(self):
        """Repository with a single room type of two units."""
        repo = InMemoryHotelRepository()
        repo.add_room(
            Room(
                room_id="R1",
                type="twin",
                name="Twin",
                base_price_per_night=100,
                max_occupancy=2,
                available_count=2,
            )
        )
        return repo

    def test_reserve_room_assigns_ids_and_decrements(self, repo):
        """Test that each booking gets the next id and takes one unit."""
        first = repo.reserve_room("twin", make_reservation)
        second = repo.reserve_room("twin", make_reservation)

        assert first.reservation_id == "RES-1000"
        assert second.reservation_id == "RES-1001"
        assert repo.get_room("twin").available_count == 0

    def test_reserve_room_sold_out_returns_none(self, repo):
        """Test that nothing is stored once the room type is sold out."""
        repo.reserve_room("twin", make_reservation)
        repo.reserve_room("twin", make_reservation)

        assert repo.reserve_room("twin", make_reservation) is None
        assert len(repo.list_reservations()) == 2

    def test_reserve_unknown_room_returns_none(self, repo):
        """Test booking a room type that does not exist."""
        assert repo.reserve_room("penthouse", make_reservation) is None

    def test_concurrent_bookings_never_oversell(self):
        """Test that parallel bookings respect availability."""
        repo = InMemoryHotelRepository()
        for room in ROOMS:
            repo.add_room(room)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: repo.reserve_room("suite", make_reservation), range(10)))

        booked = [r for r in results if r is not None]
        assert len(booked) == 3
        assert len({r.reservation_id for r in booked}) == 3
        assert repo.get_room("suite").available_count == 0

    def test_listing_while_booking(self):
        """Test that reads stay consistent while another thread books rooms."""
        repo = InMemoryHotelRepository()
        repo.add_room(
            Room(
                room_id="H1",
                type="hall",
                name="Hall",
                base_price_per_night=10,
                max_occupancy=1,
                available_count=100_000,
            )
        )
        for _ in range(2000):
            repo.reserve_room("hall", make_reservation)

        stop = threading.Event()

        def keep_booking():
            while not stop.is_set():
                repo.reserve_room("hall", make_reservation)

        writer = threading.Thread(target=keep_booking)
        writer.start()
        try:
            for _ in range(30):
                assert len(repo.list_reservations()) >= 2000
                assert repo.get_reservation("RES-1000") is not None
                assert repo.list_rooms()[0].available_count <= 98_000
        finally:
            stop.set()
            writer.join()

    def test_ids_not_reused_after_clear(self, repo):
        """Test that the id counter keeps going when the store is emptied."""
        repo.reserve_room("twin", make_reservation)
        repo.clear()
        repo.add_room(ROOMS[0])

        assert repo.reserve_room("standard", make_reservation).reservation_id == "RES-1001"

    def test_custom_start_id(self):
        """Test the configurable first reservation number."""
        repo = InMemoryHotelRepository(reservation_start_id=5000)
        repo.add_room(ROOMS[0])

        assert repo.reserve_room("standard", make_reservation).reservation_id == "RES-5000"

    def test_list_reservations_newest_first(self, repo):
        """Test listing order."""
        repo.reserve_room("twin", make_reservation)
        repo.reserve_room("twin", make_reservation)

        ids = [r.reservation_id for r in repo.list_reservations()]
        assert ids == ["RES-1001", "RES-1000"]

    def test_returned_records_are_copies(self, repo):
        """Test that mutating a returned room does not change the store."""
        room = repo.get_room("twin")
        room.available_count = 99

        assert repo.get_room("twin").available_count == 2

    def test_list_contacts_query(self):
        """Test that contact queries match on field equality."""
        repo = InMemoryHotelRepository()
        repo.add_contact(Contact(area="spa", name="A", extension="501"))
        repo.add_contact(Contact(area="spa", name="B", extension="502"))
        repo.add_contact(Contact(area="cocina", name="C", extension="301"))

        assert [c.name for c in repo.list_contacts({"area": "spa"})] == ["A", "B"]
        assert [c.name for c in repo.list_contacts({"extension": "301"})] == ["C"]
        assert repo.list_contacts({"unknown_field": "x"}) == []

    def test_promotions(self):
        """Test adding and fetching promotions."""
        repo = InMemoryHotelRepository()
        promo = Promotion(
            id="P1",
            name="Promo",
            discount_percentage=10,
            valid_from="2026-01-01",
            valid_until="2026-12-31",
        )
        repo.add_promotion(promo)

        assert repo.get_promotion("P1") == promo
        assert repo.get_promotion("P2") is None
        assert len(repo.list_promotions()) == 1

    def test_clear(self, repo):
        """Test that clear empties the store."""
        repo.reserve_room("twin", make_reservation)
        repo.clear()

        assert repo.is_empty()
        assert repo.list_reservations() == []


class TestSeedRepository:
    """Tests for seed_repository."""

    def test_loads_sample_data(self):
        """Test that every sample record is stored."""
        repo = InMemoryHotelRepository()

        assert seed_repository(repo) is True
        assert len(repo.list_promotions()) == len(PROMOTIONS) == 4
        assert len(repo.list_rooms()) == len(ROOMS) == 3
        assert len(repo.list_contacts()) == len(CONTACTS) == 13

    def test_promotion_windows_follow_seeding_year(self):
        """Test that sample promotions stay live in later years."""
        repo = InMemoryHotelRepository()
        seed_repository(repo, today=date(2031, 3, 10))
        service = PromotionsService(repo, today=lambda: date(2031, 3, 10))

        seasonal = repo.get_promotion("PROM001")
        assert (seasonal.valid_from, seasonal.valid_until) == ("2031-03-01", "2031-03-31")
        assert len(service.get_available_promotions()) == 4

    def test_promotions_for_year_keeps_months(self):
        """Test that only the year of each window changes."""
        moved = {p.id: p for p in promotions_for_year(2027)}

        assert moved["PROM004"].valid_from == "2027-02-01"
        assert moved["PROM004"].valid_until == "2027-04-30"
        assert PROMOTIONS[3].valid_from == "2026-02-01"

    def test_skips_populated_repository(self, repository):
        """Test that seeding twice does not duplicate data."""
        assert seed_repository(repository) is False
        assert len(repository.list_contacts()) == 13

    def test_room_inventory(self, repository):
        """Test the seeded prices and availability."""
        rooms = {r.type: r for r in repository.list_rooms()}

        assert (rooms["standard"].base_price_per_night, rooms["standard"].available_count) == (
            1500,
            15,
        )
        assert (rooms["deluxe"].base_price_per_night, rooms["deluxe"].available_count) == (2500, 8)
        assert (rooms["suite"].base_price_per_night, rooms["suite"].available_count) == (4500, 3)
