"""Unit tests for the hotel business services."""

from datetime import date

import pytest

from hotelhook.services import PhoneDirectoryService, PromotionsService, RoomsService
from hotelhook.services.directory import format_area_name, resolve_area
from hotelhook.services.rooms import stay_nights
from hotelhook.utils.exceptions import OperationError, ReservationError


class TestPromotionsService:
    """Tests for PromotionsService."""

    @pytest.mark.parametrize(
        "today,expected",
        [
            (date(2026, 3, 15), ["PROM001", "PROM002", "PROM003", "PROM004"]),
            (date(2026, 3, 31), ["PROM001", "PROM002", "PROM003", "PROM004"]),
            (date(2026, 4, 1), ["PROM002", "PROM003", "PROM004"]),
            (date(2026, 1, 15), ["PROM002", "PROM003"]),
            (date(2025, 12, 31), []),
        ],
    )
    def test_validity_window_is_inclusive(self, repository, today, expected):
        """Test which promotions are valid on a given day."""
        service = PromotionsService(repository, today=lambda: today)

        assert [p.id for p in service.get_available_promotions()] == expected

    def test_room_type_filter(self, repository):
        """Test that only promotions covering the room type are returned."""
        service = PromotionsService(repository, today=lambda: date(2026, 3, 15))

        ids = [p.id for p in service.get_available_promotions("standard")]
        assert ids == ["PROM001", "PROM002", "PROM003"]

    def test_inactive_promotions_hidden(self, repository):
        """Test that deactivated promotions are never available."""
        promo = repository.get_promotion("PROM002").model_copy(update={"is_active": False})
        repository.add_promotion(promo)
        service = PromotionsService(repository, today=lambda: date(2026, 3, 15))

        assert "PROM002" not in [p.id for p in service.get_available_promotions()]
        assert len(service.get_all_promotions()) == 4


class TestRoomsService:
    """Tests for RoomsService."""

    def test_check_availability(self, repository):
        """Test that an available room type is returned."""
        assert RoomsService(repository).check_availability("deluxe").name == "Habitación Deluxe"

    def test_unknown_room_type(self, repository):
        """Test that an unknown room type is rejected."""
        with pytest.raises(ReservationError, match='Tipo de habitación "loft" no encontrado'):
            RoomsService(repository).check_availability("loft")

    def test_quotes_without_nights(self, repository):
        """Test that totals are omitted when the stay length is unknown."""
        quotes = RoomsService(repository).get_room_prices("suite")

        assert len(quotes) == 1
        assert quotes[0].nights is None
        assert quotes[0].total_price is None


class TestStayNights:
    """Tests for stay_nights."""

    def test_whole_days(self):
        """Test plain date arithmetic."""
        assert stay_nights("2026-03-10", "2026-03-15") == 5

    def test_mixed_timezones_rejected(self):
        """Test that aware and naive datetimes cannot be combined."""
        with pytest.raises(OperationError, match="Fechas incompatibles"):
            stay_nights("2026-03-10T12:00:00+00:00", "2026-03-12")


class TestPhoneDirectoryService:
    """Tests for PhoneDirectoryService."""

    @pytest.mark.parametrize(
        "area,expected",
        [
            ("Front Desk", "recepcion"),
            ("alberca", "piscina"),
            ("Conserjería", "conserjeria"),
            ("spa", "spa"),
            ("unknown", "unknown"),
        ],
    )
    def test_resolve_area(self, area, expected):
        """Test area synonym resolution."""
        assert resolve_area(area) == expected

    def test_format_area_name(self):
        """Test display names, with a capitalized fallback."""
        assert format_area_name("room_service") == "Servicio a Habitaciones"
        assert format_area_name("bar") == "Bar"

    def test_all_directory_grouped_and_sorted(self, repository):
        """Test grouping by area, areas and names both sorted."""
        directory = PhoneDirectoryService(repository).get_all_directory()

        assert list(directory) == sorted(directory)
        assert [c.name for c in directory["recepcion"]] == ["Carlos Ramírez", "María González"]

    def test_contact_by_extension(self, repository):
        """Test lookup by extension."""
        service = PhoneDirectoryService(repository)

        assert service.get_contact_by_extension("801").name == "Pedro Jiménez"
        assert service.get_contact_by_extension("000") is None
