"""Unit tests for identifier normalization."""

import pytest

from hotelhook.routing.normalizer import normalize, normalize_light


class TestNormalize:
    """Tests for the strict form."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("GEN_GET_Promotions", "gengetpromotions"),
            ("gen-get-room-prices", "gengetroomprices"),
            ("Reservación", "reservacin"),
            ("front desk!", "frontdesk"),
            ("", ""),
        ],
    )
    def test_strips_everything_but_ascii_alphanumerics(self, raw, expected):
        """Test that only lowercase ASCII letters and digits survive."""
        assert normalize(raw) == expected

    def test_none_is_empty(self):
        """Test that None normalizes to an empty string."""
        assert normalize(None) == ""

    def test_non_string_is_stringified(self):
        """Test that numbers are converted before normalizing."""
        assert normalize(1764314627615) == "1764314627615"

    def test_idempotent(self):
        """Test that normalizing twice changes nothing."""
        once = normalize("Directorio_Telefónico-1764")
        assert normalize(once) == once


class TestNormalizeLight:
    """Tests for the light form."""

    def test_strips_only_underscores_and_hyphens(self):
        """Test that separators go and accents stay."""
        assert normalize_light("Crear_Reservación-Ya") == "crearreservaciónya"

    def test_keeps_spaces(self):
        """Test that spaces are not removed."""
        assert normalize_light("Front Desk") == "front desk"

    def test_none_is_empty(self):
        """Test that None normalizes to an empty string."""
        assert normalize_light(None) == ""

    def test_idempotent(self):
        """Test that normalizing twice changes nothing."""
        once = normalize_light("GEN_directorio-telef_nico")
        assert normalize_light(once) == once
