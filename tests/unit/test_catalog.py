"""Unit tests for OperationCatalog and CatalogBuilder."""

import logging

import pytest

from hotelhook.routing.catalog import CatalogBuilder, OperationCatalog
from hotelhook.utils.exceptions import CatalogFrozenError


class TestOperationCatalog:
    """Tests for OperationCatalog."""

    @pytest.fixture
    def catalog(self):
        """Create an empty catalog."""
        return OperationCatalog()

    def test_register_and_lookup(self, catalog, stub_operation):
        """Test that a registered operation can be looked up."""
        catalog.register("gen_stub", stub_operation)

        assert catalog.lookup("gen_stub") is stub_operation
        assert "gen_stub" in catalog
        assert len(catalog) == 1

    def test_lookup_missing_returns_none(self, catalog):
        """Test that unknown keys return None."""
        assert catalog.lookup("missing") is None

    def test_keys_preserve_registration_order(self, catalog, make_stub):
        """Test that keys come back in registration order."""
        for key in ("zeta", "alpha", "mid"):
            catalog.register(key, make_stub(key))

        assert catalog.keys() == ("zeta", "alpha", "mid")

    def test_reregister_replaces_in_place(self, catalog, caplog, make_stub):
        """Test that re-registering a key swaps the operation but keeps its position."""
        first, second = make_stub("first"), make_stub("second")
        catalog.register("a", first)
        catalog.register("b", make_stub("b"))

        with caplog.at_level(logging.WARNING, logger="hotelhook"):
            catalog.register("a", second)

        assert catalog.lookup("a") is second
        assert catalog.keys() == ("a", "b")
        assert "catalog.replaced: a" in caplog.text

    def test_frozen_catalog_rejects_registration(self, catalog, stub_operation):
        """Test that a frozen catalog raises on register."""
        catalog.register("a", stub_operation)
        catalog.freeze()

        assert catalog.frozen
        with pytest.raises(CatalogFrozenError):
            catalog.register("b", stub_operation)
        assert catalog.keys() == ("a",)

    def test_items_pairs_keys_with_operations(self, catalog, stub_operation):
        """Test that items() yields (key, operation) pairs."""
        catalog.register("a", stub_operation)

        assert catalog.items() == (("a", stub_operation),)


class TestCatalogBuilder:
    """Tests for CatalogBuilder."""

    def test_build_returns_frozen_catalog(self, stub_operation):
        """Test that the built catalog is frozen."""
        catalog = CatalogBuilder().add("a", stub_operation).build()

        assert catalog.frozen
        assert catalog.keys() == ("a",)

    def test_aliases_share_instance(self, stub_operation):
        """Test that alias keys map to the same operation object."""
        catalog = CatalogBuilder().add("current", stub_operation, "legacy", "older").build()

        assert catalog.keys() == ("current", "legacy", "older")
        assert catalog.lookup("legacy") is catalog.lookup("current")
        assert catalog.lookup("older") is stub_operation

    def test_production_catalog_keys(self, runtime):
        """Test the registered webhook identifiers and their order."""
        assert runtime.catalog.keys() == (
            "gen_get_promotions",
            "gen_get_room_prices",
            "gen_create_reservation",
            "gen_get_reservations",
            "gen_consultar_reservaciones",
            "gen_directorio_telef_nico_1764314627615",
            "gen_get_phone_directory",
        )
        assert runtime.catalog.lookup("gen_get_phone_directory") is runtime.catalog.lookup(
            "gen_directorio_telef_nico_1764314627615"
        )
