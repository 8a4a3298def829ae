"""Pytest configuration and shared fixtures."""

from collections.abc import Mapping
from datetime import date
from typing import Any

import pytest

from hotelhook.core.config import HotelHookConfig
from hotelhook.operations.base import Operation
from hotelhook.routing.catalog import CatalogBuilder, OperationCatalog
from hotelhook.routing.dispatcher import UseCaseDispatcher
from hotelhook.store.repository import InMemoryHotelRepository
from hotelhook.store.seed import seed_repository
from hotelhook.wiring import HotelRuntime, bootstrap

# Inside every seeded promotion's validity window
FIXED_TODAY = date(2026, 3, 15)


class StubOperation(Operation):
    """Operation recording its calls and returning a fixed result."""

    def __init__(self, name: str = "Stub", result: Any = "ok", error: Exception | None = None):
        self.name = name
        self.result = result
        self.error = error
        self.calls: list[Mapping[str, Any]] = []

    def execute(self, arguments: Mapping[str, Any]) -> Any:
        self.calls.append(arguments)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def stub_operation() -> StubOperation:
    """A stub operation returning 'ok'."""
    return StubOperation()


@pytest.fixture
def make_stub() -> type[StubOperation]:
    """The stub operation class, for tests needing several instances."""
    return StubOperation


@pytest.fixture
def repository() -> InMemoryHotelRepository:
    """In-memory repository loaded with the sample hotel data."""
    repo = InMemoryHotelRepository()
    seed_repository(repo, today=FIXED_TODAY)
    return repo


@pytest.fixture
def runtime(repository: InMemoryHotelRepository) -> HotelRuntime:
    """Fully wired application on the seeded repository."""
    return bootstrap(HotelHookConfig(), repository=repository, today=lambda: FIXED_TODAY)


@pytest.fixture
def dispatcher(runtime: HotelRuntime) -> UseCaseDispatcher:
    """Dispatcher over the production catalog."""
    return runtime.dispatcher


@pytest.fixture
def stub_catalog() -> tuple[OperationCatalog, dict[str, StubOperation]]:
    """Catalog with the production keys bound to stub operations."""
    stubs = {
        "promotions": StubOperation("Promotions", "promotions-result"),
        "rooms": StubOperation("Rooms", "rooms-result"),
        "create": StubOperation("Create reservation", "created"),
        "reservations": StubOperation("Reservations", "reservations-result"),
        "directory": StubOperation("Directory", "directory-result"),
    }
    catalog = (
        CatalogBuilder()
        .add("gen_get_promotions", stubs["promotions"])
        .add("gen_get_room_prices", stubs["rooms"])
        .add("gen_create_reservation", stubs["create"])
        .add("gen_get_reservations", stubs["reservations"], "gen_consultar_reservaciones")
        .add("gen_directorio_telef_nico_1764314627615", stubs["directory"], "gen_get_phone_directory")
        .build()
    )
    return catalog, stubs
