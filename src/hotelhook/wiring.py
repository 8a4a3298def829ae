"""Startup wiring: repository -> services -> operations -> catalog -> dispatcher."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from hotelhook.core.config import HotelHookConfig
from hotelhook.operations import (
    CreateReservationOperation,
    GetPhoneDirectoryOperation,
    GetPromotionsOperation,
    GetReservationsOperation,
    GetRoomPricesOperation,
)
from hotelhook.routing.catalog import CatalogBuilder, OperationCatalog
from hotelhook.routing.dispatcher import UseCaseDispatcher
from hotelhook.services import (
    PhoneDirectoryService,
    PromotionsService,
    ReservationsService,
    RoomsService,
)
from hotelhook.store import HotelRepository, InMemoryHotelRepository, seed_repository

logger = logging.getLogger(__name__)


@dataclass
class HotelServices:
    """Business services sharing one repository."""

    promotions: PromotionsService
    rooms: RoomsService
    reservations: ReservationsService
    directory: PhoneDirectoryService


@dataclass
class HotelRuntime:
    """Everything the transport layer needs."""

    config: HotelHookConfig
    repository: HotelRepository
    services: HotelServices
    catalog: OperationCatalog
    dispatcher: UseCaseDispatcher


def build_services(
    repository: HotelRepository, today: Callable[[], date] = date.today
) -> HotelServices:
    promotions = PromotionsService(repository, today=today)
    rooms = RoomsService(repository)
    return HotelServices(
        promotions=promotions,
        rooms=rooms,
        reservations=ReservationsService(repository, rooms, promotions),
        directory=PhoneDirectoryService(repository),
    )


def build_catalog(services: HotelServices, log: logging.Logger | None = None) -> OperationCatalog:
    """Register every use case under its webhook identifiers.

    Alias keys share the operation instance of the current key.
    """
    get_reservations = GetReservationsOperation(services.reservations)
    phone_directory = GetPhoneDirectoryOperation(services.directory)

    return (
        CatalogBuilder(log)
        .add("gen_get_promotions", GetPromotionsOperation(services.promotions))
        .add("gen_get_room_prices", GetRoomPricesOperation(services.rooms))
        .add("gen_create_reservation", CreateReservationOperation(services.reservations))
        .add("gen_get_reservations", get_reservations, "gen_consultar_reservaciones")
        # the upstream identifier for this use case; the second key is the former one
        .add("gen_directorio_telef_nico_1764314627615", phone_directory, "gen_get_phone_directory")
        .build()
    )


def bootstrap(
    config: HotelHookConfig | None = None,
    repository: HotelRepository | None = None,
    today: Callable[[], date] = date.today,
) -> HotelRuntime:
    """Assemble the application graph.

    Args:
        config: Service configuration (defaults to ``HotelHookConfig()``)
        repository: Data backend (defaults to a fresh in-memory one)
        today: Clock for promotion validity
    """
    config = config or HotelHookConfig()
    if repository is None:
        repository = InMemoryHotelRepository(reservation_start_id=config.reservation_start_id)

    if config.seed_data:
        seed_repository(repository, today=today())

    services = build_services(repository, today=today)
    catalog = build_catalog(services)
    logger.info("bootstrap.ready: use cases %s", ", ".join(catalog.keys()))

    return HotelRuntime(
        config=config,
        repository=repository,
        services=services,
        catalog=catalog,
        dispatcher=UseCaseDispatcher(catalog),
    )
