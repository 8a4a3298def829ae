"""Sample hotel data loaded at startup."""

import logging
from datetime import date

from hotelhook.core.models import Contact, Promotion, Room
from hotelhook.store.repository import HotelRepository

logger = logging.getLogger(__name__)

PROMOTIONS = [
    Promotion(
        id="PROM001",
        name="Descuento de Temporada",
        description="20% de descuento en todas las habitaciones durante el mes de marzo",
        discount_percentage=20,
        valid_from="2026-03-01",
        valid_until="2026-03-31",
        applicable_room_types=["standard", "deluxe", "suite"],
    ),
    Promotion(
        id="PROM002",
        name="Promoción Fin de Semana",
        description="15% de descuento en reservas de fin de semana (viernes a domingo)",
        discount_percentage=15,
        valid_from="2026-01-01",
        valid_until="2026-12-31",
        applicable_room_types=["standard", "deluxe"],
    ),
    Promotion(
        id="PROM003",
        name="Estancia Larga",
        description="10% de descuento adicional para estancias de 5 o más noches",
        discount_percentage=10,
        valid_from="2026-01-01",
        valid_until="2026-12-31",
        min_nights=5,
        applicable_room_types=["standard", "deluxe", "suite"],
    ),
    Promotion(
        id="PROM004",
        name="Promoción Suite Premium",
        description="25% de descuento en suites durante temporada baja",
        discount_percentage=25,
        valid_from="2026-02-01",
        valid_until="2026-04-30",
        applicable_room_types=["suite"],
    ),
]

ROOMS = [
    Room(
        room_id="ROOM001",
        type="standard",
        name="Habitación Estándar",
        description="Habitación cómoda con cama doble, baño privado y todas las comodidades básicas",
        base_price_per_night=1500.00,
        max_occupancy=2,
        available_count=15,
        amenities=["Wi-Fi", "TV", "Aire acondicionado", "Baño privado", "Caja fuerte"],
    ),
    Room(
        room_id="ROOM002",
        type="deluxe",
        name="Habitación Deluxe",
        description="Habitación amplia con vista, cama king size, minibar y balcón",
        base_price_per_night=2500.00,
        max_occupancy=3,
        available_count=8,
        amenities=["Wi-Fi", 'TV 55"', "Aire acondicionado", "Baño privado", "Minibar", "Balcón", "Vista"],
    ),
    Room(
        room_id="ROOM003",
        type="suite",
        name="Suite Premium",
        description="Suite de lujo con sala, dormitorio separado, jacuzzi y vista panorámica",
        base_price_per_night=4500.00,
        max_occupancy=4,
        available_count=3,
        amenities=[
            "Wi-Fi",
            'TV 65"',
            "Aire acondicionado",
            "Jacuzzi",
            "Sala de estar",
            "Balcón",
            "Vista panorámica",
            "Servicio de conserjería",
        ],
    ),
]

CONTACTS = [
    Contact(area="recepcion", name="María González", position="Recepcionista Principal",
            phone="+52 55 1111 2222", extension="101", email="recepcion@hotel.com",
            schedule="Lunes a Domingo: 24 horas"),
    Contact(area="recepcion", name="Carlos Ramírez", position="Recepcionista",
            phone="+52 55 1111 2223", extension="102", email="carlos.ramirez@hotel.com",
            schedule="Lunes a Viernes: 8:00 - 16:00"),
    Contact(area="piscina", name="Ana Martínez", position="Supervisora de Piscina",
            phone="+52 55 2222 3333", extension="201", email="piscina@hotel.com",
            schedule="Lunes a Domingo: 6:00 - 22:00"),
    Contact(area="piscina", name="Luis Hernández", position="Lifeguard",
            phone="+52 55 2222 3334", extension="202", email="luis.hernandez@hotel.com",
            schedule="Lunes a Domingo: 10:00 - 18:00"),
    Contact(area="cocina", name="Chef Roberto Sánchez", position="Chef Ejecutivo",
            phone="+52 55 3333 4444", extension="301", email="chef@hotel.com",
            schedule="Lunes a Domingo: 5:00 - 23:00"),
    Contact(area="cocina", name="Sofía López", position="Sous Chef",
            phone="+52 55 3333 4445", extension="302", email="sofia.lopez@hotel.com",
            schedule="Lunes a Sábado: 6:00 - 15:00"),
    Contact(area="room_service", name="Servicio a Habitaciones", position="Departamento",
            phone="+52 55 4444 5555", extension="401", email="roomservice@hotel.com",
            schedule="Lunes a Domingo: 6:00 - 24:00"),
    Contact(area="spa", name="Elena Torres", position="Directora de Spa",
            phone="+52 55 5555 6666", extension="501", email="spa@hotel.com",
            schedule="Lunes a Domingo: 8:00 - 20:00"),
    Contact(area="spa", name="Miguel Ángel", position="Terapeuta",
            phone="+52 55 5555 6667", extension="502", email="miguel.angel@hotel.com",
            schedule="Martes a Sábado: 9:00 - 18:00"),
    Contact(area="mantenimiento", name="Jorge Mendoza", position="Jefe de Mantenimiento",
            phone="+52 55 6666 7777", extension="601", email="mantenimiento@hotel.com",
            schedule="Lunes a Domingo: 24 horas (emergencias)"),
    Contact(area="seguridad", name="Seguridad", position="Departamento",
            phone="+52 55 7777 8888", extension="701", email="seguridad@hotel.com",
            schedule="Lunes a Domingo: 24 horas"),
    Contact(area="conserjeria", name="Pedro Jiménez", position="Concierge",
            phone="+52 55 8888 9999", extension="801", email="concierge@hotel.com",
            schedule="Lunes a Domingo: 7:00 - 23:00"),
    Contact(area="lavanderia", name="Lavandería", position="Departamento",
            phone="+52 55 9999 0000", extension="901", email="lavanderia@hotel.com",
            schedule="Lunes a Sábado: 7:00 - 19:00"),
]


def promotions_for_year(year: int) -> list[Promotion]:
    """Sample promotions with their windows moved into ``year``.

    ``PROMOTIONS`` is written for 2026; only the year part of each window
    changes, so seasonal offers keep their months.
    """
    return [
        p.model_copy(
            update={
                "valid_from": f"{year}{p.valid_from[4:]}",
                "valid_until": f"{year}{p.valid_until[4:]}",
            }
        )
        for p in PROMOTIONS
    ]


def seed_repository(repository: HotelRepository, today: date | None = None) -> bool:
    """Load the sample data into an empty repository.

    Args:
        repository: Backend to fill
        today: Date whose year the promotion windows are placed in
            (defaults to the current date)

    Returns:
        True if data was inserted, False if the repository already had data
    """
    if not repository.is_empty():
        logger.info("seed.skipped: repository already contains data")
        return False

    year = (today or date.today()).year
    for promotion in promotions_for_year(year):
        repository.add_promotion(promotion)
    for room in ROOMS:
        repository.add_room(room)
    for contact in CONTACTS:
        repository.add_contact(contact)

    logger.info(
        "seed.loaded: %d promotions (valid in %d), %d rooms, %d contacts",
        len(PROMOTIONS),
        year,
        len(ROOMS),
        len(CONTACTS),
    )
    return True
