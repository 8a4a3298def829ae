"""Synonym table for fallback use case matching.

Each category lists lowercase tokens in Spanish and English. Accented words
also appear ASCII-folded ('reservación' / 'reservacion') because the light
normalizer keeps accents. Categories are tried in definition order.
"""

from types import MappingProxyType

PATTERN_TABLE = MappingProxyType(
    {
        "get_promotions": (
            "promociones",
            "promocion",
            "promoción",
            "promotions",
            "promotion",
            "descuentos",
            "descuento",
            "consultar_promociones",
            "get_promotions",
            "list_promotions",
            "listar_promociones",
            "gen_get_promotions",
        ),
        "get_room_prices": (
            "precios",
            "precio",
            "costos",
            "costo",
            "habitaciones",
            "habitacion",
            "habitación",
            "rooms",
            "room",
            "consultar_precios",
            "get_prices",
            "room_prices",
            "precios_habitaciones",
            "costos_habitaciones",
            "get_room_prices",
            "gen_get_room_prices",
        ),
        "create_reservation": (
            "reservar",
            "reservacion",
            "reservación",
            "reservation",
            "book",
            "booking",
            "crear_reservacion",
            "crear_reservación",
            "create_reservation",
            "hacer_reserva",
            "make_reservation",
            "gen_create_reservation",
        ),
        "get_phone_directory": (
            "directorio",
            "directory",
            "telefono",
            "teléfono",
            "phone",
            "contacto",
            "contact",
            "directorio_telefonico",
            "directorio_telefónico",
            "phone_directory",
            "directorio_telefono",
            "consultar_directorio",
            "get_directory",
            "buscar_contacto",
            "search_contact",
            "gen_get_phone_directory",
            "gen_get_directory",
            "gen_directorio_telef_nico_1764314627615",
            "directorio_telef_nico",
            "telef_nico",
            "telefonico",
            "telefónico",
            "telef",
        ),
    }
)
