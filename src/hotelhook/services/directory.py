"""Hotel phone directory queries."""

from hotelhook.core.models import Contact
from hotelhook.store.repository import HotelRepository

# Spoken names and translations -> stored area key
AREA_SYNONYMS = {
    "recepcion": "recepcion",
    "recepción": "recepcion",
    "reception": "recepcion",
    "front desk": "recepcion",
    "piscina": "piscina",
    "pool": "piscina",
    "alberca": "piscina",
    "cocina": "cocina",
    "kitchen": "cocina",
    "chef": "cocina",
    "room service": "room_service",
    "servicio a habitaciones": "room_service",
    "servicio habitaciones": "room_service",
    "spa": "spa",
    "mantenimiento": "mantenimiento",
    "maintenance": "mantenimiento",
    "seguridad": "seguridad",
    "security": "seguridad",
    "conserjeria": "conserjeria",
    "conserjería": "conserjeria",
    "concierge": "conserjeria",
    "lavanderia": "lavanderia",
    "lavandería": "lavanderia",
    "laundry": "lavanderia",
}

AREA_DISPLAY_NAMES = {
    "recepcion": "Recepción",
    "piscina": "Piscina",
    "cocina": "Cocina",
    "room_service": "Servicio a Habitaciones",
    "spa": "Spa",
    "mantenimiento": "Mantenimiento",
    "seguridad": "Seguridad",
    "conserjeria": "Conserjería",
    "lavanderia": "Lavandería",
}


def resolve_area(area: str) -> str:
    """Map a user-supplied area name to its stored key."""
    key = (area or "").strip().lower()
    return AREA_SYNONYMS.get(key, key)


def format_area_name(area_key: str) -> str:
    """Display name for an area key."""
    if area_key in AREA_DISPLAY_NAMES:
        return AREA_DISPLAY_NAMES[area_key]
    return area_key[:1].upper() + area_key[1:]


class PhoneDirectoryService:
    """Lookups over the hotel phone directory."""

    def __init__(self, repository: HotelRepository):
        self.repository = repository

    def get_directory_by_area(self, area: str) -> list[Contact]:
        """Return contacts of an area, accepting synonyms ('pool', 'front desk')."""
        return self.repository.list_contacts({"area": resolve_area(area)})

    def get_all_directory(self) -> dict[str, list[Contact]]:
        """Return every contact grouped by area, both sorted."""
        contacts = sorted(self.repository.list_contacts(), key=lambda c: (c.area, c.name))

        directory: dict[str, list[Contact]] = {}
        for contact in contacts:
            directory.setdefault(contact.area, []).append(contact)
        return directory

    def search_contact_by_name(self, name: str) -> list[Contact]:
        """Case-insensitive substring search on contact names."""
        needle = (name or "").lower()
        return [c for c in self.repository.list_contacts() if needle in c.name.lower()]

    def get_contact_by_extension(self, extension: str) -> Contact | None:
        matches = self.repository.list_contacts({"extension": str(extension)})
        return matches[0] if matches else None

    def get_available_areas(self) -> list[str]:
        """Sorted distinct area keys."""
        return sorted({c.area for c in self.repository.list_contacts()})
