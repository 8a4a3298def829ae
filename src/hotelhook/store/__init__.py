"""Hotel data storage."""

from hotelhook.store.repository import HotelRepository, InMemoryHotelRepository
from hotelhook.store.seed import seed_repository

__all__ = ["HotelRepository", "InMemoryHotelRepository", "seed_repository"]
