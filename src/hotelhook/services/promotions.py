"""Promotion queries."""

from collections.abc import Callable
from datetime import date

from hotelhook.core.models import Promotion
from hotelhook.store.repository import HotelRepository


class PromotionsService:
    """Looks up promotions that can currently be offered to guests."""

    def __init__(self, repository: HotelRepository, today: Callable[[], date] = date.today):
        """Initialize the service.

        Args:
            repository: Hotel data backend
            today: Clock returning the current date (injectable for tests)
        """
        self.repository = repository
        self.today = today

    def get_available_promotions(self, room_type: str | None = None) -> list[Promotion]:
        """Return active promotions valid today.

        Args:
            room_type: Only keep promotions applicable to this room type
        """
        today = self.today().isoformat()
        promotions = [
            p
            for p in self.repository.list_promotions()
            if p.is_active and p.valid_from <= today <= p.valid_until
        ]

        if room_type:
            promotions = [p for p in promotions if room_type in p.applicable_room_types]

        return promotions

    def get_promotion(self, promotion_id: str) -> Promotion | None:
        return self.repository.get_promotion(promotion_id)

    def get_all_promotions(self) -> list[Promotion]:
        return self.repository.list_promotions()
