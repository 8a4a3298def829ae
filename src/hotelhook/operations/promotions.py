"""Promotions use case."""

import logging
from collections.abc import Mapping
from typing import Any

from hotelhook.operations.arguments import PromotionArguments, parse_arguments
from hotelhook.operations.base import Operation
from hotelhook.services.promotions import PromotionsService

logger = logging.getLogger(__name__)


class GetPromotionsOperation(Operation):
    """Lists promotions currently available, optionally for one room type."""

    name = "Consultar Promociones Disponibles"

    def __init__(self, promotions: PromotionsService):
        self.promotions = promotions

    def execute(self, arguments: Mapping[str, Any]) -> str:
        args = parse_arguments(PromotionArguments, arguments)
        logger.info(
            "promotions.query: room_type=%s check_in_date=%s",
            args.room_type,
            args.check_in_date,
        )

        promotions = self.promotions.get_available_promotions(args.room_type)
        if not promotions:
            return "No hay promociones disponibles en este momento."

        lines = [
            f"- {p.name}: {p.description} ({p.discount_percentage:g}% descuento). "
            f"Válida del {p.valid_from} al {p.valid_until}."
            for p in promotions
        ]
        return f"Promociones disponibles ({len(promotions)}):\n" + "\n".join(lines)
