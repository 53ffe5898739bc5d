"""Nutrient resolution pipeline: cache, generate, extract, persist, scale."""

import logging
import math
from dataclasses import dataclass
from uuid import UUID

from nutrient_resolver.domain.nutrients import ResolvedServing, ServingUnit
from nutrient_resolver.services.extraction import extract_table
from nutrient_resolver.services.food_data import StandardNutrientStore
from nutrient_resolver.services.generation import GenerativeNutrientClient
from nutrient_resolver.services.quantity import scale

_logger = logging.getLogger(__name__)


@dataclass
class NutrientResolutionService:
    """Resolves consumed nutrients for a food, generating tables on cache miss.

    Operational failures (store errors, generation errors, unusable model
    output) resolve to None. Invalid arguments raise ValueError.
    """

    store: StandardNutrientStore
    generator: GenerativeNutrientClient
    debug: bool = False

    async def resolve(
        self,
        user_id: UUID,
        food_name: str,
        quantity: float,
        unit: ServingUnit | str,
    ) -> ResolvedServing | None:
        """Return nutrients for ``quantity`` ``unit`` of a food, or None."""
        serving_unit = _validate_request(food_name, quantity, unit)

        try:
            table = self.store.get(user_id, food_name)
        except Exception:
            _logger.exception("Food data lookup failed: food=%s", food_name)
            return None

        if table is not None:
            if self.debug:
                _logger.info("Food data cache hit: food=%s", food_name)
            return scale(table, quantity, serving_unit)

        _logger.info("Food data cache miss, generating: food=%s", food_name)
        raw_text = await self.generator.generate(food_name)
        if raw_text is None:
            return None

        table = extract_table(raw_text)
        if table is None:
            _logger.warning("Discarding unusable nutrient reply: food=%s", food_name)
            return None

        if not self.store.put(user_id, food_name, table):
            return None
        return scale(table, quantity, serving_unit)


def _validate_request(
    food_name: str, quantity: float, unit: ServingUnit | str
) -> ServingUnit:
    """Check caller arguments and return the parsed unit."""
    if not isinstance(food_name, str) or not food_name.strip():
        raise ValueError("food_name must be a non-empty string")
    if (
        isinstance(quantity, bool)
        or not isinstance(quantity, int | float)
        or not math.isfinite(quantity)
        or quantity <= 0
    ):
        raise ValueError(f"quantity must be a positive number, got {quantity!r}")
    return ServingUnit(unit)
