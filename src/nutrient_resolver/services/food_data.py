"""Per-user store of standard nutrient tables."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from pydantic import ValidationError

from nutrient_resolver.domain.nutrients import NutrientTable

_logger = logging.getLogger(__name__)


class FoodDataRepository(Protocol):
    """Persistence interface for standard food data."""

    def get_food_data(self, user_id: UUID, food_name: str) -> dict[str, object] | None:
        """Return the stored payload for a food, if present."""

    def upsert_food_data(
        self, user_id: UUID, food_name: str, payload: dict[str, object]
    ) -> None:
        """Create or overwrite the payload for a food."""

    def list_food_names(self, user_id: UUID) -> list[str]:
        """Return every food name stored for a user."""


@dataclass
class StandardNutrientStore:
    """Reads and writes one nutrient table per (user, food name).

    Food names are used as given; "Rice" and "rice " are different keys.
    """

    repository: FoodDataRepository

    def get(self, user_id: UUID, food_name: str) -> NutrientTable | None:
        """Return the stored table, or None when absent or unreadable."""
        payload = self.repository.get_food_data(user_id, food_name)
        if payload is None:
            return None
        try:
            return NutrientTable.model_validate(payload)
        except ValidationError:
            _logger.warning("Ignoring invalid stored food data: food=%s", food_name)
            return None

    def put(self, user_id: UUID, food_name: str, table: NutrientTable) -> bool:
        """Overwrite the stored table and report whether it was written."""
        try:
            self.repository.upsert_food_data(user_id, food_name, table.to_payload())
        except Exception:
            _logger.exception("Failed to store food data: food=%s", food_name)
            return False
        return True

    def suggest(self, user_id: UUID, partial: str, limit: int = 10) -> list[str]:
        """Return stored food names containing ``partial``."""
        term = partial.strip().lower()
        if not term:
            return []
        try:
            names = self.repository.list_food_names(user_id)
        except Exception:
            _logger.exception("Failed to list food names")
            return []
        matches = [name for name in names if term in name.lower()]
        matches.sort(key=lambda name: (name.lower() != term, name.lower(), name))
        return matches[:limit]
