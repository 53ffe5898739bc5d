"""Supabase repository for standard food data."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from nutrient_resolver.services.food_data import FoodDataRepository


@dataclass
class SupabaseFoodDataRepository(FoodDataRepository):
    """Supabase implementation keyed by (user_id, food_name)."""

    client: Client
    table_name: str = "food_data"

    def get_food_data(self, user_id: UUID, food_name: str) -> dict[str, object] | None:
        """Return the stored nutrient payload for a food."""
        response = (
            self.client.table(self.table_name)
            .select("nutrients")
            .eq("user_id", str(user_id))
            .eq("food_name", food_name)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        nutrients = response.data[0].get("nutrients")
        return nutrients if isinstance(nutrients, dict) else None

    def upsert_food_data(
        self, user_id: UUID, food_name: str, payload: dict[str, object]
    ) -> None:
        """Write the nutrient payload, replacing any existing row."""
        self.client.table(self.table_name).upsert(
            {
                "user_id": str(user_id),
                "food_name": food_name,
                "nutrients": payload,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id,food_name",
        ).execute()

    def list_food_names(self, user_id: UUID) -> list[str]:
        """Return the names of all foods stored for a user."""
        response = (
            self.client.table(self.table_name)
            .select("food_name")
            .eq("user_id", str(user_id))
            .execute()
        )
        return [str(row["food_name"]) for row in response.data or []]
