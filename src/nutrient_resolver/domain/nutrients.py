"""Nutrient domain models."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

Amount = Annotated[float, Field(ge=0, strict=True, allow_inf_nan=False)]


class ServingUnit(str, Enum):
    """Unit a user enters a consumed quantity in."""

    GRAMS = "grams"
    MILLILITERS = "milliliters"
    PIECES = "pieces"
    PACK = "pack"

    @classmethod
    def _missing_(cls, value: object) -> "ServingUnit | None":
        if value == "ml":
            return cls.MILLILITERS
        return None


class ServingBasis(str, Enum):
    """Reference quantity a standard profile is expressed for.

    Values are the keys used in generated and stored tables.
    """

    PER_100_GRAMS = "grams"
    PER_100_MILLILITERS = "ml"
    PER_PIECE = "pieces"
    PER_PACK = "pack"


UNIT_BASIS: dict[ServingUnit, ServingBasis] = {
    ServingUnit.GRAMS: ServingBasis.PER_100_GRAMS,
    ServingUnit.MILLILITERS: ServingBasis.PER_100_MILLILITERS,
    ServingUnit.PIECES: ServingBasis.PER_PIECE,
    ServingUnit.PACK: ServingBasis.PER_PACK,
}

NUTRIENT_FIELDS: tuple[str, ...] = (
    "calories",
    "protein",
    "carbs",
    "fat",
    "fiber",
    "sugar",
    "sodium",
    "cholesterol",
    "vitaminA",
    "vitaminC",
    "calcium",
    "iron",
)


class NutrientProfile(BaseModel):
    """Twelve nutrient amounts for a single serving basis."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    calories: Amount
    protein: Amount
    carbs: Amount
    fat: Amount
    fiber: Amount
    sugar: Amount
    sodium: Amount
    cholesterol: Amount
    vitamin_a: Amount = Field(alias="vitaminA")
    vitamin_c: Amount = Field(alias="vitaminC")
    calcium: Amount
    iron: Amount


class NutrientTable(BaseModel):
    """Standard nutrient profiles for all four serving bases of one food."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    per_100_grams: NutrientProfile = Field(alias=ServingBasis.PER_100_GRAMS.value)
    per_100_milliliters: NutrientProfile = Field(
        alias=ServingBasis.PER_100_MILLILITERS.value
    )
    per_piece: NutrientProfile = Field(alias=ServingBasis.PER_PIECE.value)
    per_pack: NutrientProfile = Field(alias=ServingBasis.PER_PACK.value)

    def profile_for(self, basis: ServingBasis) -> NutrientProfile:
        """Return the profile stored for a serving basis."""
        return {
            ServingBasis.PER_100_GRAMS: self.per_100_grams,
            ServingBasis.PER_100_MILLILITERS: self.per_100_milliliters,
            ServingBasis.PER_PIECE: self.per_piece,
            ServingBasis.PER_PACK: self.per_pack,
        }[basis]

    def to_payload(self) -> dict[str, dict[str, float]]:
        """Serialize to the stored JSON shape."""
        return self.model_dump(by_alias=True)


@dataclass(frozen=True)
class ResolvedServing:
    """Nutrients for the quantity a user actually consumed."""

    calories: int
    protein: float
    carbs: float
    fat: float
    fiber: float
    sugar: float
    sodium: int
    cholesterol: int
    vitamin_a: int
    vitamin_c: int
    calcium: int
    iron: int

    def as_payload(self) -> dict[str, int | float]:
        """Return values keyed by their wire names."""
        values = asdict(self)
        values["vitaminA"] = values.pop("vitamin_a")
        values["vitaminC"] = values.pop("vitamin_c")
        return values
