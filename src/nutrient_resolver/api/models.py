"""Request and response models for the nutrition API."""

from uuid import UUID

from pydantic import BaseModel, Field

from nutrient_resolver.domain.nutrients import ServingUnit


class ResolveRequest(BaseModel):
    """Food entry to resolve nutrients for."""

    user_id: UUID
    food_name: str = Field(min_length=1)
    quantity: float = Field(gt=0, allow_inf_nan=False)
    unit: ServingUnit


class ResolveResponse(BaseModel):
    """Resolution outcome; nutrients are null when unavailable."""

    status: str
    nutrients: dict[str, int | float] | None = None
