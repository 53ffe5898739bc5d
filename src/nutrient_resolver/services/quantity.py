"""Scale standard nutrient tables to consumed quantities."""

import math
from decimal import ROUND_HALF_UP, Decimal

from nutrient_resolver.domain.nutrients import (
    UNIT_BASIS,
    NutrientTable,
    ResolvedServing,
    ServingUnit,
)

_PER_HUNDRED_UNITS = {ServingUnit.GRAMS, ServingUnit.MILLILITERS}
_WHOLE = Decimal("1")
_TENTH = Decimal("0.1")


def multiplier_for(quantity: float, unit: ServingUnit) -> float:
    """Return the factor applied to the stored profile for a unit."""
    if unit in _PER_HUNDRED_UNITS:
        return quantity / 100
    return quantity


def scale(table: NutrientTable, quantity: float, unit: ServingUnit) -> ResolvedServing:
    """Scale the profile matching ``unit`` to ``quantity`` and round it."""
    profile = table.profile_for(UNIT_BASIS[unit])
    factor = multiplier_for(quantity, unit)
    return ResolvedServing(
        calories=_round_whole(profile.calories * factor),
        protein=_round_tenth(profile.protein * factor),
        carbs=_round_tenth(profile.carbs * factor),
        fat=_round_tenth(profile.fat * factor),
        fiber=_round_tenth(profile.fiber * factor),
        sugar=_round_tenth(profile.sugar * factor),
        sodium=_round_whole(profile.sodium * factor),
        cholesterol=_round_whole(profile.cholesterol * factor),
        vitamin_a=_round_whole(profile.vitamin_a * factor),
        vitamin_c=_round_whole(profile.vitamin_c * factor),
        calcium=_round_whole(profile.calcium * factor),
        iron=_round_whole(profile.iron * factor),
    )


def _round_whole(value: float) -> int:
    return int(_to_decimal(value).quantize(_WHOLE, rounding=ROUND_HALF_UP))


def _round_tenth(value: float) -> float:
    return float(_to_decimal(value).quantize(_TENTH, rounding=ROUND_HALF_UP))


def _to_decimal(value: float) -> Decimal:
    # Half-up on the shortest repr, not the binary value.
    if not math.isfinite(value):
        raise ValueError(f"scaled nutrient amount is not finite: {value!r}")
    return Decimal(repr(value))
