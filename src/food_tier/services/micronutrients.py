"""Micronutrient bonus shared by all archetypes."""

from food_tier.domain.foods import FoodLike, NutrientComponent
from food_tier.domain.nutrients import (
    AMINO_ACID_LABELS,
    MINERAL_LABELS,
    VITAMIN_LABELS,
    NutrientLabel,
    display_name,
)
from food_tier.domain.tiers import Archetype, FoodTierReason, ReasonKind

MANY_MICROS = 5
SOME_MICROS = 3
TOP_NAMED = 3

# Bonus for (>= 5, >= 3, fewer) micronutrients present.
BONUS_SCALE: dict[Archetype, tuple[float, float, float]] = {
    Archetype.CARB: (8, 5, 3),
    Archetype.PROTEIN: (6, 4, 2),
    Archetype.MIXED: (6, 4, 2),
    Archetype.FAT: (5, 3, 2),
}


def _present(
    food: FoodLike, labels: frozenset[NutrientLabel]
) -> list[NutrientComponent]:
    return [
        component
        for component in food.components or ()
        if component.name in labels and (component.amount or 0) > 0
    ]


def add_micronutrient_signals(
    food: FoodLike, archetype: Archetype
) -> tuple[float, list[FoodTierReason]]:
    """Return the micronutrient bonus and its reason for a food."""
    vitamins = _present(food, VITAMIN_LABELS)
    minerals = _present(food, MINERAL_LABELS)
    aminos = _present(food, AMINO_ACID_LABELS)

    total = len(vitamins) + len(minerals) + len(aminos)
    if not total:
        return 0, []

    many, some, few = BONUS_SCALE[archetype]
    if total >= MANY_MICROS:
        bonus = many
    elif total >= SOME_MICROS:
        bonus = some
    else:
        bonus = few

    top = sorted(
        vitamins + minerals, key=lambda component: component.amount or 0, reverse=True
    )[:TOP_NAMED]
    if top:
        names = ", ".join(display_name(component.name) for component in top)
        message = f"Provides useful micronutrients like {names}."
    else:
        message = "Provides a mix of vitamins and minerals."
    return bonus, [FoodTierReason(kind=ReasonKind.POSITIVE, message=message)]
