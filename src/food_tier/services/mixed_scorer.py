"""Scoring rules for mixed foods (meals, lentils, casseroles, processed items)."""

from food_tier.domain.foods import FoodLike
from food_tier.domain.nutrients import NutrientLabel
from food_tier.domain.tiers import FoodTierReason, ReasonKind
from food_tier.services.bands import ScoreSheet, at_least, below, otherwise
from food_tier.services.nutrients import (
    kcal_per_100g,
    per_100g,
    protein_per_100kcal,
)

BASE_SCORE = 55

POSITIVE = ReasonKind.POSITIVE
NEGATIVE = ReasonKind.NEGATIVE
INFO = ReasonKind.INFO

PROTEIN_DENSITY = (
    at_least(
        12, 8, POSITIVE, "Good protein density for a mixed food (≥ 12 g / 100 kcal)."
    ),
    below(6, -5, NEGATIVE, "Low protein for its calories (< 6 g / 100 kcal)."),
    otherwise(0, INFO, "Moderate protein – neither high nor low."),
)

FIBER = (
    at_least(5, 6, POSITIVE, "Contains a good amount of fibre (≥ 5 g / 100 g)."),
    at_least(3, 3, POSITIVE, "Some fibre present (3–5 g / 100 g)."),
)

SUGAR = (
    at_least(10, -8, NEGATIVE, "High sugar for a mixed food (≥ 10 g / 100 g)."),
    at_least(5, -4, NEGATIVE, "Contains added sugars (5–10 g / 100 g)."),
)

SATURATED_FAT = (
    at_least(5, -8, NEGATIVE, "High in saturated fat (≥ 5 g / 100 g)."),
    at_least(2, -3, NEGATIVE, "Moderate saturated fat (2–5 g / 100 g)."),
)

ENERGY_DENSITY = (
    at_least(
        220,
        -6,
        NEGATIVE,
        "Quite calorie-dense – watch portion size (≥ 220 kcal / 100 g).",
    ),
    below(120, 3, POSITIVE, "Relatively light for a mixed food (< 120 kcal / 100 g)."),
)


def score_mixed_food(food: FoodLike) -> tuple[float, list[FoodTierReason]]:
    """Score a balanced or composite food."""
    sheet = ScoreSheet(BASE_SCORE)
    sheet.apply(protein_per_100kcal(food), PROTEIN_DENSITY)
    sheet.apply(per_100g(food, NutrientLabel.FIBER), FIBER)
    sheet.apply(per_100g(food, NutrientLabel.SUGAR), SUGAR)
    sheet.apply(per_100g(food, NutrientLabel.SATURATED), SATURATED_FAT)
    sheet.apply(kcal_per_100g(food), ENERGY_DENSITY)
    return sheet.result()
