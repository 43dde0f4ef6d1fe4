"""Scoring rules for protein-dominant foods.

Protein density drives the score. Saturated fat and sodium are the main
negatives; sugar and energy density count a little.
"""

from food_tier.domain.foods import FoodLike
from food_tier.domain.nutrients import NutrientLabel
from food_tier.domain.tiers import FoodTierReason, ReasonKind
from food_tier.services.bands import (
    ScoreSheet,
    above,
    at_least,
    at_most,
    below,
    otherwise,
)
from food_tier.services.nutrients import (
    kcal_per_100g,
    per_100g,
    protein_per_100kcal,
)

BASE_SCORE = 50

POSITIVE = ReasonKind.POSITIVE
NEGATIVE = ReasonKind.NEGATIVE
INFO = ReasonKind.INFO

PROTEIN_DENSITY = (
    at_least(
        25,
        30,
        POSITIVE,
        "Extremely high protein density (≥ 25 g / 100 kcal) – premium protein source.",
    ),
    at_least(20, 24, POSITIVE, "Very high protein density (20–25 g / 100 kcal)."),
    at_least(15, 16, POSITIVE, "High protein density (15–20 g / 100 kcal)."),
    at_least(10, 8, POSITIVE, "Decent protein density (10–15 g / 100 kcal)."),
    otherwise(-8, NEGATIVE, "Low protein for a protein-focused food (< 10 g / 100 kcal)."),
)

SATURATED_FAT = (
    below(1, 6, POSITIVE, "Very low saturated fat (< 1 g / 100 g)."),
    below(3, 2, INFO, "Moderate saturated fat (1–3 g / 100 g)."),
    below(7, -6, NEGATIVE, "High saturated fat (3–7 g / 100 g)."),
    otherwise(-12, NEGATIVE, "Very high saturated fat (≥ 7 g / 100 g)."),
)

SODIUM = (
    below(120, 3, POSITIVE, "Low sodium (< 120 mg / 100 g)."),
    below(400, 0, INFO, "Moderate sodium (120–400 mg / 100 g)."),
    below(800, -5, NEGATIVE, "High sodium (400–800 mg / 100 g)."),
    otherwise(-10, NEGATIVE, "Very high sodium (≥ 800 mg / 100 g)."),
)

ENERGY_DENSITY = (
    below(120, 3, POSITIVE, "Quite lean (< 120 kcal / 100 g)."),
    at_most(
        250,
        0,
        INFO,
        "Reasonable calorie density for a protein source (120–250 kcal / 100 g).",
    ),
    at_most(350, -3, NEGATIVE, "Calorie-dense protein (250–350 kcal / 100 g)."),
    otherwise(-5, NEGATIVE, "Very calorie-dense protein (> 350 kcal / 100 g)."),
)

# Sugar-free protein foods get no reason at all.
SUGAR = (
    at_least(10, -8, NEGATIVE, "High sugar for a protein source (≥ 10 g / 100 g)."),
    at_least(5, -4, NEGATIVE, "Contains added sugars (5–10 g / 100 g)."),
    above(0, 0, INFO, "Small amount of sugar present."),
)


def score_protein_food(food: FoodLike) -> tuple[float, list[FoodTierReason]]:
    """Score a protein-dominant food."""
    sheet = ScoreSheet(BASE_SCORE)
    sheet.apply(protein_per_100kcal(food), PROTEIN_DENSITY)
    sheet.apply(per_100g(food, NutrientLabel.SATURATED), SATURATED_FAT)
    sheet.apply(per_100g(food, NutrientLabel.SODIUM), SODIUM)
    sheet.apply(kcal_per_100g(food), ENERGY_DENSITY)
    sheet.apply(per_100g(food, NutrientLabel.SUGAR), SUGAR)
    return sheet.result()
