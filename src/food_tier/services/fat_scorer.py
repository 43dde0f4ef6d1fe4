"""Scoring rules for fat-dominant foods (oils, butter, nuts, seeds)."""

from food_tier.domain.foods import FoodLike
from food_tier.domain.nutrients import OMEGA3_LABELS, NutrientLabel
from food_tier.domain.tiers import FoodTierReason, ReasonKind
from food_tier.services.bands import ScoreSheet, above, at_least, below, otherwise
from food_tier.services.nutrients import kcal_per_100g, per_100g

BASE_SCORE = 55

UNSATURATED_RATIO = 1.5
UNSATURATED_MIN_G = 15
SODIUM_LIMIT_MG = 300

POSITIVE = ReasonKind.POSITIVE
NEGATIVE = ReasonKind.NEGATIVE
INFO = ReasonKind.INFO

OMEGA3 = (
    at_least(
        1, 12, POSITIVE, "Rich in omega-3 fats – great for heart and brain health."
    ),
    at_least(0.3, 6, POSITIVE, "Contains meaningful omega-3 fats."),
)

SATURATED_FAT = (
    below(
        10,
        6,
        POSITIVE,
        "Relatively low saturated fat for a fat-dense food (< 10 g / 100 g).",
    ),
    below(20, 0, INFO, "Moderate saturated fat (10–20 g / 100 g)."),
    otherwise(-10, NEGATIVE, "Very high saturated fat (≥ 20 g / 100 g)."),
)

# Fats are always energy dense, so only extremes count.
ENERGY_DENSITY = (
    above(750, -6, NEGATIVE, "Extremely calorie-dense (> 750 kcal / 100 g)."),
    above(600, 0, INFO, "Very energy-dense – best in small portions."),
)


def score_fat_food(food: FoodLike) -> tuple[float, list[FoodTierReason]]:
    """Score a fat-dominant food.

    Missing fat fractions count as zero here, so the saturated fat rule always
    produces a reason for this archetype.
    """
    saturated = per_100g(food, NutrientLabel.SATURATED) or 0
    unsaturated = (per_100g(food, NutrientLabel.MONOUNSATURATED) or 0) + (
        per_100g(food, NutrientLabel.POLYUNSATURATED) or 0
    )
    omega3 = sum(per_100g(food, label) or 0 for label in OMEGA3_LABELS)
    sodium = per_100g(food, NutrientLabel.SODIUM)

    sheet = ScoreSheet(BASE_SCORE)
    sheet.apply(omega3, OMEGA3)
    sheet.apply(saturated, SATURATED_FAT)
    if unsaturated > saturated * UNSATURATED_RATIO and unsaturated > UNSATURATED_MIN_G:
        sheet.add(6, POSITIVE, "Mostly unsaturated fat – better overall fat profile.")
    sheet.apply(kcal_per_100g(food), ENERGY_DENSITY)
    if sodium is not None and sodium >= SODIUM_LIMIT_MG:
        sheet.add(-5, NEGATIVE, "High sodium (≥ 300 mg / 100 g).")
    return sheet.result()
