"""Scoring rules for carbohydrate-dominant foods."""

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

BASE_SCORE = 55

POSITIVE = ReasonKind.POSITIVE
NEGATIVE = ReasonKind.NEGATIVE
INFO = ReasonKind.INFO

FIBER = (
    at_least(
        7,
        14,
        POSITIVE,
        "Very high in fibre (≥ 7 g / 100 g) – great for gut health and satiety.",
    ),
    at_least(5, 10, POSITIVE, "High fibre (5–7 g / 100 g)."),
    at_least(3, 5, POSITIVE, "Decent fibre (3–5 g / 100 g)."),
    below(1, -6, NEGATIVE, "Very low fibre (< 1 g / 100 g) – mostly quick carbs."),
    otherwise(0, INFO, "Moderate fibre (1–3 g / 100 g)."),
)

# Cut-offs follow the Nutri-Score sugar points.
SUGAR = (
    above(22.5, -18, NEGATIVE, "Very high sugar (> 22.5 g / 100 g)."),
    above(15, -12, NEGATIVE, "High sugar (15–22.5 g / 100 g)."),
    above(10, -8, NEGATIVE, "Moderate–high sugar (10–15 g / 100 g)."),
    above(
        5, -4, NEGATIVE, "Some sugar (5–10 g / 100 g) – keep an eye on portions."
    ),
    otherwise(4, POSITIVE, "Low sugar (≤ 5 g / 100 g)."),
)

PROTEIN_DENSITY = (
    at_least(7, 5, POSITIVE, "Good protein for a carb source (≥ 7 g / 100 kcal)."),
    at_least(3, 0, INFO, "Some protein present – still mainly carbs."),
    otherwise(0, INFO, "Mostly carbs – best to pair with a protein source."),
)

ENERGY_DENSITY = (
    below(80, 4, POSITIVE, "Light on calories (< 80 kcal / 100 g)."),
    at_most(160, 0, INFO, "Moderate calorie density (80–160 kcal / 100 g)."),
    at_most(
        260, -5, NEGATIVE, "Quite calorie-dense for carbs (160–260 kcal / 100 g)."
    ),
    otherwise(-10, NEGATIVE, "Very calorie-dense carbs (≥ 260 kcal / 100 g)."),
)

SODIUM = (
    at_least(600, -8, NEGATIVE, "Very high sodium (≥ 600 mg / 100 g)."),
    at_least(300, -4, NEGATIVE, "High sodium (300–600 mg / 100 g)."),
    below(120, 2, POSITIVE, "Low sodium (< 120 mg / 100 g)."),
)


def score_carb_food(food: FoodLike) -> tuple[float, list[FoodTierReason]]:
    """Score a carbohydrate-dominant food.

    Fibre and low sugar pull the score up, free sugar, energy density and salt
    pull it down. A little protein is a bonus.
    """
    sheet = ScoreSheet(BASE_SCORE)
    sheet.apply(per_100g(food, NutrientLabel.FIBER), FIBER)
    sheet.apply(per_100g(food, NutrientLabel.SUGAR), SUGAR)
    sheet.apply(protein_per_100kcal(food), PROTEIN_DENSITY)
    sheet.apply(kcal_per_100g(food), ENERGY_DENSITY)
    sheet.apply(per_100g(food, NutrientLabel.SODIUM), SODIUM)
    return sheet.result()
