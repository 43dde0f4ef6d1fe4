"""Food records consumed by the tier engine."""

from dataclasses import dataclass

from food_tier.domain.nutrients import NutrientLabel, Unit
from food_tier.domain.tiers import FoodTierResult


@dataclass(frozen=True)
class NutrientComponent:
    """Amount of one nutrient for the whole base serving."""

    name: NutrientLabel
    unit: Unit
    amount: float | None = None


@dataclass(frozen=True)
class FoodLike:
    """Nutrient composition of a food as delivered by the API."""

    serving_total_grams: float | None = None
    calorie_amount: float | None = None
    components: tuple[NutrientComponent, ...] | None = None


@dataclass(frozen=True)
class RatedMealFood:
    """Meal food together with its freshly computed tier."""

    food_id: int
    meal_id: int
    name: str
    result: FoodTierResult
