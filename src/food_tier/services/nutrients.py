"""Nutrient accessors normalising food amounts.

Every accessor returns ``None`` when the value cannot be derived (no food, no
such component, a non-finite amount or a non-positive denominator). ``None``
means the nutrient is unknown, which is different from a known zero amount.
"""

import math

from food_tier.domain.foods import FoodLike
from food_tier.domain.nutrients import NutrientLabel


def find_component_amount(food: FoodLike | None, label: NutrientLabel) -> float | None:
    """Return the amount of the first component with ``label``, if usable."""
    if food is None or not food.components:
        return None
    component = next((c for c in food.components if c.name == label), None)
    if component is None or component.amount is None:
        return None
    if not math.isfinite(component.amount):
        return None
    return component.amount


def get_base_calories(food: FoodLike | None) -> float:
    """Prefer the ENERGY component, fall back to the calorie amount."""
    if food is None:
        return 0
    energy = find_component_amount(food, NutrientLabel.ENERGY)
    if energy is not None:
        return energy
    return food.calorie_amount or 0


def per_100g(food: FoodLike | None, label: NutrientLabel) -> float | None:
    """Return the nutrient amount per 100 g of food."""
    if food is None:
        return None
    grams = food.serving_total_grams or 0
    if not grams > 0:
        return None
    amount = find_component_amount(food, label)
    if amount is None:
        return None
    return amount / grams * 100


def per_100kcal(food: FoodLike | None, label: NutrientLabel) -> float | None:
    """Return the nutrient amount per 100 kcal of food."""
    if food is None:
        return None
    calories = get_base_calories(food)
    if not calories > 0:
        return None
    amount = find_component_amount(food, label)
    if amount is None:
        return None
    return amount / calories * 100


def protein_per_100kcal(food: FoodLike | None) -> float | None:
    """Return protein grams per 100 kcal."""
    return per_100kcal(food, NutrientLabel.PROTEIN)


def kcal_per_100g(food: FoodLike | None) -> float | None:
    """Return the energy density in kcal per 100 g."""
    if food is None:
        return None
    grams = food.serving_total_grams or 0
    calories = get_base_calories(food)
    if not grams > 0 or not calories > 0:
        return None
    return calories / grams * 100
