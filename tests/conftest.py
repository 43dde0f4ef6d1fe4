"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from food_tier.adapters.meal_food_client import MealFoodClient
from food_tier.config import Settings
from food_tier.domain.foods import FoodLike, NutrientComponent
from food_tier.domain.nutrients import NutrientLabel, Unit

_UNITS = {
    NutrientLabel.ENERGY: Unit.KCAL,
    NutrientLabel.SODIUM: Unit.MG,
    NutrientLabel.POTASSIUM: Unit.MG,
    NutrientLabel.CALCIUM: Unit.MG,
    NutrientLabel.IRON: Unit.MG,
    NutrientLabel.VITAMIN_C: Unit.MG,
    NutrientLabel.VITAMIN_A_RAE: Unit.MCG,
    NutrientLabel.VITAMIN_B12: Unit.MCG,
}


def make_food(
    grams: float | None = 100,
    calories: float | None = None,
    **amounts: float | None,
) -> FoodLike:
    """Build a food from ``LABEL=amount`` keyword arguments."""
    components = tuple(
        NutrientComponent(
            name=NutrientLabel[name],
            unit=_UNITS.get(NutrientLabel[name], Unit.G),
            amount=amount,
        )
        for name, amount in amounts.items()
    )
    return FoodLike(
        serving_total_grams=grams,
        calorie_amount=calories,
        components=components,
    )


def meal_food_payload(food_id: int = 7, meal_id: int = 3) -> dict[str, object]:
    """Return an API payload for a chicken breast meal food."""
    return {
        "id": food_id,
        "mealId": meal_id,
        "name": "Chicken breast",
        "info": None,
        "largeInfo": None,
        "picture": None,
        "calorieAmount": 165,
        "calorieUnit": "kcal",
        "servingUnit": "g",
        "servingAmount": 100,
        "servingTotalGrams": 100,
        "servings": [{"id": 1, "amount": 100, "metric": "g", "gramsTotal": 100}],
        "components": [
            {"id": 1, "group": "OTHER", "name": "ENERGY", "unit": "KCAL", "amount": 165},
            {"id": 2, "group": "PROTEIN", "name": "PROTEIN", "unit": "G", "amount": 31},
            {"id": 3, "group": "FATS", "name": "FAT", "unit": "G", "amount": 3.6},
            {"id": 4, "group": "FATS", "name": "SATURATED", "unit": "G", "amount": 1},
            {
                "id": 5,
                "group": "CARBS",
                "name": "CARBOHYDRATE",
                "unit": "G",
                "amount": 0,
            },
            {"id": 6, "group": "MINERALS", "name": "SODIUM", "unit": "MG", "amount": 74},
        ],
    }


@dataclass
class FakeMealFoodClient(MealFoodClient):
    """Fake meal-food client serving in-memory payloads."""

    foods: dict[int, list[dict[str, object]]] = field(
        default_factory=lambda: {3: [meal_food_payload()]}
    )
    food_calls: int = 0
    list_calls: int = 0

    async def get_meal_food(self, meal_id: int, food_id: int) -> dict[str, object]:
        self.food_calls += 1
        for payload in self.foods.get(meal_id, []):
            if payload["id"] == food_id:
                return payload
        raise LookupError(f"meal food {meal_id}/{food_id} not found")

    async def get_meal_foods(self, meal_id: int) -> list[dict[str, object]]:
        self.list_calls += 1
        return self.foods.get(meal_id, [])


@pytest.fixture
def settings() -> Settings:
    return Settings(
        api_base_url="https://api.example.test",
        api_token="test-token",
    )


@pytest.fixture
def chicken_breast() -> FoodLike:
    return make_food(
        grams=100,
        calories=165,
        ENERGY=165,
        PROTEIN=31,
        FAT=3.6,
        SATURATED=1,
        CARBOHYDRATE=0,
        SODIUM=74,
    )


@pytest.fixture
def white_sugar() -> FoodLike:
    return make_food(
        grams=100,
        calories=400,
        ENERGY=400,
        CARBOHYDRATE=100,
        SUGAR=100,
        FIBER=0,
    )
