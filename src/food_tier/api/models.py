"""Pydantic models for meal-food API payloads."""

import logging

from pydantic import BaseModel, ConfigDict, Field

from food_tier.domain.foods import FoodLike, NutrientComponent
from food_tier.domain.nutrients import NutrientLabel, Unit

_logger = logging.getLogger(__name__)

_LABELS = {label.value: label for label in NutrientLabel}
_UNITS = {unit.value: unit for unit in Unit}


class ServingView(BaseModel):
    """Serving option payload."""

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = None
    amount: float | None = None
    metric: str | None = None
    grams_total: float | None = Field(default=None, alias="gramsTotal")


class FoodComponentView(BaseModel):
    """Nutrient component payload."""

    id: int | None = None
    group: str | None = None
    name: str
    unit: str
    amount: float | None = None


class MealFoodView(BaseModel):
    """Meal food payload."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    meal_id: int = Field(alias="mealId")
    name: str = ""
    info: str | None = None
    large_info: str | None = Field(default=None, alias="largeInfo")
    picture: str | None = None
    calorie_amount: float | None = Field(default=None, alias="calorieAmount")
    calorie_unit: str | None = Field(default=None, alias="calorieUnit")
    serving_unit: str | None = Field(default=None, alias="servingUnit")
    serving_amount: float | None = Field(default=None, alias="servingAmount")
    serving_total_grams: float | None = Field(default=None, alias="servingTotalGrams")
    servings: list[ServingView] = Field(default_factory=list)
    components: list[FoodComponentView] | None = None

    def to_food(self) -> FoodLike:
        """Convert the payload into the record scored by the tier engine.

        Components with a label or unit this engine does not know are dropped.
        """
        components: list[NutrientComponent] = []
        for component in self.components or []:
            label = _LABELS.get(component.name)
            unit = _UNITS.get(component.unit)
            if label is None or unit is None:
                _logger.debug(
                    "Skipping unknown component: name=%s unit=%s",
                    component.name,
                    component.unit,
                )
                continue
            components.append(
                NutrientComponent(name=label, unit=unit, amount=component.amount)
            )
        return FoodLike(
            serving_total_grams=self.serving_total_grams,
            calorie_amount=self.calorie_amount,
            components=tuple(components) if self.components is not None else None,
        )
