"""Food tier scoring entry point and meal-food rating service."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from food_tier.adapters.meal_food_client import MealFoodClient
from food_tier.api.models import MealFoodView
from food_tier.domain.foods import FoodLike, RatedMealFood
from food_tier.domain.tiers import (
    Archetype,
    FoodTierReason,
    FoodTierResult,
    ReasonKind,
    Tier,
)
from food_tier.services.archetype import detect_archetype
from food_tier.services.carb_scorer import score_carb_food
from food_tier.services.fat_scorer import score_fat_food
from food_tier.services.micronutrients import add_micronutrient_signals
from food_tier.services.mixed_scorer import score_mixed_food
from food_tier.services.protein_scorer import score_protein_food
from food_tier.services.tiers import clamp, score_to_tier

NEUTRAL_SCORE = 50
MIN_SIGNALS = 3

NO_DATA_MESSAGE = "Not enough nutrition data – neutral rating."
ESTIMATE_MESSAGE = "Rating is approximate – not all key nutrients were available."
SOLID_CHOICE_MESSAGE = "Solid everyday choice – no major drawbacks found."
MODERATION_MESSAGE = (
    "Best enjoyed in moderation or paired with more nutrient-dense foods."
)

SCORERS: dict[Archetype, Callable[[FoodLike], tuple[float, list[FoodTierReason]]]] = {
    Archetype.PROTEIN: score_protein_food,
    Archetype.CARB: score_carb_food,
    Archetype.FAT: score_fat_food,
    Archetype.MIXED: score_mixed_food,
}

_ENCOURAGED_TIERS = {Tier.B, Tier.C}
_CAUTIONED_TIERS = {Tier.D, Tier.E, Tier.F}

T = TypeVar("T")

_logger = logging.getLogger(__name__)


def compute_food_tier(food: FoodLike | None) -> FoodTierResult:
    """Score a food and map it to a tier with reasons.

    The result is computed from scratch on every call and never raises for
    missing or invalid nutrient data.
    """
    if food is None or not food.components:
        return FoodTierResult(
            tier=Tier.C,
            score=NEUTRAL_SCORE,
            reasons=(FoodTierReason(kind=ReasonKind.INFO, message=NO_DATA_MESSAGE),),
            is_estimate=True,
        )

    archetype = detect_archetype(food)
    score, reasons = SCORERS[archetype.type](food)
    bonus, micro_reasons = add_micronutrient_signals(food, archetype.type)
    score += bonus
    reasons.extend(micro_reasons)

    # Few fired rules means little data to go on.
    is_estimate = len(reasons) < MIN_SIGNALS
    if is_estimate:
        reasons.append(FoodTierReason(kind=ReasonKind.INFO, message=ESTIMATE_MESSAGE))

    score = clamp(score, 0, 100)
    tier = score_to_tier(score)

    has_negative = any(reason.kind is ReasonKind.NEGATIVE for reason in reasons)
    has_positive = any(reason.kind is ReasonKind.POSITIVE for reason in reasons)
    if tier in _ENCOURAGED_TIERS and not has_negative and has_positive:
        reasons.append(
            FoodTierReason(kind=ReasonKind.INFO, message=SOLID_CHOICE_MESSAGE)
        )
    elif tier in _CAUTIONED_TIERS:
        reasons.append(FoodTierReason(kind=ReasonKind.INFO, message=MODERATION_MESSAGE))

    _logger.debug(
        "Food tier computed: archetype=%s score=%s tier=%s estimate=%s",
        archetype.type.value,
        score,
        tier.value,
        is_estimate,
    )
    return FoodTierResult(
        tier=tier, score=score, reasons=tuple(reasons), is_estimate=is_estimate
    )


@dataclass
class FoodTierService:
    """Rates meal foods fetched from the API, recomputing on every call."""

    client: MealFoodClient
    debug: bool = False
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def rate_meal_food(self, meal_id: int, food_id: int) -> RatedMealFood:
        """Fetch one meal food and compute its tier."""
        payload = await self._call_with_retry(
            lambda: self.client.get_meal_food(meal_id, food_id),
            action=f"get_meal_food:{meal_id}:{food_id}",
        )
        return self._rate(MealFoodView.model_validate(payload))

    async def rate_meal_foods(self, meal_id: int) -> list[RatedMealFood]:
        """Fetch every food of a meal and compute their tiers."""
        payload = await self._call_with_retry(
            lambda: self.client.get_meal_foods(meal_id),
            action=f"get_meal_foods:{meal_id}",
        )
        views = [MealFoodView.model_validate(item) for item in payload]
        return [self._rate(view) for view in views]

    def _rate(self, view: MealFoodView) -> RatedMealFood:
        result = compute_food_tier(view.to_food())
        if self.debug:
            _logger.info(
                "Rated meal food: id=%s name=%s tier=%s score=%s",
                view.id,
                view.name,
                result.tier.value,
                result.score,
            )
        return RatedMealFood(
            food_id=view.id, meal_id=view.meal_id, name=view.name, result=result
        )

    async def _call_with_retry(
        self, func: Callable[[], Awaitable[T]], *, action: str
    ) -> T:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                if self.debug:
                    _logger.warning(
                        "Meal food %s failed (attempt %s/%s, status=%s): %s",
                        action,
                        attempt,
                        self.retry_attempts + 1,
                        _status_code_from_exception(exc),
                        exc,
                    )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
