"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from food_tier.adapters.meal_food_client import HttpxMealFoodClient, MealFoodClient
from food_tier.app_logging import configure_logging
from food_tier.config import Settings
from food_tier.services.food_tier import FoodTierService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    meal_food_client: MealFoodClient
    food_tier_service: FoodTierService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(debug=resolved_settings.debug)
    meal_food_client = HttpxMealFoodClient.create(
        base_url=resolved_settings.api_url,
        api_token=resolved_settings.api_token,
        timeout_seconds=resolved_settings.request_timeout_seconds,
    )
    food_tier_service = FoodTierService(
        client=meal_food_client,
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        await meal_food_client.close()

    return AppContainer(
        settings=resolved_settings,
        meal_food_client=meal_food_client,
        food_tier_service=food_tier_service,
        close_resources=close_resources,
    )
