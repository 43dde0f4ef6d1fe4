"""Meal-food REST API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class MealFoodClient(Protocol):
    """Interface for reading meal foods from the API."""

    async def get_meal_food(self, meal_id: int, food_id: int) -> dict[str, object]:
        """Fetch one meal food and return raw API data."""

    async def get_meal_foods(self, meal_id: int) -> list[dict[str, object]]:
        """Fetch all foods of a meal and return raw API data."""


@dataclass
class HttpxMealFoodClient(MealFoodClient):
    """HTTPX-backed meal-food client."""

    base_url: str
    http_client: httpx.AsyncClient
    api_token: str | None = None
    timeout_seconds: float = 15

    @classmethod
    def create(
        cls,
        base_url: str,
        api_token: str | None = None,
        timeout_seconds: float = 15,
    ) -> "HttpxMealFoodClient":
        """Create a meal-food client with a managed httpx session."""
        return cls(
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            api_token=api_token,
            timeout_seconds=timeout_seconds,
        )

    async def get_meal_food(self, meal_id: int, food_id: int) -> dict[str, object]:
        """Fetch one meal food."""
        url = f"{self.base_url}/meals/{meal_id}/foods/{food_id}"
        response = await self.http_client.get(
            url, headers=self._headers(), timeout=self.timeout_seconds
        )
        response.raise_for_status()
        return response.json()

    async def get_meal_foods(self, meal_id: int) -> list[dict[str, object]]:
        """Fetch all foods of a meal with an empty filter."""
        url = f"{self.base_url}/meals/{meal_id}/foods/get-all"
        response = await self.http_client.post(
            url, json={}, headers=self._headers(), timeout=self.timeout_seconds
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    def _headers(self) -> dict[str, str]:
        if not self.api_token:
            return {}
        return {"Authorization": f"Bearer {self.api_token}"}
