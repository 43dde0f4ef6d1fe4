"""Tests for HTTP-based adapters."""

import asyncio
import json

import httpx
import pytest

from food_tier.adapters.meal_food_client import HttpxMealFoodClient
from tests.conftest import meal_food_payload


def test_meal_food_client_get_single_food() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=meal_food_payload())

    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    client = HttpxMealFoodClient(
        base_url="https://api.test/api/v1",
        http_client=async_client,
        api_token="token",
    )

    payload = asyncio.run(client.get_meal_food(3, 7))

    assert payload["id"] == 7
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/api/v1/meals/3/foods/7"
    assert seen[0].headers["Authorization"] == "Bearer token"


def test_meal_food_client_lists_foods_with_empty_filter() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[meal_food_payload()])

    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    client = HttpxMealFoodClient(base_url="https://api.test", http_client=async_client)

    payload = asyncio.run(client.get_meal_foods(3))

    assert len(payload) == 1
    assert seen[0].method == "POST"
    assert seen[0].url.path == "/meals/3/foods/get-all"
    assert json.loads(seen[0].content.decode()) == {}
    assert "Authorization" not in seen[0].headers


def test_meal_food_client_raises_on_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"title": "Not Found", "status": 404})

    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    client = HttpxMealFoodClient(base_url="https://api.test", http_client=async_client)

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.get_meal_food(3, 99))

    asyncio.run(client.close())
