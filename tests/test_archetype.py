"""Tests for archetype detection."""

import pytest

from food_tier.domain.foods import FoodLike
from food_tier.domain.tiers import Archetype
from food_tier.services.archetype import detect_archetype
from tests.conftest import make_food


def test_pure_protein_is_protein() -> None:
    info = detect_archetype(make_food(PROTEIN=25, CARBOHYDRATE=0, FAT=0))

    assert info.type is Archetype.PROTEIN
    assert info.p_share == pytest.approx(1)
    assert info.c_share == 0
    assert info.f_share == 0


def test_unknown_macros_default_to_mixed() -> None:
    for food in (None, FoodLike(), make_food(ENERGY=100)):
        info = detect_archetype(food)
        assert info.type is Archetype.MIXED
        assert (info.c_share, info.p_share, info.f_share) == (0, 0, 0)


def test_shares_use_atwater_factors() -> None:
    info = detect_archetype(make_food(CARBOHYDRATE=10, PROTEIN=10, FAT=10))

    assert info.c_share == pytest.approx(40 / 170)
    assert info.p_share == pytest.approx(40 / 170)
    assert info.f_share == pytest.approx(90 / 170)


def test_macros_are_normalised_per_100g() -> None:
    info = detect_archetype(make_food(grams=200, PROTEIN=50))

    assert info.protein == pytest.approx(25)
    assert info.type is Archetype.PROTEIN


@pytest.mark.parametrize(
    ("macros", "expected"),
    [
        ({"PROTEIN": 25, "FAT": 8}, Archetype.PROTEIN),
        ({"PROTEIN": 15, "CARBOHYDRATE": 30, "FAT": 5}, Archetype.MIXED),
        ({"CARBOHYDRATE": 80, "PROTEIN": 5, "FAT": 1}, Archetype.CARB),
        ({"FAT": 80, "PROTEIN": 1, "CARBOHYDRATE": 1}, Archetype.FAT),
        ({"FAT": 30, "CARBOHYDRATE": 50, "PROTEIN": 5}, Archetype.FAT),
        ({"CARBOHYDRATE": 20, "FAT": 5, "PROTEIN": 10}, Archetype.MIXED),
    ],
)
def test_classification_rules(macros: dict[str, float], expected: Archetype) -> None:
    assert detect_archetype(make_food(**macros)).type is expected


def test_protein_needs_calorie_share() -> None:
    # 20 g protein but most calories from fat.
    info = detect_archetype(make_food(PROTEIN=20, FAT=40, CARBOHYDRATE=2))

    assert info.p_share < 0.4
    assert info.type is Archetype.FAT


def test_dense_meal_prefers_mixed_over_carb() -> None:
    # Carbs dominate calories, but protein is high enough for a balanced meal.
    info = detect_archetype(make_food(PROTEIN=13, CARBOHYDRATE=40, FAT=1))

    assert info.c_share >= 0.6
    assert info.type is Archetype.MIXED
