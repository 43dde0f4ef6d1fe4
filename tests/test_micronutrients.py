"""Tests for the micronutrient bonus."""

import pytest

from food_tier.domain.foods import FoodLike
from food_tier.domain.nutrients import NutrientLabel, display_name
from food_tier.domain.tiers import Archetype, ReasonKind
from food_tier.services.micronutrients import add_micronutrient_signals
from tests.conftest import make_food


def _rich_food() -> FoodLike:
    return make_food(
        ENERGY=50,
        VITAMIN_C=50,
        POTASSIUM=300,
        IRON=2,
        CALCIUM=40,
        LYSINE=1,
    )


def test_no_micronutrients_gives_no_bonus() -> None:
    bonus, reasons = add_micronutrient_signals(
        make_food(ENERGY=100, PROTEIN=10), Archetype.PROTEIN
    )

    assert bonus == 0
    assert reasons == []


def test_zero_amounts_are_not_counted() -> None:
    bonus, reasons = add_micronutrient_signals(
        make_food(VITAMIN_C=0, IRON=None), Archetype.CARB
    )

    assert bonus == 0
    assert reasons == []


@pytest.mark.parametrize(
    ("archetype", "expected"),
    [
        (Archetype.CARB, 8),
        (Archetype.PROTEIN, 6),
        (Archetype.MIXED, 6),
        (Archetype.FAT, 5),
    ],
)
def test_bonus_scales_by_archetype(archetype: Archetype, expected: float) -> None:
    bonus, _ = add_micronutrient_signals(_rich_food(), archetype)

    assert bonus == expected


@pytest.mark.parametrize(
    ("archetype", "some", "few"),
    [
        (Archetype.CARB, 5, 3),
        (Archetype.PROTEIN, 4, 2),
        (Archetype.MIXED, 4, 2),
        (Archetype.FAT, 3, 2),
    ],
)
def test_bonus_buckets(archetype: Archetype, some: float, few: float) -> None:
    three = make_food(VITAMIN_C=10, IRON=1, ZINC=1)
    one = make_food(VITAMIN_C=10)

    assert add_micronutrient_signals(three, archetype)[0] == some
    assert add_micronutrient_signals(one, archetype)[0] == few


def test_reason_names_top_three_by_amount() -> None:
    _, reasons = add_micronutrient_signals(_rich_food(), Archetype.CARB)

    assert len(reasons) == 1
    assert reasons[0].kind is ReasonKind.POSITIVE
    assert (
        reasons[0].message
        == "Provides useful micronutrients like potassium, vitamin C, calcium."
    )


def test_amino_acids_only_gives_generic_reason() -> None:
    bonus, reasons = add_micronutrient_signals(
        make_food(LEUCINE=2, LYSINE=1), Archetype.PROTEIN
    )

    assert bonus == 2
    assert reasons[0].message == "Provides a mix of vitamins and minerals."


def test_display_name_falls_back_to_label() -> None:
    assert display_name(NutrientLabel.VITAMIN_B3_NIACIN) == "niacin (B3)"
    assert display_name(NutrientLabel.SODIUM) == "sodium"
    assert (
        display_name(NutrientLabel.VITAMIN_A_BETA_CAROTENE)
        == "vitamin a beta carotene"
    )


def test_equal_amounts_keep_vitamins_before_minerals() -> None:
    _, reasons = add_micronutrient_signals(
        make_food(ZINC=1, IRON=1, VITAMIN_C=1), Archetype.MIXED
    )

    assert (
        reasons[0].message
        == "Provides useful micronutrients like vitamin C, zinc, iron."
    )
