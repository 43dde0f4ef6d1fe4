"""Macronutrient archetype detection."""

from food_tier.domain.foods import FoodLike
from food_tier.domain.nutrients import NutrientLabel
from food_tier.domain.tiers import Archetype, ArchetypeInfo
from food_tier.services.nutrients import per_100g

KCAL_PER_G_CARBS = 4
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_FAT = 9

PROTEIN_MIN_G = 20
PROTEIN_MIN_SHARE = 0.4
MIXED_PROTEIN_MIN_G = 12
MIXED_CARBS_MIN_G = 20
MIXED_MIN_SHARE = 0.2
CARB_MIN_SHARE = 0.6
FAT_MIN_SHARE = 0.6
FAT_MIN_G = 30


def detect_archetype(food: FoodLike | None) -> ArchetypeInfo:
    """Classify a food by where its macronutrient calories come from.

    Rules are checked in priority order and the first match wins, so a
    protein-dense food is never demoted to ``mixed`` and dense meals are
    preferred as ``mixed`` over a single-macro archetype.
    """
    carbs = per_100g(food, NutrientLabel.CARBOHYDRATE) or 0
    fat = per_100g(food, NutrientLabel.FAT) or 0
    protein = per_100g(food, NutrientLabel.PROTEIN) or 0

    carbs_kcal = carbs * KCAL_PER_G_CARBS
    protein_kcal = protein * KCAL_PER_G_PROTEIN
    fat_kcal = fat * KCAL_PER_G_FAT
    total_kcal = carbs_kcal + protein_kcal + fat_kcal

    if not total_kcal:
        return ArchetypeInfo(
            type=Archetype.MIXED,
            carbs=carbs,
            fat=fat,
            protein=protein,
            c_share=0,
            p_share=0,
            f_share=0,
        )

    c_share = carbs_kcal / total_kcal
    p_share = protein_kcal / total_kcal
    f_share = fat_kcal / total_kcal

    if protein >= PROTEIN_MIN_G and p_share >= PROTEIN_MIN_SHARE:
        archetype = Archetype.PROTEIN
    elif (
        protein >= MIXED_PROTEIN_MIN_G
        and carbs >= MIXED_CARBS_MIN_G
        and p_share >= MIXED_MIN_SHARE
        and c_share >= MIXED_MIN_SHARE
    ):
        archetype = Archetype.MIXED
    elif c_share >= CARB_MIN_SHARE:
        archetype = Archetype.CARB
    elif f_share >= FAT_MIN_SHARE or fat >= FAT_MIN_G:
        archetype = Archetype.FAT
    else:
        archetype = Archetype.MIXED

    return ArchetypeInfo(
        type=archetype,
        carbs=carbs,
        fat=fat,
        protein=protein,
        c_share=c_share,
        p_share=p_share,
        f_share=f_share,
    )
