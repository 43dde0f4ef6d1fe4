"""Nutrient labels, units and label groups."""

from enum import Enum


class Unit(Enum):
    """Physical unit of a component amount."""

    KCAL = "KCAL"
    G = "G"
    MG = "MG"
    MCG = "MCG"


class NutrientLabel(Enum):
    """Nutrient identifiers as delivered by the meal-food API."""

    ENERGY = "ENERGY"
    WATER = "WATER"
    CARBOHYDRATE = "CARBOHYDRATE"
    STARCH = "STARCH"
    SUGAR = "SUGAR"
    FIBER = "FIBER"
    FAT = "FAT"
    SATURATED = "SATURATED"
    TRANS = "TRANS"
    MONOUNSATURATED = "MONOUNSATURATED"
    POLYUNSATURATED = "POLYUNSATURATED"
    CHOLESTEROL = "CHOLESTEROL"
    OMEGA6 = "OMEGA6"
    OMEGA3 = "OMEGA3"
    OMEGA3_EPA = "OMEGA3_EPA"
    OMEGA3_DHA = "OMEGA3_DHA"
    PROTEIN = "PROTEIN"
    VITAMIN_A_RAE = "VITAMIN_A_RAE"
    VITAMIN_A_BETA_CAROTENE = "VITAMIN_A_BETA_CAROTENE"
    VITAMIN_A_LUTEIN_ZEAXANTHIN = "VITAMIN_A_LUTEIN_ZEAXANTHIN"
    VITAMIN_A_LYCOPENE = "VITAMIN_A_LYCOPENE"
    VITAMIN_D_D2_D3 = "VITAMIN_D_D2_D3"
    VITAMIN_E_ALPHA_TOCOPHEROL = "VITAMIN_E_ALPHA_TOCOPHEROL"
    VITAMIN_K = "VITAMIN_K"
    VITAMIN_B1_THIAMINE = "VITAMIN_B1_THIAMINE"
    VITAMIN_B2_RIBOFLAVIN = "VITAMIN_B2_RIBOFLAVIN"
    VITAMIN_B3_NIACIN = "VITAMIN_B3_NIACIN"
    VITAMIN_B5_PANTOTHENIC_ACID = "VITAMIN_B5_PANTOTHENIC_ACID"
    VITAMIN_B6 = "VITAMIN_B6"
    VITAMIN_B7_BIOTIN = "VITAMIN_B7_BIOTIN"
    VITAMIN_B9_FOLATE_DFE = "VITAMIN_B9_FOLATE_DFE"
    VITAMIN_B12 = "VITAMIN_B12"
    VITAMIN_C = "VITAMIN_C"
    CHOLINE = "CHOLINE"
    HISTIDINE = "HISTIDINE"
    ISOLEUCINE = "ISOLEUCINE"
    LEUCINE = "LEUCINE"
    LYSINE = "LYSINE"
    THREONINE = "THREONINE"
    TRYPTOPHAN = "TRYPTOPHAN"
    VALINE = "VALINE"
    METHIONINE_CYSTEINE_TOTAL = "METHIONINE_CYSTEINE_TOTAL"
    PHENYLALANINE_TYROSINE_TOTAL = "PHENYLALANINE_TYROSINE_TOTAL"
    CALCIUM = "CALCIUM"
    PHOSPHORUS = "PHOSPHORUS"
    MAGNESIUM = "MAGNESIUM"
    SODIUM = "SODIUM"
    POTASSIUM = "POTASSIUM"
    IRON = "IRON"
    ZINC = "ZINC"
    COPPER = "COPPER"
    MANGANESE = "MANGANESE"
    IODINE = "IODINE"
    SELENIUM = "SELENIUM"


VITAMIN_LABELS: frozenset[NutrientLabel] = frozenset(
    {
        NutrientLabel.VITAMIN_A_RAE,
        NutrientLabel.VITAMIN_D_D2_D3,
        NutrientLabel.VITAMIN_E_ALPHA_TOCOPHEROL,
        NutrientLabel.VITAMIN_K,
        NutrientLabel.VITAMIN_B1_THIAMINE,
        NutrientLabel.VITAMIN_B2_RIBOFLAVIN,
        NutrientLabel.VITAMIN_B3_NIACIN,
        NutrientLabel.VITAMIN_B5_PANTOTHENIC_ACID,
        NutrientLabel.VITAMIN_B6,
        NutrientLabel.VITAMIN_B7_BIOTIN,
        NutrientLabel.VITAMIN_B9_FOLATE_DFE,
        NutrientLabel.VITAMIN_B12,
        NutrientLabel.VITAMIN_C,
        NutrientLabel.CHOLINE,
    }
)

MINERAL_LABELS: frozenset[NutrientLabel] = frozenset(
    {
        NutrientLabel.CALCIUM,
        NutrientLabel.PHOSPHORUS,
        NutrientLabel.MAGNESIUM,
        NutrientLabel.POTASSIUM,
        NutrientLabel.IRON,
        NutrientLabel.ZINC,
        NutrientLabel.COPPER,
        NutrientLabel.MANGANESE,
        NutrientLabel.IODINE,
        NutrientLabel.SELENIUM,
    }
)

AMINO_ACID_LABELS: frozenset[NutrientLabel] = frozenset(
    {
        NutrientLabel.HISTIDINE,
        NutrientLabel.ISOLEUCINE,
        NutrientLabel.LEUCINE,
        NutrientLabel.LYSINE,
        NutrientLabel.THREONINE,
        NutrientLabel.TRYPTOPHAN,
        NutrientLabel.VALINE,
        NutrientLabel.METHIONINE_CYSTEINE_TOTAL,
        NutrientLabel.PHENYLALANINE_TYROSINE_TOTAL,
    }
)

OMEGA3_LABELS: tuple[NutrientLabel, ...] = (
    NutrientLabel.OMEGA3,
    NutrientLabel.OMEGA3_EPA,
    NutrientLabel.OMEGA3_DHA,
)

# Short names used in micronutrient reasons.
DISPLAY_NAMES: dict[NutrientLabel, str] = {
    NutrientLabel.VITAMIN_A_RAE: "vitamin A",
    NutrientLabel.VITAMIN_D_D2_D3: "vitamin D",
    NutrientLabel.VITAMIN_E_ALPHA_TOCOPHEROL: "vitamin E",
    NutrientLabel.VITAMIN_K: "vitamin K",
    NutrientLabel.VITAMIN_B1_THIAMINE: "vitamin B1",
    NutrientLabel.VITAMIN_B2_RIBOFLAVIN: "vitamin B2",
    NutrientLabel.VITAMIN_B3_NIACIN: "niacin (B3)",
    NutrientLabel.VITAMIN_B5_PANTOTHENIC_ACID: "vitamin B5",
    NutrientLabel.VITAMIN_B6: "vitamin B6",
    NutrientLabel.VITAMIN_B7_BIOTIN: "biotin (B7)",
    NutrientLabel.VITAMIN_B9_FOLATE_DFE: "folate (B9)",
    NutrientLabel.VITAMIN_B12: "vitamin B12",
    NutrientLabel.VITAMIN_C: "vitamin C",
    NutrientLabel.CHOLINE: "choline",
    NutrientLabel.CALCIUM: "calcium",
    NutrientLabel.PHOSPHORUS: "phosphorus",
    NutrientLabel.MAGNESIUM: "magnesium",
    NutrientLabel.POTASSIUM: "potassium",
    NutrientLabel.IRON: "iron",
    NutrientLabel.ZINC: "zinc",
    NutrientLabel.COPPER: "copper",
    NutrientLabel.MANGANESE: "manganese",
    NutrientLabel.IODINE: "iodine",
    NutrientLabel.SELENIUM: "selenium",
}


def display_name(label: NutrientLabel) -> str:
    """Return a lower-case, human-friendly name for a nutrient label."""
    return DISPLAY_NAMES.get(label, label.value.replace("_", " ").lower())
