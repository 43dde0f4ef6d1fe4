"""Domain models for food tier results."""

from dataclasses import dataclass
from enum import Enum


class Tier(Enum):
    """Ordinal food quality tier, S is best."""

    S = "S"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"


class ReasonKind(Enum):
    """Direction of a single scoring factor."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    INFO = "info"


class Archetype(Enum):
    """Macronutrient archetype that selects the scoring rules."""

    PROTEIN = "protein"
    CARB = "carb"
    FAT = "fat"
    MIXED = "mixed"


@dataclass(frozen=True)
class FoodTierReason:
    """Human-readable explanation of one scoring factor."""

    kind: ReasonKind
    message: str


@dataclass(frozen=True)
class FoodTierResult:
    """Score, tier and justification for a food."""

    tier: Tier
    score: float
    reasons: tuple[FoodTierReason, ...] = ()
    is_estimate: bool = False


@dataclass(frozen=True)
class ArchetypeInfo:
    """Detected archetype with macros per 100 g and calorie shares."""

    type: Archetype
    carbs: float
    fat: float
    protein: float
    c_share: float
    p_share: float
    f_share: float
