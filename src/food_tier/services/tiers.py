"""Mapping between scores and tiers."""

from food_tier.domain.tiers import Tier

# Highest threshold first; the first one reached wins.
TIER_THRESHOLDS: tuple[tuple[float, Tier], ...] = (
    (90, Tier.S),
    (80, Tier.A),
    (70, Tier.B),
    (55, Tier.C),
    (40, Tier.D),
    (25, Tier.E),
)

TIER_LABELS: dict[Tier, str] = {
    Tier.S: "Legend",
    Tier.A: "Great",
    Tier.B: "Good",
    Tier.C: "OK",
    Tier.D: "Limit",
    Tier.E: "Limit",
    Tier.F: "Limit",
}

TIER_EMOJI: dict[Tier, str] = {
    Tier.S: "💎",
    Tier.A: "🥇",
    Tier.B: "🥈",
    Tier.C: "🥉",
    Tier.D: "⚠️",
    Tier.E: "🚫",
    Tier.F: "☠️",
}


def clamp(value: float, low: float, high: float) -> float:
    """Clamp a value into ``[low, high]``."""
    return min(high, max(low, value))


def score_to_tier(score: float) -> Tier:
    """Map a 0-100 score to its tier."""
    for threshold, tier in TIER_THRESHOLDS:
        if score >= threshold:
            return tier
    return Tier.F


def tier_label(tier: Tier) -> str:
    """Return the short badge label for a tier."""
    return TIER_LABELS[tier]


def tier_emoji(tier: Tier) -> str:
    """Return the decoration emoji for a tier."""
    return TIER_EMOJI[tier]
