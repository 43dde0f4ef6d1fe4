"""Text formatting of tier results for badges and detail views."""

from dataclasses import dataclass, field

from food_tier.domain.tiers import FoodTierReason, FoodTierResult, ReasonKind
from food_tier.services.tiers import tier_emoji, tier_label

MAX_POSITIVES = 4
MAX_NEGATIVES = 6
MAX_INFOS = 2


@dataclass(frozen=True)
class ReasonBreakdown:
    """Reasons grouped for the detail view."""

    positives: list[FoodTierReason] = field(default_factory=list)
    negatives: list[FoodTierReason] = field(default_factory=list)
    infos: list[FoodTierReason] = field(default_factory=list)


def format_inline(result: FoodTierResult) -> str:
    """Return e.g. ``"🥈 B • 71/100"`` with an estimate marker when relevant."""
    text = f"{tier_emoji(result.tier)} {result.tier.value} • {result.score:.0f}/100"
    if result.is_estimate:
        text += " (estimate)"
    return text


def format_badge_subtitle(result: FoodTierResult) -> str:
    """Return the compact subtitle shown next to a food name."""
    return f"Tier {result.tier.value} · {tier_label(result.tier)}"


def format_score(result: FoodTierResult) -> str:
    """Return the score line of the detail view."""
    text = f"Score: {result.score:.0f} / 100"
    if result.is_estimate:
        text += " (estimate)"
    return text


def primary_reason(result: FoodTierResult) -> FoodTierReason | None:
    """Pick the reason worth showing first: a drawback, then a note, then any."""
    for kind in (ReasonKind.NEGATIVE, ReasonKind.INFO):
        for reason in result.reasons:
            if reason.kind is kind:
                return reason
    return result.reasons[0] if result.reasons else None


def reason_breakdown(result: FoodTierResult) -> ReasonBreakdown:
    """Group reasons by kind, keeping evaluation order and capping each group."""

    def of_kind(kind: ReasonKind, limit: int) -> list[FoodTierReason]:
        return [reason for reason in result.reasons if reason.kind is kind][:limit]

    return ReasonBreakdown(
        positives=of_kind(ReasonKind.POSITIVE, MAX_POSITIVES),
        negatives=of_kind(ReasonKind.NEGATIVE, MAX_NEGATIVES),
        infos=of_kind(ReasonKind.INFO, MAX_INFOS),
    )
