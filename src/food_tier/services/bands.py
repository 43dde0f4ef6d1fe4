"""Declarative threshold ladders used by the archetype scorers."""

import operator
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from food_tier.domain.tiers import FoodTierReason, ReasonKind


@dataclass(frozen=True)
class Band:
    """One rung of a ladder: when the metric matches, apply delta and reason."""

    delta: float
    kind: ReasonKind
    message: str
    compare: Callable[[float, float], bool] | None = None
    threshold: float = 0

    def matches(self, value: float) -> bool:
        """Return True if the metric falls into this band."""
        if self.compare is None:
            return True
        return self.compare(value, self.threshold)

    def reason(self) -> FoodTierReason:
        """Return the reason emitted by this band."""
        return FoodTierReason(kind=self.kind, message=self.message)


def at_least(threshold: float, delta: float, kind: ReasonKind, message: str) -> Band:
    """Band matching values >= threshold."""
    return Band(delta, kind, message, operator.ge, threshold)


def above(threshold: float, delta: float, kind: ReasonKind, message: str) -> Band:
    """Band matching values > threshold."""
    return Band(delta, kind, message, operator.gt, threshold)


def below(threshold: float, delta: float, kind: ReasonKind, message: str) -> Band:
    """Band matching values < threshold."""
    return Band(delta, kind, message, operator.lt, threshold)


def at_most(threshold: float, delta: float, kind: ReasonKind, message: str) -> Band:
    """Band matching values <= threshold."""
    return Band(delta, kind, message, operator.le, threshold)


def otherwise(delta: float, kind: ReasonKind, message: str) -> Band:
    """Catch-all band."""
    return Band(delta, kind, message)


Ladder = Sequence[Band]


def match_band(value: float | None, ladder: Ladder) -> Band | None:
    """Return the first band matching ``value``; unknown values match nothing."""
    if value is None:
        return None
    return next((band for band in ladder if band.matches(value)), None)


@dataclass
class ScoreSheet:
    """Running score and reasons for one archetype scorer."""

    score: float
    reasons: list[FoodTierReason] = field(default_factory=list)

    def apply(self, value: float | None, ladder: Ladder) -> Band | None:
        """Apply the first matching band of ``ladder`` for ``value``."""
        band = match_band(value, ladder)
        if band is not None:
            self.score += band.delta
            self.reasons.append(band.reason())
        return band

    def add(self, delta: float, kind: ReasonKind, message: str) -> None:
        """Apply a one-off rule outside of a ladder."""
        self.score += delta
        self.reasons.append(FoodTierReason(kind=kind, message=message))

    def result(self) -> tuple[float, list[FoodTierReason]]:
        """Return the unclamped score and reasons in evaluation order."""
        return self.score, list(self.reasons)
