"""Lifecycle stage and future-value score for a player's age."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal, Mapping, Optional

from dynasty_edge.config.age_curves import AGE_SCALE_MAX, AGE_SCALE_MIN, AgeCurve, get_curve
from dynasty_edge.config.roster import normalize_position


AgeCurveZone = Literal["Ascent", "Prime", "Decline", "Cliff", "Unknown"]
AgeCurveColor = Literal["green", "gold", "orange", "red", "gray"]

ZONES: tuple[AgeCurveZone, ...] = ("Ascent", "Prime", "Decline", "Cliff", "Unknown")

# Score given to players whose lifecycle stage cannot be determined.
UNKNOWN_SCORE = 50.0

_ZONE_COLORS: Mapping[str, AgeCurveColor] = {
    "Ascent": "green",
    "Prime": "gold",
    "Decline": "orange",
    "Cliff": "red",
    "Unknown": "gray",
}


@dataclass(frozen=True)
class AgeCurveStatus:
    age: Optional[int]
    position_bucket: str
    zone: AgeCurveZone
    score: float
    prime_window: Optional[tuple[int, int]]
    dot_pct: float
    color: AgeCurveColor
    label: str

    @property
    def prime_start(self) -> Optional[int]:
        return self.prime_window[0] if self.prime_window else None

    @property
    def prime_end(self) -> Optional[int]:
        return self.prime_window[1] if self.prime_window else None


def zone_color(zone: str) -> AgeCurveColor:
    return _ZONE_COLORS.get(zone, "gray")


def dot_position(age: Optional[float]) -> float:
    """Place ``age`` on the displayed age bar, clamped to [0, 1]."""

    if age is None:
        return 0.0
    span = AGE_SCALE_MAX - AGE_SCALE_MIN
    return min(1.0, max(0.0, (age - AGE_SCALE_MIN) / span))


def _coerce_age(age: object) -> Optional[int]:
    if age is None or isinstance(age, bool):
        return None
    try:
        value = float(age)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return int(math.floor(value))


def _zone_for(curve: AgeCurve, age: int) -> AgeCurveZone:
    if age >= curve.cliff_age:
        return "Cliff"
    if age < curve.prime_start:
        return "Ascent"
    if age <= curve.prime_end:
        return "Prime"
    return "Decline"


def _score_for(curve: AgeCurve, age: int, zone: AgeCurveZone) -> float:
    if zone == "Cliff":
        return curve.cliff_score
    if age in curve.scores:
        return curve.scores[age]
    youngest = curve.youngest_scored_age
    if zone == "Ascent" and youngest is not None and age < youngest:
        return curve.scores[youngest]
    # Gaps in a tuned table fall back to a flat score per zone.
    if zone == "Prime":
        return 100.0
    if zone == "Decline":
        return max(curve.cliff_score, 70.0)
    return UNKNOWN_SCORE


def _unknown(age: Optional[int], bucket: str) -> AgeCurveStatus:
    return AgeCurveStatus(
        age=age,
        position_bucket=bucket,
        zone="Unknown",
        score=UNKNOWN_SCORE,
        prime_window=None,
        dot_pct=dot_position(age),
        color="gray",
        label="Unknown",
    )


def age_curve_status(
    position: Optional[str],
    age: object,
    curves: Mapping[str, AgeCurve] | None = None,
) -> AgeCurveStatus:
    """Classify ``age`` against the prime window of ``position``.

    Total over every input: a missing or non-finite age, or a position with no
    curve, yields the ``Unknown`` zone with the neutral score.
    """

    bucket = normalize_position(position)
    resolved_age = _coerce_age(age)
    curve = get_curve(bucket, curves)
    if resolved_age is None or curve is None:
        return _unknown(resolved_age, bucket)

    zone = _zone_for(curve, resolved_age)
    score = _score_for(curve, resolved_age, zone)
    label = f"Prime ({curve.prime_start}-{curve.prime_end})" if zone == "Prime" else zone
    return AgeCurveStatus(
        age=resolved_age,
        position_bucket=bucket,
        zone=zone,
        score=float(score),
        prime_window=(curve.prime_start, curve.prime_end),
        dot_pct=dot_position(resolved_age),
        color=zone_color(zone),
        label=label,
    )


def prime_label(position: Optional[str], curves: Mapping[str, AgeCurve] | None = None) -> str:
    curve = get_curve(position, curves)
    if curve is None:
        return "Unknown"
    return f"Prime ({curve.prime_start}-{curve.prime_end})"
