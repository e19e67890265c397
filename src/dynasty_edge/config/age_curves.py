"""Position age curves used by the lifecycle model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping

from .roster import normalize_position


@dataclass(frozen=True)
class AgeCurve:
    position: str
    prime_start: int
    prime_end: int
    cliff_age: int
    cliff_score: float
    scores: Mapping[int, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.prime_start <= self.prime_end < self.cliff_age:
            raise ValueError(
                f"{self.position} curve must satisfy prime_start <= prime_end < cliff_age, "
                f"got {self.prime_start}/{self.prime_end}/{self.cliff_age}"
            )

    @property
    def youngest_scored_age(self) -> int | None:
        return min(self.scores) if self.scores else None

    @classmethod
    def from_mapping(cls, position: str, data: Mapping[str, Any]) -> "AgeCurve":
        raw_scores = data.get("scores") or {}
        return cls(
            position=normalize_position(position),
            prime_start=int(data["prime_start"]),
            prime_end=int(data["prime_end"]),
            cliff_age=int(data["cliff_age"]),
            cliff_score=float(data["cliff_score"]),
            scores={int(age): float(score) for age, score in raw_scores.items()},
        )

    def to_mapping(self) -> Dict[str, Any]:
        return {
            "prime_start": self.prime_start,
            "prime_end": self.prime_end,
            "cliff_age": self.cliff_age,
            "cliff_score": self.cliff_score,
            "scores": {str(age): score for age, score in sorted(self.scores.items())},
        }


_AGE_CURVES: Dict[str, AgeCurve] = {
    "RB": AgeCurve(
        position="RB",
        prime_start=23,
        prime_end=26,
        cliff_age=29,
        cliff_score=45,
        scores={20: 60, 21: 75, 22: 90, 23: 100, 24: 100, 25: 100, 26: 100, 27: 85, 28: 70},
    ),
    "WR": AgeCurve(
        position="WR",
        prime_start=24,
        prime_end=28,
        cliff_age=32,
        cliff_score=45,
        scores={
            21: 70, 22: 80, 23: 90,
            24: 100, 25: 100, 26: 100, 27: 100, 28: 100,
            29: 85, 30: 85, 31: 70,
        },
    ),
    "TE": AgeCurve(
        position="TE",
        prime_start=25,
        prime_end=30,
        cliff_age=33,
        cliff_score=45,
        scores={
            21: 60, 22: 70, 23: 80, 24: 85,
            25: 100, 26: 100, 27: 100, 28: 100, 29: 100, 30: 100,
            31: 80, 32: 80,
        },
    ),
    "QB": AgeCurve(
        position="QB",
        prime_start=26,
        prime_end=33,
        cliff_age=37,
        cliff_score=55,
        scores={
            21: 70, 22: 75, 23: 80, 24: 85, 25: 90,
            26: 100, 27: 100, 28: 100, 29: 100, 30: 100, 31: 100, 32: 100, 33: 100,
            34: 85, 35: 85, 36: 85,
        },
    ),
}

# Ends of the displayed age scale bar.
AGE_SCALE_MIN = 20
AGE_SCALE_MAX = 38


def iter_curves() -> Iterable[AgeCurve]:
    return _AGE_CURVES.values()


def default_curves() -> Dict[str, AgeCurve]:
    return dict(_AGE_CURVES)


def get_curve(position: str | None, curves: Mapping[str, AgeCurve] | None = None) -> AgeCurve | None:
    """Return the curve for ``position`` or None when the position has no prime window."""

    table = _AGE_CURVES if curves is None else curves
    return table.get(normalize_position(position))


def merge_curves(overrides: Mapping[str, Mapping[str, Any]] | None) -> Dict[str, AgeCurve]:
    """Layer per-position overrides on top of the default curves.

    Each override may be partial; missing keys fall back to the default curve
    for that position. A position without a default must be fully specified.
    """

    merged = default_curves()
    for position, data in (overrides or {}).items():
        key = normalize_position(position)
        base = merged.get(key)
        payload: Dict[str, Any] = base.to_mapping() if base is not None else {}
        payload.update(data)
        merged[key] = AgeCurve.from_mapping(key, payload)
    return merged
