"""Weighted composite power score and value-weighted age window."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from pydantic import ValidationError

from dynasty_edge.config.age_curves import AgeCurve
from dynasty_edge.config.errors import InvalidConfigurationError
from dynasty_edge.models import DEFAULT_WEIGHTS, EdgeEngineWeights, PlayerRecord

from .age_curve import age_curve_status


logger = logging.getLogger(__name__)

AXES: tuple[str, ...] = ("starters", "bench", "picks", "depth", "age")


@dataclass(frozen=True)
class ResolvedWeights:
    weights: EdgeEngineWeights
    defaulted: bool


@dataclass(frozen=True)
class WindowScore:
    raw: float
    coverage_pct: float
    eligible_count: int
    player_count: int


def resolve_weights(weights: EdgeEngineWeights | Mapping[str, Any] | None) -> ResolvedWeights:
    """Validate caller weights, substituting the documented defaults when omitted.

    A caller mapping must name every axis; partial mappings are rejected
    rather than topped up from the defaults.
    """

    if weights is None:
        logger.info("No composite weights supplied; using defaults %s", DEFAULT_WEIGHTS.as_dict())
        return ResolvedWeights(weights=DEFAULT_WEIGHTS, defaulted=True)
    if isinstance(weights, EdgeEngineWeights):
        return ResolvedWeights(weights=weights, defaulted=False)
    try:
        payload = dict(weights)
    except (TypeError, ValueError) as exc:
        raise InvalidConfigurationError(f"invalid composite weights: {exc}") from exc
    missing = [axis for axis in AXES if axis not in payload]
    if missing:
        raise InvalidConfigurationError(f"invalid composite weights: missing {', '.join(missing)}")
    try:
        parsed = EdgeEngineWeights.model_validate(payload)
    except (TypeError, ValueError, ValidationError) as exc:
        raise InvalidConfigurationError(f"invalid composite weights: {exc}") from exc
    return ResolvedWeights(weights=parsed, defaulted=False)


def composite_score(axis_percentiles: Mapping[str, float], weights: EdgeEngineWeights) -> float:
    """Weighted mean of axis percentiles.

    Axes missing from ``axis_percentiles`` contribute zero. A zero weight total
    scores 0.0.
    """

    weight_map = weights.as_dict()
    total_weight = sum(weight_map[axis] for axis in AXES)
    if total_weight <= 0:
        return 0.0
    weighted = sum(axis_percentiles.get(axis, 0.0) * weight_map[axis] for axis in AXES)
    return weighted / total_weight


def compute_value_weighted_window(
    players: Sequence[PlayerRecord],
    curves: Mapping[str, AgeCurve] | None = None,
) -> WindowScore:
    """Average age-curve score weighted by trade value.

    Players without market value are left out of both sides of the average,
    so unknown-value players do not drag the score toward zero.
    """

    eligible = [player for player in players if player.value > 0]
    numerator = 0.0
    denominator = 0.0
    for player in eligible:
        status = age_curve_status(player.position, player.age, curves)
        numerator += player.value * status.score
        denominator += player.value

    if not eligible or denominator <= 0:
        return WindowScore(raw=0.0, coverage_pct=0.0, eligible_count=0, player_count=len(players))

    return WindowScore(
        raw=numerator / denominator,
        coverage_pct=len(eligible) / len(players) * 100.0,
        eligible_count=len(eligible),
        player_count=len(players),
    )

