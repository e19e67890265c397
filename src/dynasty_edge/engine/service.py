"""League scoring pass: roster axes, archetypes and power rankings."""

from __future__ import annotations

import logging
import math
import os
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional, Sequence

from pydantic import ValidationError

from dynasty_edge.config.age_curves import AgeCurve, merge_curves
from dynasty_edge.config.archetypes import DEFAULT_ARCHETYPE_CONFIG, ArchetypeConfig
from dynasty_edge.config.errors import InvalidConfigurationError
from dynasty_edge.config.roster import SCORED_POSITIONS, count_starter_slots, is_superflex_from_positions
from dynasty_edge.models import EdgeEngineWeights, LeagueSnapshot, PlayerRecord, RosterSnapshot

from .archetypes import ArchetypeLabel, classify_archetype
from .composite import WindowScore, composite_score, compute_value_weighted_window, resolve_weights
from .core_assets import (
    CoreAsset,
    PositionNeeds,
    compute_position_needs,
    describe_core_assets,
    position_values,
    select_core_assets,
)
from .lineup import (
    DepthScore,
    DraftCapital,
    LineupResult,
    compute_depth_score,
    compute_draft_capital,
    compute_optimal_lineup,
)
from .percentile import optional_percentile_ranks, percentile_ranks, summarize


logger = logging.getLogger("uvicorn.error")

_LOW_CONFIDENCE_ENV = "DYNASTY_EDGE_LOW_CONFIDENCE_PCT"
_LOW_CONFIDENCE_DEFAULT = 70.0


def _env_float(name: str, default: float, *, clamp_min: float | None = None, clamp_max: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    if clamp_max is not None:
        value = min(clamp_max, value)
    return value


def low_confidence_threshold() -> float:
    return _env_float(_LOW_CONFIDENCE_ENV, _LOW_CONFIDENCE_DEFAULT, clamp_min=0.0, clamp_max=100.0)


@dataclass(frozen=True)
class AxisScore:
    raw: float
    pct: float
    coverage_pct: float


@dataclass(frozen=True)
class RosterAxes:
    roster_id: int
    owner_id: Optional[str]
    display_name: str
    starters: AxisScore
    draft: AxisScore
    window_core: AxisScore
    window_total: AxisScore
    max_pf: Optional[float]
    max_pf_pct: Optional[float]
    archetype: ArchetypeLabel
    reasons: list[str]
    core_assets: list[CoreAsset]
    needs: PositionNeeds
    low_confidence: bool

    @property
    def power_pct(self) -> float:
        return self.starters.pct


@dataclass(frozen=True)
class TeamPowerRanking:
    roster_id: int
    display_name: str
    rank: int
    composite: float
    starters_value: float
    bench_value: float
    picks_value: float
    depth: DepthScore
    window_value: float
    axis_percentiles: dict[str, float]
    draft_counts: dict[int, int]


@dataclass(frozen=True)
class LeagueAxesResult:
    league_id: str
    season: int
    superflex: bool
    starter_slot_count: int
    weights: EdgeEngineWeights
    weights_defaulted: bool
    teams: list[RosterAxes]
    power_rankings: list[TeamPowerRanking]
    normalization: dict[str, dict[str, float]] = field(default_factory=dict)


@dataclass(frozen=True)
class _RosterRaw:
    roster: RosterSnapshot
    lineup: LineupResult
    depth: DepthScore
    draft: DraftCapital
    core_players: list[PlayerRecord]
    window_core: WindowScore
    window_total: WindowScore


def _finite_or_none(value: Optional[float]) -> Optional[float]:
    if value is None or not math.isfinite(value):
        return None
    return value


def resolve_archetype_config(
    config: ArchetypeConfig | Mapping[str, Any] | None,
) -> ArchetypeConfig:
    if config is None:
        return DEFAULT_ARCHETYPE_CONFIG
    if isinstance(config, ArchetypeConfig):
        return config
    try:
        return DEFAULT_ARCHETYPE_CONFIG.with_overrides(config)
    except (TypeError, ValueError, ValidationError) as exc:
        raise InvalidConfigurationError(f"invalid archetype thresholds: {exc}") from exc


def resolve_age_curves(
    curves: Mapping[str, AgeCurve] | Mapping[str, Mapping[str, Any]] | None,
) -> Mapping[str, AgeCurve] | None:
    if not curves:
        return None
    if all(isinstance(curve, AgeCurve) for curve in curves.values()):
        return curves  # type: ignore[return-value]
    try:
        return merge_curves(curves)  # type: ignore[arg-type]
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidConfigurationError(f"invalid age curve override: {exc}") from exc


def _measure_roster(
    roster: RosterSnapshot,
    snapshot: LeagueSnapshot,
    *,
    superflex: bool,
    starter_slot_count: int,
    curves: Mapping[str, AgeCurve] | None,
) -> _RosterRaw:
    lineup = compute_optimal_lineup(roster.players, snapshot.roster_positions)
    core_players = select_core_assets(roster.players, starter_slot_count)
    return _RosterRaw(
        roster=roster,
        lineup=lineup,
        depth=compute_depth_score(lineup),
        draft=compute_draft_capital(roster.draft_picks, season=snapshot.season, superflex=superflex),
        core_players=core_players,
        window_core=compute_value_weighted_window(core_players, curves),
        window_total=compute_value_weighted_window(roster.players, curves),
    )


def score_league(
    snapshot: LeagueSnapshot,
    *,
    config: ArchetypeConfig | Mapping[str, Any] | None = None,
    weights: EdgeEngineWeights | Mapping[str, Any] | None = None,
    curves: Mapping[str, Any] | None = None,
) -> LeagueAxesResult:
    """Score every roster in ``snapshot`` against the rest of the league."""

    archetype_config = resolve_archetype_config(config)
    resolved = resolve_weights(weights)
    age_curves = resolve_age_curves(curves)

    superflex = is_superflex_from_positions(snapshot.roster_positions)
    starter_slot_count = count_starter_slots(snapshot.roster_positions)

    measured = [
        _measure_roster(
            roster,
            snapshot,
            superflex=superflex,
            starter_slot_count=starter_slot_count,
            curves=age_curves,
        )
        for roster in snapshot.rosters
    ]

    # Every population is fully built before any team is ranked against it.
    starters_values = [item.lineup.starters_value for item in measured]
    bench_values = [item.lineup.bench_value for item in measured]
    draft_values = [item.draft.value for item in measured]
    depth_values = [item.depth.overall for item in measured]
    window_core_values = [item.window_core.raw for item in measured]
    window_total_values = [item.window_total.raw for item in measured]
    max_pf_values = [_finite_or_none(item.roster.max_pf) for item in measured]

    starters_pcts = percentile_ranks(starters_values)
    bench_pcts = percentile_ranks(bench_values)
    draft_pcts = percentile_ranks(draft_values)
    depth_pcts = percentile_ranks(depth_values)
    window_core_pcts = percentile_ranks(window_core_values)
    window_total_pcts = percentile_ranks(window_total_values)
    max_pf_pcts = optional_percentile_ranks(max_pf_values)

    league_position_values: dict[str, list[float]] = {position: [] for position in SCORED_POSITIONS}
    for item in measured:
        for position, value in position_values(item.roster.players).items():
            league_position_values[position].append(value)

    threshold = low_confidence_threshold()
    teams: list[RosterAxes] = []
    rankings: list[TeamPowerRanking] = []
    for idx, item in enumerate(measured):
        roster = item.roster
        result = classify_archetype(
            power_pct=starters_pcts[idx],
            draft_pct=draft_pcts[idx],
            window_pct=window_core_pcts[idx],
            max_pf_pct=max_pf_pcts[idx],
            config=archetype_config,
        )
        low_confidence = item.lineup.coverage_pct < threshold
        if low_confidence:
            logger.warning(
                "Roster %s in league %s has %.1f%% value coverage; ranks are low confidence",
                roster.roster_id,
                snapshot.league_id,
                item.lineup.coverage_pct,
            )
        axes = RosterAxes(
            roster_id=roster.roster_id,
            owner_id=roster.owner_id,
            display_name=roster.display_name,
            starters=AxisScore(item.lineup.starters_value, starters_pcts[idx], item.lineup.coverage_pct),
            draft=AxisScore(item.draft.value, draft_pcts[idx], item.draft.coverage_pct),
            window_core=AxisScore(item.window_core.raw, window_core_pcts[idx], item.window_core.coverage_pct),
            window_total=AxisScore(item.window_total.raw, window_total_pcts[idx], item.window_total.coverage_pct),
            max_pf=max_pf_values[idx],
            max_pf_pct=max_pf_pcts[idx],
            archetype=result.archetype,
            reasons=result.reasons,
            core_assets=describe_core_assets(item.core_players, age_curves),
            needs=compute_position_needs(
                roster.players,
                snapshot.roster_positions,
                item.lineup,
                league_position_values,
            ),
            low_confidence=low_confidence,
        )
        teams.append(axes)
        logger.debug("Scored roster %s: %s (%s)", roster.roster_id, axes.archetype, "; ".join(axes.reasons))

        axis_percentiles = {
            "starters": starters_pcts[idx],
            "bench": bench_pcts[idx],
            "picks": draft_pcts[idx],
            "depth": depth_pcts[idx],
            "age": window_core_pcts[idx],
        }
        rankings.append(
            TeamPowerRanking(
                roster_id=roster.roster_id,
                display_name=roster.display_name,
                rank=0,
                composite=composite_score(axis_percentiles, resolved.weights),
                starters_value=item.lineup.starters_value,
                bench_value=item.lineup.bench_value,
                picks_value=item.draft.value,
                depth=item.depth,
                window_value=item.window_core.raw,
                axis_percentiles=axis_percentiles,
                draft_counts=item.draft.counts_by_round,
            )
        )

    ordered = sorted(rankings, key=lambda ranking: ranking.composite, reverse=True)
    ranked = [
        replace(ranking, rank=position)
        for position, ranking in enumerate(ordered, start=1)
    ]

    logger.info(
        "Scored league %s: %s rosters, superflex=%s, weights=%s%s",
        snapshot.league_id or "-",
        len(teams),
        superflex,
        resolved.weights.as_dict(),
        " (default)" if resolved.defaulted else "",
    )

    return LeagueAxesResult(
        league_id=snapshot.league_id,
        season=snapshot.season,
        superflex=superflex,
        starter_slot_count=starter_slot_count,
        weights=resolved.weights,
        weights_defaulted=resolved.defaulted,
        teams=teams,
        power_rankings=ranked,
        normalization={
            "starters": summarize(starters_values),
            "bench": summarize(bench_values),
            "picks": summarize(draft_values),
            "window": summarize(window_core_values),
        },
    )


def _score_league_job(args: tuple[LeagueSnapshot, Any, Any, Any]) -> LeagueAxesResult:
    snapshot, config, weights, curves = args
    return score_league(snapshot, config=config, weights=weights, curves=curves)


def score_leagues(
    snapshots: Sequence[LeagueSnapshot],
    *,
    config: ArchetypeConfig | Mapping[str, Any] | None = None,
    weights: EdgeEngineWeights | Mapping[str, Any] | None = None,
    curves: Mapping[str, Any] | None = None,
    max_workers: int | None = None,
) -> list[LeagueAxesResult]:
    """Score independent leagues, on a process pool when ``max_workers`` > 1.

    Results come back in input order.
    """

    # Surface bad configuration once, before any worker starts.
    resolve_archetype_config(config)
    resolve_weights(weights)
    resolve_age_curves(curves)

    if not max_workers or max_workers <= 1 or len(snapshots) <= 1:
        return [score_league(snapshot, config=config, weights=weights, curves=curves) for snapshot in snapshots]

    jobs = [(snapshot, config, weights, curves) for snapshot in snapshots]
    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(_score_league_job, jobs))
