"""Scoring engine: age curves, percentiles, composite score, archetypes and core assets."""

from .age_curve import AgeCurveStatus, age_curve_status
from .archetypes import ARCHETYPES, ArchetypeResult, classify_archetype
from .composite import composite_score, compute_value_weighted_window, resolve_weights
from .core_assets import compute_position_needs, select_core_assets
from .percentile import percentile_rank
from .service import LeagueAxesResult, RosterAxes, TeamPowerRanking, score_league, score_leagues

__all__ = [
    "ARCHETYPES",
    "AgeCurveStatus",
    "ArchetypeResult",
    "LeagueAxesResult",
    "RosterAxes",
    "TeamPowerRanking",
    "age_curve_status",
    "classify_archetype",
    "composite_score",
    "compute_position_needs",
    "compute_value_weighted_window",
    "percentile_rank",
    "resolve_weights",
    "score_league",
    "score_leagues",
    "select_core_assets",
]
