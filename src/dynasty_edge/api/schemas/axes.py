from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from dynasty_edge.engine.age_curve import AgeCurveStatus
from dynasty_edge.engine.core_assets import CoreAsset, PositionNeeds
from dynasty_edge.engine.rounding import round_half_up, round_optional
from dynasty_edge.engine.service import AxisScore, LeagueAxesResult, RosterAxes, TeamPowerRanking
from dynasty_edge.models import LeagueSnapshot


def _r1(value: float) -> float:
    return round_half_up(value, 1)


class ScoreLeagueRequest(BaseModel):
    snapshot: LeagueSnapshot
    weights: Optional[Dict[str, Any]] = None
    archetypes: Optional[Dict[str, Dict[str, Any]]] = None
    age_curves: Optional[Dict[str, Dict[str, Any]]] = None


class AgeCurveRequest(BaseModel):
    position: str
    age: Optional[float] = None


class AgeCurveResponse(BaseModel):
    age: Optional[int]
    position: str
    zone: str
    score: float
    color: str
    label: str
    prime_start: Optional[int]
    prime_end: Optional[int]
    dot_pct: float

    @classmethod
    def from_status(cls, status: AgeCurveStatus) -> "AgeCurveResponse":
        return cls(
            age=status.age,
            position=status.position_bucket,
            zone=status.zone,
            score=_r1(status.score),
            color=status.color,
            label=status.label,
            prime_start=status.prime_start,
            prime_end=status.prime_end,
            dot_pct=round_half_up(status.dot_pct, 3),
        )


class AxisResponse(BaseModel):
    raw: float
    pct: float
    coverage_pct: float

    @classmethod
    def from_axis(cls, axis: AxisScore) -> "AxisResponse":
        return cls(raw=_r1(axis.raw), pct=_r1(axis.pct), coverage_pct=_r1(axis.coverage_pct))


class CoreAssetResponse(BaseModel):
    player_id: str
    full_name: str
    position: str
    value: float
    age: Optional[int]
    age_curve: AgeCurveResponse

    @classmethod
    def from_asset(cls, asset: CoreAsset) -> "CoreAssetResponse":
        return cls(
            player_id=asset.player_id,
            full_name=asset.full_name,
            position=asset.position,
            value=_r1(asset.value),
            age=asset.age,
            age_curve=AgeCurveResponse.from_status(asset.age_curve),
        )


class PositionNeedResponse(BaseModel):
    position: str
    count: int
    target: int
    value: float
    value_pct: float
    status: str


class SurplusPlayerResponse(BaseModel):
    player_id: str
    full_name: str
    position: str
    value: float
    surplus_score: float


class PositionNeedsResponse(BaseModel):
    positions: List[PositionNeedResponse]
    shallow_positions: List[str]
    surplus_positions: List[str]
    weakest_slot: Optional[str]
    surplus_players: List[SurplusPlayerResponse]

    @classmethod
    def from_needs(cls, needs: PositionNeeds) -> "PositionNeedsResponse":
        return cls(
            positions=[
                PositionNeedResponse(
                    position=need.position,
                    count=need.count,
                    target=need.target,
                    value=_r1(need.value),
                    value_pct=_r1(need.value_pct),
                    status=need.status,
                )
                for need in needs.positions
            ],
            shallow_positions=needs.shallow_positions,
            surplus_positions=needs.surplus_positions,
            weakest_slot=needs.weakest_slot,
            surplus_players=[
                SurplusPlayerResponse(
                    player_id=player.player_id,
                    full_name=player.full_name,
                    position=player.position,
                    value=_r1(player.value),
                    surplus_score=_r1(player.surplus_score),
                )
                for player in needs.surplus_players
            ],
        )


class RosterAxesResponse(BaseModel):
    roster_id: int
    owner_id: Optional[str]
    display_name: str
    starters: AxisResponse
    draft: AxisResponse
    window_core: AxisResponse
    window_total: AxisResponse
    power_pct: float
    max_pf: Optional[float]
    max_pf_pct: Optional[float]
    archetype: str
    reasons: List[str]
    core_assets: List[CoreAssetResponse]
    needs: PositionNeedsResponse
    low_confidence: bool

    @classmethod
    def from_axes(cls, axes: RosterAxes) -> "RosterAxesResponse":
        return cls(
            roster_id=axes.roster_id,
            owner_id=axes.owner_id,
            display_name=axes.display_name,
            starters=AxisResponse.from_axis(axes.starters),
            draft=AxisResponse.from_axis(axes.draft),
            window_core=AxisResponse.from_axis(axes.window_core),
            window_total=AxisResponse.from_axis(axes.window_total),
            power_pct=_r1(axes.power_pct),
            max_pf=round_optional(axes.max_pf),
            max_pf_pct=round_optional(axes.max_pf_pct),
            archetype=axes.archetype,
            reasons=list(axes.reasons),
            core_assets=[CoreAssetResponse.from_asset(asset) for asset in axes.core_assets],
            needs=PositionNeedsResponse.from_needs(axes.needs),
            low_confidence=axes.low_confidence,
        )


class PowerRankingResponse(BaseModel):
    roster_id: int
    display_name: str
    rank: int
    composite: float
    starters_value: float
    bench_value: float
    picks_value: float
    depth_score: float
    window_value: float
    axis_percentiles: Dict[str, float]
    draft_counts: Dict[int, int]

    @classmethod
    def from_ranking(cls, ranking: TeamPowerRanking) -> "PowerRankingResponse":
        return cls(
            roster_id=ranking.roster_id,
            display_name=ranking.display_name,
            rank=ranking.rank,
            composite=_r1(ranking.composite),
            starters_value=_r1(ranking.starters_value),
            bench_value=_r1(ranking.bench_value),
            picks_value=_r1(ranking.picks_value),
            depth_score=_r1(ranking.depth.overall),
            window_value=_r1(ranking.window_value),
            axis_percentiles={axis: _r1(pct) for axis, pct in ranking.axis_percentiles.items()},
            draft_counts=dict(ranking.draft_counts),
        )


class LeagueAxesResponse(BaseModel):
    league_id: str
    season: int
    superflex: bool
    starter_slot_count: int
    weights: Dict[str, float]
    weights_defaulted: bool
    teams: List[RosterAxesResponse]
    power_rankings: List[PowerRankingResponse]
    normalization: Dict[str, Dict[str, float]] = Field(default_factory=dict)

    @classmethod
    def from_result(cls, result: LeagueAxesResult) -> "LeagueAxesResponse":
        return cls(
            league_id=result.league_id,
            season=result.season,
            superflex=result.superflex,
            starter_slot_count=result.starter_slot_count,
            weights=result.weights.as_dict(),
            weights_defaulted=result.weights_defaulted,
            teams=[RosterAxesResponse.from_axes(axes) for axes in result.teams],
            power_rankings=[PowerRankingResponse.from_ranking(ranking) for ranking in result.power_rankings],
            normalization={
                axis: {key: _r1(value) for key, value in stats.items()}
                for axis, stats in result.normalization.items()
            },
        )
