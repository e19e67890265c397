"""Core assets and positional surplus/deficit for trade targeting."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal, Mapping, Optional, Sequence

from dynasty_edge.config.age_curves import AgeCurve
from dynasty_edge.config.roster import SCORED_POSITIONS, eligible_positions, slot_demand, starter_slots
from dynasty_edge.models import PlayerRecord

from .age_curve import AgeCurveStatus, age_curve_status
from .lineup import LineupResult
from .percentile import percentile_rank


CORE_ASSET_CAP = 12
CORE_ASSET_EXTRA = 3

SHALLOW_VALUE_PCT = 25.0
SURPLUS_VALUE_PCT = 75.0
SURPLUS_COUNT_MARGIN = 2

NeedStatus = Literal["shallow", "surplus", "balanced"]


@dataclass(frozen=True)
class CoreAsset:
    player_id: str
    full_name: str
    position: str
    value: float
    age: Optional[int]
    age_curve: AgeCurveStatus


@dataclass(frozen=True)
class PositionNeed:
    position: str
    count: int
    target: int
    value: float
    value_pct: float
    status: NeedStatus


@dataclass(frozen=True)
class SurplusPlayer:
    player_id: str
    full_name: str
    position: str
    value: float
    surplus_score: float


@dataclass(frozen=True)
class PositionNeeds:
    positions: list[PositionNeed]
    weakest_slot: Optional[str]
    surplus_players: list[SurplusPlayer]

    @property
    def shallow_positions(self) -> list[str]:
        return [need.position for need in self.positions if need.status == "shallow"]

    @property
    def surplus_positions(self) -> list[str]:
        return [need.position for need in self.positions if need.status == "surplus"]


def core_asset_count(starter_slot_count: int) -> int:
    return max(0, min(CORE_ASSET_CAP, starter_slot_count + CORE_ASSET_EXTRA))


def select_core_assets(players: Sequence[PlayerRecord], starter_slot_count: int) -> list[PlayerRecord]:
    """Most valuable players, at most ``min(12, starter_slot_count + 3)``.

    The sort is stable, so players with equal value keep their input order.
    """

    ranked = sorted(players, key=lambda player: player.value, reverse=True)
    return ranked[: core_asset_count(starter_slot_count)]


def describe_core_assets(
    players: Sequence[PlayerRecord],
    curves: Mapping[str, AgeCurve] | None = None,
) -> list[CoreAsset]:
    return [
        CoreAsset(
            player_id=player.player_id,
            full_name=player.full_name,
            position=player.position,
            value=player.value,
            age=player.age,
            age_curve=age_curve_status(player.position, player.age, curves),
        )
        for player in players
    ]


def position_values(players: Sequence[PlayerRecord]) -> dict[str, float]:
    totals = {position: 0.0 for position in SCORED_POSITIONS}
    for player in players:
        if player.position in totals:
            totals[player.position] += player.value
    return totals


def _depth_buffer(position: str) -> int:
    return 1 if position == "QB" else 2


def _need_status(count: int, target: int, value_pct: float) -> NeedStatus:
    if count < target or value_pct < SHALLOW_VALUE_PCT:
        return "shallow"
    if count > target + SURPLUS_COUNT_MARGIN or value_pct >= SURPLUS_VALUE_PCT:
        return "surplus"
    return "balanced"


def compute_position_needs(
    players: Sequence[PlayerRecord],
    roster_positions: Sequence[str],
    lineup: LineupResult,
    league_position_values: Mapping[str, Sequence[float]],
) -> PositionNeeds:
    """Flag positions that are thin or overstocked against slot demand and league peers.

    ``league_position_values`` maps each position to every team's total value
    there, this roster included.
    """

    demand = slot_demand(roster_positions, share=0.5)
    own_values = position_values(players)
    starter_ids = lineup.starter_ids

    needs: list[PositionNeed] = []
    surplus: list[SurplusPlayer] = []
    for position in SCORED_POSITIONS:
        at_position = [player for player in players if player.position == position]
        target = max(1, math.ceil(demand.get(position, 0.0))) + _depth_buffer(position)
        value_pct = percentile_rank(league_position_values.get(position, ()), own_values[position])
        needs.append(
            PositionNeed(
                position=position,
                count=len(at_position),
                target=target,
                value=own_values[position],
                value_pct=value_pct,
                status=_need_status(len(at_position), target, value_pct),
            )
        )

        excess = max(0, len(at_position) - target)
        if excess == 0:
            continue
        bench_here = sorted(
            (player for player in at_position if player.player_id not in starter_ids),
            key=lambda player: player.value,
            reverse=True,
        )
        for player in bench_here[:excess]:
            surplus.append(
                SurplusPlayer(
                    player_id=player.player_id,
                    full_name=player.full_name,
                    position=position,
                    value=player.value,
                    surplus_score=player.value * excess / target,
                )
            )

    surplus.sort(key=lambda item: item.surplus_score, reverse=True)
    return PositionNeeds(
        positions=needs,
        weakest_slot=weakest_slot(players, roster_positions),
        surplus_players=surplus,
    )


def weakest_slot(players: Sequence[PlayerRecord], roster_positions: Sequence[str]) -> Optional[str]:
    """Starter slot whose best eligible player is least valuable; first slot wins ties."""

    weakest: Optional[str] = None
    lowest = math.inf
    for slot in starter_slots(roster_positions):
        eligible = eligible_positions(slot)
        best = max((player.value for player in players if player.position in eligible), default=0.0)
        if best < lowest:
            lowest = best
            weakest = slot
    return weakest
