"""Optimal starting lineup, bench depth and draft capital for one roster."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

from dynasty_edge.config.roster import eligible_positions, starter_slots
from dynasty_edge.models import DraftPickRecord, PlayerRecord

from .rounding import round_half_up


# Fallback pick prices by round: (1QB, superflex). Rounds past 4 use round 4.
FALLBACK_PICK_VALUES: Mapping[int, tuple[float, float]] = {
    1: (55.0, 75.0),
    2: (30.0, 40.0),
    3: (15.0, 20.0),
    4: (7.0, 10.0),
}

YEAR_DISCOUNTS: Mapping[int, float] = {0: 1.0, 1: 0.85, 2: 0.72, 3: 0.62}


@dataclass(frozen=True)
class SlotAssignment:
    slot: str
    player: PlayerRecord


@dataclass(frozen=True)
class LineupResult:
    starters: list[SlotAssignment]
    bench: list[PlayerRecord]
    starters_value: float
    bench_value: float
    coverage_pct: float

    @property
    def total_value(self) -> float:
        return self.starters_value + self.bench_value

    @property
    def starter_ids(self) -> set[str]:
        return {assignment.player.player_id for assignment in self.starters}


@dataclass(frozen=True)
class DepthScore:
    overall: float
    starter_quality: float
    bench_depth: float
    fragility: float


@dataclass(frozen=True)
class DraftCapital:
    value: float
    pick_count: int
    priced_count: int
    counts_by_round: dict[int, int]

    @property
    def coverage_pct(self) -> float:
        if self.pick_count == 0:
            return 0.0
        return self.priced_count / self.pick_count * 100.0


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return min(high, max(low, value))


def value_coverage_pct(players: Sequence[PlayerRecord]) -> float:
    if not players:
        return 0.0
    return sum(1 for player in players if player.has_value) / len(players) * 100.0


def compute_optimal_lineup(players: Sequence[PlayerRecord], roster_positions: Iterable[str]) -> LineupResult:
    """Fill starter slots in order with the most valuable eligible player left."""

    available = sorted(players, key=lambda player: player.value, reverse=True)
    used: set[str] = set()
    starters: list[SlotAssignment] = []
    for slot in starter_slots(roster_positions):
        eligible = eligible_positions(slot)
        for candidate in available:
            if candidate.player_id in used or candidate.position not in eligible:
                continue
            used.add(candidate.player_id)
            starters.append(SlotAssignment(slot=slot, player=candidate))
            break

    bench = [player for player in players if player.player_id not in used]
    return LineupResult(
        starters=starters,
        bench=bench,
        starters_value=sum(assignment.player.value for assignment in starters),
        bench_value=sum(player.value for player in bench),
        coverage_pct=value_coverage_pct(players),
    )


def compute_depth_score(lineup: LineupResult) -> DepthScore:
    starter_values = [assignment.player.value for assignment in lineup.starters]
    if starter_values:
        avg_starter = sum(starter_values) / len(starter_values)
        min_starter = min(starter_values)
    else:
        avg_starter = 0.0
        min_starter = 0.0

    starter_quality = min(100.0, avg_starter / 10)

    startable_threshold = min_starter * 0.5
    startable_bench = sum(
        1 for player in lineup.bench if player.has_value and player.value >= startable_threshold
    )
    bench_depth = min(100.0, startable_bench * 15.0)

    spread_ratio = min_starter / avg_starter if avg_starter > 0 else 0.0
    fragility = 100.0 - (spread_ratio * 50 + bench_depth * 0.5)

    overall = starter_quality * 0.4 + bench_depth * 0.4 + (100 - fragility) * 0.2
    return DepthScore(
        overall=_clamp(overall),
        starter_quality=_clamp(starter_quality),
        bench_depth=_clamp(bench_depth),
        fragility=_clamp(fragility),
    )


def pick_value(pick: DraftPickRecord, *, season: int, superflex: bool) -> float:
    """Market value of a pick, or the discounted fallback price when unpriced."""

    if pick.value is not None:
        return pick.value
    base_1qb, base_sf = FALLBACK_PICK_VALUES[min(pick.round, 4)]
    base = base_sf if superflex else base_1qb
    years_out = min(max(pick.season - season, 0), 3)
    return round_half_up(base * YEAR_DISCOUNTS[years_out])


def compute_draft_capital(
    picks: Sequence[DraftPickRecord],
    *,
    season: int,
    superflex: bool,
) -> DraftCapital:
    counts = {round_: 0 for round_ in FALLBACK_PICK_VALUES}
    total = 0.0
    for pick in picks:
        total += pick_value(pick, season=season, superflex=superflex)
        counts[min(pick.round, 4)] += 1
    return DraftCapital(
        value=total,
        pick_count=len(picks),
        priced_count=sum(1 for pick in picks if pick.value is not None),
        counts_by_round=counts,
    )
