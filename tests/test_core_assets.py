import pytest

from dynasty_edge.engine import compute_position_needs, select_core_assets
from dynasty_edge.engine.core_assets import core_asset_count, describe_core_assets, weakest_slot
from dynasty_edge.engine.lineup import compute_optimal_lineup
from dynasty_edge.models import PlayerRecord


def _roster(values: list[float]) -> list[PlayerRecord]:
    return [
        PlayerRecord(player_id=f"p{idx}", position="WR", age=25, value=value)
        for idx, value in enumerate(values)
    ]


@pytest.mark.parametrize(("slots", "expected"), [(0, 3), (5, 8), (9, 12), (10, 12), (20, 12)])
def test_core_asset_count(slots, expected):
    assert core_asset_count(slots) == expected


def test_selects_most_valuable_players_in_order():
    players = _roster([float(value) for value in range(20)])
    selected = select_core_assets(players, 5)
    assert len(selected) == 8
    assert [player.value for player in selected] == [19, 18, 17, 16, 15, 14, 13, 12]


def test_short_roster_returns_everyone():
    players = _roster([5, 10])
    assert [player.player_id for player in select_core_assets(players, 9)] == ["p1", "p0"]


def test_ties_keep_input_order_and_selection_is_idempotent():
    players = _roster([10, 30, 10, 30, 10])
    selected = select_core_assets(players, 0)
    assert [player.player_id for player in selected] == ["p1", "p3", "p0"]
    assert select_core_assets(players, 0) == selected


def test_describe_core_assets_attaches_age_curve():
    assets = describe_core_assets(_roster([10]))
    assert assets[0].age_curve.zone == "Prime"


ROSTER_POSITIONS = ["QB", "RB", "RB", "WR", "WR", "TE", "FLEX", "BN"]


def _needs_roster() -> list[PlayerRecord]:
    players = [PlayerRecord(player_id="q1", position="QB", value=50)]
    players += [
        PlayerRecord(player_id=f"r{idx}", position="RB", value=value)
        for idx, value in enumerate([90, 80, 70, 60, 50, 40, 30], start=1)
    ]
    players += [
        PlayerRecord(player_id=f"w{idx}", position="WR", value=value)
        for idx, value in enumerate([85, 75, 65, 55], start=1)
    ]
    players += [
        PlayerRecord(player_id=f"t{idx}", position="TE", value=value)
        for idx, value in enumerate([20, 15, 10], start=1)
    ]
    return players


def test_position_needs():
    players = _needs_roster()
    lineup = compute_optimal_lineup(players, ROSTER_POSITIONS)
    league_values = {
        "QB": [50, 100, 200],
        "RB": [420, 10, 20],
        "WR": [280, 0, 10000, 20000],
        "TE": [45],
    }
    needs = compute_position_needs(players, ROSTER_POSITIONS, lineup, league_values)

    by_position = {need.position: need for need in needs.positions}
    assert by_position["QB"].target == 2
    assert by_position["RB"].target == 4
    assert by_position["TE"].target == 3
    assert by_position["QB"].status == "shallow"
    assert by_position["RB"].status == "surplus"
    assert by_position["WR"].status == "balanced"
    assert by_position["TE"].status == "balanced"
    assert needs.shallow_positions == ["QB"]
    assert needs.surplus_positions == ["RB"]
    assert needs.weakest_slot == "TE"
    assert [player.player_id for player in needs.surplus_players] == ["r4", "r5", "r6"]
    assert needs.surplus_players[0].surplus_score == pytest.approx(45)


def test_weakest_slot_edges():
    assert weakest_slot([], ["QB", "RB"]) == "QB"
    assert weakest_slot([], ["BN", "IR"]) is None
