import logging

import pytest

from dynasty_edge.config import InvalidConfigurationError
from dynasty_edge.engine import composite_score, compute_value_weighted_window, resolve_weights
from dynasty_edge.models import DEFAULT_WEIGHTS, EdgeEngineWeights, PlayerRecord


def _player(player_id: str, position: str, age, value: float) -> PlayerRecord:
    return PlayerRecord(player_id=player_id, position=position, age=age, value=value)


def test_window_of_empty_roster_is_zero():
    window = compute_value_weighted_window([])
    assert window.raw == 0
    assert window.coverage_pct == 0


def test_window_with_no_valued_players_is_zero():
    players = [_player("a", "RB", 24, 0), _player("b", "WR", 26, 0)]
    window = compute_value_weighted_window(players)
    assert (window.raw, window.coverage_pct) == (0.0, 0.0)
    assert window.player_count == 2


def test_window_skips_unvalued_players():
    players = [
        _player("prime", "RB", 24, 100),
        _player("cliff", "RB", 29, 100),
        _player("unpriced", "WR", 22, 0),
    ]
    window = compute_value_weighted_window(players)
    assert window.raw == pytest.approx((100 * 100 + 100 * 45) / 200)
    assert window.coverage_pct == pytest.approx(200 / 3)
    assert window.eligible_count == 2


def test_window_is_value_weighted():
    players = [_player("star", "WR", 25, 9000), _player("vet", "WR", 33, 1000)]
    window = compute_value_weighted_window(players)
    assert window.raw == pytest.approx((9000 * 100 + 1000 * 45) / 10000)


def test_composite_is_weighted_mean():
    percentiles = {"starters": 100, "bench": 0, "picks": 0, "depth": 0, "age": 0}
    assert composite_score(percentiles, DEFAULT_WEIGHTS) == pytest.approx(45)
    flat = {axis: 60 for axis in ("starters", "bench", "picks", "depth", "age")}
    assert composite_score(flat, EdgeEngineWeights(starters=3, bench=1, picks=0, depth=0, age=0)) == pytest.approx(60)


def test_missing_weights_fall_back_to_defaults(caplog):
    with caplog.at_level(logging.INFO, logger="dynasty_edge.engine.composite"):
        resolved = resolve_weights(None)
    assert resolved.defaulted
    assert resolved.weights == DEFAULT_WEIGHTS
    assert "using defaults" in caplog.text


def test_supplied_weights_are_not_defaulted():
    resolved = resolve_weights({"starters": 50, "bench": 10, "picks": 20, "depth": 15, "age": 5})
    assert not resolved.defaulted
    assert resolved.weights.starters == 50


@pytest.mark.parametrize(
    "weights",
    [
        {"starters": -1, "bench": 15, "picks": 15, "depth": 20, "age": 5},
        {"starters": 0, "bench": 0, "picks": 0, "depth": 0, "age": 0},
        {"starters": 45, "bench": 15, "picks": 15, "depth": 20, "age": 5, "speed": 10},
        {"starters": "heavy", "bench": 15, "picks": 15, "depth": 20, "age": 5},
        {"starters": 100},
        {"starters": 45, "bench": 15, "picks": 15, "depth": 20},
    ],
)
def test_invalid_weights_raise(weights):
    with pytest.raises(InvalidConfigurationError):
        resolve_weights(weights)


def test_partial_weights_name_missing_axes():
    with pytest.raises(InvalidConfigurationError, match="missing bench, picks, depth, age"):
        resolve_weights({"starters": 100})


def test_zero_weight_total_scores_zero():
    weights = EdgeEngineWeights.model_construct(starters=0, bench=0, picks=0, depth=0, age=0)
    assert composite_score({"starters": 90, "age": 40}, weights) == 0.0
