import math

import pytest

from dynasty_edge.config import AgeCurve, merge_curves
from dynasty_edge.engine import age_curve_status
from dynasty_edge.engine.age_curve import UNKNOWN_SCORE, dot_position, prime_label


@pytest.mark.parametrize("position", ["QB", "RB", "WR", "TE", "K", "DEF", ""])
def test_missing_age_is_unknown(position):
    status = age_curve_status(position, None)
    assert status.zone == "Unknown"
    assert status.score == UNKNOWN_SCORE
    assert status.color == "gray"
    assert status.prime_window is None


@pytest.mark.parametrize("age", [float("nan"), float("inf"), "old", True])
def test_unusable_age_is_unknown(age):
    assert age_curve_status("WR", age).zone == "Unknown"


@pytest.mark.parametrize(
    ("position", "age", "zone", "score"),
    [
        ("RB", 22, "Ascent", 90),
        ("RB", 23, "Prime", 100),
        ("RB", 26, "Prime", 100),
        ("RB", 27, "Decline", 85),
        ("RB", 29, "Cliff", 45),
        ("WR", 31, "Decline", 70),
        ("WR", 32, "Cliff", 45),
        ("TE", 24, "Ascent", 85),
        ("TE", 33, "Cliff", 45),
        ("QB", 25, "Ascent", 90),
        ("QB", 36, "Decline", 85),
        ("QB", 40, "Cliff", 55),
    ],
)
def test_zones_and_scores(position, age, zone, score):
    status = age_curve_status(position, age)
    assert status.zone == zone
    assert status.score == score


def test_prime_label_and_color():
    status = age_curve_status("wr", 25)
    assert status.position_bucket == "WR"
    assert status.label == "Prime (24-28)"
    assert status.color == "gold"
    assert (status.prime_start, status.prime_end) == (24, 28)
    assert age_curve_status("RB", 30).color == "red"
    assert age_curve_status("RB", 21).color == "green"
    assert age_curve_status("RB", 28).color == "orange"
    assert prime_label("QB") == "Prime (26-33)"
    assert prime_label("K") == "Unknown"


def test_young_player_below_table_uses_youngest_score():
    status = age_curve_status("RB", 18)
    assert status.zone == "Ascent"
    assert status.score == 60


def test_fractional_age_is_floored():
    status = age_curve_status("RB", 26.9)
    assert status.age == 26
    assert status.zone == "Prime"


def test_unsupported_position_with_age():
    status = age_curve_status("K", 30)
    assert status.zone == "Unknown"
    assert status.age == 30


def test_dot_position_is_clamped():
    assert dot_position(None) == 0.0
    assert dot_position(15) == 0.0
    assert dot_position(20) == 0.0
    assert dot_position(29) == pytest.approx(0.5)
    assert dot_position(45) == 1.0
    for age in range(0, 60):
        assert 0.0 <= age_curve_status("WR", age).dot_pct <= 1.0


def test_merge_curves_applies_partial_override():
    curves = merge_curves({"rb": {"cliff_age": 28, "cliff_score": 30}})
    assert curves["RB"].cliff_age == 28
    assert curves["RB"].prime_start == 23
    assert curves["WR"].cliff_age == 32
    status = age_curve_status("RB", 28, curves)
    assert status.zone == "Cliff"
    assert status.score == 30


def test_curve_rejects_inverted_window():
    with pytest.raises(ValueError):
        AgeCurve(position="RB", prime_start=27, prime_end=25, cliff_age=29, cliff_score=40)


def test_scores_are_always_finite():
    for position in ("QB", "RB", "WR", "TE", "K"):
        for age in (None, 0, 19, 25, 33, 50):
            assert math.isfinite(age_curve_status(position, age).score)
