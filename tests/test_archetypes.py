import itertools
import random

import pytest

from dynasty_edge.config import DEFAULT_ARCHETYPE_CONFIG, ArchetypeConfig
from dynasty_edge.engine import ARCHETYPES, classify_archetype
from dynasty_edge.engine.archetypes import _ordinal


@pytest.mark.parametrize(
    ("power", "draft", "window", "max_pf", "expected"),
    [
        (85, 30, 75, None, "Dynasty Juggernaut"),
        (80, 30, 75, None, "All-In Contender"),
        (78, 50, 50, None, "Competitor"),
        (72, 50, 30, None, "Fragile Contender"),
        (20, 80, 65, None, "Productive Struggle"),
        (45, 80, 65, 10, "Productive Struggle"),
        (20, 80, 65, 60, "Rebuilder"),
        (29.9, 50, 50, None, "Rebuilder"),
        (30, 10, 10, None, "Competitor"),
        (40, 49, 49, None, "Dead Zone"),
        (60, 49, 49, None, "Dead Zone"),
        (60.1, 49, 49, None, "Competitor"),
        (50, 50, 49, None, "Competitor"),
        (50, 50, 50, None, "Competitor"),
    ],
)
def test_first_match_rules(power, draft, window, max_pf, expected):
    assert classify_archetype(power, draft, window, max_pf).archetype == expected


def test_non_finite_max_pf_is_ignored():
    result = classify_archetype(20, 80, 65, float("nan"))
    assert result.archetype == "Productive Struggle"
    assert len(result.reasons) == 3


def test_reasons_follow_axis_order():
    result = classify_archetype(power_pct=85, draft_pct=30, window_pct=75, max_pf_pct=22)
    assert result.reasons == [
        "Power 85th pct (elite starters)",
        "Window 75th pct (young core)",
        "Draft 30th pct (low capital)",
        "MaxPF 22nd pct (intentional tank profile)",
    ]


def test_reasons_without_max_pf():
    result = classify_archetype(power_pct=45, draft_pct=10, window_pct=55)
    assert [reason.split()[0] for reason in result.reasons] == ["Power", "Window", "Draft"]
    assert result.reasons[2] == "Draft 10th pct (no ammo)"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"), (13, "13th"), (21, "21st"), (62.5, "63rd"), (0, "0th")],
)
def test_ordinals(value, expected):
    assert _ordinal(value) == expected


def test_overrides_change_thresholds():
    config = DEFAULT_ARCHETYPE_CONFIG.with_overrides({"dynastyJuggernaut": {"powerMin": 90}})
    assert config.dynastyJuggernaut.powerMin == 90
    assert config.dynastyJuggernaut.windowMin == 70
    assert classify_archetype(85, 30, 75, config=config).archetype == "All-In Contender"


def test_overrides_reject_unknown_keys():
    with pytest.raises(ValueError):
        DEFAULT_ARCHETYPE_CONFIG.with_overrides({"rebuilder": {"powerCeiling": 20}})


def test_classification_is_total_over_random_inputs():
    rng = random.Random(7)
    for _ in range(500):
        overrides = {
            group: {key: rng.uniform(0, 100) for key in values}
            for group, values in DEFAULT_ARCHETYPE_CONFIG.model_dump().items()
        }
        config = ArchetypeConfig.model_validate(overrides)
        max_pf = rng.choice([None, rng.uniform(0, 100)])
        result = classify_archetype(
            rng.uniform(0, 100), rng.uniform(0, 100), rng.uniform(0, 100), max_pf, config=config
        )
        assert result.archetype in ARCHETYPES
        assert len(result.reasons) == (3 if max_pf is None else 4)


def _boundary_values() -> list[float]:
    values = {0.0, 100.0}
    for group in DEFAULT_ARCHETYPE_CONFIG.model_dump().values():
        values.update(float(threshold) for threshold in group.values())
    return sorted(values)


def test_classification_is_total_on_boundaries():
    values = _boundary_values()
    assert {0.0, 30.0, 40.0, 50.0, 60.0, 70.0, 75.0, 80.0, 100.0} <= set(values)
    for power, window, draft in itertools.product(values, repeat=3):
        for max_pf in [None, *values]:
            result = classify_archetype(power, draft, window, max_pf)
            assert result.archetype in ARCHETYPES
            assert len(result.reasons) == (3 if max_pf is None else 4)
