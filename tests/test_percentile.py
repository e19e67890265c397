import pytest

from dynasty_edge.engine.percentile import (
    optional_percentile_ranks,
    percentile_rank,
    percentile_ranks,
    summarize,
)


def test_small_populations_are_neutral():
    assert percentile_rank([], 10) == 50
    assert percentile_rank([42], 42) == 50
    assert percentile_rank([42], 1000) == 50


def test_ties_share_the_lowest_rank():
    population = [10, 20, 20, 30]
    assert percentile_rank(population, 20) == pytest.approx(25.0)
    assert percentile_rank(population, 10) == 0
    assert percentile_rank(population, 30) == pytest.approx(75.0)


def test_ranks_stay_in_range_and_follow_order():
    values = [5.0, 80.0, 12.5, 80.0, 0.0, 44.0]
    ranks = percentile_ranks(values)
    assert all(0 <= rank < 100 for rank in ranks)
    for a, rank_a in zip(values, ranks):
        for b, rank_b in zip(values, ranks):
            if a < b:
                assert rank_a < rank_b


def test_optional_ranks_only_rank_present_members():
    ranks = optional_percentile_ranks([100.0, None, 50.0, 75.0])
    assert ranks[1] is None
    assert ranks[0] == pytest.approx(200 / 3)
    assert ranks[2] == 0


def test_summarize():
    assert summarize([]) == {"min": 0.0, "max": 0.0, "median": 0.0}
    assert summarize([3, 1, 2]) == {"min": 1.0, "max": 3.0, "median": 2.0}
