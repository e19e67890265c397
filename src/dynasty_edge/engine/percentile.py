"""Percentile ranks across a league population."""

from __future__ import annotations

from statistics import median
from typing import Iterable, Optional, Sequence

NEUTRAL_PERCENTILE = 50.0


def percentile_rank(population: Sequence[float], value: float) -> float:
    """Share of ``population`` strictly below ``value``, scaled to 0-100.

    Tied values all receive the rank of the lowest tied member. Populations of
    zero or one member carry no spread and return the neutral midpoint.
    """

    size = len(population)
    if size <= 1:
        return NEUTRAL_PERCENTILE
    below = sum(1 for member in population if member < value)
    return 100.0 * below / size


def percentile_ranks(values: Sequence[float]) -> list[float]:
    """Rank every member of ``values`` against the full, fixed population."""

    population = tuple(values)
    return [percentile_rank(population, value) for value in population]


def optional_percentile_ranks(values: Sequence[Optional[float]]) -> list[Optional[float]]:
    """Rank the members that are present; absent members stay absent."""

    population = tuple(value for value in values if value is not None)
    return [None if value is None else percentile_rank(population, value) for value in values]


def summarize(values: Iterable[float]) -> dict[str, float]:
    """Min, max and median of a population, zeroed when empty."""

    ordered = sorted(values)
    if not ordered:
        return {"min": 0.0, "max": 0.0, "median": 0.0}
    return {"min": float(ordered[0]), "max": float(ordered[-1]), "median": float(median(ordered))}
