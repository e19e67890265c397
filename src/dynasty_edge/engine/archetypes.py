"""First-match archetype classification over percentile axes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Literal, Optional

from dynasty_edge.config.archetypes import DEFAULT_ARCHETYPE_CONFIG, ArchetypeConfig

from .rounding import round_half_up


ArchetypeLabel = Literal[
    "Dynasty Juggernaut",
    "All-In Contender",
    "Fragile Contender",
    "Productive Struggle",
    "Rebuilder",
    "Dead Zone",
    "Competitor",
]

DEFAULT_ARCHETYPE: ArchetypeLabel = "Competitor"

MAX_REASONS = 4


@dataclass(frozen=True)
class ArchetypeInputs:
    power_pct: float
    window_pct: float
    draft_pct: float
    max_pf_pct: Optional[float] = None

    @property
    def low_now_pct(self) -> float:
        """Current production percentile, falling back to power when absent."""

        return self.power_pct if self.max_pf_pct is None else self.max_pf_pct


@dataclass(frozen=True)
class ArchetypeResult:
    archetype: ArchetypeLabel
    reasons: list[str]


Rule = tuple[ArchetypeLabel, Callable[[ArchetypeInputs, ArchetypeConfig], bool]]

# Order matters: the first matching rule decides the label.
ARCHETYPE_RULES: tuple[Rule, ...] = (
    (
        "Dynasty Juggernaut",
        lambda x, c: x.power_pct > c.dynastyJuggernaut.powerMin
        and x.window_pct > c.dynastyJuggernaut.windowMin,
    ),
    (
        "All-In Contender",
        lambda x, c: x.power_pct > c.allInContender.powerMin
        and x.draft_pct < c.allInContender.draftMax,
    ),
    (
        "Fragile Contender",
        lambda x, c: x.power_pct > c.fragileContender.powerMin
        and x.window_pct < c.fragileContender.windowMax,
    ),
    (
        "Productive Struggle",
        lambda x, c: x.low_now_pct < c.productiveStruggle.lowNowMax
        and x.draft_pct > c.productiveStruggle.draftMin
        and x.window_pct > c.productiveStruggle.windowMin,
    ),
    (
        "Rebuilder",
        lambda x, c: x.power_pct < c.rebuilder.powerMax,
    ),
    (
        # Inclusive power band, strict elsewhere.
        "Dead Zone",
        lambda x, c: c.deadZone.powerMin <= x.power_pct <= c.deadZone.powerMax
        and x.draft_pct < c.deadZone.draftMax
        and x.window_pct < c.deadZone.windowMax,
    ),
)

ARCHETYPES: tuple[ArchetypeLabel, ...] = tuple(label for label, _ in ARCHETYPE_RULES) + (DEFAULT_ARCHETYPE,)


def _ordinal(value: float) -> str:
    number = int(round_half_up(value))
    if 10 <= number % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


def _power_bucket(pct: float) -> str:
    if pct >= 80:
        return "elite starters"
    if pct >= 60:
        return "strong starters"
    if pct >= 40:
        return "average starters"
    return "weak starters"


def _window_bucket(pct: float) -> str:
    if pct >= 70:
        return "young core"
    if pct >= 50:
        return "prime window"
    if pct >= 30:
        return "aging core"
    return "declining core"


def _draft_bucket(pct: float) -> str:
    if pct >= 70:
        return "loaded with picks"
    if pct >= 50:
        return "decent capital"
    if pct >= 30:
        return "low capital"
    return "no ammo"


def _max_pf_bucket(pct: float) -> str:
    if pct < 30:
        return "intentional tank profile"
    if pct < 50:
        return "underperforming"
    return "competitive"


def archetype_reasons(inputs: ArchetypeInputs) -> list[str]:
    """Describe each axis in fixed order: power, window, draft, max PF."""

    reasons = [
        f"Power {_ordinal(inputs.power_pct)} pct ({_power_bucket(inputs.power_pct)})",
        f"Window {_ordinal(inputs.window_pct)} pct ({_window_bucket(inputs.window_pct)})",
        f"Draft {_ordinal(inputs.draft_pct)} pct ({_draft_bucket(inputs.draft_pct)})",
    ]
    if inputs.max_pf_pct is not None:
        reasons.append(f"MaxPF {_ordinal(inputs.max_pf_pct)} pct ({_max_pf_bucket(inputs.max_pf_pct)})")
    return reasons[:MAX_REASONS]


def match_archetype(inputs: ArchetypeInputs, config: ArchetypeConfig = DEFAULT_ARCHETYPE_CONFIG) -> ArchetypeLabel:
    for label, predicate in ARCHETYPE_RULES:
        if predicate(inputs, config):
            return label
    return DEFAULT_ARCHETYPE


def classify_archetype(
    power_pct: float,
    draft_pct: float,
    window_pct: float,
    max_pf_pct: Optional[float] = None,
    config: ArchetypeConfig | None = None,
) -> ArchetypeResult:
    if max_pf_pct is not None and not math.isfinite(max_pf_pct):
        max_pf_pct = None
    inputs = ArchetypeInputs(
        power_pct=power_pct,
        window_pct=window_pct,
        draft_pct=draft_pct,
        max_pf_pct=max_pf_pct,
    )
    return ArchetypeResult(
        archetype=match_archetype(inputs, config or DEFAULT_ARCHETYPE_CONFIG),
        reasons=archetype_reasons(inputs),
    )
