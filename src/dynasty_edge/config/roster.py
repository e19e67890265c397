"""Slot rules for dynasty league roster formats."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Mapping, Sequence, Tuple


# Slots that never hold a starter. Every other label, including labels the
# platform adds later, is treated as a starting slot.
RESERVED_SLOTS: FrozenSet[str] = frozenset({"BN", "IR", "TAXI"})

SCORED_POSITIONS: Tuple[str, ...] = ("QB", "RB", "WR", "TE")


@dataclass(frozen=True)
class SlotRule:
    slot: str
    eligible: Tuple[str, ...]


_SLOT_RULES: Dict[str, SlotRule] = {
    rule.slot: rule
    for rule in (
        SlotRule("QB", ("QB",)),
        SlotRule("RB", ("RB",)),
        SlotRule("WR", ("WR",)),
        SlotRule("TE", ("TE",)),
        SlotRule("K", ("K",)),
        SlotRule("DEF", ("DEF",)),
        SlotRule("FLEX", ("RB", "WR", "TE")),
        SlotRule("SUPER_FLEX", ("QB", "RB", "WR", "TE")),
        SlotRule("REC_FLEX", ("WR", "TE")),
        SlotRule("WRRB_FLEX", ("WR", "RB")),
        SlotRule("IDP_FLEX", ("DL", "LB", "DB")),
    )
}

_DEFAULT_ELIGIBLE: Tuple[str, ...] = ("QB", "RB", "WR", "TE")

_POSITION_ALIASES: Mapping[str, str] = {
    "DST": "DEF",
    "D/ST": "DEF",
    "D": "DEF",
    "PK": "K",
}


def normalize_position(position: str | None) -> str:
    """Upper-case a position label and fold common aliases."""

    key = (position or "").strip().upper()
    return _POSITION_ALIASES.get(key, key)


def is_starter_slot(slot: str) -> bool:
    return slot not in RESERVED_SLOTS


def starter_slots(roster_positions: Iterable[str]) -> list[str]:
    return [slot for slot in roster_positions if is_starter_slot(slot)]


def count_starter_slots(roster_positions: Iterable[str]) -> int:
    return len(starter_slots(roster_positions))


def eligible_positions(slot: str) -> Tuple[str, ...]:
    """Positions that may fill ``slot``; unknown labels accept offensive skill players."""

    rule = _SLOT_RULES.get(slot.upper())
    if rule is None:
        return _DEFAULT_ELIGIBLE
    return rule.eligible


def is_superflex_from_positions(roster_positions: Sequence[str]) -> bool:
    """A league is superflex with a SUPER_FLEX slot or at least two QB slots."""

    if "SUPER_FLEX" in roster_positions:
        return True
    return sum(1 for slot in roster_positions if slot == "QB") >= 2


def slot_demand(roster_positions: Iterable[str], *, share: float = 1.0) -> Dict[str, float]:
    """Sum how many starting slots each position can fill.

    Multi-position slots contribute ``share`` to every eligible position.
    """

    demand: Dict[str, float] = {}
    for slot in starter_slots(roster_positions):
        for position in eligible_positions(slot):
            demand[position] = demand.get(position, 0.0) + share
    return demand
