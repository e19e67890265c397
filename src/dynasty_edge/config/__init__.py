"""Configuration helpers for slot rules, age curves and archetype thresholds."""

from .age_curves import AgeCurve, default_curves, get_curve, iter_curves, merge_curves
from .archetypes import DEFAULT_ARCHETYPE_CONFIG, ArchetypeConfig
from .errors import InvalidConfigurationError
from .roster import (
    RESERVED_SLOTS,
    SCORED_POSITIONS,
    count_starter_slots,
    eligible_positions,
    is_starter_slot,
    is_superflex_from_positions,
    normalize_position,
    slot_demand,
    starter_slots,
)

__all__ = [
    "AgeCurve",
    "ArchetypeConfig",
    "DEFAULT_ARCHETYPE_CONFIG",
    "InvalidConfigurationError",
    "RESERVED_SLOTS",
    "SCORED_POSITIONS",
    "count_starter_slots",
    "default_curves",
    "eligible_positions",
    "get_curve",
    "is_starter_slot",
    "is_superflex_from_positions",
    "iter_curves",
    "merge_curves",
    "normalize_position",
    "slot_demand",
    "starter_slots",
]
