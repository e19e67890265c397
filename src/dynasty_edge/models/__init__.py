"""Pydantic models describing engine input."""

from .league import LeagueSnapshot, RosterSnapshot
from .player import DraftPickRecord, PlayerRecord
from .weights import DEFAULT_WEIGHTS, EdgeEngineWeights

__all__ = [
    "DEFAULT_WEIGHTS",
    "DraftPickRecord",
    "EdgeEngineWeights",
    "LeagueSnapshot",
    "PlayerRecord",
    "RosterSnapshot",
]
