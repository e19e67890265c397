"""Pydantic models for API I/O."""

from .axes import (
    AgeCurveRequest,
    AgeCurveResponse,
    AxisResponse,
    CoreAssetResponse,
    LeagueAxesResponse,
    PositionNeedsResponse,
    PowerRankingResponse,
    RosterAxesResponse,
    ScoreLeagueRequest,
)

__all__ = [
    "AgeCurveRequest",
    "AgeCurveResponse",
    "AxisResponse",
    "CoreAssetResponse",
    "LeagueAxesResponse",
    "PositionNeedsResponse",
    "PowerRankingResponse",
    "RosterAxesResponse",
    "ScoreLeagueRequest",
]
