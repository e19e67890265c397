"""League snapshot models consumed by a scoring pass."""

from __future__ import annotations

import math
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.config import ConfigDict

from .player import DraftPickRecord, PlayerRecord


class RosterSnapshot(BaseModel):
    roster_id: int
    owner_id: Optional[str] = None
    display_name: str = ""
    players: List[PlayerRecord] = Field(default_factory=list)
    draft_picks: List[DraftPickRecord] = Field(default_factory=list)
    max_pf: Optional[float] = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _default_display_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("display_name"):
            data = {**data, "display_name": f"Team {data.get('roster_id')}"}
        return data

    @field_validator("max_pf")
    @classmethod
    def _drop_non_finite_max_pf(cls, value: Optional[float]) -> Optional[float]:
        # NaN or infinite production carries no signal.
        if value is None or not math.isfinite(value):
            return None
        return value


class LeagueSnapshot(BaseModel):
    """Everything the engine needs to score one league."""

    league_id: str = ""
    season: int
    roster_positions: List[str] = Field(default_factory=list)
    rosters: List[RosterSnapshot] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
