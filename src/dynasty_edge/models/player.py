"""Canonical player and pick models shared across the engine and API layers."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from dynasty_edge.config.roster import normalize_position


class PlayerRecord(BaseModel):
    """Rostered player with an externally priced trade value."""

    player_id: str = Field(..., min_length=1)
    full_name: str = ""
    position: str = ""
    age: Optional[int] = Field(default=None, ge=0)
    value: float = Field(default=0.0, ge=0.0)

    model_config = ConfigDict(frozen=True)

    @field_validator("position", mode="before")
    @classmethod
    def _normalize_position(cls, value: object) -> str:
        return normalize_position(value if isinstance(value, str) else None)

    @property
    def has_value(self) -> bool:
        return self.value > 0


class DraftPickRecord(BaseModel):
    """Future rookie draft pick owned by a roster."""

    season: int
    round: int = Field(..., ge=1)
    original_roster_id: Optional[int] = None
    value: Optional[float] = Field(default=None, ge=0.0)

    model_config = ConfigDict(frozen=True)
