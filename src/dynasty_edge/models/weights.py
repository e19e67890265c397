"""Composite score weights supplied by callers."""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


class EdgeEngineWeights(BaseModel):
    """Relative weight of each power-ranking axis.

    Weights are nominally out of 100 but only their ratios matter.
    """

    starters: float = Field(default=45, ge=0.0)
    bench: float = Field(default=15, ge=0.0)
    picks: float = Field(default=15, ge=0.0)
    depth: float = Field(default=20, ge=0.0)
    age: float = Field(default=5, ge=0.0)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def _require_positive_total(self) -> "EdgeEngineWeights":
        if self.total <= 0:
            raise ValueError("at least one weight must be greater than zero")
        return self

    @property
    def total(self) -> float:
        return self.starters + self.bench + self.picks + self.depth + self.age

    def as_dict(self) -> Dict[str, float]:
        return self.model_dump()


DEFAULT_WEIGHTS = EdgeEngineWeights()
