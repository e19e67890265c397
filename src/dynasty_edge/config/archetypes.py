"""Threshold configuration for the archetype classifier."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


Percentile = float


class _Thresholds(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class DynastyJuggernautThresholds(_Thresholds):
    powerMin: Percentile = Field(default=80, ge=0, le=100)
    windowMin: Percentile = Field(default=70, ge=0, le=100)


class AllInContenderThresholds(_Thresholds):
    powerMin: Percentile = Field(default=75, ge=0, le=100)
    draftMax: Percentile = Field(default=40, ge=0, le=100)


class FragileContenderThresholds(_Thresholds):
    powerMin: Percentile = Field(default=70, ge=0, le=100)
    windowMax: Percentile = Field(default=40, ge=0, le=100)


class ProductiveStruggleThresholds(_Thresholds):
    lowNowMax: Percentile = Field(default=40, ge=0, le=100)
    draftMin: Percentile = Field(default=70, ge=0, le=100)
    windowMin: Percentile = Field(default=60, ge=0, le=100)


class RebuilderThresholds(_Thresholds):
    powerMax: Percentile = Field(default=30, ge=0, le=100)


class DeadZoneThresholds(_Thresholds):
    powerMin: Percentile = Field(default=40, ge=0, le=100)
    powerMax: Percentile = Field(default=60, ge=0, le=100)
    draftMax: Percentile = Field(default=50, ge=0, le=100)
    windowMax: Percentile = Field(default=50, ge=0, le=100)


class ArchetypeConfig(BaseModel):
    """Percentile cut points for every archetype rule."""

    dynastyJuggernaut: DynastyJuggernautThresholds = Field(default_factory=DynastyJuggernautThresholds)
    allInContender: AllInContenderThresholds = Field(default_factory=AllInContenderThresholds)
    fragileContender: FragileContenderThresholds = Field(default_factory=FragileContenderThresholds)
    productiveStruggle: ProductiveStruggleThresholds = Field(default_factory=ProductiveStruggleThresholds)
    rebuilder: RebuilderThresholds = Field(default_factory=RebuilderThresholds)
    deadZone: DeadZoneThresholds = Field(default_factory=DeadZoneThresholds)

    model_config = ConfigDict(frozen=True, extra="forbid")

    def with_overrides(self, overrides: Mapping[str, Mapping[str, Any]] | None) -> "ArchetypeConfig":
        """Return a copy with nested threshold groups updated key by key."""

        if not overrides:
            return self
        payload = self.model_dump()
        for group, values in overrides.items():
            current = payload.get(group)
            if isinstance(current, dict) and isinstance(values, Mapping):
                current.update(values)
            else:
                payload[group] = values
        return ArchetypeConfig.model_validate(payload)


DEFAULT_ARCHETYPE_CONFIG = ArchetypeConfig()
