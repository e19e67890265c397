"""Persist and load engine tuning profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass
class EngineProfile:
    weights: Optional[Dict[str, float]] = None
    archetypes: Dict[str, Dict[str, float]] = field(default_factory=dict)
    age_curves: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path) -> "EngineProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            weights=data.get("weights"),
            archetypes=data.get("archetypes", {}),
            age_curves=data.get("age_curves", {}),
        )

    def save(self, path: Path) -> None:
        payload = {
            "weights": self.weights,
            "archetypes": self.archetypes,
            "age_curves": self.age_curves,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def merged_with(self, other: "EngineProfile") -> "EngineProfile":
        """Overlay ``other`` on this profile; ``other`` wins per group."""

        archetypes = {group: dict(values) for group, values in self.archetypes.items()}
        for group, values in other.archetypes.items():
            archetypes.setdefault(group, {}).update(values)
        return EngineProfile(
            weights=other.weights if other.weights is not None else self.weights,
            archetypes=archetypes,
            age_curves={**self.age_curves, **other.age_curves},
        )
