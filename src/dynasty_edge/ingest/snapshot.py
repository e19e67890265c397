"""Load league snapshots from JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

from pydantic import ValidationError

from dynasty_edge.models import LeagueSnapshot


logger = logging.getLogger(__name__)


def parse_snapshot(payload: Any) -> LeagueSnapshot:
    """Validate one decoded snapshot payload."""

    try:
        return LeagueSnapshot.model_validate(payload)
    except ValidationError as exc:
        raise ValueError(f"Invalid league snapshot: {exc}") from exc


def load_snapshots(path: Path) -> List[LeagueSnapshot]:
    """Read a file holding one snapshot object or a list of them."""

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path} is not valid JSON: {exc}") from exc

    items = data if isinstance(data, list) else [data]
    snapshots = [parse_snapshot(item) for item in items]
    logger.info(
        "Loaded %s snapshot(s) from %s with %s rosters",
        len(snapshots),
        path,
        sum(len(snapshot.rosters) for snapshot in snapshots),
    )
    return snapshots


def load_snapshot(path: Path) -> LeagueSnapshot:
    snapshots = load_snapshots(path)
    if len(snapshots) != 1:
        raise ValueError(f"{path} holds {len(snapshots)} snapshots; expected exactly one")
    return snapshots[0]
