"""Lightweight REST client for the dynasty edge API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def build_overrides(raw: str) -> dict | None:
    if not raw:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid override JSON: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the dynasty edge REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("snapshot", type=Path, nargs="?", help="League snapshot JSON")
    parser.add_argument("--weights", default="", help="JSON composite weights")
    parser.add_argument("--archetypes", default="", help="JSON archetype threshold overrides")
    parser.add_argument("--age-curve", nargs=2, metavar=("POSITION", "AGE"), help="Look up one age curve status and exit")
    parser.add_argument("--defaults", action="store_true", help="Print default archetype thresholds and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.defaults:
            resp = client.get("/archetypes/defaults")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return
        if args.age_curve:
            position, age = args.age_curve
            resp = client.post("/age-curve", json={"position": position, "age": float(age)})
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.snapshot is None:
            raise SystemExit("snapshot file is required unless using --defaults/--age-curve")

        body = {
            "snapshot": json.loads(args.snapshot.read_text(encoding="utf-8")),
            "weights": build_overrides(args.weights),
            "archetypes": build_overrides(args.archetypes),
        }
        resp = client.post("/leagues/axes", json=body)
        if resp.status_code == 400:
            raise SystemExit(resp.json().get("detail", "invalid configuration"))
        resp.raise_for_status()
        payload = resp.json()
        print(f"Weights: {payload['weights']}{' (default)' if payload['weights_defaulted'] else ''}")
        for team in payload["teams"]:
            print(f"{team['display_name']}: {team['archetype']}")
            for reason in team["reasons"]:
                print(f"  - {reason}")


if __name__ == "__main__":
    main()
