"""Command-line interface for scoring league snapshots."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from dynasty_edge.api.schemas import LeagueAxesResponse
from dynasty_edge.config import InvalidConfigurationError
from dynasty_edge.config_loader import EngineProfile
from dynasty_edge.engine import score_leagues
from dynasty_edge.ingest import load_snapshots


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Score dynasty league snapshots")
    parser.add_argument("snapshots", type=Path, nargs="+", help="League snapshot JSON files")
    parser.add_argument("--profile", type=Path, default=None, help="Engine profile JSON with tuning overrides")
    parser.add_argument(
        "--weights",
        default=None,
        help='Composite weights JSON, e.g. \'{"starters": 50, "bench": 10, "picks": 20, "depth": 15, "age": 5}\'',
    )
    parser.add_argument("--save-profile", type=Path, default=None, help="Save the effective profile JSON")
    parser.add_argument("--output", type=Path, default=Path("league_axes.json"), help="Output JSON path")
    parser.add_argument("--jobs", type=int, default=1, help="Worker processes for multi-league runs")
    parser.add_argument("--verbose", action="store_true", help="Log engine progress")
    return parser.parse_args()


def _parse_weights(raw: str | None) -> dict | None:
    if not raw:
        return None
    try:
        weights = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid weights JSON: {exc}") from exc
    if not isinstance(weights, dict):
        raise SystemExit("Weights must be a JSON object")
    return weights


def main() -> None:
    args = _parse_args()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    profile = EngineProfile.load(args.profile) if args.profile else EngineProfile()
    weights = _parse_weights(args.weights)
    if weights is not None:
        profile = profile.merged_with(EngineProfile(weights=weights))

    if args.save_profile:
        profile.save(args.save_profile)
        print(f"Saved engine profile to {args.save_profile}")

    snapshots = []
    for path in args.snapshots:
        try:
            snapshots.extend(load_snapshots(path))
        except (OSError, ValueError) as exc:
            raise SystemExit(f"Unable to load {path}: {exc}") from exc

    try:
        results = score_leagues(
            snapshots,
            config=profile.archetypes or None,
            weights=profile.weights,
            curves=profile.age_curves or None,
            max_workers=max(1, args.jobs),
        )
    except InvalidConfigurationError as exc:
        raise SystemExit(f"Invalid configuration: {exc}") from exc

    payload = [LeagueAxesResponse.from_result(result).model_dump() for result in results]
    args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    for result in results:
        print(f"League {result.league_id or '-'} ({result.season}): {len(result.teams)} teams")
        for axes in sorted(result.teams, key=lambda team: team.starters.pct, reverse=True):
            flag = " [low confidence]" if axes.low_confidence else ""
            print(f"  {axes.display_name}: {axes.archetype} (power {axes.starters.pct:.0f}){flag}")
    print(f"Wrote {len(results)} league result(s) to {args.output}")


if __name__ == "__main__":
    main()
