"""Input adapters that load league snapshots from disk."""

from .snapshot import load_snapshot, load_snapshots, parse_snapshot

__all__ = ["load_snapshot", "load_snapshots", "parse_snapshot"]
