"""Errors raised while resolving engine configuration."""

from __future__ import annotations


class InvalidConfigurationError(ValueError):
    """Weights, thresholds or age curves that the engine cannot score with."""
