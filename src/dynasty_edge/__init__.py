"""Dynasty league analytics: power percentiles, team archetypes and trade needs."""

__version__ = "0.1.0"
