"""REST API for the dynasty edge engine."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from fastapi import FastAPI, HTTPException

from dynasty_edge.api.schemas import (
    AgeCurveRequest,
    AgeCurveResponse,
    LeagueAxesResponse,
    ScoreLeagueRequest,
)
from dynasty_edge.config import DEFAULT_ARCHETYPE_CONFIG, InvalidConfigurationError
from dynasty_edge.config_loader import EngineProfile
from dynasty_edge.engine import age_curve_status, score_league
from dynasty_edge.engine.service import resolve_age_curves


logger = logging.getLogger("uvicorn.error")

_PROFILE_ENV = "DYNASTY_EDGE_PROFILE"


def _load_profile(path: Path | None) -> EngineProfile:
    if path is None:
        raw = os.getenv(_PROFILE_ENV)
        if not raw:
            return EngineProfile()
        path = Path(raw)
    try:
        profile = EngineProfile.load(path)
    except (OSError, ValueError) as exc:
        raise RuntimeError(f"Unable to load engine profile {path}: {exc}") from exc
    logger.info("Loaded engine profile from %s", path)
    return profile


def create_app(profile_path: Path | None = None) -> FastAPI:
    app = FastAPI(title="dynasty edge engine")
    profile = _load_profile(profile_path)
    app.state.profile = profile

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/archetypes/defaults")
    async def archetype_defaults() -> dict[str, Any]:
        return DEFAULT_ARCHETYPE_CONFIG.model_dump()

    @app.post("/age-curve", response_model=AgeCurveResponse)
    async def age_curve(request: AgeCurveRequest) -> AgeCurveResponse:
        try:
            curves = resolve_age_curves(profile.age_curves)
        except InvalidConfigurationError as exc:
            raise HTTPException(status_code=400, detail=f"invalid configuration: {exc}") from exc
        return AgeCurveResponse.from_status(age_curve_status(request.position, request.age, curves))

    @app.post("/leagues/axes", response_model=LeagueAxesResponse)
    async def league_axes(request: ScoreLeagueRequest) -> LeagueAxesResponse:
        overrides = profile.merged_with(
            EngineProfile(
                weights=request.weights,
                archetypes=request.archetypes or {},
                age_curves=request.age_curves or {},
            )
        )
        try:
            result = score_league(
                request.snapshot,
                config=overrides.archetypes or None,
                weights=overrides.weights,
                curves=overrides.age_curves or None,
            )
        except InvalidConfigurationError as exc:
            raise HTTPException(status_code=400, detail=f"invalid configuration: {exc}") from exc
        return LeagueAxesResponse.from_result(result)

    return app
