"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from ezestimator.engine import ENGINE_VERSION
from ezestimator.exceptions import InputContractError, ParameterValidationError
from ezestimator.models.project import (  # noqa: TCH001 (FastAPI resolves at runtime)
    ProjectDimensions,
    ProjectParameters,
    parse_parameters,
)

if TYPE_CHECKING:
    from ezestimator.engine import EstimationEngine
    from ezestimator.models.estimate import EstimationResult

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = "http://localhost:3000"


def _cors_origins() -> list[str]:
    raw = os.environ.get("EZESTIMATOR_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def _configure_logging() -> None:
    level = os.environ.get("EZESTIMATOR_LOG_LEVEL")
    if level:
        logging.getLogger().setLevel(level.upper())


def _estimate_payload(result: EstimationResult) -> dict[str, Any]:
    return {
        "estimate": result.model_dump(mode="json"),
        "summary_dict": result.to_summary_dict(),
        "export_dict": result.to_export_dict(),
    }


def sample_parameters() -> ProjectParameters:
    """A plain 20' x 20' broom-finished driveway with no extras."""
    return ProjectParameters(
        dimensions=ProjectDimensions(length=20.0, width=20.0),
        notes="Sample estimate",
    )


def create_app(*, engine: EstimationEngine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built engine for dependency injection (e.g. tests).
        If not provided, one is created via create_default_engine on first
        request.
    """
    _configure_logging()

    app = FastAPI(title="EZ Estimator", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.engine = engine

    def _get_engine() -> EstimationEngine:
        eng: EstimationEngine | None = app.state.engine
        if eng is not None:
            return eng
        from ezestimator.factory import create_default_engine

        eng = create_default_engine()
        app.state.engine = eng
        return eng

    @app.exception_handler(ParameterValidationError)
    async def parameter_validation_handler(
        request: Request, exc: ParameterValidationError,
    ) -> JSONResponse:
        logger.warning("Rejected project parameters: %s", exc)
        return JSONResponse(
            status_code=422,
            content={
                "detail": [
                    {"field": e.field, "constraint": e.constraint} for e in exc.errors
                ],
            },
        )

    @app.exception_handler(InputContractError)
    async def input_contract_handler(
        request: Request, exc: InputContractError,
    ) -> JSONResponse:
        logger.warning("Input contract violated: %s", exc)
        return JSONResponse(
            status_code=422,
            content={"detail": [{"field": exc.field, "constraint": exc.constraint}]},
        )

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(params: ProjectParameters) -> dict[str, Any]:
        result = _get_engine().estimate(params)
        return _estimate_payload(result)

    # ------------------------------------------------------------------
    # POST /api/validate
    # ------------------------------------------------------------------

    @app.post("/api/validate")
    def validate(payload: dict[str, Any]) -> dict[str, Any]:
        params = parse_parameters(payload)
        return {"valid": True, "parameters": params.model_dump(mode="json")}

    # ------------------------------------------------------------------
    # GET /api/sample-estimate
    # ------------------------------------------------------------------

    @app.get("/api/sample-estimate")
    def sample_estimate() -> dict[str, Any]:
        result = _get_engine().estimate(sample_parameters())
        return _estimate_payload(result)

    return app
