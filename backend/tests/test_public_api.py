"""Tests for the public API surface of the ezestimator package.

Verifies that consumers can import everything they need from the top-level
``ezestimator`` package, use ``create_default_engine`` for quick setup, and
round-trip estimates through JSON serialization.
"""

from __future__ import annotations

import json

import pytest

import ezestimator
from ezestimator import (
    DEFAULT_RATES,
    AdditionalServices,
    ConcreteStrength,
    EstimationEngine,
    EstimationResult,
    EstimatorError,
    InputContractError,
    ParameterValidationError,
    ProjectDimensions,
    ProjectParameters,
    ProjectType,
    ReinforcementType,
    SiteConditions,
    SlabThickness,
    SoilType,
    SurfaceFinish,
    create_default_engine,
    estimate,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _sample_patio() -> ProjectParameters:
    """Create a mid-size stamped patio for testing."""
    return ProjectParameters(
        project_type=ProjectType.PATIO,
        dimensions=ProjectDimensions(length=18.0, width=14.0, thickness=SlabThickness.SIX_INCH),
        concrete_strength=ConcreteStrength.PSI_3500,
        surface_finish=SurfaceFinish.STAMPED,
        reinforcement=ReinforcementType.WIRE_MESH,
        site_conditions=SiteConditions(slope_grade=3.0, soil_type=SoilType.LOAM),
        additional_services=AdditionalServices(grading=True, control_joints=True),
        urgency_level=7,
        travel_distance=8.0,
    )


# ---------------------------------------------------------------------------
# Import tests
# ---------------------------------------------------------------------------


class TestPublicImports:
    """All expected symbols are importable from the top-level package."""

    def test_all_names_resolve(self) -> None:
        for name in ezestimator.__all__:
            assert getattr(ezestimator, name) is not None, name

    def test_error_hierarchy(self) -> None:
        assert issubclass(ParameterValidationError, EstimatorError)
        assert issubclass(InputContractError, EstimatorError)


# ---------------------------------------------------------------------------
# create_default_engine
# ---------------------------------------------------------------------------


class TestCreateDefaultEngine:
    def test_returns_engine(self) -> None:
        engine = create_default_engine()
        assert isinstance(engine, EstimationEngine)
        assert engine.rates is DEFAULT_RATES

    def test_engine_produces_estimate(self) -> None:
        result = create_default_engine().estimate(_sample_patio())
        assert isinstance(result, EstimationResult)
        assert result.costs.total > result.costs.subtotal

    def test_matches_module_level_estimate(self) -> None:
        params = _sample_patio()
        assert create_default_engine().estimate(params) == estimate(params)

    def test_accepts_raw_mapping(self) -> None:
        result = estimate({"dimensions": {"length": 20, "width": 20}})
        assert result.costs.total == 4160.00

    def test_raw_mapping_validated(self) -> None:
        with pytest.raises(ParameterValidationError):
            estimate({"dimensions": {"length": 20, "width": 20, "thickness": 5}})


# ---------------------------------------------------------------------------
# JSON round trip
# ---------------------------------------------------------------------------


class TestJsonRoundTrip:
    def test_result_round_trips(self) -> None:
        result = estimate(_sample_patio())
        restored = EstimationResult.model_validate(json.loads(result.model_dump_json()))
        assert restored == result

    def test_parameters_round_trip(self) -> None:
        params = _sample_patio()
        restored = ProjectParameters.model_validate_json(params.model_dump_json())
        assert restored == params
