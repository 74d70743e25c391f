"""Factory functions for creating pre-configured EstimationEngine instances."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ezestimator.data.rates import DEFAULT_RATES
from ezestimator.engine import EstimationEngine

if TYPE_CHECKING:
    from ezestimator.data.pricing import PricingRates
    from ezestimator.models.estimate import EstimationResult
    from ezestimator.models.project import ProjectParameters

_DEFAULT_ENGINE = EstimationEngine(DEFAULT_RATES)


def create_default_engine(rates: PricingRates | None = None) -> EstimationEngine:
    """Create an EstimationEngine wired up with the default pricing rates.

    This is the recommended way to create an engine for typical usage.
    Pass ``rates`` to price with a different table set.

    Example::

        from ezestimator import create_default_engine

        engine = create_default_engine()
        result = engine.estimate(params)
    """
    return EstimationEngine(rates if rates is not None else DEFAULT_RATES)


def estimate(params: ProjectParameters | Mapping[str, Any]) -> EstimationResult:
    """Estimate a project with the default pricing rates."""
    return _DEFAULT_ENGINE.estimate(params)
