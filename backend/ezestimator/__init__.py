"""EZ Estimator concrete project estimation engine.

Usage::

    from ezestimator import ProjectDimensions, ProjectParameters, estimate

    params = ProjectParameters(dimensions=ProjectDimensions(length=20, width=20))
    result = estimate(params)
"""

from ezestimator.data.pricing import PricingRates, ServiceRate
from ezestimator.data.rates import DEFAULT_RATES
from ezestimator.engine import EstimationEngine
from ezestimator.exceptions import (
    EstimatorError,
    FieldError,
    InputContractError,
    ParameterValidationError,
)
from ezestimator.factory import create_default_engine, estimate
from ezestimator.models.enums import (
    AccessDifficulty,
    AdditionalService,
    ConcreteStrength,
    FormworkComplexity,
    ProjectType,
    ReinforcementType,
    SlabThickness,
    SoilType,
    SurfaceFinish,
)
from ezestimator.models.estimate import (
    CostBreakdown,
    EstimateMetadata,
    EstimationResult,
    MaterialQuantities,
)
from ezestimator.models.project import (
    AdditionalServices,
    ProjectDimensions,
    ProjectParameters,
    SiteConditions,
    parse_parameters,
)

__all__ = [
    "DEFAULT_RATES",
    "AccessDifficulty",
    "AdditionalService",
    "AdditionalServices",
    "ConcreteStrength",
    "CostBreakdown",
    "EstimateMetadata",
    "EstimationEngine",
    "EstimationResult",
    "EstimatorError",
    "FieldError",
    "FormworkComplexity",
    "InputContractError",
    "MaterialQuantities",
    "ParameterValidationError",
    "PricingRates",
    "ProjectDimensions",
    "ProjectParameters",
    "ProjectType",
    "ReinforcementType",
    "ServiceRate",
    "SiteConditions",
    "SlabThickness",
    "SoilType",
    "SurfaceFinish",
    "create_default_engine",
    "estimate",
    "parse_parameters",
]
