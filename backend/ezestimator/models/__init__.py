"""Domain models for the EZ Estimator engine."""

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
    "AccessDifficulty",
    "AdditionalService",
    "AdditionalServices",
    "ConcreteStrength",
    "CostBreakdown",
    "EstimateMetadata",
    "EstimationResult",
    "FormworkComplexity",
    "MaterialQuantities",
    "ProjectDimensions",
    "ProjectParameters",
    "ProjectType",
    "ReinforcementType",
    "SiteConditions",
    "SlabThickness",
    "SoilType",
    "SurfaceFinish",
    "parse_parameters",
]
