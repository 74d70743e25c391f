"""Default pricing data for the EZ Estimator engine.

Rates are residential flatwork figures in dollars per square foot unless
noted otherwise.
"""

from ezestimator.data.pricing import PricingRates, ServiceRate
from ezestimator.models.enums import (
    AdditionalService,
    FormworkComplexity,
    ProjectType,
    ReinforcementType,
    SurfaceFinish,
)

BASE_RATES: dict[ProjectType, float] = {
    ProjectType.DRIVEWAY: 8.0,
    ProjectType.PATIO: 9.0,
    ProjectType.SIDEWALK: 8.0,
    ProjectType.POOL_DECK: 10.0,
    ProjectType.FOUNDATION: 12.0,
    ProjectType.GARAGE_FLOOR: 8.0,
    ProjectType.DECORATIVE_CONCRETE: 15.0,
    ProjectType.REPAIR: 12.0,
}

# Applied to the base cost; the finish line item is the amount above 1.0.
FINISH_MULTIPLIERS: dict[SurfaceFinish, float] = {
    SurfaceFinish.BROOM: 1.0,
    SurfaceFinish.SMOOTH: 1.1,
    SurfaceFinish.EXPOSED_AGGREGATE: 1.3,
    SurfaceFinish.STAMPED: 1.5,
    SurfaceFinish.COLORED: 1.25,
    SurfaceFinish.SEALED: 1.15,
}

REINFORCEMENT_RATES: dict[ReinforcementType, float] = {
    ReinforcementType.FIBER_MESH: 0.5,
    ReinforcementType.WIRE_MESH: 1.0,
    ReinforcementType.REBAR: 1.5,
    ReinforcementType.NONE: 0.0,
}

COMPLEXITY_MULTIPLIERS: dict[FormworkComplexity, float] = {
    FormworkComplexity.SIMPLE: 1.0,
    FormworkComplexity.MODERATE: 1.3,
    FormworkComplexity.COMPLEX: 1.6,
}

# Joint cutting is folded into pour time, so joints carry no labor.
SERVICE_RATES: dict[AdditionalService, ServiceRate] = {
    AdditionalService.DEMOLITION: ServiceRate(cost_per_sf=3.0, labor_sf_per_hour=200.0),
    AdditionalService.GRADING: ServiceRate(cost_per_sf=2.0, labor_sf_per_hour=300.0),
    AdditionalService.DRAINAGE: ServiceRate(flat_cost=1000.0, flat_labor_hours=4.0),
    AdditionalService.BASE_PREPARATION: ServiceRate(cost_per_sf=2.0, labor_sf_per_hour=250.0),
    AdditionalService.EXPANSION_JOINTS: ServiceRate(cost_per_sf=0.5),
    AdditionalService.CONTROL_JOINTS: ServiceRate(cost_per_sf=0.3),
}

DEFAULT_RATES = PricingRates(
    base_rates=BASE_RATES,
    finish_multipliers=FINISH_MULTIPLIERS,
    reinforcement_rates=REINFORCEMENT_RATES,
    complexity_multipliers=COMPLEXITY_MULTIPLIERS,
    service_rates=SERVICE_RATES,
)
