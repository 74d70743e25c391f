"""Core estimation engine for EZ Estimator.

The EstimationEngine prices a concrete flatwork job with a unit-rate
methodology:

1. **Cost breakdown**: Price the slab per square foot by project type, add
   finish, reinforcement, optional services, site conditions and travel,
   then apply markup and the urgency multiplier.
2. **Material quantities**: Concrete volume with a waste factor, rounded up
   to the next 0.1 cubic yard; reinforcement area; base aggregate.
3. **Labor hours**: Production-rate hours scaled by formwork complexity, plus
   time for services, rounded up to whole hours.
4. **Equipment**: A fixed baseline plus items triggered by size and services.
5. **Recommendations**: Fixed advisory lines followed by conditional ones.

Every step is a pure function of the parameters and the pricing rates.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ezestimator.data.rates import DEFAULT_RATES
from ezestimator.exceptions import InputContractError
from ezestimator.formatting import format_number
from ezestimator.models.enums import (
    AdditionalService,
    ConcreteStrength,
    ReinforcementType,
    SlabThickness,
    SoilType,
)
from ezestimator.models.estimate import (
    CostBreakdown,
    EstimateMetadata,
    EstimationResult,
    MaterialQuantities,
)
from ezestimator.models.project import ProjectParameters, parse_parameters

if TYPE_CHECKING:
    from ezestimator.data.pricing import PricingRates

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"
PRICING_VERSION = "2025.1"

BASELINE_EQUIPMENT: tuple[str, ...] = ("Concrete Tools", "Wheelbarrow", "Levels")

_CUBIC_FEET_PER_YARD = 27
_INCHES_PER_FOOT = 12

# Products like 114.4 * 1.1 (125.84000000000002) land a hair above a whole
# cent; anything closer than this to a step boundary counts as on the boundary.
_CEIL_NOISE_DIGITS = 6


def _ceil_to(value: float, places: int) -> float:
    """Round ``value`` up to ``places`` decimal places."""
    scale = 10**places
    return math.ceil(round(value * scale, _CEIL_NOISE_DIGITS)) / scale


def _ceil_int(value: float) -> int:
    return math.ceil(round(value, _CEIL_NOISE_DIGITS))


def _rate(table: Mapping[Any, Any], key: object, field: str) -> Any:
    try:
        return table[key]
    except (KeyError, TypeError) as exc:
        msg = f"unsupported value {key!r}"
        raise InputContractError(field, msg) from exc


# ---------------------------------------------------------------------------
# Calculations
# ---------------------------------------------------------------------------


def calculate_cost_breakdown(
    params: ProjectParameters,
    rates: PricingRates = DEFAULT_RATES,
) -> CostBreakdown:
    """Itemize the project cost.

    All line items stay unrounded. Markup is taken on the subtotal, and the
    urgency multiplier applies to subtotal plus markup; the resulting total
    is rounded up to the cent.
    """
    sf = params.dimensions.square_footage
    site = params.site_conditions
    services = params.additional_services

    base_cost = sf * _rate(rates.base_rates, params.project_type, "project_type")
    finish_multiplier = _rate(rates.finish_multipliers, params.surface_finish, "surface_finish")
    finish_cost = base_cost * (finish_multiplier - 1)
    reinforcement_cost = sf * _rate(
        rates.reinforcement_rates, params.reinforcement, "reinforcement",
    )

    additional_services_cost = 0.0
    for service in services.active():
        service_rate = rates.service_rates[service]
        additional_services_cost += sf * service_rate.cost_per_sf + service_rate.flat_cost

    site_conditions_cost = 0.0
    if site.needs_excavation:
        site_conditions_cost += sf * rates.excavation_cost_per_sf
    if site.needs_haul_away:
        site_conditions_cost += sf * rates.haul_away_cost_per_sf
    site_conditions_cost += (site.slope_grade / 100) * base_cost * rates.slope_cost_factor

    travel_cost = params.travel_distance * rates.travel_cost_per_mile

    subtotal = (
        base_cost
        + finish_cost
        + reinforcement_cost
        + additional_services_cost
        + site_conditions_cost
        + travel_cost
    )
    urgency_multiplier = urgency_multiplier_for(params.urgency_level, rates)
    markup = subtotal * rates.markup_rate
    total = _ceil_to((subtotal + markup) * urgency_multiplier, 2)

    return CostBreakdown(
        base_cost=base_cost,
        finish_cost=finish_cost,
        reinforcement_cost=reinforcement_cost,
        additional_services_cost=additional_services_cost,
        site_conditions_cost=site_conditions_cost,
        travel_cost=travel_cost,
        subtotal=subtotal,
        markup=markup,
        total=total,
        markup_rate=rates.markup_rate,
        urgency_multiplier=urgency_multiplier,
    )


def urgency_multiplier_for(urgency_level: int, rates: PricingRates = DEFAULT_RATES) -> float:
    """Price inflation for rushed jobs; levels at or below the threshold are neutral."""
    return 1 + max(0, urgency_level - rates.urgency_threshold) * rates.urgency_step


def calculate_material_quantities(
    params: ProjectParameters,
    rates: PricingRates = DEFAULT_RATES,
) -> MaterialQuantities:
    """Concrete, reinforcement and base aggregate quantities.

    Concrete and aggregate are rounded up to the next tenth so the order is
    never short. Reinforcement is the slab area for any reinforced slab.
    """
    dims = params.dimensions
    area = dims.length * dims.width
    depth_ft = dims.thickness / _INCHES_PER_FOOT
    cubic_yards = (area * depth_ft) / _CUBIC_FEET_PER_YARD * rates.waste_factor

    reinforcement = area if params.reinforcement != ReinforcementType.NONE else 0.0

    return MaterialQuantities(
        concrete=_ceil_to(cubic_yards, 1),
        reinforcement=reinforcement,
        base_aggregate=_ceil_to(area * rates.base_layer_depth_ft, 1),
    )


def calculate_labor_hours(
    params: ProjectParameters,
    rates: PricingRates = DEFAULT_RATES,
) -> int:
    """Crew hours, always rounded up."""
    sf = params.dimensions.square_footage
    complexity = _rate(
        rates.complexity_multipliers,
        params.site_conditions.formwork_complexity,
        "site_conditions.formwork_complexity",
    )

    hours = sf / rates.labor_sf_per_hour
    hours *= complexity

    for service in params.additional_services.active():
        service_rate = rates.service_rates[service]
        if service_rate.labor_sf_per_hour is not None:
            hours += sf / service_rate.labor_sf_per_hour
        hours += service_rate.flat_labor_hours

    return _ceil_int(hours)


def select_equipment(
    params: ProjectParameters,
    rates: PricingRates = DEFAULT_RATES,
) -> list[str]:
    """Equipment list in a fixed order: baseline, pump, demolition, grading, excavation."""
    services = params.additional_services
    equipment = list(BASELINE_EQUIPMENT)

    if params.dimensions.square_footage > rates.pump_threshold_sf:
        equipment.append("Concrete Pump")

    if services.is_active(AdditionalService.DEMOLITION):
        equipment.extend(["Jackhammer", "Dump Trailer"])

    if services.is_active(AdditionalService.GRADING):
        equipment.extend(["Skid Steer", "Laser Level"])

    if params.site_conditions.needs_excavation:
        equipment.append("Mini Excavator")

    return equipment


def estimated_days(labor_hours: int, rates: PricingRates = DEFAULT_RATES) -> int:
    return math.ceil(labor_hours / rates.hours_per_day)


def generate_recommendations(
    params: ProjectParameters,
    labor_hours: int,
    quantities: MaterialQuantities,
    rates: PricingRates = DEFAULT_RATES,
) -> list[str]:
    """Advisory lines shown verbatim under the estimate."""
    site = params.site_conditions
    slope = max(1, site.slope_grade)

    recommendations = [
        f"Recommended concrete strength: {int(params.concrete_strength)} PSI "
        f"for {params.project_type.label}",
        f"Estimated completion time: {estimated_days(labor_hours, rates)} day(s) "
        f"with a crew of {rates.crew_size}",
        f"Order {format_number(quantities.concrete)} cubic yards of concrete",
        f"Ensure proper drainage slope of {format_number(slope)}%",
    ]

    if site.soil_type == SoilType.CLAY:
        recommendations.append("Consider additional base preparation due to clay soil")

    if params.dimensions.square_footage > rates.pump_threshold_sf:
        recommendations.append("Recommend scheduling concrete pump truck")

    return recommendations


# ---------------------------------------------------------------------------
# Input contract
# ---------------------------------------------------------------------------


def _is_number(value: object) -> bool:
    return (
        isinstance(value, int | float)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _require(condition: bool, field: str, constraint: str) -> None:
    if not condition:
        raise InputContractError(field, constraint)


def _check_contract(params: ProjectParameters) -> None:
    """Fail fast on a parameter record that skipped validation.

    A normally constructed ``ProjectParameters`` always passes. Enum-keyed
    lookups are guarded where they happen, in ``_rate``.
    """
    dims = params.dimensions
    site = params.site_conditions

    _require(_is_number(dims.length) and dims.length > 0, "dimensions.length", "must be greater than 0")
    _require(_is_number(dims.width) and dims.width > 0, "dimensions.width", "must be greater than 0")
    _require(
        _is_number(dims.square_footage) and dims.square_footage > 0,
        "dimensions.square_footage",
        "must be greater than 0",
    )
    _require(
        dims.thickness in tuple(SlabThickness),
        "dimensions.thickness",
        "thickness must be one of 4, 6, 8",
    )
    _require(
        params.concrete_strength in tuple(ConcreteStrength),
        "concrete_strength",
        "concrete_strength must be one of 2500, 3000, 3500, 4000",
    )
    _require(
        _is_number(site.slope_grade) and 0 <= site.slope_grade <= 100,
        "site_conditions.slope_grade",
        "must be between 0 and 100",
    )
    _require(
        site.soil_type in tuple(SoilType),
        "site_conditions.soil_type",
        f"unsupported value {site.soil_type!r}",
    )
    _require(
        isinstance(params.urgency_level, int)
        and not isinstance(params.urgency_level, bool)
        and 1 <= params.urgency_level <= 10,
        "urgency_level",
        "must be an integer between 1 and 10",
    )
    _require(
        _is_number(params.travel_distance) and params.travel_distance >= 0,
        "travel_distance",
        "must be greater than or equal to 0",
    )


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


class EstimationEngine:
    """Converts ProjectParameters into an EstimationResult.

    The engine holds nothing but its (immutable) pricing rates, so a single
    instance can serve concurrent requests.

    Args:
        rates: Lookup tables and constants to price with.

    Example::

        from ezestimator.data.rates import DEFAULT_RATES

        engine = EstimationEngine(DEFAULT_RATES)
        result = engine.estimate(params)
    """

    def __init__(self, rates: PricingRates) -> None:
        self._rates = rates

    @property
    def rates(self) -> PricingRates:
        return self._rates

    def estimate(self, params: ProjectParameters | Mapping[str, Any]) -> EstimationResult:
        """Produce a full estimate for a concrete project.

        Args:
            params: A validated ``ProjectParameters``, or a raw mapping which
                is validated first.

        Returns:
            The cost breakdown, material quantities, labor hours, equipment,
            duration and recommendations, with the parameters echoed back.

        Raises:
            ParameterValidationError: If a raw mapping fails validation.
            InputContractError: If a ``ProjectParameters`` that bypassed
                validation carries an out-of-contract value.
        """
        if isinstance(params, Mapping):
            params = parse_parameters(params)
        elif not isinstance(params, ProjectParameters):
            msg = f"expected ProjectParameters or a mapping, got {type(params).__name__}"
            raise InputContractError("parameters", msg)

        _check_contract(params)
        rates = self._rates

        costs = calculate_cost_breakdown(params, rates)
        quantities = calculate_material_quantities(params, rates)
        labor_hours = calculate_labor_hours(params, rates)
        equipment = select_equipment(params, rates)
        recommendations = generate_recommendations(params, labor_hours, quantities, rates)

        logger.debug(
            "Estimated %s: %.2f sq ft, %d labor hours, total $%.2f",
            params.project_type,
            params.dimensions.square_footage,
            labor_hours,
            costs.total,
        )

        return EstimationResult(
            parameters=params,
            costs=costs,
            material_quantities=quantities,
            labor_hours=labor_hours,
            equipment_needed=tuple(equipment),
            estimated_duration=estimated_days(labor_hours, rates),
            recommendations=tuple(recommendations),
            metadata=EstimateMetadata(
                engine_version=ENGINE_VERSION,
                pricing_version=PRICING_VERSION,
            ),
        )
