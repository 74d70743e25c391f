"""Schema for the pricing and production rates used by the engine."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ezestimator.models.enums import (
    AdditionalService,
    FormworkComplexity,
    ProjectType,
    ReinforcementType,
    SurfaceFinish,
)


class ServiceRate(BaseModel):
    """Cost and labor contribution of one additional service.

    Cost is ``square_footage * cost_per_sf + flat_cost``. Labor adds
    ``square_footage / labor_sf_per_hour`` (when set) plus ``flat_labor_hours``.
    """

    model_config = ConfigDict(frozen=True)

    cost_per_sf: float = Field(default=0.0, ge=0)
    flat_cost: float = Field(default=0.0, ge=0)
    labor_sf_per_hour: float | None = Field(default=None, gt=0)
    flat_labor_hours: float = Field(default=0.0, ge=0)


class PricingRates(BaseModel):
    """Every lookup table and constant the estimation engine reads.

    Each table must have an entry for every member of its enum, so adding
    a project type or finish without pricing it fails at construction.
    """

    model_config = ConfigDict(frozen=True)

    # $/SF by project type
    base_rates: dict[ProjectType, float]
    finish_multipliers: dict[SurfaceFinish, float]
    # $/SF by reinforcement type
    reinforcement_rates: dict[ReinforcementType, float]
    complexity_multipliers: dict[FormworkComplexity, float]
    service_rates: dict[AdditionalService, ServiceRate]

    # Site conditions
    excavation_cost_per_sf: float = 2.0
    haul_away_cost_per_sf: float = 1.5
    slope_cost_factor: float = 0.2

    travel_cost_per_mile: float = 2.0
    markup_rate: float = 0.3

    # Urgency above the threshold adds ``urgency_step`` per level.
    urgency_threshold: int = 5
    urgency_step: float = 0.1

    # Materials
    waste_factor: float = 1.1
    base_layer_depth_ft: float = 0.167

    # Labor and scheduling
    labor_sf_per_hour: float = Field(default=100.0, gt=0)
    hours_per_day: int = Field(default=8, gt=0)
    crew_size: int = Field(default=3, gt=0)
    pump_threshold_sf: float = 500.0

    @model_validator(mode="after")
    def tables_must_be_exhaustive(self) -> PricingRates:
        tables: dict[str, tuple[dict[object, object], type[Enum]]] = {
            "base_rates": (self.base_rates, ProjectType),
            "finish_multipliers": (self.finish_multipliers, SurfaceFinish),
            "reinforcement_rates": (self.reinforcement_rates, ReinforcementType),
            "complexity_multipliers": (self.complexity_multipliers, FormworkComplexity),
            "service_rates": (self.service_rates, AdditionalService),
        }
        for name, (table, enum_cls) in tables.items():
            missing = [member.value for member in enum_cls if member not in table]
            if missing:
                msg = f"{name} is missing entries for: {', '.join(missing)}"
                raise ValueError(msg)
        return self
