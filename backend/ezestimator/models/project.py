"""Project input models for the EZ Estimator engine.

These models are the validation boundary in front of the engine: a
``ProjectParameters`` instance that was built normally has already passed
every range and membership check, so the engine can treat it as trusted.
Defaults mirror the initial values of the estimate form.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import IntEnum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from ezestimator.exceptions import FieldError, ParameterValidationError
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

# Allowed drift between a supplied square footage and length x width.
SQUARE_FOOTAGE_TOLERANCE = 0.01


class _InputModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)


def _require_member(value: object, enum_cls: type[IntEnum], name: str) -> Any:
    allowed = [member.value for member in enum_cls]
    if (
        isinstance(value, bool)
        or not isinstance(value, int | float)
        or value not in allowed
    ):
        msg = f"{name} must be one of {', '.join(str(a) for a in allowed)}"
        raise ValueError(msg)
    return enum_cls(int(value))


class ProjectDimensions(_InputModel):
    """Slab plan dimensions.

    Length and width are the source of truth. ``square_footage`` may be
    omitted, in which case it is derived as ``length * width``; if it is
    supplied it must agree with them.
    """

    length: float = Field(gt=0)
    width: float = Field(gt=0)
    thickness: SlabThickness = SlabThickness.FOUR_INCH
    square_footage: float = Field(gt=0)

    @model_validator(mode="before")
    @classmethod
    def derive_square_footage(cls, data: Any) -> Any:
        if not isinstance(data, Mapping) or data.get("square_footage") is not None:
            return data
        try:
            area = float(data["length"]) * float(data["width"])
        except (KeyError, TypeError, ValueError):
            # Leave it to field validation to report the bad length/width.
            return data
        return {**data, "square_footage": area}

    @field_validator("thickness", mode="before")
    @classmethod
    def thickness_must_be_standard(cls, v: object) -> Any:
        return _require_member(v, SlabThickness, "thickness")

    @model_validator(mode="after")
    def square_footage_matches_plan(self) -> ProjectDimensions:
        expected = self.length * self.width
        if not math.isclose(
            self.square_footage, expected, rel_tol=0.0, abs_tol=SQUARE_FOOTAGE_TOLERANCE
        ):
            msg = (
                f"square_footage must equal length x width ({expected:g}), "
                f"got {self.square_footage:g}"
            )
            raise ValueError(msg)
        return self

    @property
    def area(self) -> float:
        """Plan area in square feet, computed from length and width."""
        return self.length * self.width


class SiteConditions(_InputModel):
    """Conditions on site that affect cost and labor."""

    slope_grade: float = Field(default=0.0, ge=0, le=100)
    needs_excavation: bool = False
    soil_type: SoilType = SoilType.SANDY
    access_difficulty: AccessDifficulty = AccessDifficulty.EASY
    needs_haul_away: bool = False
    formwork_complexity: FormworkComplexity = FormworkComplexity.SIMPLE


class AdditionalServices(_InputModel):
    """Independent on/off flags for optional services."""

    demolition: bool = False
    grading: bool = False
    drainage: bool = False
    base_preparation: bool = False
    expansion_joints: bool = False
    control_joints: bool = False

    def active(self) -> list[AdditionalService]:
        """Enabled services, in declaration order."""
        return [service for service in AdditionalService if getattr(self, service.value)]

    def is_active(self, service: AdditionalService) -> bool:
        return bool(getattr(self, service.value))


class ProjectParameters(_InputModel):
    """Input model describing a concrete project to be estimated.

    This is the only input to the estimation engine.
    """

    project_type: ProjectType = ProjectType.DRIVEWAY
    dimensions: ProjectDimensions
    concrete_strength: ConcreteStrength = ConcreteStrength.PSI_3000
    surface_finish: SurfaceFinish = SurfaceFinish.BROOM
    reinforcement: ReinforcementType = ReinforcementType.NONE
    site_conditions: SiteConditions = Field(default_factory=SiteConditions)
    additional_services: AdditionalServices = Field(default_factory=AdditionalServices)
    urgency_level: int = Field(default=5, ge=1, le=10)
    travel_distance: float = Field(default=0.0, ge=0)
    notes: str = ""

    @field_validator("concrete_strength", mode="before")
    @classmethod
    def strength_must_be_standard(cls, v: object) -> Any:
        return _require_member(v, ConcreteStrength, "concrete_strength")


def _field_errors(exc: ValidationError) -> list[FieldError]:
    errors: list[FieldError] = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or "parameters"
        ctx = err.get("ctx") or {}
        if err["type"] == "value_error" and "error" in ctx:
            constraint = str(ctx["error"])
        else:
            constraint = err["msg"]
        errors.append(FieldError(field=field, constraint=constraint))
    return errors


def parse_parameters(data: Mapping[str, Any]) -> ProjectParameters:
    """Validate raw input into a ``ProjectParameters``.

    Raises:
        ParameterValidationError: Listing every offending field together
            with the constraint it violated.
    """
    try:
        return ProjectParameters.model_validate(data)
    except ValidationError as exc:
        raise ParameterValidationError(_field_errors(exc)) from exc
