"""Estimate output models for the EZ Estimator engine."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from ezestimator.models.project import ProjectParameters  # noqa: TCH001 (pydantic resolves at runtime)


class _ResultModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class CostBreakdown(_ResultModel):
    """Itemized project cost.

    Every line item is kept unrounded; only ``total`` is rounded, up to
    the next cent.
    """

    base_cost: float
    finish_cost: float
    reinforcement_cost: float
    additional_services_cost: float
    site_conditions_cost: float
    travel_cost: float
    subtotal: float
    markup: float
    total: float

    # Derivation fields (transparency layer)
    markup_rate: float
    urgency_multiplier: float


class MaterialQuantities(_ResultModel):
    """Material order quantities."""

    concrete: float  # cubic yards
    reinforcement: float  # square feet
    base_aggregate: float  # tons


class EstimateMetadata(_ResultModel):
    """Metadata about the estimation run."""

    engine_version: str
    pricing_version: str
    estimation_method: str = "unit_rate_flatwork"


class EstimationResult(_ResultModel):
    """Complete estimate produced by the engine.

    Echoes the parameters it was computed from; everything else is derived
    from them.
    """

    parameters: ProjectParameters
    costs: CostBreakdown
    material_quantities: MaterialQuantities
    labor_hours: int
    equipment_needed: tuple[str, ...]
    estimated_duration: int  # days
    recommendations: tuple[str, ...]
    metadata: EstimateMetadata

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict for frontend consumption.

        Returns a dict with formatted strings for direct display in the
        result view.
        """
        from ezestimator.formatting import (
            format_currency,
            format_percent,
            format_quantity,
        )

        costs = self.costs
        quantities = self.material_quantities

        cost_lines = [
            ("Base Cost", costs.base_cost),
            ("Finish Cost", costs.finish_cost),
            ("Reinforcement Cost", costs.reinforcement_cost),
            ("Additional Services", costs.additional_services_cost),
            ("Site Conditions", costs.site_conditions_cost),
            ("Travel Cost", costs.travel_cost),
        ]

        materials = [
            {"label": "Concrete", "quantity_formatted": format_quantity(quantities.concrete, "cubic yards")},
        ]
        if quantities.reinforcement > 0:
            materials.append({
                "label": "Reinforcement",
                "quantity_formatted": format_quantity(quantities.reinforcement, "sq ft"),
            })
        materials.append({
            "label": "Base Aggregate",
            "quantity_formatted": format_quantity(quantities.base_aggregate, "tons"),
        })

        return {
            "project_type": self.parameters.project_type.value,
            "square_footage_formatted": format_quantity(
                self.parameters.dimensions.square_footage, "sq ft",
            ),
            "cost_lines": [
                {"label": label, "amount_formatted": format_currency(amount)}
                for label, amount in cost_lines
            ],
            "subtotal_formatted": format_currency(costs.subtotal),
            "markup_label": f"Markup ({format_percent(costs.markup_rate)})",
            "markup_formatted": format_currency(costs.markup),
            "total_formatted": format_currency(costs.total),
            "materials": materials,
            "labor_hours_formatted": format_quantity(self.labor_hours, "hours"),
            "estimated_duration_formatted": format_quantity(self.estimated_duration, "days"),
            "equipment_needed": list(self.equipment_needed),
            "recommendations": list(self.recommendations),
        }

    def to_export_dict(self) -> dict[str, Any]:
        """Produce a detailed, JSON-safe dict for export.

        Enum values are flattened to their strings.
        """
        return {
            "parameters": self.parameters.model_dump(mode="json"),
            "costs": self.costs.model_dump(),
            "material_quantities": self.material_quantities.model_dump(),
            "labor_hours": self.labor_hours,
            "estimated_duration": self.estimated_duration,
            "equipment_needed": list(self.equipment_needed),
            "recommendations": list(self.recommendations),
            "metadata": self.metadata.model_dump(),
        }
