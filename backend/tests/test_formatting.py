"""Tests for formatting helpers and EstimationResult summary/export methods."""

from __future__ import annotations

import json

import pytest

from ezestimator.factory import estimate
from ezestimator.formatting import (
    format_currency,
    format_number,
    format_percent,
    format_quantity,
)
from ezestimator.models.enums import ReinforcementType, SlabThickness
from ezestimator.models.estimate import EstimationResult
from ezestimator.models.project import ProjectDimensions, ProjectParameters

# ---------- Helpers ----------


def _build_result(**overrides: object) -> EstimationResult:
    """Build a real EstimationResult for testing summary/export methods."""
    fields: dict[str, object] = {
        "dimensions": ProjectDimensions(length=20, width=20),
    }
    fields.update(overrides)
    return estimate(ProjectParameters(**fields))  # type: ignore[arg-type]


# ---------- format_currency ----------


class TestFormatCurrency:
    def test_thousands_with_cents(self) -> None:
        assert format_currency(4160) == "$4,160.00"

    def test_large_amount(self) -> None:
        assert format_currency(1_234_567.891) == "$1,234,567.89"

    def test_small_amount(self) -> None:
        assert format_currency(0.5) == "$0.50"

    def test_zero(self) -> None:
        assert format_currency(0) == "$0.00"


# ---------- format_number / format_quantity ----------


class TestFormatNumber:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(5.0, "5"), (1, "1"), (5.5, "5.5"), (66.8, "66.8"), (0.0, "0"), (2.25, "2.25")],
    )
    def test_format_number(self, value: float, expected: str) -> None:
        assert format_number(value) == expected

    def test_format_quantity(self) -> None:
        assert format_quantity(5.5, "cubic yards") == "5.5 cubic yards"
        assert format_quantity(400.0, "sq ft") == "400 sq ft"

    @pytest.mark.parametrize(
        ("fraction", "expected"),
        [(0.3, "30%"), (0.125, "12.5%"), (1.0, "100%")],
    )
    def test_format_percent(self, fraction: float, expected: str) -> None:
        assert format_percent(fraction) == expected


# ---------- to_summary_dict ----------


class TestToSummaryDict:
    def test_has_expected_keys(self) -> None:
        summary = _build_result().to_summary_dict()
        expected_keys = {
            "project_type",
            "square_footage_formatted",
            "cost_lines",
            "subtotal_formatted",
            "markup_label",
            "markup_formatted",
            "total_formatted",
            "materials",
            "labor_hours_formatted",
            "estimated_duration_formatted",
            "equipment_needed",
            "recommendations",
        }
        assert set(summary.keys()) == expected_keys

    def test_cost_values(self) -> None:
        summary = _build_result().to_summary_dict()
        assert summary["project_type"] == "driveway"
        assert summary["square_footage_formatted"] == "400 sq ft"
        assert summary["subtotal_formatted"] == "$3,200.00"
        assert summary["markup_label"] == "Markup (30%)"
        assert summary["markup_formatted"] == "$960.00"
        assert summary["total_formatted"] == "$4,160.00"

    def test_cost_lines_in_display_order(self) -> None:
        lines = _build_result().to_summary_dict()["cost_lines"]
        assert [line["label"] for line in lines] == [
            "Base Cost",
            "Finish Cost",
            "Reinforcement Cost",
            "Additional Services",
            "Site Conditions",
            "Travel Cost",
        ]
        assert lines[0]["amount_formatted"] == "$3,200.00"

    def test_reinforcement_hidden_when_none(self) -> None:
        materials = _build_result().to_summary_dict()["materials"]
        assert [m["label"] for m in materials] == ["Concrete", "Base Aggregate"]
        assert materials[0]["quantity_formatted"] == "5.5 cubic yards"
        assert materials[1]["quantity_formatted"] == "66.8 tons"

    def test_reinforcement_shown_when_present(self) -> None:
        result = _build_result(reinforcement=ReinforcementType.REBAR)
        materials = result.to_summary_dict()["materials"]
        assert [m["label"] for m in materials] == ["Concrete", "Reinforcement", "Base Aggregate"]
        assert materials[1]["quantity_formatted"] == "400 sq ft"

    def test_labor_and_duration(self) -> None:
        result = _build_result(
            dimensions=ProjectDimensions(length=40, width=25, thickness=SlabThickness.SIX_INCH),
        )
        summary = result.to_summary_dict()
        assert summary["labor_hours_formatted"] == "10 hours"
        assert summary["estimated_duration_formatted"] == "2 days"

    def test_single_day_keeps_plural_units(self) -> None:
        result = _build_result(dimensions=ProjectDimensions(length=10, width=10))
        summary = result.to_summary_dict()
        assert summary["labor_hours_formatted"] == "1 hours"
        assert summary["estimated_duration_formatted"] == "1 days"

    def test_lists_copied(self) -> None:
        result = _build_result()
        summary = result.to_summary_dict()
        assert summary["equipment_needed"] == list(result.equipment_needed)
        assert summary["recommendations"] == list(result.recommendations)


# ---------- to_export_dict ----------


class TestToExportDict:
    def test_has_expected_keys(self) -> None:
        export = _build_result().to_export_dict()
        assert set(export.keys()) == {
            "parameters",
            "costs",
            "material_quantities",
            "labor_hours",
            "estimated_duration",
            "equipment_needed",
            "recommendations",
            "metadata",
        }

    def test_enums_flattened(self) -> None:
        export = _build_result().to_export_dict()
        assert export["parameters"]["project_type"] == "driveway"
        assert export["parameters"]["dimensions"]["thickness"] == 4
        assert export["parameters"]["site_conditions"]["soil_type"] == "sandy"

    def test_costs_unrounded_except_total(self) -> None:
        costs = _build_result().to_export_dict()["costs"]
        assert costs["total"] == 4160.0
        assert costs["markup"] == pytest.approx(960.0)
        assert costs["urgency_multiplier"] == 1.0

    def test_is_json_serializable(self) -> None:
        export = _build_result().to_export_dict()
        restored = json.loads(json.dumps(export))
        assert restored["labor_hours"] == 4
        assert restored["metadata"]["engine_version"] == "0.1.0"
