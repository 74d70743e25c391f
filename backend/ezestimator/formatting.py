"""Formatting helpers for estimate output.

Display strings match what the estimate screen shows: dollars with cents,
quantities with their unit, and plain numbers without a trailing ``.0``.
"""

from __future__ import annotations


def format_currency(amount: float) -> str:
    """Format a dollar amount with separators and cents (e.g. '$4,160.00')."""
    return f"${amount:,.2f}"


def format_number(value: float) -> str:
    """Render a number the way the recommendations print it.

    Whole values drop the fractional part ('5', not '5.0'); anything else
    uses the shortest round-tripping representation ('5.5').
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_quantity(value: float, unit: str) -> str:
    """Format a quantity with its unit (e.g. '5.5 cubic yards')."""
    return f"{format_number(value)} {unit}"


def format_percent(fraction: float) -> str:
    """Format a fraction as a whole-or-decimal percent (0.3 -> '30%')."""
    return f"{format_number(round(fraction * 100, 6))}%"
