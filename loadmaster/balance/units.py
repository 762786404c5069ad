"""
Unit registry and helpers for weight and balance figures.

The engine works in pounds and inches throughout. pint handles the
conversions used when reporting metric equivalents.
"""

import pint

# Create a shared unit registry for the entire application
ureg = pint.UnitRegistry()

# Shorthand for creating quantities
Q_ = ureg.Quantity

pound = ureg.pound
inch = ureg.inch
kilogram = ureg.kilogram
meter = ureg.meter


def magnitude_in(quantity: pint.Quantity, unit: str) -> float:
    """Get the magnitude of a quantity in specified units."""
    return quantity.to(unit).magnitude


def lb_to_kg(weight_lb: float) -> float:
    """Convert pounds to kilograms."""
    return magnitude_in(Q_(weight_lb, "lb"), "kg")


def kg_to_lb(mass_kg: float) -> float:
    """Convert kilograms to pounds."""
    return magnitude_in(Q_(mass_kg, "kg"), "lb")


def in_to_m(length_in: float) -> float:
    """Convert inches to meters."""
    return magnitude_in(Q_(length_in, "inch"), "m")


def moment_lb_in_to_kg_m(moment_lb_in: float) -> float:
    """Convert a moment in lb-in to kg-m."""
    return magnitude_in(Q_(moment_lb_in, "lb * inch"), "kg * m")
