"""Tax computation engines."""

from cgtcalc.engines.calculator import CGTCalculator, calculate_cgt, round_cents

__all__ = [
    "CGTCalculator",
    "calculate_cgt",
    "round_cents",
]
