"""Data models for the CGT calculator."""

from cgtcalc.models.enums import IncomeYear, MedicareLevyPolicy
from cgtcalc.models.inputs import Asset, CGTInputs
from cgtcalc.models.results import AssetBreakdownLine, CGTResults

__all__ = [
    "Asset",
    "AssetBreakdownLine",
    "CGTInputs",
    "CGTResults",
    "IncomeYear",
    "MedicareLevyPolicy",
]
