"""Report generation for the CGT calculator."""

from cgtcalc.reports.cgt_summary import CGTSummaryGenerator

__all__ = ["CGTSummaryGenerator"]
