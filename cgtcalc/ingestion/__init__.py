"""Input adapters."""

from cgtcalc.ingestion.manual import ManualAdapter

__all__ = ["ManualAdapter"]
