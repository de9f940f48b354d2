"""Custom exceptions for the CGT calculator.

The calculation engine itself never raises; these are raised at the input
boundary (file loading, CLI argument parsing).
"""


class CGTCalculatorError(Exception):
    """Base exception for CGT calculator errors."""


class DataValidationError(CGTCalculatorError):
    """Raised when input data fails validation."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Validation error on '{field}': {message}")


class InputFileError(CGTCalculatorError):
    """Raised when an input file cannot be read or decoded."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Input error from {source}: {message}")
