class LitseasonError(Exception):
    """Base error."""

class InvalidOrdinalError(LitseasonError, ValueError):
    """Raised when a week-of-month ordinal is below 1."""
