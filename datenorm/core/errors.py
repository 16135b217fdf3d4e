"""Error kinds raised for values destined for a remote API query.

``InvalidQueryError`` is the family; callers that build query parameters
catch it once.  ``InvalidDateFormat`` is the only member raised today, by
``datenorm.normalization.date_normalizer.normalize_date``.
"""
from __future__ import annotations

INVALID_DATE_MESSAGE = "Invalid date entered. Please see docs for allowed formats."


class InvalidQueryError(ValueError):
    """A value cannot be used as a query parameter."""


class InvalidDateFormat(InvalidQueryError):
    """The input matches none of the accepted date shapes."""

    def __init__(self, message: str = INVALID_DATE_MESSAGE) -> None:
        super().__init__(message)
