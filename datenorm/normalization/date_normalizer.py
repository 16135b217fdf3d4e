"""Date normalizer.

Converts a date value into the ``YYYY-MM-DD`` form expected by remote
reporting APIs (e.g. as ``restrict_begin`` / ``restrict_end`` query
parameters).

Accepted inputs
---------------
- ``datetime.date`` and subclasses (``datetime``, ``pandas.Timestamp`` ...),
  formatted from their year, month and day fields.
- Any other object exposing ``strftime``, formatted directly.
- ``"YYYY-MM-DD"``, returned unchanged.
- ``"YYYY/MM/DD"``
- ``"MM-DD-YYYY"`` / ``"MM/DD/YYYY"``
- ``"MM-DD"`` / ``"MM/DD"``, assuming the current year.

No calendar validation is performed: ``"13-45"`` normalizes to
``"<year>-13-45"``.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Protocol, runtime_checkable

from datenorm.core.errors import InvalidDateFormat
from datenorm.normalization.date_formats import DATE_FORMATS

logger = logging.getLogger(__name__)

CANONICAL_FORMAT = "%Y-%m-%d"


@runtime_checkable
class DateLike(Protocol):
    """Anything that can render itself as a calendar date string."""

    def strftime(self, format: str, /) -> str:
        ...


def normalize_date(value: DateLike | str, *, today: date | None = None) -> str:
    """Return *value* as a ``YYYY-MM-DD`` string.

    Parameters
    ----------
    value:
        A ``DateLike`` object or a date string in one of the accepted
        shapes (see ``datenorm.normalization.date_formats``).
    today:
        Reference date whose year fills in ``mm-dd`` inputs.  Defaults to
        ``date.today()``.

    Returns
    -------
    str
        The canonical date string.  Already-canonical strings are returned
        unchanged, so the function is idempotent.

    Raises
    ------
    InvalidDateFormat
        If *value* is a string matching none of the accepted shapes, or is
        neither a string nor ``DateLike``.
    """
    if isinstance(value, date):
        # %Y is not zero-padded below year 1000 on every platform
        return date(value.year, value.month, value.day).isoformat()

    if isinstance(value, DateLike) and not isinstance(value, str):
        return value.strftime(CANONICAL_FORMAT)

    if not isinstance(value, str):
        logger.debug("normalize_date: unsupported input type %s", type(value).__name__)
        raise InvalidDateFormat()

    reference = today if today is not None else date.today()
    for fmt in DATE_FORMATS:
        normalized = fmt.apply(value, reference)
        if normalized is not None:
            logger.debug("normalize_date: matched %r", fmt.label)
            return normalized

    # SAFETY: do not log raw value
    logger.debug("normalize_date: no accepted format matched (length=%d)", len(value))
    raise InvalidDateFormat()
