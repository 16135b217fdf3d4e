"""Accepted date shapes, tried in priority order.

Each ``DateFormat`` pairs a human-readable label (used in error
documentation and by ``GET /dates/formats``) with a regular expression and
a rewrite that turns a match into ``YYYY-MM-DD``.

Shape semantics
---------------
Rules are matched against the *whole* input string with ``re.ASCII`` so
that only ``0-9`` count as digits.  Matching is lexical only: ``13-45``
is a valid ``mm-dd`` shape.  No zero-padding is ever added; groups that
are not exactly two or four digits simply do not match.

Order matters.  ``yyyy-mm-dd`` must be tried before ``mm-dd`` and the
first rule that matches wins.
"""
from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

# ---------------------------------------------------------------------------
# Format definition
# ---------------------------------------------------------------------------

Rewrite = Callable[[re.Match[str], date], str]


@dataclass(frozen=True)
class DateFormat:
    """A single accepted date shape.

    Attributes
    ----------
    label:    Human-readable pattern, e.g. ``"yyyy/mm/dd"``.
    regex:    Regular expression source; compiled once into ``pattern``.
    rewrite:  Callable turning a full match (and the reference date used
              for a missing year) into the canonical string.
    """
    label: str
    regex: str
    rewrite: Rewrite
    pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", re.compile(self.regex, re.ASCII))

    def apply(self, value: str, today: date) -> str | None:
        """Return *value* rewritten as ``YYYY-MM-DD``, or ``None`` if the shape differs."""
        match = self.pattern.fullmatch(value)
        if match is None:
            return None
        return self.rewrite(match, today)


# ---------------------------------------------------------------------------
# Rewrites
# ---------------------------------------------------------------------------

def _unchanged(match: re.Match[str], _today: date) -> str:
    return match.group(0)


def _slashes_to_hyphens(match: re.Match[str], _today: date) -> str:
    return match.group(0).replace("/", "-")


def _month_day_year(match: re.Match[str], _today: date) -> str:
    month, day, year = match.groups()
    return f"{year}-{month}-{day}"


def _month_day(match: re.Match[str], today: date) -> str:
    # Year is not part of the input; take it from the reference date
    month, day = match.groups()
    return f"{today.year:04d}-{month}-{day}"


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------

DATE_FORMATS: tuple[DateFormat, ...] = (
    DateFormat(
        label="yyyy-mm-dd",
        regex=r"(\d{4})-(\d{2})-(\d{2})",
        rewrite=_unchanged,
    ),
    DateFormat(
        label="yyyy/mm/dd",
        regex=r"(\d{4})/(\d{2})/(\d{2})",
        rewrite=_slashes_to_hyphens,
    ),
    DateFormat(
        label="mm-dd-yyyy or mm/dd/yyyy",
        regex=r"(\d{2})[-/](\d{2})[-/](\d{4})",
        rewrite=_month_day_year,
    ),
    DateFormat(
        label="mm-dd or mm/dd",
        regex=r"(\d{2})[-/](\d{2})",
        rewrite=_month_day,
    ),
)

ACCEPTED_FORMATS: tuple[str, ...] = tuple(fmt.label for fmt in DATE_FORMATS)


def find_format(value: str) -> DateFormat | None:
    """Return the first ``DateFormat`` whose shape matches *value*, or ``None``."""
    for fmt in DATE_FORMATS:
        if fmt.pattern.fullmatch(value):
            return fmt
    return None
