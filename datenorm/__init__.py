"""datenorm: normalize user-supplied dates to ``YYYY-MM-DD``."""
from datenorm.core.errors import InvalidDateFormat, InvalidQueryError
from datenorm.normalization.date_normalizer import DateLike, normalize_date

__all__ = ["DateLike", "InvalidDateFormat", "InvalidQueryError", "normalize_date"]
