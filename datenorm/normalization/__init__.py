"""Normalization package.

Turns user-supplied date values into the canonical ``YYYY-MM-DD`` form
used in remote API queries.  The accepted shapes live in
``date_formats``; ``date_normalizer.normalize_date`` applies them.
"""
