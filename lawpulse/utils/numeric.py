"""Numeric guards shared by ingestion and aggregation.

Source counts arrive as ints, floats, numeric strings, nulls or garbage.
Everything is read through to_number() so NaN never reaches a sum.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Tuple


def to_number(value: Any) -> float:
    """Coerce a raw leaf value to a finite number, else 0.

    Args:
        value: Raw JSON value (number, numeric string, bool, None, ...).

    Returns:
        The value as a number, or 0 if it is missing, non-numeric or non-finite.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        # JSON ints beyond float range overflow isfinite()
        try:
            return value if math.isfinite(value) else 0
        except OverflowError:
            return 0
    if isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError:
            return 0
        if not math.isfinite(parsed):
            return 0
        return int(parsed) if parsed.is_integer() else parsed
    return 0


def first_nonzero(values: Iterable[float]) -> Tuple[int, float]:
    """Return (index, value) of the first non-zero alternate, or (-1, 0).

    Legacy spellings of one field are alternates, never additive.
    """
    for i, v in enumerate(values):
        if v:
            return i, v
    return -1, 0


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (bar percentages)."""
    return int(math.floor(value + 0.5))


def safe_ratio(numerator: float, denominator: float) -> float:
    """numerator / denominator, or 0.0 when the denominator is 0."""
    if not denominator:
        return 0.0
    return numerator / denominator
