"""LawPulse utilities package.

All utilities except logging are stateless pure functions with no side effects.
"""

from lawpulse.utils.date_utils import (
    day_range,
    format_ymd,
    normalize_date_str,
    parse_ymd,
    period_sort_key,
    previous_window,
    resolve_window,
    week_key_to_monday,
)
from lawpulse.utils.numeric import first_nonzero, round_half_up, safe_ratio, to_number

__all__ = [
    "day_range",
    "format_ymd",
    "normalize_date_str",
    "parse_ymd",
    "period_sort_key",
    "previous_window",
    "resolve_window",
    "week_key_to_monday",
    "first_nonzero",
    "round_half_up",
    "safe_ratio",
    "to_number",
]
