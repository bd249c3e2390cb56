"""Date window utilities for LawPulse.

Daily period keys are ``YYYY-MM-DD`` and sort chronologically as strings.
Weekly keys (``YYYY-Www``) do not: always route them through
week_key_to_monday() before ordering or comparing them.

All arithmetic works on calendar dates, never on timestamps, and keys are
always formatted from year/month/day components.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Union

from dateutil import parser as dateutil_parser

from config.defaults import DEFAULT_WINDOW_DAYS
from lawpulse.models.views import TimeWindow

DateLike = Union[str, date, datetime]

_DAILY_KEY = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_WEEK_KEY = re.compile(r"^(\d{4})-W(\d{1,2})$")


def format_ymd(day: date) -> str:
    """Format a date as zero-padded ``YYYY-MM-DD``."""
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def parse_ymd(key: str) -> Optional[date]:
    """Parse a ``YYYY-MM-DD`` key to a date, or None if it is not one."""
    if not key or not _DAILY_KEY.match(key):
        return None
    try:
        year, month, day = (int(part) for part in key.split("-"))
        return date(year, month, day)
    except ValueError:
        return None


def is_daily_key(key: str) -> bool:
    return parse_ymd(key) is not None


def week_key_to_monday(key: str) -> Optional[date]:
    """Convert an ISO week key (``2025-W30``) to the Monday of that week.

    Returns:
        The Monday date, or None for malformed keys or out-of-range weeks.
    """
    m = _WEEK_KEY.match(key or "")
    if not m:
        return None
    try:
        return date.fromisocalendar(int(m.group(1)), int(m.group(2)), 1)
    except ValueError:
        return None


def period_key_to_date(key: str) -> Optional[date]:
    """Calendar date for a daily or weekly period key, else None."""
    parsed = parse_ymd(key)
    if parsed is not None:
        return parsed
    return week_key_to_monday(key)


def period_sort_key(key: str) -> date:
    """Chronological sort key; unparseable keys sort first."""
    return period_key_to_date(key) or date.min


def normalize_date_str(raw: DateLike) -> date:
    """Normalize a caller-supplied bound to a calendar date.

    Args:
        raw: ``date``, ``datetime`` or a date string in any dateutil-readable form.

    Returns:
        The calendar date (time and timezone parts are dropped).

    Raises:
        ValueError: If the string cannot be parsed.
    """
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    parsed = parse_ymd(raw.strip()) if isinstance(raw, str) else None
    if parsed is not None:
        return parsed
    try:
        return dateutil_parser.parse(raw).date()
    except (ValueError, OverflowError, TypeError) as exc:
        raise ValueError(f"Unparseable date bound: {raw!r}") from exc


def day_range(window: TimeWindow) -> List[str]:
    """Every day in the window as ``YYYY-MM-DD``, inclusive."""
    return [format_ymd(d) for d in window.days()]


def resolve_window(
    explicit_start: Optional[DateLike],
    explicit_end: Optional[DateLike],
    dataset_dates: Iterable[str],
    default_days: int = DEFAULT_WINDOW_DAYS,
) -> Optional[TimeWindow]:
    """Resolve the effective inclusive window for a dashboard build.

    When both bounds are given they are used verbatim, even if they fall
    outside the data. Otherwise the window spans the most recent
    ``default_days`` daily keys present in the dataset (fewer if the dataset
    is shorter). A single bound on its own is ignored.

    Args:
        explicit_start: Caller start bound, or None.
        explicit_end: Caller end bound, or None.
        dataset_dates: Daily period keys present in the dataset.
        default_days: Number of trailing dataset days for the fallback.

    Returns:
        TimeWindow, or None when no bounds were given and the dataset has no days.
    """
    if explicit_start is not None and explicit_end is not None:
        return TimeWindow(normalize_date_str(explicit_start), normalize_date_str(explicit_end))

    days = sorted({k for k in dataset_dates if is_daily_key(k)})
    if not days:
        return None
    recent = days[-default_days:]
    return TimeWindow(parse_ymd(recent[0]), parse_ymd(recent[-1]))


def previous_window(window: TimeWindow) -> TimeWindow:
    """Window of equal day-count ending the day before ``window.start``."""
    prev_end = window.start - timedelta(days=1)
    prev_start = prev_end - timedelta(days=window.day_count - 1)
    return TimeWindow(prev_start, prev_end)
