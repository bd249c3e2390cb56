"""Hierarchical traversal over the typed dataset tree.

category → timeline granularity → period key → mid-category → sub-category.

When a window is supplied the daily timeline is always used so slicing is
exact, whatever granularity the caller displays.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Tuple

from config.defaults import DAILY
from lawpulse.models.dataset import (
    CategoryBucket,
    PeriodEntry,
    RawDataset,
    SubCategoryEntry,
    TimelineSet,
)
from lawpulse.models.views import TimeWindow
from lawpulse.utils.date_utils import format_ymd, is_daily_key, week_key_to_monday

Leaf = Tuple[str, str, str, SubCategoryEntry]


def key_in_window(key: str, window: TimeWindow) -> bool:
    """Whether a period key falls inside the inclusive window.

    Daily keys compare as strings; week keys compare by their ISO Monday.
    Any other key is outside every window.
    """
    if is_daily_key(key):
        return format_ymd(window.start) <= key <= format_ymd(window.end)
    monday = week_key_to_monday(key)
    if monday is not None:
        return window.contains(monday)
    return False


def walk_periods(
    timeline_set: TimelineSet,
    granularity: str = DAILY,
    window: Optional[TimeWindow] = None,
) -> Iterator[Tuple[str, PeriodEntry]]:
    """Yield (period_key, PeriodEntry) pairs in source order.

    Args:
        timeline_set: One channel of a category.
        granularity: Timeline used when no window is given.
        window: Inclusive date window; forces the daily timeline.
    """
    if window is None:
        yield from timeline_set.timeline(granularity).items()
        return

    for key, entry in timeline_set.timeline(DAILY).items():
        if key_in_window(key, window):
            yield key, entry


def walk_leaves(
    timeline_set: TimelineSet,
    granularity: str = DAILY,
    window: Optional[TimeWindow] = None,
) -> Iterator[Leaf]:
    """Yield (period_key, mid_key, sub_key, SubCategoryEntry) for every leaf."""
    for period_key, entry in walk_periods(timeline_set, granularity, window):
        for mid_key, mid in entry.mids.items():
            for sub_key, sub in mid.subs.items():
                yield period_key, mid_key, sub_key, sub


def iter_domains(
    dataset: RawDataset,
    domains: Optional[Iterable[str]] = None,
) -> Iterator[Tuple[str, CategoryBucket]]:
    """Yield (category_key, CategoryBucket) for the requested categories.

    ``None`` or an empty selection means every non-aggregate category present
    in the dataset. Requested categories missing from the dataset yield an
    empty bucket.
    """
    keys = list(domains) if domains else dataset.category_keys(include_aggregate=False)
    for key in keys:
        yield key, dataset.category(key)
