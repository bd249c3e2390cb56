"""Cumulative KPI trends for LawPulse.

For each KPI category: per-day news and social totals over the window, their
running sums, and the percentage change against the preceding window of the
same length.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Optional, Sequence, Tuple

from config.defaults import DAILY, KPI_CATEGORIES, NO_SUB_LABEL
from lawpulse.models.dataset import CategoryBucket, PeriodEntry, RawDataset
from lawpulse.models.views import CategoryKpi, KpiDetail, KpiPoint, KpiSeries, TimeWindow
from lawpulse.utils.date_utils import day_range, is_daily_key, previous_window

_AGREE = "찬성"
_DISAGREE = "반대"


def pct_change(curr: float, prev: float) -> float:
    """Percentage change from ``prev`` to ``curr``.

    Returns 0 when both are zero and ``math.inf`` when only ``prev`` is zero.
    """
    if prev == 0 and curr == 0:
        return 0.0
    if prev == 0:
        return math.inf
    return (curr - prev) / prev * 100


def format_pct_change(value: float) -> str:
    """Render a change for display; infinity renders as ``∞``, never a number."""
    if math.isinf(value):
        return "∞"
    if value > 0:
        arrow = "▲"
    elif value < 0:
        arrow = "▼"
    else:
        arrow = "-"
    return f"{arrow} {abs(value):.1f}%"


def news_total_for_day(bucket: CategoryBucket, day: str) -> float:
    """Sum of mid-category counts in the news channel for one day."""
    entry = bucket.news.timeline(DAILY).get(day)
    if entry is None:
        return 0
    return sum(mid.count for mid in entry.mids.values())


def _social_total(entry: PeriodEntry) -> float:
    if entry.counts:
        return entry.counts.get(_AGREE, 0) + entry.counts.get(_DISAGREE, 0)
    return sum(sub.opinion_total for mid in entry.mids.values() for sub in mid.subs.values())


def social_total_for_day(bucket: CategoryBucket, day: str) -> float:
    """Agree plus disagree opinions in the social channel for one day.

    Uses the period-level counts when present, otherwise the leaf totals.
    """
    entry = bucket.social.timeline(DAILY).get(day)
    if entry is None:
        return 0
    return _social_total(entry)


def day_detail(bucket: CategoryBucket, day: str) -> Optional[KpiDetail]:
    """Leading news topic for one day.

    Picks the mid-category with the highest count, then its highest-count
    sub-category and that sub's first article. Ties keep the first key seen.
    A mid without subs reports NO_SUB_LABEL with the mid's own count.

    Returns:
        KpiDetail, or None when the day has no news mid-categories.
    """
    entry = bucket.news.timeline(DAILY).get(day)
    if entry is None or not entry.mids:
        return None

    best_mid = None
    for mid in entry.mids.values():
        if best_mid is None or mid.count > best_mid.count:
            best_mid = mid

    best_sub = None
    for sub in best_mid.subs.values():
        if best_sub is None or sub.count > best_sub.count:
            best_sub = sub

    if best_sub is None:
        return KpiDetail(mid=best_mid.key, sub=NO_SUB_LABEL, count=best_mid.count)
    article = best_sub.articles[0] if best_sub.articles else None
    return KpiDetail(mid=best_mid.key, sub=best_sub.key, count=best_sub.count, article=article)


def _cumulative(bucket: CategoryBucket, days: Sequence[str]) -> List[KpiPoint]:
    points = []
    acc_news = 0
    acc_social = 0
    for day in days:
        news = news_total_for_day(bucket, day)
        social = social_total_for_day(bucket, day)
        acc_news += news
        acc_social += social
        points.append(KpiPoint(date=day, news=news, social=social,
                               news_cum=acc_news, social_cum=acc_social,
                               detail=day_detail(bucket, day)))
    return points


def _totals(points: Sequence[KpiPoint]) -> Tuple[float, float]:
    if not points:
        return 0, 0
    return points[-1].news_cum, points[-1].social_cum


def has_any_data(
    dataset: RawDataset,
    window: Optional[TimeWindow],
    categories: Iterable[str] = KPI_CATEGORIES,
) -> bool:
    """True iff some category has a non-zero news or social day total in the window."""
    if window is None:
        return False
    days = day_range(window)
    for cat in categories:
        bucket = dataset.category(cat)
        for day in days:
            if news_total_for_day(bucket, day) > 0 or social_total_for_day(bucket, day) > 0:
                return True
    return False


def build_category_kpi(
    bucket: CategoryBucket,
    window: TimeWindow,
    prev: TimeWindow,
) -> CategoryKpi:
    """Build one KPI card for a category bucket."""
    points = _cumulative(bucket, day_range(window))
    total_news, total_social = _totals(points)
    previous_news, previous_social = _totals(_cumulative(bucket, day_range(prev)))

    news_change = pct_change(total_news, previous_news)
    social_change = pct_change(total_social, previous_social)
    headline = news_change if abs(news_change) >= abs(social_change) else social_change

    return CategoryKpi(
        category=bucket.key,
        points=points,
        total_news=total_news,
        total_social=total_social,
        previous_news=previous_news,
        previous_social=previous_social,
        news_change=news_change,
        social_change=social_change,
        headline_change=headline,
    )


def aggregate_kpis(
    dataset: RawDataset,
    window: Optional[TimeWindow],
    categories: Iterable[str] = KPI_CATEGORIES,
) -> KpiSeries:
    """Build cumulative KPI series for every category over ``window``.

    Args:
        dataset: Parsed dataset.
        window: Inclusive window; None yields an empty series.
        categories: Category keys in display order (missing ones read as zero).

    Returns:
        KpiSeries. Check ``has_any_data`` before charting it.
    """
    categories = list(categories)
    if window is None:
        return KpiSeries(window=None, previous_window=None, categories=[], has_any_data=False)

    prev = previous_window(window)
    cards = [build_category_kpi(dataset.category(cat), window, prev) for cat in categories]
    return KpiSeries(
        window=window,
        previous_window=prev,
        categories=cards,
        has_any_data=has_any_data(dataset, window, categories),
    )


def data_coverage(dataset: RawDataset) -> Optional[Tuple[str, str]]:
    """First and last daily key in the dataset, for the empty-range message."""
    days = [d for d in dataset.daily_dates() if is_daily_key(d)]
    if not days:
        return None
    return days[0], days[-1]
