"""Percentage-stacked stance series for LawPulse.

Buckets reform-stance counts by day (when a window is given) or by ISO week
(when it is not), sums them across domains, and converts each bucket to
shares of its own total.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from config.defaults import DAILY, WEEKLY
from lawpulse.analysis.walker import iter_domains, walk_leaves
from lawpulse.models.dataset import RawDataset
from lawpulse.models.views import StancePoint, StanceSeries, TimeWindow
from lawpulse.utils.date_utils import period_sort_key


@dataclass
class _Bucket:
    strengthen: float = 0
    loosen: float = 0
    disagree: float = 0

    @property
    def total(self) -> float:
        return self.strengthen + self.loosen + self.disagree


def _label(key: str, granularity: str) -> str:
    # Daily buckets show MM-DD; weeks keep their YYYY-Www form
    if granularity == DAILY:
        return key[5:]
    return key


def build_stance_series(
    dataset: RawDataset,
    window: Optional[TimeWindow] = None,
    domains: Optional[Iterable[str]] = None,
) -> StanceSeries:
    """Build the stacked stance series.

    Args:
        dataset: Parsed dataset.
        window: Inclusive window → daily buckets; None → weekly buckets.
        domains: Categories to sum; None means every non-aggregate category.

    Returns:
        StanceSeries with chronologically ordered points. A bucket whose
        total is 0 reports 0% for every stance.
    """
    granularity = DAILY if window is not None else WEEKLY
    buckets: Dict[str, _Bucket] = {}

    for _, category in iter_domains(dataset, domains):
        for period_key, _, _, sub in walk_leaves(category.social, granularity, window):
            b = buckets.setdefault(period_key, _Bucket())
            b.strengthen += sub.strengthen.count
            b.loosen += sub.loosen.count
            b.disagree += sub.disagree.count

    keys = sorted(buckets, key=period_sort_key)
    points = []
    for key in keys:
        b = buckets[key]
        denom = max(b.total, 1)
        points.append(
            StancePoint(
                key=key,
                label=_label(key, granularity),
                strengthen=b.strengthen,
                loosen=b.loosen,
                disagree=b.disagree,
                total=b.total,
                strengthen_pct=b.strengthen / denom * 100,
                loosen_pct=b.loosen / denom * 100,
                disagree_pct=b.disagree / denom * 100,
            )
        )

    return StanceSeries(
        granularity=granularity,
        categories=[p.label for p in points],
        points=points,
    )


def stance_shift(series: StanceSeries) -> Optional[Dict[str, float]]:
    """Last-minus-first percentage for each stance, or None for an empty series."""
    if series.is_empty:
        return None
    first, last = series.points[0], series.points[-1]
    return {
        "strengthen": last.strengthen_pct - first.strengthen_pct,
        "loosen": last.loosen_pct - first.loosen_pct,
        "disagree": last.disagree_pct - first.disagree_pct,
    }
