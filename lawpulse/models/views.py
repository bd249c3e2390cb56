"""Derived view models for LawPulse.

Each analysis function returns one of these records. They are rebuilt on every
call and never share state with the input dataset.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Dict, Iterator, List, Optional


@dataclass(frozen=True)
class TimeWindow:
    """Inclusive calendar-date window."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"TimeWindow start {self.start} is after end {self.end}")

    @property
    def day_count(self) -> int:
        return (self.end - self.start).days + 1

    def days(self) -> Iterator[date]:
        for offset in range(self.day_count):
            yield self.start + timedelta(days=offset)

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


# ── KPI ──────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class KpiDetail:
    """Leading news topic of one day: top mid-category, its top sub and first article."""

    mid: str
    sub: str
    count: float
    article: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class KpiPoint:
    """Per-day totals and running cumulative sums for one category."""

    date: str
    news: float
    social: float
    news_cum: float
    social_cum: float
    detail: Optional[KpiDetail] = None   # None on days without news mid-categories


@dataclass(frozen=True)
class CategoryKpi:
    """KPI card for one category: cumulative series plus period-over-period change."""

    category: str
    points: List[KpiPoint] = field(default_factory=list)
    total_news: float = 0.0
    total_social: float = 0.0
    previous_news: float = 0.0
    previous_social: float = 0.0
    news_change: float = 0.0      # percent, math.inf when the previous total is 0
    social_change: float = 0.0
    headline_change: float = 0.0  # whichever change has the larger magnitude


@dataclass(frozen=True)
class KpiSeries:
    """KPI cards for every requested category over one window."""

    window: Optional[TimeWindow]
    previous_window: Optional[TimeWindow]
    categories: List[CategoryKpi] = field(default_factory=list)
    has_any_data: bool = False

    def by_category(self) -> Dict[str, CategoryKpi]:
        return {c.category: c for c in self.categories}


# ── Ranking ──────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RankedEntity:
    """A law ranked by opinion volume, with its stance split."""

    rank: int
    law: str
    total: float
    strengthen: float
    loosen: float
    disagree: float
    news_count: int
    incident_count: int
    strengthen_pct: int
    loosen_pct: int
    disagree_pct: int
    lead_incident: Optional[str] = None   # `mid::sub` with the largest total
    lead_news: Optional[str] = None       # its representative headline


# ── Stance series ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class StancePoint:
    """One time bucket of the stacked stance chart."""

    key: str      # raw period key (YYYY-MM-DD or YYYY-Www)
    label: str    # display label
    strengthen: float
    loosen: float
    disagree: float
    total: float
    strengthen_pct: float
    loosen_pct: float
    disagree_pct: float


@dataclass(frozen=True)
class StanceSeries:
    """Percentage-stacked stance series over ordered time buckets."""

    granularity: str
    categories: List[str] = field(default_factory=list)
    points: List[StancePoint] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.points


# ── Relation graph ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class GraphNode:
    """Entity (mid-category) or incident (sub-category) node."""

    id: str
    type: str                 # "entity" or "incident"
    label: str
    total: float = 0.0        # entity magnitude, or incident count
    entity: Optional[str] = None
    size: Optional[float] = None
    samples: Dict[str, List[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class GraphLink:
    source: str
    target: str
    weight: float


@dataclass(frozen=True)
class RelationGraph:
    """Pruned bipartite entity → incident graph."""

    nodes: List[GraphNode] = field(default_factory=list)
    links: List[GraphLink] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def incidents(self) -> List[GraphNode]:
        """Incident nodes, largest first (stable on ties)."""
        found = [n for n in self.nodes if n.type == "incident"]
        return sorted(found, key=lambda n: n.total, reverse=True)


# ── Heatmap ──────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class HeatmapCell:
    row: str
    column: str
    x: int        # column index
    y: int        # row index
    ratio: float
    count: float


@dataclass(frozen=True)
class HeatmapInsight:
    """One derived insight: ``kind`` is max_ratio, min_ratio or max_count."""

    kind: str
    row: str
    column: str
    value: float
    ratio: float
    count: float


@dataclass(frozen=True)
class HeatmapMatrix:
    rows: List[str] = field(default_factory=list)
    cols: List[str] = field(default_factory=list)
    cells: List[HeatmapCell] = field(default_factory=list)
    insights: List[HeatmapInsight] = field(default_factory=list)

    def cell(self, row: str, column: str) -> Optional[HeatmapCell]:
        for c in self.cells:
            if c.row == row and c.column == column:
                return c
        return None


# ── Dashboard bundle ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class DashboardViews:
    """All five views computed for one window."""

    window: Optional[TimeWindow]
    kpis: KpiSeries
    ranking: List[RankedEntity]
    stance_series: StanceSeries
    graph: RelationGraph
    heatmap: HeatmapMatrix
    timings_ms: Dict[str, float] = field(default_factory=dict, compare=False)
