"""LawPulse data models package.

The typed dataset tree lives in ``dataset``; every analysis output in ``views``.
Never return raw dicts from analysis code — always use the typed models.
"""

from lawpulse.models.dataset import (
    CategoryBucket,
    Evidence,
    MidCategoryEntry,
    PeriodEntry,
    RawDataset,
    StanceBucket,
    SubCategoryEntry,
    TimelineSet,
)
from lawpulse.models.views import (
    CategoryKpi,
    DashboardViews,
    GraphLink,
    GraphNode,
    HeatmapCell,
    HeatmapInsight,
    HeatmapMatrix,
    KpiDetail,
    KpiPoint,
    KpiSeries,
    RankedEntity,
    RelationGraph,
    StancePoint,
    StanceSeries,
    TimeWindow,
)

__all__ = [
    # dataset
    "RawDataset",
    "CategoryBucket",
    "TimelineSet",
    "PeriodEntry",
    "MidCategoryEntry",
    "SubCategoryEntry",
    "StanceBucket",
    "Evidence",
    # views
    "TimeWindow",
    "KpiDetail",
    "KpiPoint",
    "CategoryKpi",
    "KpiSeries",
    "RankedEntity",
    "StancePoint",
    "StanceSeries",
    "GraphNode",
    "GraphLink",
    "RelationGraph",
    "HeatmapCell",
    "HeatmapInsight",
    "HeatmapMatrix",
    "DashboardViews",
]
