"""LawPulse configuration package."""

from config.defaults import (
    AGGREGATE_CATEGORY,
    DEFAULT_LOG_LEVEL,
    DEFAULT_WINDOW_DAYS,
    GRAPH_TOP_ENTITIES,
    GRAPH_TOP_INCIDENTS,
    KPI_CATEGORIES,
    RANKING_TOP_N,
    STANCE_LABELS,
    STANCES,
    UNKNOWN_LAW,
)
from config.settings import DashboardConfig

__all__ = [
    "DashboardConfig",
    "AGGREGATE_CATEGORY",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_WINDOW_DAYS",
    "GRAPH_TOP_ENTITIES",
    "GRAPH_TOP_INCIDENTS",
    "KPI_CATEGORIES",
    "RANKING_TOP_N",
    "STANCE_LABELS",
    "STANCES",
    "UNKNOWN_LAW",
]
