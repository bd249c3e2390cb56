"""LawPulse — DashboardConfig and environment-based configuration loading.

All runtime configuration flows through DashboardConfig. The aggregation
functions take plain parameters; only the pipeline and CLI read this object.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

from config.defaults import (
    DATASET_PATH,
    DEFAULT_LOG_LEVEL,
    DEFAULT_WINDOW_DAYS,
    GRAPH_NODE_SIZE_MAX,
    GRAPH_NODE_SIZE_MIN,
    GRAPH_SAMPLES_PER_STANCE,
    GRAPH_TOP_ENTITIES,
    GRAPH_TOP_INCIDENTS,
    GRANULARITIES,
    HEATMAP_GRANULARITY,
    KPI_CATEGORIES,
    RANKING_TOP_N,
)

# Load .env file if present; silently skip if missing
load_dotenv()


@dataclass
class DashboardConfig:
    """Single configuration object for a dashboard build.

    Explicit ``start_date``/``end_date`` are only honoured when both are set;
    otherwise the window falls back to the most recent dataset days.
    """

    # ── Input ─────────────────────────────────────────────────────────────────
    dataset_path: str = field(
        default_factory=lambda: os.getenv("LAWPULSE_DATASET_PATH", DATASET_PATH)
    )

    # ── Date window ───────────────────────────────────────────────────────────
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    default_window_days: int = DEFAULT_WINDOW_DAYS

    # ── Views ─────────────────────────────────────────────────────────────────
    kpi_categories: List[str] = field(default_factory=lambda: list(KPI_CATEGORIES))
    domains: Optional[List[str]] = None   # None → every non-aggregate category
    ranking_top_n: int = RANKING_TOP_N
    graph_top_entities: int = GRAPH_TOP_ENTITIES
    graph_top_incidents: int = GRAPH_TOP_INCIDENTS
    graph_node_size_min: float = GRAPH_NODE_SIZE_MIN
    graph_node_size_max: float = GRAPH_NODE_SIZE_MAX
    graph_samples_per_stance: int = GRAPH_SAMPLES_PER_STANCE
    heatmap_granularity: str = HEATMAP_GRANULARITY

    # ── Logging ───────────────────────────────────────────────────────────────
    log_level: str = field(
        default_factory=lambda: os.getenv("LAWPULSE_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    )

    def __post_init__(self) -> None:
        for name in (
            "default_window_days",
            "ranking_top_n",
            "graph_top_entities",
            "graph_top_incidents",
        ):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be >= 1, got {getattr(self, name)}")
        if self.graph_samples_per_stance < 0:
            raise ValueError("graph_samples_per_stance must be >= 0")
        if self.graph_node_size_min > self.graph_node_size_max:
            raise ValueError(
                f"graph node size range is inverted: "
                f"{self.graph_node_size_min} > {self.graph_node_size_max}"
            )
        if self.heatmap_granularity not in GRANULARITIES:
            raise ValueError(f"Unknown heatmap granularity: {self.heatmap_granularity}")

    @property
    def size_range(self) -> tuple:
        return (self.graph_node_size_min, self.graph_node_size_max)
