"""LawPulse dashboard orchestrator.

Resolves the date window, runs every aggregator and records per-view timings.
This is the observability boundary: the analysis functions stay log-free and
all logging about a build happens here.

Usage:
    from config.settings import DashboardConfig
    from lawpulse.io.loader import load_dataset
    from lawpulse.pipeline import build_dashboard

    config = DashboardConfig(start_date="2025-08-01", end_date="2025-08-14")
    views = build_dashboard(load_dataset(config.dataset_path), config)
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from config.settings import DashboardConfig
from lawpulse.analysis.heatmap import build_heatmap
from lawpulse.analysis.kpi import aggregate_kpis, data_coverage
from lawpulse.analysis.ranking import top_entities
from lawpulse.analysis.relation_graph import build_relation_graph
from lawpulse.analysis.stance_series import build_stance_series
from lawpulse.models.dataset import RawDataset
from lawpulse.models.views import DashboardViews, TimeWindow
from lawpulse.utils.date_utils import resolve_window
from lawpulse.utils.logging_utils import log_timing

logger = logging.getLogger(__name__)


def resolve_dashboard_window(dataset: RawDataset, config: DashboardConfig) -> Optional[TimeWindow]:
    """Resolve the effective window for a build and log how it was chosen."""
    window = resolve_window(
        config.start_date,
        config.end_date,
        dataset.daily_dates(),
        default_days=config.default_window_days,
    )
    if window is None:
        logger.warning("Dashboard: dataset has no daily keys and no explicit window was given")
    elif config.start_date is not None and config.end_date is not None:
        logger.info("Dashboard: explicit window %s → %s (%d days)",
                    window.start, window.end, window.day_count)
    else:
        logger.info("Dashboard: default window %s → %s (%d days)",
                    window.start, window.end, window.day_count)
    return window


def build_dashboard(
    dataset: RawDataset,
    config: Optional[DashboardConfig] = None,
) -> DashboardViews:
    """Compute all five dashboard views for one window.

    Args:
        dataset: Parsed dataset.
        config: Build configuration (defaults when omitted).

    Returns:
        DashboardViews with per-view timings in milliseconds.
    """
    config = config or DashboardConfig()
    window = resolve_dashboard_window(dataset, config)
    timings: Dict[str, float] = {}

    with log_timing(logger, "kpis", timings):
        kpis = aggregate_kpis(dataset, window, config.kpi_categories)
    with log_timing(logger, "ranking", timings):
        ranking = top_entities(dataset, window, config.domains, config.ranking_top_n)
    with log_timing(logger, "stance_series", timings):
        stance = build_stance_series(dataset, window, config.domains)
    with log_timing(logger, "graph", timings):
        graph = build_relation_graph(
            dataset,
            window,
            top_entities=config.graph_top_entities,
            top_incidents=config.graph_top_incidents,
            size_range=config.size_range,
            samples_per_stance=config.graph_samples_per_stance,
            domains=config.domains,
        )
    with log_timing(logger, "heatmap", timings):
        heatmap = build_heatmap(dataset, window, config.heatmap_granularity)

    if not kpis.has_any_data:
        span = data_coverage(dataset)
        logger.info(
            "Dashboard: no data in range %s; dataset covers %s",
            f"{window.start} ~ {window.end}" if window else "(none)",
            f"{span[0]} ~ {span[1]}" if span else "nothing",
        )

    logger.info(
        "Dashboard: built in %.1f ms | ranked=%d | stance buckets=%d | graph nodes=%d | rows=%d",
        sum(timings.values()),
        len(ranking),
        len(stance.points),
        len(graph.nodes),
        len(heatmap.rows),
    )

    return DashboardViews(
        window=window,
        kpis=kpis,
        ranking=ranking,
        stance_series=stance,
        graph=graph,
        heatmap=heatmap,
        timings_ms=timings,
    )
