#!/usr/bin/env python3
"""LawPulse CLI — compute dashboard views from a dataset file.

Usage:
    python scripts/run_dashboard.py --dataset data/data.json
    python scripts/run_dashboard.py --dataset data/data.json --start 2025-08-01 --end 2025-08-14
    python scripts/run_dashboard.py --dataset data/data.json --view ranking --top-n 10
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure project root is on sys.path for consistent import resolution
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from config.defaults import (  # noqa: E402
    DATASET_PATH,
    DEFAULT_LOG_LEVEL,
    DEFAULT_WINDOW_DAYS,
    GRAPH_TOP_ENTITIES,
    GRAPH_TOP_INCIDENTS,
    RANKING_TOP_N,
)
from config.settings import DashboardConfig  # noqa: E402

VIEWS = ("all", "kpi", "ranking", "stance", "graph", "heatmap")


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the argparse argument parser with the DashboardConfig fields as flags."""
    parser = argparse.ArgumentParser(
        prog="run_dashboard",
        description="LawPulse — legislative sentiment dashboard views as JSON",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # ── Input and window ────────────────────────────────────────────────────────
    parser.add_argument(
        "--dataset", type=str, default=DATASET_PATH, help="Path to the dataset JSON file"
    )
    parser.add_argument("--start", type=str, default=None, help="Window start (YYYY-MM-DD)")
    parser.add_argument("--end", type=str, default=None, help="Window end (YYYY-MM-DD)")
    parser.add_argument(
        "--default-window-days",
        type=int,
        default=DEFAULT_WINDOW_DAYS,
        help="Trailing dataset days used when --start/--end are not both given",
    )

    # ── Views ───────────────────────────────────────────────────────────────────
    parser.add_argument("--view", type=str, default="all", choices=VIEWS, help="View to print")
    parser.add_argument(
        "--domains",
        nargs="*",
        default=None,
        help="Categories to include in ranking, stance and graph views (default: all)",
    )
    parser.add_argument("--top-n", type=int, default=RANKING_TOP_N, help="Laws in the ranking")
    parser.add_argument(
        "--graph-top-entities",
        type=int,
        default=GRAPH_TOP_ENTITIES,
        help="Entities kept in the relation graph",
    )
    parser.add_argument(
        "--graph-top-incidents",
        type=int,
        default=GRAPH_TOP_INCIDENTS,
        help="Incidents kept per entity in the relation graph",
    )

    # ── Logging ─────────────────────────────────────────────────────────────────
    parser.add_argument(
        "--log-level",
        type=str,
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (logs go to stderr)",
    )

    return parser


def args_to_config(args: argparse.Namespace) -> DashboardConfig:
    """Convert parsed CLI arguments to a DashboardConfig instance."""
    return DashboardConfig(
        dataset_path=args.dataset,
        start_date=args.start,
        end_date=args.end,
        default_window_days=args.default_window_days,
        domains=args.domains or None,
        ranking_top_n=args.top_n,
        graph_top_entities=args.graph_top_entities,
        graph_top_incidents=args.graph_top_incidents,
        log_level=args.log_level,
    )


def select_view(views, name: str):
    """Pick one view (or the whole bundle) from DashboardViews."""
    return {
        "all": views,
        "kpi": views.kpis,
        "ranking": views.ranking,
        "stance": views.stance_series,
        "graph": views.graph,
        "heatmap": views.heatmap,
    }[name]


def main(argv=None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    from lawpulse.utils.logging_utils import configure_logging, get_logger

    configure_logging(log_level=args.log_level)
    logger = get_logger("cli")

    try:
        config = args_to_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    from lawpulse.io.loader import load_dataset
    from lawpulse.io.persistence import dumps_json
    from lawpulse.pipeline import build_dashboard

    try:
        dataset = load_dataset(config.dataset_path)
    except FileNotFoundError as exc:
        logger.error("%s", exc)
        return 1

    try:
        views = build_dashboard(dataset, config)
    except ValueError as exc:
        logger.error("Invalid window: %s", exc)
        return 2

    print(dumps_json(select_view(views, args.view)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
