"""LawPulse — Temporal aggregation and ranking engine for legislative sentiment dashboards.

Public API surface:
    - DashboardConfig: Runtime configuration
    - load_dataset / parse_dataset: Raw JSON → typed dataset tree
    - build_dashboard: Compute all five views for one window
"""

__version__ = "1.0.0"
__author__ = "LawPulse Contributors"

from config.settings import DashboardConfig
from lawpulse.io.loader import load_dataset, parse_dataset
from lawpulse.pipeline import build_dashboard

__all__ = [
    "__version__",
    "DashboardConfig",
    "build_dashboard",
    "load_dataset",
    "parse_dataset",
]
