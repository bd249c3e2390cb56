"""LawPulse analysis package.

Pure analytical functions only — no I/O, no logging, no side effects.
All functions operate on the typed tree from lawpulse.models.dataset and
return fresh records from lawpulse.models.views.
"""

from lawpulse.analysis.heatmap import build_heatmap, describe_insights
from lawpulse.analysis.kpi import (
    aggregate_kpis,
    day_detail,
    format_pct_change,
    has_any_data,
    pct_change,
)
from lawpulse.analysis.ranking import stance_percentages, top_entities
from lawpulse.analysis.relation_graph import build_relation_graph, sqrt_size_scale
from lawpulse.analysis.stance_series import build_stance_series, stance_shift
from lawpulse.analysis.walker import iter_domains, key_in_window, walk_leaves, walk_periods

__all__ = [
    "aggregate_kpis",
    "day_detail",
    "format_pct_change",
    "has_any_data",
    "pct_change",
    "top_entities",
    "stance_percentages",
    "build_stance_series",
    "stance_shift",
    "build_relation_graph",
    "sqrt_size_scale",
    "build_heatmap",
    "describe_insights",
    "iter_domains",
    "key_in_window",
    "walk_leaves",
    "walk_periods",
]
