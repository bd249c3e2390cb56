"""Category × stance heatmap for LawPulse.

Rows are every top-level category in the dataset; columns are the three
reform stances. Each cell holds the stance's share of its row and the raw
count. Three insights are derived in fixed order: highest ratio, lowest
ratio, largest count. Ties go to the first cell in row-major order.

No I/O or logging.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from config.defaults import HEATMAP_GRANULARITY, STANCE_LABELS, STANCES
from lawpulse.analysis.walker import walk_leaves
from lawpulse.models.dataset import RawDataset
from lawpulse.models.views import HeatmapCell, HeatmapInsight, HeatmapMatrix, TimeWindow
from lawpulse.utils.numeric import safe_ratio


def _row_counts(
    dataset: RawDataset,
    row: str,
    window: Optional[TimeWindow],
    granularity: str,
) -> Dict[str, float]:
    counts = {stance: 0 for stance in STANCES}
    for _, _, _, sub in walk_leaves(dataset.category(row).social, granularity, window):
        counts["strengthen"] += sub.strengthen.count
        counts["loosen"] += sub.loosen.count
        counts["disagree"] += sub.disagree.count
    return counts


def _insights(cells: List[HeatmapCell]) -> List[HeatmapInsight]:
    if not cells:
        return []
    # max()/min() return the first extreme, which is row-major order here
    top_ratio = max(cells, key=lambda c: c.ratio)
    low_ratio = min(cells, key=lambda c: c.ratio)
    top_count = max(cells, key=lambda c: c.count)
    return [
        HeatmapInsight("max_ratio", top_ratio.row, top_ratio.column,
                       top_ratio.ratio, top_ratio.ratio, top_ratio.count),
        HeatmapInsight("min_ratio", low_ratio.row, low_ratio.column,
                       low_ratio.ratio, low_ratio.ratio, low_ratio.count),
        HeatmapInsight("max_count", top_count.row, top_count.column,
                       top_count.count, top_count.ratio, top_count.count),
    ]


def build_heatmap(
    dataset: RawDataset,
    window: Optional[TimeWindow] = None,
    granularity: str = HEATMAP_GRANULARITY,
) -> HeatmapMatrix:
    """Build the category × stance ratio matrix.

    Args:
        dataset: Parsed dataset.
        window: Inclusive window → daily slice; None → every key of ``granularity``.
        granularity: Timeline read when no window is given.

    Returns:
        HeatmapMatrix. A row whose total is 0 has ratio 0 in every cell.
    """
    rows = dataset.category_keys(include_aggregate=True)
    cols = list(STANCES)
    cells: List[HeatmapCell] = []

    for y, row in enumerate(rows):
        counts = _row_counts(dataset, row, window, granularity)
        row_total = sum(counts.values())
        for x, col in enumerate(cols):
            cells.append(
                HeatmapCell(
                    row=row,
                    column=col,
                    x=x,
                    y=y,
                    ratio=safe_ratio(counts[col], row_total),
                    count=counts[col],
                )
            )

    return HeatmapMatrix(rows=rows, cols=cols, cells=cells, insights=_insights(cells))


def describe_insights(matrix: HeatmapMatrix) -> List[str]:
    """Short text lines for the insight panel, using the source stance labels."""
    lines = []
    for insight in matrix.insights:
        label = STANCE_LABELS.get(insight.column, insight.column)
        where = f"{insight.row} · {label}"
        if insight.kind == "max_count":
            lines.append(f"Most comments: {where} ({insight.count:,.0f})")
        else:
            prefix = "Highest share" if insight.kind == "max_ratio" else "Lowest share"
            lines.append(
                f"{prefix}: {where} ({insight.ratio * 100:.1f}%, {insight.count:,.0f} comments)"
            )
    return lines
