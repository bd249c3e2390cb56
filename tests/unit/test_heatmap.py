"""Unit tests for lawpulse.analysis.heatmap."""

from __future__ import annotations

from datetime import date

import pytest

from lawpulse.analysis.heatmap import build_heatmap, describe_insights
from lawpulse.io.loader import parse_dataset
from lawpulse.models.views import TimeWindow


class TestBuildHeatmap:
    def test_rows_include_aggregate(self, sample_dataset, sample_window):
        matrix = build_heatmap(sample_dataset, sample_window)
        assert matrix.rows == ["privacy", "child", "all"]
        assert matrix.cols == ["strengthen", "loosen", "disagree"]
        assert len(matrix.cells) == 9

    def test_row_ratios(self, make_period, make_social_leaf):
        """A 3:1:6 row reads 0.3 / 0.1 / 0.6."""
        dataset = parse_dataset({
            "privacy": {"addsocial": {"daily_timeline": {
                "2025-08-01": make_period({"m": (0, {"s": make_social_leaf(3, 1, 6)})}),
            }}},
        })
        window = TimeWindow(date(2025, 8, 1), date(2025, 8, 1))
        matrix = build_heatmap(dataset, window)

        assert [c.ratio for c in matrix.cells] == pytest.approx([0.3, 0.1, 0.6])
        assert [c.count for c in matrix.cells] == [3, 1, 6]

    def test_row_ratios_sum_to_one(self, sample_dataset, sample_window):
        matrix = build_heatmap(sample_dataset, sample_window)
        for row in matrix.rows:
            total = sum(matrix.cell(row, col).ratio for col in matrix.cols)
            assert total == pytest.approx(1.0)

    def test_cell_coordinates(self, sample_dataset, sample_window):
        cell = build_heatmap(sample_dataset, sample_window).cell("child", "disagree")
        assert (cell.x, cell.y) == (2, 1)
        assert cell.ratio == 0

    def test_weekly_without_window(self, sample_dataset):
        matrix = build_heatmap(sample_dataset)
        child = matrix.cell("child", "strengthen")
        assert child.count == 6
        # The aggregate category has no weekly data; its row reads zero
        assert all(matrix.cell("all", col).ratio == 0 for col in matrix.cols)

    def test_empty_dataset(self):
        matrix = build_heatmap(parse_dataset({}))
        assert matrix.rows == []
        assert matrix.cells == []
        assert matrix.insights == []


class TestInsights:
    def test_insight_order_and_targets(self, sample_dataset, sample_window):
        insights = build_heatmap(sample_dataset, sample_window).insights

        assert [i.kind for i in insights] == ["max_ratio", "min_ratio", "max_count"]
        top, low, biggest = insights
        assert (top.row, top.column, top.ratio) == ("all", "strengthen", 1.0)
        # Several cells are 0; the first in row-major order wins
        assert (low.row, low.column, low.ratio) == ("child", "disagree", 0)
        assert (biggest.row, biggest.column, biggest.count) == ("all", "strengthen", 100)

    def test_describe_insights_uses_stance_labels(self, sample_dataset, sample_window):
        lines = describe_insights(build_heatmap(sample_dataset, sample_window))

        assert len(lines) == 3
        assert lines[0] == "Highest share: all · 개정강화 (100.0%, 100 comments)"
        assert lines[1] == "Lowest share: child · 현상유지 (0.0%, 0 comments)"
        assert lines[2] == "Most comments: all · 개정강화 (100)"
