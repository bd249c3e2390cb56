"""Integration tests for the dashboard pipeline.

Runs build_dashboard end to end over the in-memory sample dataset and the
JSON fixture file, checking the views agree with each other and that the
empty and inverted window cases behave.
"""

from __future__ import annotations

import logging

import pytest

from config.settings import DashboardConfig
from lawpulse.io.loader import load_dataset
from lawpulse.pipeline import build_dashboard, resolve_dashboard_window

_VIEW_TIMINGS = {"kpis", "ranking", "stance_series", "graph", "heatmap"}


@pytest.fixture
def explicit_config():
    return DashboardConfig(start_date="2025-08-01", end_date="2025-08-02")


class TestBuildDashboard:
    def test_all_views_present(self, sample_dataset, explicit_config):
        views = build_dashboard(sample_dataset, explicit_config)

        assert str(views.window.start) == "2025-08-01"
        assert views.kpis.has_any_data
        assert [r.law for r in views.ranking] == ["개인정보보호법", "아동복지법"]
        assert views.stance_series.categories == ["08-01", "08-02"]
        assert len(views.graph.incidents()) == 3
        assert views.heatmap.rows == ["privacy", "child", "all"]
        assert set(views.timings_ms) == _VIEW_TIMINGS

    def test_views_are_consistent(self, sample_dataset, explicit_config):
        """Ranking totals and stance buckets describe the same comments."""
        views = build_dashboard(sample_dataset, explicit_config)

        ranked_stances = sum(r.strengthen + r.loosen + r.disagree for r in views.ranking)
        series_total = sum(p.total for p in views.stance_series.points)
        assert ranked_stances == series_total == 24

    def test_idempotent(self, sample_dataset, explicit_config):
        assert build_dashboard(sample_dataset, explicit_config) == build_dashboard(
            sample_dataset, explicit_config
        )

    def test_default_window_from_dataset(self, sample_dataset):
        views = build_dashboard(sample_dataset, DashboardConfig())
        assert (str(views.window.start), str(views.window.end)) == ("2025-07-31", "2025-08-02")

    def test_single_bound_is_ignored(self, sample_dataset):
        window = resolve_dashboard_window(sample_dataset, DashboardConfig(start_date="2025-08-02"))
        assert str(window.start) == "2025-07-31"

    def test_window_outside_data(self, sample_dataset, caplog):
        config = DashboardConfig(start_date="2020-01-01", end_date="2020-01-14")
        with caplog.at_level(logging.INFO, logger="lawpulse.pipeline"):
            views = build_dashboard(sample_dataset, config)

        assert not views.kpis.has_any_data
        assert views.ranking == []
        assert views.stance_series.is_empty
        assert views.graph.is_empty
        assert any("no data in range" in r.getMessage() for r in caplog.records)

    def test_inverted_window_raises(self, sample_dataset):
        config = DashboardConfig(start_date="2025-08-10", end_date="2025-08-01")
        with pytest.raises(ValueError):
            build_dashboard(sample_dataset, config)

    def test_empty_dataset(self):
        from lawpulse.io.loader import parse_dataset

        views = build_dashboard(parse_dataset({}), DashboardConfig())
        assert views.window is None
        assert not views.kpis.has_any_data
        assert views.heatmap.cells == []

    def test_domain_filter_flows_through(self, sample_dataset):
        config = DashboardConfig(start_date="2025-08-01", end_date="2025-08-02", domains=["child"])
        views = build_dashboard(sample_dataset, config)
        assert [r.law for r in views.ranking] == ["아동복지법"]
        assert {n.entity for n in views.graph.incidents()} == {"아동"}


class TestFixtureFile:
    def test_loads_and_builds(self, fixture_dataset_path):
        dataset = load_dataset(fixture_dataset_path)
        views = build_dashboard(dataset, DashboardConfig())

        assert (str(views.window.start), str(views.window.end)) == ("2025-08-12", "2025-08-13")
        assert [r.law for r in views.ranking] == ["개인정보보호법", "(관련법 미상)"]
        assert views.ranking[0].total == 6
        assert views.ranking[0].news_count == 1
        assert views.ranking[1].disagree == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_dataset(tmp_path / "missing.json")
