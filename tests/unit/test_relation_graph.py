"""Unit tests for lawpulse.analysis.relation_graph."""

from __future__ import annotations

import math
from datetime import date

import pytest

from lawpulse.analysis.relation_graph import build_relation_graph, sqrt_size_scale
from lawpulse.io.loader import parse_dataset
from lawpulse.models.views import TimeWindow

_DAY = TimeWindow(date(2025, 8, 1), date(2025, 8, 1))


class TestSqrtSizeScale:
    def test_endpoints(self):
        scale = sqrt_size_scale([4, 100], 8.0, 36.0)
        assert scale(4) == pytest.approx(8.0)
        assert scale(100) == pytest.approx(36.0)

    def test_midpoint_is_sqrt(self):
        scale = sqrt_size_scale([0, 100], 0.0, 10.0)
        assert scale(25) == pytest.approx(5.0)

    def test_empty_counts_anchor(self):
        scale = sqrt_size_scale([], 8.0, 36.0)
        assert scale(1) == pytest.approx(8.0)
        assert scale(50) == pytest.approx(36.0)

    def test_single_value_does_not_divide_by_zero(self):
        scale = sqrt_size_scale([9, 9], 8.0, 36.0)
        assert math.isfinite(scale(9))
        assert scale(9) == pytest.approx(8.0)


class TestBuildRelationGraph:
    def test_entities_and_incidents(self, sample_dataset, sample_window):
        graph = build_relation_graph(sample_dataset, sample_window)

        assert [n.id for n in graph.nodes] == [
            "개인정보",
            "개인정보::개인정보_유출",
            "개인정보::개인정보_CCTV",
            "아동",
            "아동::아동_학대",
        ]
        entity = graph.nodes[0]
        assert entity.type == "entity"
        assert entity.total == 14

    def test_incident_labels_strip_entity_prefix(self, sample_dataset, sample_window):
        graph = build_relation_graph(sample_dataset, sample_window)
        assert [n.label for n in graph.incidents()] == ["유출", "CCTV", "학대"]

    def test_links_carry_incident_count(self, sample_dataset, sample_window):
        graph = build_relation_graph(sample_dataset, sample_window)
        links = {(l.source, l.target): l.weight for l in graph.links}
        assert links == {
            ("개인정보", "개인정보::개인정보_유출"): 10,
            ("개인정보", "개인정보::개인정보_CCTV"): 4,
            ("아동", "아동::아동_학대"): 10,
        }

    def test_incident_sizes_span_range(self, sample_dataset, sample_window):
        graph = build_relation_graph(sample_dataset, sample_window)
        sizes = {n.id: n.size for n in graph.incidents()}
        assert sizes["개인정보::개인정보_유출"] == pytest.approx(36.0)
        assert sizes["개인정보::개인정보_CCTV"] == pytest.approx(8.0)

    def test_samples_capped_per_stance(self, sample_dataset, sample_window):
        graph = build_relation_graph(sample_dataset, sample_window)
        leak = next(n for n in graph.nodes if n.id == "개인정보::개인정보_유출")
        assert leak.samples == {
            "agree": ["강화 0", "강화 1"],
            "loosen": ["완화 0"],
            "disagree": ["반대 0", "반대 1"],
        }

    def test_aggregate_category_excluded(self, sample_dataset, sample_window):
        graph = build_relation_graph(sample_dataset, sample_window)
        assert "전체" not in {n.id for n in graph.nodes}

    def test_top_entities_pruning(self, make_period, make_social_leaf):
        mids = {f"e{i}": (0, {f"e{i}_x": make_social_leaf(i + 1, 0, 0)}) for i in range(10)}
        dataset = parse_dataset({
            "privacy": {"addsocial": {"daily_timeline": {"2025-08-01": make_period(mids)}}},
        })

        graph = build_relation_graph(dataset, _DAY, top_entities=5)
        entities = [n.id for n in graph.nodes if n.type == "entity"]
        assert entities == ["e9", "e8", "e7", "e6", "e5"]
        assert len(graph.incidents()) == 5

    def test_top_incidents_and_zero_counts(self, make_period, make_social_leaf):
        subs = {f"m_s{i}": make_social_leaf(i, 0, 0) for i in range(5)}
        dataset = parse_dataset({
            "privacy": {"addsocial": {"daily_timeline": {"2025-08-01": make_period({"m": (0, subs)})}}},
        })

        graph = build_relation_graph(dataset, _DAY, top_incidents=3)
        assert [n.label for n in graph.incidents()] == ["s4", "s3", "s2"]

        full = build_relation_graph(dataset, _DAY)
        assert "m::m_s0" not in {n.id for n in full.nodes}

    def test_window_outside_coverage_is_empty(self, sample_dataset):
        window = TimeWindow(date(2020, 1, 1), date(2020, 1, 14))
        graph = build_relation_graph(sample_dataset, window)
        assert graph.is_empty
        assert graph.links == []

    def test_idempotent(self, sample_dataset, sample_window):
        assert build_relation_graph(sample_dataset, sample_window) == build_relation_graph(
            sample_dataset, sample_window
        )
