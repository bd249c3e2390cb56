"""Shared pytest fixtures for LawPulse tests.

Raw datasets are built with the helpers below so each test can state the
exact counts it relies on. The static file in tests/fixtures/ covers the
JSON loading path. No test touches the network.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict, Optional

import pytest

_FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ── Raw tree builders ────────────────────────────────────────────────────────────

def social_leaf(
    strengthen: int = 0,
    loosen: int = 0,
    disagree: int = 0,
    law: Optional[str] = None,
    loosen_key: str = "폐지약화",
) -> Dict[str, Any]:
    """A social sub-category leaf with evidence lists matching its counts."""
    leaf: Dict[str, Any] = {
        "찬성": {
            "개정강화": {
                "count": strengthen,
                "소셜목록": [{"content": f"강화 {i}"} for i in range(strengthen)],
            },
            loosen_key: {
                "count": loosen,
                "소셜목록": [{"content": f"완화 {i}"} for i in range(loosen)],
            },
        },
        "반대": {
            "count": disagree,
            "소셜목록": [{"content": f"반대 {i}"} for i in range(disagree)],
        },
        "counts": {"찬성": strengthen + loosen, "반대": disagree},
    }
    if law:
        leaf["관련법"] = law
    return leaf


def news_leaf(count: int, law: Optional[str] = None, articles: int = 0) -> Dict[str, Any]:
    leaf: Dict[str, Any] = {
        "count": count,
        "articles": [{"title": f"기사 {i}"} for i in range(articles)],
    }
    if law:
        leaf["관련법"] = law
    return leaf


def period(mids: Dict[str, Any]) -> Dict[str, Any]:
    """Period entry from ``{mid: (count, {sub: leaf})}``."""
    return {
        "중분류목록": {
            mid: {"count": count, "소분류목록": subs} for mid, (count, subs) in mids.items()
        }
    }


# ── Sample dataset ───────────────────────────────────────────────────────────────

_SAMPLE_RAW: Dict[str, Any] = {
    "privacy": {
        "news": {
            "daily_timeline": {
                "2025-07-31": period({"개인정보": (4, {"개인정보_유출": news_leaf(4, "개인정보보호법", 2)})}),
                "2025-08-01": period({"개인정보": (10, {"개인정보_유출": news_leaf(10, "개인정보보호법", 3)})}),
                "2025-08-02": period({"개인정보": (5, {"개인정보_유출": news_leaf(5, "개인정보보호법", 1)})}),
            },
        },
        "addsocial": {
            "daily_timeline": {
                "2025-08-01": period(
                    {"개인정보": (10, {"개인정보_유출": social_leaf(3, 1, 6, "개인정보보호법")})}
                ),
                "2025-08-02": period(
                    {"개인정보": (4, {"개인정보_CCTV": social_leaf(2, 0, 2, "개인정보보호법")})}
                ),
            },
            "weekly_timeline": {
                "2025-W31": period(
                    {"개인정보": (14, {"개인정보_유출": social_leaf(5, 1, 8, "개인정보보호법")})}
                ),
            },
        },
    },
    "child": {
        "news": {
            "daily_timeline": {
                "2025-08-02": period({"아동": (3, {"아동_학대": news_leaf(3, "아동복지법", 2)})}),
            },
        },
        "addsocial": {
            "daily_timeline": {
                "2025-08-02": period(
                    {"아동": (10, {"아동_학대": social_leaf(5, 5, 0, "아동복지법", "폐지완화")})}
                ),
            },
            "weekly_timeline": {
                "2025-W31": period(
                    {"아동": (10, {"아동_학대": social_leaf(5, 5, 0, "아동복지법", "폐지완화")})}
                ),
                "2025-W30": period(
                    {"아동": (2, {"아동_학대": social_leaf(1, 0, 1, "아동복지법")})}
                ),
            },
        },
    },
    "all": {
        "addsocial": {
            "daily_timeline": {
                "2025-08-01": period({"전체": (100, {"전체_합계": social_leaf(100, 0, 0, "전체법")})}),
            },
        },
    },
}


@pytest.fixture
def sample_raw() -> Dict[str, Any]:
    """Fresh deep copy of the raw sample dataset (privacy, child, all)."""
    return copy.deepcopy(_SAMPLE_RAW)


@pytest.fixture
def sample_dataset(sample_raw):
    """Typed RawDataset parsed from the sample raw dataset."""
    from lawpulse.io.loader import parse_dataset

    return parse_dataset(sample_raw)


@pytest.fixture
def sample_window():
    """2025-08-01 → 2025-08-02, covering both sample days."""
    from datetime import date

    from lawpulse.models.views import TimeWindow

    return TimeWindow(date(2025, 8, 1), date(2025, 8, 2))


@pytest.fixture(scope="session")
def fixture_dataset_path() -> Path:
    """Path to the static JSON dataset fixture."""
    return _FIXTURES_DIR / "sample_dataset.json"


# ── Builder fixtures ─────────────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def make_social_leaf():
    """Factory for raw social leaves: ``make_social_leaf(s, l, d, law, loosen_key)``."""
    return social_leaf


@pytest.fixture(scope="session")
def make_news_leaf():
    """Factory for raw news leaves: ``make_news_leaf(count, law, articles)``."""
    return news_leaf


@pytest.fixture(scope="session")
def make_period():
    """Factory for raw period entries: ``make_period({mid: (count, {sub: leaf})})``."""
    return period
