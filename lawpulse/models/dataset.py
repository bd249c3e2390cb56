"""Typed dataset tree for LawPulse.

The raw dashboard JSON is parsed once by ``lawpulse.io.loader`` into these
records. Legacy field spellings and numeric coercion are already resolved here,
so aggregation code reads plain attributes. Every accessor that walks down the
tree returns an empty default for a missing path.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from config.defaults import AGGREGATE_CATEGORY, DAILY, NEWS_CHANNEL, SOCIAL_CHANNEL


@dataclass(frozen=True)
class Evidence:
    """A single social comment or post attached to a stance bucket."""

    content: str = ""


@dataclass(frozen=True)
class StanceBucket:
    """Opinions for one stance in one leaf.

    ``count`` is the direct count when non-zero, otherwise the evidence length.
    """

    count: float = 0.0
    evidence: List[Evidence] = field(default_factory=list)


@dataclass(frozen=True)
class SubCategoryEntry:
    """Leaf unit of the tree (소분류).

    Social leaves fill the stance buckets; news leaves fill ``articles``.
    """

    key: str
    related_law: Optional[str] = None
    strengthen: StanceBucket = field(default_factory=StanceBucket)
    loosen: StanceBucket = field(default_factory=StanceBucket)
    disagree: StanceBucket = field(default_factory=StanceBucket)
    agree_count: float = 0.0       # counts.찬성, or strengthen + loosen
    disagree_count: float = 0.0    # counts.반대, or the disagree bucket count
    count: float = 0.0             # news leaf count
    articles: List[dict] = field(default_factory=list)
    representative_news: Optional[str] = None

    @property
    def opinion_total(self) -> float:
        """Agree plus disagree opinions, as used for ranking magnitude."""
        return self.agree_count + self.disagree_count

    @property
    def stance_total(self) -> float:
        """Sum of the three reform-stance counts."""
        return self.strengthen.count + self.loosen.count + self.disagree.count


@dataclass(frozen=True)
class MidCategoryEntry:
    """Mid-level grouping inside a period (중분류)."""

    key: str
    count: float = 0.0
    subs: Dict[str, SubCategoryEntry] = field(default_factory=dict)


@dataclass(frozen=True)
class PeriodEntry:
    """All groupings recorded for one period key."""

    key: str
    mids: Dict[str, MidCategoryEntry] = field(default_factory=dict)
    counts: Dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class TimelineSet:
    """Granularity → period key → PeriodEntry for one channel."""

    timelines: Dict[str, Dict[str, PeriodEntry]] = field(default_factory=dict)

    def timeline(self, granularity: str) -> Dict[str, PeriodEntry]:
        return self.timelines.get(granularity, {})


_EMPTY_TIMELINE_SET = TimelineSet()


@dataclass(frozen=True)
class CategoryBucket:
    """The news and social channels of one top-level category."""

    key: str
    news: TimelineSet = field(default_factory=TimelineSet)
    social: TimelineSet = field(default_factory=TimelineSet)

    def channel(self, name: str) -> TimelineSet:
        """Return the channel by its raw key (``news`` or ``addsocial``)."""
        if name == NEWS_CHANNEL:
            return self.news
        if name == SOCIAL_CHANNEL:
            return self.social
        return _EMPTY_TIMELINE_SET


@dataclass(frozen=True)
class RawDataset:
    """Whole dashboard dataset, keyed by category in source order."""

    categories: Dict[str, CategoryBucket] = field(default_factory=dict)

    def category(self, key: str) -> CategoryBucket:
        bucket = self.categories.get(key)
        if bucket is None:
            return CategoryBucket(key=key)
        return bucket

    def category_keys(self, include_aggregate: bool = True) -> List[str]:
        if include_aggregate:
            return list(self.categories)
        return [k for k in self.categories if k != AGGREGATE_CATEGORY]

    def daily_dates(self) -> List[str]:
        """Sorted union of daily period keys across every category and channel."""
        keys = set()
        for bucket in self.categories.values():
            keys.update(bucket.news.timeline(DAILY))
            keys.update(bucket.social.timeline(DAILY))
        return sorted(keys)
