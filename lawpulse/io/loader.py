"""Dataset ingestion for LawPulse.

Turns the raw, bilingual-keyed dashboard JSON into the typed tree in
``lawpulse.models.dataset``. This is the only place that knows raw key names
and legacy spellings; aggregation code never sees them.

Resolution rules applied once per leaf:
  - stance count = direct ``count`` when non-zero, else evidence-list length
  - loosen stance = first non-zero of 폐지약화 / 폐지완화 (alternates, not summed)
  - disagree bucket = first non-zero of 반대 / 현상유지
  - any missing or non-mapping path is treated as empty
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence, Tuple

from config.defaults import NEWS_CHANNEL, SOCIAL_CHANNEL
from lawpulse.io.persistence import load_json
from lawpulse.models.dataset import (
    CategoryBucket,
    Evidence,
    MidCategoryEntry,
    PeriodEntry,
    RawDataset,
    StanceBucket,
    SubCategoryEntry,
    TimelineSet,
)
from lawpulse.utils.numeric import first_nonzero, to_number

logger = logging.getLogger(__name__)

# ── Raw key names ──────────────────────────────────────────────────────────────
MID_MAP_KEY = "중분류목록"
SUB_MAP_KEY = "소분류목록"
AGREE_KEY = "찬성"
STRENGTHEN_KEY = "개정강화"
LOOSEN_KEYS = ("폐지약화", "폐지완화")     # canonical spelling first
DISAGREE_KEYS = ("반대", "현상유지")
EVIDENCE_KEY = "소셜목록"
COUNTS_KEY = "counts"
RELATED_LAW_KEY = "관련법"
REPRESENTATIVE_NEWS_KEY = "대표뉴스"


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _sequence(value: Any) -> Sequence[Any]:
    return value if isinstance(value, list) else []


def _evidence(raw_list: Any) -> List[Evidence]:
    items = []
    for item in _sequence(raw_list):
        if isinstance(item, Mapping):
            content = item.get("content")
            items.append(Evidence(content=content if isinstance(content, str) else ""))
        elif isinstance(item, str):
            items.append(Evidence(content=item))
        else:
            items.append(Evidence())
    return items


def _stance_bucket(raw: Any, fallback_count: float = 0) -> StanceBucket:
    block = _mapping(raw)
    evidence = _evidence(block.get(EVIDENCE_KEY))
    count = to_number(block.get("count")) or fallback_count or len(evidence)
    return StanceBucket(count=count, evidence=evidence)


def _resolve_alias(
    parent: Mapping[str, Any],
    names: Tuple[str, ...],
    fallback_counts: Tuple[float, ...] = (),
    where: str = "",
) -> StanceBucket:
    """Pick one bucket among alternate spellings by the non-zero rule.

    When more than one spelling is non-zero the first (canonical) one wins
    and a warning is logged.
    """
    buckets = []
    for i, name in enumerate(names):
        fallback = fallback_counts[i] if i < len(fallback_counts) else 0
        buckets.append(_stance_bucket(parent.get(name), fallback))

    nonzero = [b for b in buckets if b.count]
    if len(nonzero) > 1:
        logger.warning(
            "Both %s are non-zero at %s (%s); using %s",
            "/".join(names),
            where or "?",
            ", ".join(str(b.count) for b in buckets),
            names[buckets.index(nonzero[0])],
        )
    index, _ = first_nonzero(b.count for b in buckets)
    if index >= 0:
        return buckets[index]
    # All zero: keep whichever spelling actually carries evidence, if any
    for bucket in buckets:
        if bucket.evidence:
            return bucket
    return buckets[0]


def parse_sub_entry(key: str, raw: Any, where: str = "") -> SubCategoryEntry:
    """Parse one leaf (소분류) into a SubCategoryEntry."""
    sub = _mapping(raw)
    counts = _mapping(sub.get(COUNTS_KEY))
    agree_block = _mapping(sub.get(AGREE_KEY))

    strengthen = _stance_bucket(agree_block.get(STRENGTHEN_KEY))
    loosen = _resolve_alias(agree_block, LOOSEN_KEYS, where=f"{where}/{key}")
    disagree = _resolve_alias(
        sub,
        DISAGREE_KEYS,
        fallback_counts=tuple(to_number(counts.get(name)) for name in DISAGREE_KEYS),
        where=f"{where}/{key}",
    )

    agree_count = to_number(counts.get(AGREE_KEY)) or (strengthen.count + loosen.count)
    law = sub.get(RELATED_LAW_KEY)
    news = sub.get(REPRESENTATIVE_NEWS_KEY)
    articles = [a for a in _sequence(sub.get("articles")) if isinstance(a, Mapping)]

    return SubCategoryEntry(
        key=key,
        related_law=law if isinstance(law, str) and law else None,
        strengthen=strengthen,
        loosen=loosen,
        disagree=disagree,
        agree_count=agree_count,
        disagree_count=disagree.count,
        count=to_number(sub.get("count")),
        articles=[dict(a) for a in articles],
        representative_news=news if isinstance(news, str) else None,
    )


def parse_period_entry(key: str, raw: Any, where: str = "") -> PeriodEntry:
    entry = _mapping(raw)
    mids: Dict[str, MidCategoryEntry] = {}
    for mid_key, mid_raw in _mapping(entry.get(MID_MAP_KEY)).items():
        mid = _mapping(mid_raw)
        subs = {
            sub_key: parse_sub_entry(sub_key, sub_raw, where=f"{where}/{key}/{mid_key}")
            for sub_key, sub_raw in _mapping(mid.get(SUB_MAP_KEY)).items()
        }
        mids[mid_key] = MidCategoryEntry(key=mid_key, count=to_number(mid.get("count")), subs=subs)

    counts = {name: to_number(v) for name, v in _mapping(entry.get(COUNTS_KEY)).items()}
    return PeriodEntry(key=key, mids=mids, counts=counts)


def parse_timeline_set(raw: Any, where: str = "") -> TimelineSet:
    timelines: Dict[str, Dict[str, PeriodEntry]] = {}
    for granularity, periods in _mapping(raw).items():
        timelines[granularity] = {
            period_key: parse_period_entry(period_key, period_raw, where=f"{where}/{granularity}")
            for period_key, period_raw in _mapping(periods).items()
        }
    return TimelineSet(timelines=timelines)


def parse_dataset(raw: Any) -> RawDataset:
    """Parse the raw dashboard JSON into a typed RawDataset.

    The input is never modified. Non-mapping input yields an empty dataset.

    Args:
        raw: Parsed JSON object keyed by category.

    Returns:
        RawDataset with legacy spellings and numeric values resolved.
    """
    if not isinstance(raw, Mapping):
        logger.warning("Dataset root is %s, not an object; using empty dataset",
                       type(raw).__name__)
        return RawDataset()

    categories: Dict[str, CategoryBucket] = {}
    for cat_key, cat_raw in raw.items():
        bucket = _mapping(cat_raw)
        categories[cat_key] = CategoryBucket(
            key=cat_key,
            news=parse_timeline_set(bucket.get(NEWS_CHANNEL), where=f"{cat_key}/{NEWS_CHANNEL}"),
            social=parse_timeline_set(
                bucket.get(SOCIAL_CHANNEL), where=f"{cat_key}/{SOCIAL_CHANNEL}"
            ),
        )
    logger.debug("Parsed dataset with %d categories", len(categories))
    return RawDataset(categories=categories)


def load_dataset(path: str | Path) -> RawDataset:
    """Load a dataset JSON file and parse it.

    Raises:
        FileNotFoundError: If the file is missing or does not contain valid JSON.
    """
    raw = load_json(path)
    if raw is None:
        raise FileNotFoundError(f"Dataset not found or unreadable: {path}")
    dataset = parse_dataset(raw)
    logger.info("Loaded dataset %s (%d categories, %d days)",
                path, len(dataset.categories), len(dataset.daily_dates()))
    return dataset

