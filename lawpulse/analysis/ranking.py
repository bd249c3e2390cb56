"""Top-N law ranking for LawPulse.

Groups social leaves by their related law, accumulates opinion volume and the
stance split, adds the news article count per law, and keeps the N largest.

Ties on ``total`` keep first-seen traversal order. This is a stable
tie-break only; it carries no meaning about the laws themselves.

No I/O or logging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from config.defaults import RANKING_TOP_N, UNKNOWN_LAW
from lawpulse.analysis.walker import iter_domains, walk_leaves
from lawpulse.models.dataset import RawDataset
from lawpulse.models.views import RankedEntity, TimeWindow
from lawpulse.utils.numeric import round_half_up


@dataclass
class _IncidentTally:
    total: float = 0
    representative_news: Optional[str] = None


@dataclass
class _LawTally:
    law: str
    total: float = 0
    strengthen: float = 0
    loosen: float = 0
    disagree: float = 0
    news_count: int = 0
    incidents: Dict[str, _IncidentTally] = field(default_factory=dict)

    def lead_incident(self) -> Optional[Tuple[str, _IncidentTally]]:
        if not self.incidents:
            return None
        # max() keeps the first incident seen on ties
        return max(self.incidents.items(), key=lambda kv: kv[1].total)


def stance_percentages(strengthen: float, loosen: float, disagree: float) -> Tuple[int, int, int]:
    """Integer stance shares that always sum to exactly 100.

    The denominator is floored at 1 and the third share is the remainder,
    so an all-zero split reads (0, 0, 100). The remainder is not clamped:
    when both rounded shares round up it can reach -1, e.g. (1, 7, 0) reads
    (13, 88, -1).
    """
    denom = max(1, strengthen + loosen + disagree)
    p1 = round_half_up(strengthen / denom * 100)
    p2 = round_half_up(loosen / denom * 100)
    return p1, p2, 100 - p1 - p2


def _tally(tallies: Dict[str, _LawTally], law: Optional[str]) -> _LawTally:
    key = law or UNKNOWN_LAW
    if key not in tallies:
        tallies[key] = _LawTally(law=key)
    return tallies[key]


def _aggregate_laws(
    dataset: RawDataset,
    window: Optional[TimeWindow],
    domains: Optional[Iterable[str]] = None,
) -> List[_LawTally]:
    """Accumulate every law seen in the window, in first-seen order."""
    domains = list(domains) if domains else None
    tallies: Dict[str, _LawTally] = {}

    for _, bucket in iter_domains(dataset, domains):
        for _, mid_key, sub_key, sub in walk_leaves(bucket.social, window=window):
            t = _tally(tallies, sub.related_law)
            t.total += sub.opinion_total
            t.strengthen += sub.strengthen.count
            t.loosen += sub.loosen.count
            t.disagree += sub.disagree.count
            incident = t.incidents.setdefault(f"{mid_key}::{sub_key}", _IncidentTally())
            incident.total += sub.opinion_total
            if not incident.representative_news:
                incident.representative_news = sub.representative_news

    for _, bucket in iter_domains(dataset, domains):
        for _, _, _, sub in walk_leaves(bucket.news, window=window):
            _tally(tallies, sub.related_law).news_count += len(sub.articles)

    return list(tallies.values())


def top_entities(
    dataset: RawDataset,
    window: Optional[TimeWindow],
    domains: Optional[Iterable[str]] = None,
    n: int = RANKING_TOP_N,
) -> List[RankedEntity]:
    """Rank laws by total opinion volume and keep the top ``n``.

    Args:
        dataset: Parsed dataset.
        window: Inclusive window; None disables date filtering.
        domains: Categories to include; None means every non-aggregate category.
        n: Number of entries to keep.

    Returns:
        RankedEntity list, rank 1 first. Empty when nothing falls in the window.
    """
    ranked = sorted(_aggregate_laws(dataset, window, domains), key=lambda t: t.total, reverse=True)

    result: List[RankedEntity] = []
    for i, t in enumerate(ranked[:n]):
        p1, p2, p3 = stance_percentages(t.strengthen, t.loosen, t.disagree)
        lead = t.lead_incident()
        result.append(
            RankedEntity(
                rank=i + 1,
                law=t.law,
                total=t.total,
                strengthen=t.strengthen,
                loosen=t.loosen,
                disagree=t.disagree,
                news_count=t.news_count,
                incident_count=len(t.incidents),
                strengthen_pct=p1,
                loosen_pct=p2,
                disagree_pct=p3,
                lead_incident=lead[0] if lead else None,
                lead_news=lead[1].representative_news if lead else None,
            )
        )
    return result
