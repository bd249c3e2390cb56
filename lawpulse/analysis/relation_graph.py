"""Entity → incident relation graph for LawPulse.

Builds a pruned, weighted bipartite graph from the social daily timeline:
mid-categories are entities, their sub-categories are incidents. Incidents
are keyed ``entity::sub`` so same-named subs under different entities stay
distinct.

The selection is assembled as a NetworkX DiGraph and exported to plain
records.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import networkx as nx

from config.defaults import (
    GRAPH_NODE_SIZE_MAX,
    GRAPH_NODE_SIZE_MIN,
    GRAPH_SAMPLES_PER_STANCE,
    GRAPH_TOP_ENTITIES,
    GRAPH_TOP_INCIDENTS,
)
from lawpulse.analysis.walker import iter_domains, walk_leaves
from lawpulse.models.dataset import RawDataset, StanceBucket
from lawpulse.models.views import GraphLink, GraphNode, RelationGraph, TimeWindow

# Sample keys on incident nodes; "agree" holds the strengthen stance
SAMPLE_STANCES = ("agree", "loosen", "disagree")


@dataclass
class _Incident:
    id: str
    entity: str
    label: str
    count: float = 0
    samples: Dict[str, List[str]] = field(
        default_factory=lambda: {stance: [] for stance in SAMPLE_STANCES}
    )


@dataclass
class _Entity:
    total: float = 0
    incidents: Dict[str, _Incident] = field(default_factory=dict)


def sqrt_size_scale(
    counts: Sequence[float],
    out_min: float = GRAPH_NODE_SIZE_MIN,
    out_max: float = GRAPH_NODE_SIZE_MAX,
) -> Callable[[float], float]:
    """Square-root scale from counts onto [out_min, out_max].

    Anchored on the min/max of ``counts`` (1..50 when empty) so node area,
    not radius, tracks magnitude.
    """
    lo = min(counts) if counts else 1
    hi = max(counts) if counts else 50
    a = math.sqrt(lo)
    span = (math.sqrt(hi) - a) or 1

    def scale(value: float) -> float:
        t = (math.sqrt(value) - a) / span
        return out_min + t * (out_max - out_min)

    return scale


def _sample(target: List[str], bucket: StanceBucket, cap: int) -> None:
    for item in bucket.evidence:
        if len(target) >= cap:
            return
        target.append(item.content)


def _accumulate(
    dataset: RawDataset,
    window: Optional[TimeWindow],
    domains: Optional[Iterable[str]],
    samples_per_stance: int,
) -> Dict[str, _Entity]:
    entities: Dict[str, _Entity] = {}
    for _, bucket in iter_domains(dataset, domains):
        for _, mid_key, sub_key, sub in walk_leaves(bucket.social, window=window):
            entity = entities.setdefault(mid_key, _Entity())
            inc_id = f"{mid_key}::{sub_key}"
            incident = entity.incidents.get(inc_id)
            if incident is None:
                label = sub_key[len(mid_key) + 1:] if sub_key.startswith(f"{mid_key}_") else sub_key
                incident = _Incident(id=inc_id, entity=mid_key, label=label)
                entity.incidents[inc_id] = incident

            magnitude = sub.stance_total
            incident.count += magnitude
            entity.total += magnitude
            _sample(incident.samples["agree"], sub.strengthen, samples_per_stance)
            _sample(incident.samples["loosen"], sub.loosen, samples_per_stance)
            _sample(incident.samples["disagree"], sub.disagree, samples_per_stance)
    return entities


def _select(
    entities: Dict[str, _Entity],
    top_entities: int,
    top_incidents: int,
) -> List[Tuple[str, _Entity, List[_Incident]]]:
    ranked = sorted(entities.items(), key=lambda kv: kv[1].total, reverse=True)[:top_entities]
    selection = []
    for key, entity in ranked:
        incidents = [i for i in entity.incidents.values() if i.count > 0]
        incidents = sorted(incidents, key=lambda i: i.count, reverse=True)[:top_incidents]
        selection.append((key, entity, incidents))
    return selection


def build_relation_graph(
    dataset: RawDataset,
    window: Optional[TimeWindow],
    top_entities: int = GRAPH_TOP_ENTITIES,
    top_incidents: int = GRAPH_TOP_INCIDENTS,
    size_range: Tuple[float, float] = (GRAPH_NODE_SIZE_MIN, GRAPH_NODE_SIZE_MAX),
    samples_per_stance: int = GRAPH_SAMPLES_PER_STANCE,
    domains: Optional[Iterable[str]] = None,
) -> RelationGraph:
    """Build the pruned entity → incident graph for a window.

    Args:
        dataset: Parsed dataset.
        window: Inclusive window over the daily timeline; None uses every day.
        top_entities: Entities kept, by total magnitude.
        top_incidents: Incidents kept per entity, by count; zero counts dropped.
        size_range: Output range of the incident size scale.
        samples_per_stance: Evidence texts kept per stance per incident.
        domains: Categories to include; None means every non-aggregate category.

    Returns:
        RelationGraph; empty when nothing falls in the window.
    """
    entities = _accumulate(dataset, window, domains, samples_per_stance)
    selection = _select(entities, top_entities, top_incidents)

    counts = [inc.count for _, _, incidents in selection for inc in incidents]
    scale = sqrt_size_scale(counts, *size_range)

    G = nx.DiGraph()
    for key, entity, incidents in selection:
        G.add_node(key, type="entity", label=key, total=entity.total)
        for inc in incidents:
            G.add_node(
                inc.id,
                type="incident",
                label=inc.label,
                total=inc.count,
                entity=key,
                size=round(scale(inc.count), 4),
                samples={k: list(v) for k, v in inc.samples.items()},
            )
            G.add_edge(key, inc.id, weight=inc.count)

    nodes = [
        GraphNode(
            id=node_id,
            type=attrs["type"],
            label=attrs["label"],
            total=attrs["total"],
            entity=attrs.get("entity"),
            size=attrs.get("size"),
            samples=attrs.get("samples", {}),
        )
        for node_id, attrs in G.nodes(data=True)
    ]
    links = [GraphLink(source=u, target=v, weight=d["weight"]) for u, v, d in G.edges(data=True)]
    return RelationGraph(nodes=nodes, links=links)
