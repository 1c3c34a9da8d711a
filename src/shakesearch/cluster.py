from __future__ import annotations
from typing import Iterable, List, Sequence

from .config import MAX_DISTANCE
from .index import WordIndex
from .models import PositionEntry

Cluster = List[PositionEntry]


def collect_positions(terms: Iterable[str], index: WordIndex) -> List[PositionEntry]:
    """Every occurrence of every term, sorted by offset (then term)."""
    entries = [PositionEntry(off, t) for t in terms for off in index.positions(t)]
    entries.sort()
    return entries


def build_clusters(entries: Sequence[PositionEntry],
                   max_distance: int = MAX_DISTANCE) -> List[Cluster]:
    """
    Group sorted entries into runs where the gap between the end of one
    word and the start of the next is at most max_distance.
    Every entry lands in exactly one cluster, including the last one.
    """
    clusters: List[Cluster] = []
    if not entries:
        return clusters
    current: Cluster = [entries[0]]
    for prev, nxt in zip(entries, entries[1:]):
        if nxt.offset - (prev.offset + len(prev.term)) > max_distance:
            clusters.append(current)
            current = []
        current.append(nxt)
    clusters.append(current)
    return clusters


def is_valid_cluster(cluster: Cluster, n_terms: int) -> bool:
    """True if the cluster holds every one of the n_terms distinct terms."""
    if not cluster or len(cluster) < n_terms:
        return False
    if n_terms == 1:
        return True
    return len({e.term for e in cluster}) == n_terms


def valid_clusters(clusters: Iterable[Cluster], terms: Sequence[str]) -> List[Cluster]:
    return [c for c in clusters if is_valid_cluster(c, len(terms))]
