# src/e2e/test_cluster_engine.py

from shakesearch.cluster import build_clusters, collect_positions, valid_clusters
from shakesearch.index import WordIndex
from shakesearch.models import PositionEntry as PE


def test_collect_positions_sorted_across_terms():
    idx = WordIndex.build("ab cd ab ef cd")
    entries = collect_positions(("cd", "ab"), idx)
    assert [(e.offset, e.term) for e in entries] == [
        (0, "ab"), (3, "cd"), (6, "ab"), (12, "cd"),
    ]


def test_gap_measured_from_end_of_previous_word():
    entries = [PE(0, "ab"), PE(52, "cd"), PE(200, "ab")]
    clusters = build_clusters(entries)
    # 52 - (0 + 2) == 50 stays together; 200 - 54 > 50 splits
    assert clusters == [[PE(0, "ab"), PE(52, "cd")], [PE(200, "ab")]]


def test_every_entry_lands_in_exactly_one_cluster():
    entries = [PE(o, "word") for o in (0, 10, 100, 110, 500, 1000)]
    clusters = build_clusters(entries)
    flat = [e for c in clusters for e in c]
    assert flat == entries
    assert clusters[-1] == [PE(1000, "word")]


def test_empty_input_yields_no_clusters():
    assert build_clusters([]) == []


def test_validation_requires_every_term():
    clusters = [
        [PE(0, "ab"), PE(5, "cd")],        # both terms
        [PE(100, "ab"), PE(105, "ab")],    # enough entries, one term
        [PE(300, "cd")],                   # too small
    ]
    assert valid_clusters(clusters, ("ab", "cd")) == [clusters[0]]


def test_single_term_accepts_any_non_empty_cluster():
    clusters = [[PE(0, "ab")], [PE(100, "ab"), PE(110, "ab")]]
    assert valid_clusters(clusters, ("ab",)) == clusters


def test_gap_ignores_start_to_start_distance():
    # start-to-start 54, but only 49 chars after the end of "romeo"
    entries = [PE(0, "romeo"), PE(54, "juliet")]
    assert build_clusters(entries) == [entries]
    # 51 chars after the end of "romeo" splits
    apart = [PE(0, "romeo"), PE(56, "juliet")]
    assert build_clusters(apart) == [[apart[0]], [apart[1]]]
