# src/e2e/test_fuzzy_correction.py

import time

import pytest

from shakesearch import config as CFG
from shakesearch.fuzzy import best_match, correct_terms, jaro_winkler
from shakesearch.index import WordIndex
from shakesearch.models import SearchTimeout


def test_jaro_winkler_known_values():
    assert jaro_winkler("martha", "martha") == pytest.approx(1.0)
    # jaro 0.944, three-char common prefix boost
    assert jaro_winkler("martha", "marhta") == pytest.approx(0.9611, abs=1e-3)
    assert jaro_winkler("abc", "xyz") == 0.0


def test_prefix_boost_capped_at_three_chars():
    j = jaro_winkler("abcdx", "abcdy")
    # jaro = (4/5 + 4/5 + 1) / 3; prefix counted as 3, not 4
    base = (0.8 + 0.8 + 1.0) / 3
    assert j == pytest.approx(base + 0.1 * 3 * (1 - base))


def test_best_match_picks_highest_score():
    c = best_match("questoin", ("quest", "question", "zebra"))
    assert c is not None
    assert c.corrected == "question"
    assert c.score > CFG.SIMILARITY_THRESHOLD


def test_best_match_below_threshold_returns_none():
    assert best_match("xylophone", ("question", "hamlet")) is None


def test_ties_go_to_smallest_word():
    idx = WordIndex.build("abcdz abcdy filler")
    c = best_match("abcdx", idx.vocabulary)
    assert c is not None and c.corrected == "abcdy"


def test_deadline_aborts_scan():
    vocab = [f"w{i:05d}" for i in range(CFG.DEADLINE_CHECK_EVERY * 2)]
    with pytest.raises(SearchTimeout):
        best_match("qqqqqq", vocab, deadline=time.monotonic() - 1)


def test_correct_terms_splits_matches_and_corrections():
    idx = WordIndex.build("the quick brown fox")
    res = correct_terms(("quick", "quikc"), idx)
    assert res.matched == ("quick",)
    assert [(c.original, c.corrected) for c in res.corrections] == [("quikc", "quick")]
    assert res.resolved
    # corrected term duplicates a direct match: only searched once
    assert res.terms == ("quick",)


def test_unresolved_term_marks_resolution():
    idx = WordIndex.build("the quick brown fox")
    res = correct_terms(("quick", "zzzzzz"), idx)
    assert res.missing == ("zzzzzz",)
    assert res.corrections == ()
    assert not res.resolved
