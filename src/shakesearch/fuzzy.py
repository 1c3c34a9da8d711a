from __future__ import annotations
import logging
import time
from typing import Iterable, List, Optional

from rapidfuzz.distance import Jaro

from . import config as CFG
from .index import WordIndex
from .models import Correction, Resolution, SearchTimeout

log = logging.getLogger(__name__)


def jaro_winkler(a: str, b: str,
                 boost_threshold: float = CFG.JW_BOOST_THRESHOLD,
                 prefix_size: int = CFG.JW_PREFIX_SIZE) -> float:
    """
    Jaro similarity with the Winkler common-prefix boost.
    The boost applies only when the Jaro score exceeds boost_threshold,
    and counts at most prefix_size leading characters.
    """
    j = Jaro.similarity(a, b)
    if j <= boost_threshold:
        return j
    limit = min(prefix_size, len(a), len(b))
    common = 0
    while common < limit and a[common] == b[common]:
        common += 1
    return j + CFG.JW_PREFIX_WEIGHT * common * (1.0 - j)


def best_match(term: str, vocabulary: Iterable[str], *,
               threshold: float = CFG.SIMILARITY_THRESHOLD,
               deadline: Optional[float] = None) -> Optional[Correction]:
    """
    Scan the vocabulary for the word most similar to term.
    A candidate wins only if it beats both the best score so far and the
    threshold, so with a sorted vocabulary ties go to the smallest word.
    deadline is a time.monotonic() value; passing it raises SearchTimeout.
    """
    best: Optional[Correction] = None
    best_score = 0.0
    for n, word in enumerate(vocabulary, 1):
        if deadline is not None and n % CFG.DEADLINE_CHECK_EVERY == 0 \
                and time.monotonic() > deadline:
            log.warning("Correction scan for %r timed out after %d words", term, n)
            raise SearchTimeout(f"correction scan for {term!r} exceeded its deadline")
        score = jaro_winkler(term, word)
        if score > best_score and score > threshold:
            best_score = score
            best = Correction(original=term, corrected=word, score=score)
    return best


def correct_terms(terms: Iterable[str], index: WordIndex, *,
                  deadline: Optional[float] = None) -> Resolution:
    """Split terms into verbatim matches and corrections for the rest."""
    matched: List[str] = []
    missing: List[str] = []
    corrections: List[Correction] = []
    for term in terms:
        if term in index:
            matched.append(term)
            continue
        missing.append(term)
        c = best_match(term, index.vocabulary, deadline=deadline)
        if c is not None:
            log.debug("Corrected %r -> %r (%.3f)", c.original, c.corrected, c.score)
            corrections.append(c)
    return Resolution(matched=tuple(matched), corrections=tuple(corrections),
                      missing=tuple(missing))
