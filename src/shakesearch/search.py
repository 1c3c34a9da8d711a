from __future__ import annotations
import logging
import time
from typing import Optional

from .cluster import build_clusters, collect_positions, valid_clusters
from .fuzzy import correct_terms
from .index import WordIndex
from .models import SearchResult
from .query import is_too_short, parse_query
from .snippet import compile_terms, extract_snippet

log = logging.getLogger(__name__)


def search(query: str, index: WordIndex, *, deadline: Optional[float] = None) -> SearchResult:
    """
    Run one query against the index:
      parse -> correct misspellings -> collect positions -> cluster ->
      keep clusters holding every term -> extract highlighted snippets.
    Every exit path returns a timed SearchResult.
    """
    start = time.perf_counter_ns()

    def done(snippets=(), replaced=()) -> SearchResult:
        return SearchResult(snippets=tuple(snippets),
                            elapsed=time.perf_counter_ns() - start,
                            replaced=tuple(replaced))

    if is_too_short(query):
        return done()

    res = correct_terms(parse_query(query), index, deadline=deadline)

    # More missing terms than replacements: no good reading of the query
    if not res.resolved:
        log.debug("Unresolved terms for %r: %s", query, res.missing)
        return done()

    replaced = [(c.original, c.corrected) for c in res.corrections]
    terms = res.terms
    entries = collect_positions(terms, index)
    if not entries:
        return done(replaced=replaced)

    clusters = valid_clusters(build_clusters(entries), terms)
    pattern = compile_terms(terms)
    snippets = [extract_snippet(index.text, c, pattern) for c in clusters]
    return done(snippets, replaced)
