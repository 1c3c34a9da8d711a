# shakesearch/engine.py
from __future__ import annotations

import logging
import time
from typing import Optional

from . import config as CFG
from .index import WordIndex
from .loader import load_text
from .models import SearchResult
from .search import search as run_search

log = logging.getLogger(__name__)


class Engine:
    """
    Owns the corpus and its WordIndex for the life of the process.

    Public API (used by CLI/Flask):
      * build(path) / build_from_text(text): load -> index, exactly once
      * search(query):  run one query, read-only against the index
      * shutdown():     drop the index

    The index is never mutated after build, so concurrent search() calls
    need no locking.
    """

    def __init__(self, *, timeout: Optional[float] = CFG.SEARCH_TIMEOUT) -> None:
        self.index: Optional[WordIndex] = None
        self.timeout = timeout

    # ------------- lifecycle -------------

    def build(self, path: str = CFG.DEFAULT_CORPUS, *, verbose: bool = False) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
        log.info("Loading corpus from %s", path)
        self.build_from_text(load_text(path))

    def build_from_text(self, text: str) -> None:
        if self.index is not None:
            raise RuntimeError("Engine already built")
        t0 = time.perf_counter()
        self.index = WordIndex.build(text)
        log.info("Engine build() complete in %.2fs: words=%d",
                 time.perf_counter() - t0, len(self.index))

    # ------------- query -------------

    def search(self, query: str) -> SearchResult:
        if self.index is None:
            raise RuntimeError("Engine not built. Call build() first.")
        deadline = time.monotonic() + self.timeout if self.timeout else None
        return run_search(query, self.index, deadline=deadline)

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.index = None
        log.info("Engine shutdown complete")
