"""In-memory proximity search over a single text corpus."""
from __future__ import annotations
from .engine import Engine
from .index import WordIndex
from .models import CorpusLoadError, SearchResult, SearchTimeout, format_duration
from .search import search

__all__ = [
    "Engine",
    "WordIndex",
    "SearchResult",
    "CorpusLoadError",
    "SearchTimeout",
    "format_duration",
    "search",
]
