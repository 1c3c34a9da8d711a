from __future__ import annotations
from typing import List, Tuple

from .config import MIN_QUERY_LENGTH, MIN_TERM_LENGTH
from .normalize import clean_word


def is_too_short(raw: str) -> bool:
    """We shouldn't search for single letters."""
    return len(raw) < MIN_QUERY_LENGTH


def parse_query(raw: str) -> Tuple[str, ...]:
    """
    Find the valid, unique terms of a raw query and clean them up.
    Splits on spaces only; first-seen order is preserved.
    """
    terms: List[str] = []
    seen: set[str] = set()
    for piece in raw.split(" "):
        term = clean_word(piece)
        if len(term) < MIN_TERM_LENGTH or term in seen:
            continue
        seen.add(term)
        terms.append(term)
    return tuple(terms)
