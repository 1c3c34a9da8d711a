from __future__ import annotations
from .config import PUNCTUATION


def clean_word(token: str) -> str:
    """
    Normalize a raw token for indexing and matching:
      * remove every punctuation mark in PUNCTUATION (literal removal)
      * trim surrounding whitespace
      * lowercase
    May return an empty string; callers decide what to keep.
    """
    for p in PUNCTUATION:
        token = token.replace(p, "")
    return token.strip().lower()
