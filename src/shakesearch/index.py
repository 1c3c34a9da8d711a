from __future__ import annotations
import logging
from collections import defaultdict
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from .normalize import clean_word

log = logging.getLogger(__name__)

_BOUNDARY = (" ", "\n")


class WordIndex:
    """
    Immutable word -> start offsets index over a single corpus.
    Built once by Engine.build() and shared read-only by
    every request; offsets for each word are strictly increasing.
    """

    __slots__ = ("_text", "_words", "_vocab")

    def __init__(self, text: str, words: Mapping[str, Tuple[int, ...]]) -> None:
        self._text = text
        self._words: Mapping[str, Tuple[int, ...]] = MappingProxyType(dict(words))
        self._vocab: Tuple[str, ...] = tuple(sorted(self._words))

    # ---- Build ----
    @classmethod
    def build(cls, text: str) -> "WordIndex":
        """
        Split the corpus manually so every word keeps its position.
        A boundary is a space or newline once the buffer holds more than one
        character; shorter buffers absorb the boundary char and keep growing.
        """
        postings: Dict[str, List[int]] = defaultdict(list)
        buf: List[str] = []

        def flush(i: int) -> None:
            word = clean_word("".join(buf))
            buf.clear()
            if word:
                postings[word].append(i - len(word))

        for i, ch in enumerate(text):
            if ch in _BOUNDARY and len(buf) > 1:
                flush(i)
                continue
            buf.append(ch)
        if buf:
            flush(len(text))

        idx = cls(text, {w: tuple(p) for w, p in postings.items()})
        log.info("Indexed %d chars: words=%d", len(text), len(idx))
        return idx

    # ---- Query ----
    @property
    def text(self) -> str:
        return self._text

    @property
    def vocabulary(self) -> Tuple[str, ...]:
        """Distinct indexed words, sorted."""
        return self._vocab

    def positions(self, word: str) -> Tuple[int, ...]:
        return self._words.get(word, ())

    def __contains__(self, word: object) -> bool:
        return word in self._words and bool(self._words[word])  # type: ignore[index]

    def __len__(self) -> int:
        return len(self._words)

    def items(self):
        return self._words.items()
