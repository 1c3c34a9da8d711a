from __future__ import annotations
import re
from typing import Sequence

from markupsafe import escape

from .config import HIGHLIGHT_END, HIGHLIGHT_START, SNIPPET_SURROUND
from .models import PositionEntry


def window_bounds(text_len: int, first: int, last: int,
                  surround: int = SNIPPET_SURROUND) -> tuple[int, int]:
    """[first - surround, last + surround) clamped to the document."""
    start = min(max(0, first - surround), text_len)
    end = max(min(text_len, last + surround), start)
    return start, end


def trim_to_words(text: str, start: int, end: int) -> str:
    """
    Slice text[start:end] without breaking words: move the leading edge
    forward to the first whitespace and the trailing edge back to the last
    one. Edges sitting on the document boundary are already word-safe.
    """
    lo, hi = start, end
    if lo > 0:
        for i in range(lo, hi):
            if text[i].isspace():
                lo = i
                break
    if hi < len(text):
        for i in range(hi - 1, lo, -1):
            if text[i].isspace():
                hi = i
                break
    return text[lo:hi].strip()


def compile_terms(terms: Sequence[str]) -> re.Pattern | None:
    """Case-insensitive literal alternation, longest term first."""
    if not terms:
        return None
    alts = sorted({t for t in terms if t}, key=lambda t: (-len(t), t))
    return re.compile("|".join(re.escape(t) for t in alts), re.IGNORECASE)


def highlight(snippet: str, pattern: re.Pattern | None) -> str:
    """Wrap every match in highlight markup; everything else is HTML-escaped."""
    if pattern is None:
        return str(escape(snippet))
    out: list[str] = []
    pos = 0
    for m in pattern.finditer(snippet):
        out.append(str(escape(snippet[pos:m.start()])))
        out.append(HIGHLIGHT_START + str(escape(m.group(0))) + HIGHLIGHT_END)
        pos = m.end()
    out.append(str(escape(snippet[pos:])))
    return "".join(out)


def extract_snippet(text: str, cluster: Sequence[PositionEntry],
                    pattern: re.Pattern | None) -> str:
    start, end = window_bounds(len(text), cluster[0].offset, cluster[-1].offset)
    return highlight(trim_to_words(text, start, end), pattern)
