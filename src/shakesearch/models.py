from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple


class CorpusLoadError(OSError):
    """The corpus file could not be read; the service cannot start."""


class SearchTimeout(RuntimeError):
    """The spelling-correction scan ran past its deadline."""


@dataclass(frozen=True, order=True)
class PositionEntry:
    offset: int     # start of the word in the corpus
    term: str       # resolved query term found there


@dataclass(frozen=True)
class Correction:
    original: str
    corrected: str
    score: float


@dataclass(frozen=True)
class Resolution:
    """Outcome of matching query terms against the vocabulary."""
    matched: Tuple[str, ...]                 # terms found verbatim
    corrections: Tuple[Correction, ...]      # one per corrected term, query order
    missing: Tuple[str, ...]                 # every term not found verbatim

    @property
    def resolved(self) -> bool:
        return len(self.missing) <= len(self.corrections)

    @property
    def terms(self) -> Tuple[str, ...]:
        """Direct matches followed by corrected terms, without duplicates."""
        out: List[str] = []
        for t in list(self.matched) + [c.corrected for c in self.corrections]:
            if t not in out:
                out.append(t)
        return tuple(out)


@dataclass(frozen=True)
class SearchResult:
    snippets: Tuple[str, ...] = ()
    elapsed: int = 0                                  # nanoseconds
    replaced: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    def to_json(self) -> dict:
        """Wire shape: results, single-element time list, flat replaced pairs."""
        flat: List[str] = []
        for original, corrected in self.replaced:
            flat.extend((original, corrected))
        return {
            "results": list(self.snippets),
            "time": [format_duration(self.elapsed)],
            "replaced": flat,
        }


def _fmt_frac(value: int, unit: int, digits: int) -> str:
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    return f"{whole}.{frac:0{digits}d}".rstrip("0")


def format_duration(ns: int) -> str:
    """
    Render nanoseconds as a magnitude+unit string:
      850 -> "850ns", 152400 -> "152.4µs", 12_500_000 -> "12.5ms",
      1_250_000_000 -> "1.25s", 90_000_000_000 -> "1m30s"
    """
    ns = int(ns)
    if ns < 0:
        return "-" + format_duration(-ns)
    if ns == 0:
        return "0s"
    if ns < 1_000:
        return f"{ns}ns"
    if ns < 1_000_000:
        return _fmt_frac(ns, 1_000, 3) + "µs"
    if ns < 1_000_000_000:
        return _fmt_frac(ns, 1_000_000, 6) + "ms"

    minutes, rem = divmod(ns, 60 * 1_000_000_000)
    hours, minutes = divmod(minutes, 60)
    secs = _fmt_frac(rem, 1_000_000_000, 9) + "s"
    if hours:
        return f"{hours}h{minutes}m{secs}"
    if minutes:
        return f"{minutes}m{secs}"
    return secs
