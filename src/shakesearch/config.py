from __future__ import annotations
import os

# Characters stripped from every token (literal removal, one at a time)
PUNCTUATION: tuple[str, ...] = (",", ".", "?", "!", ";", "-", "[", "]", "_", "'", "`")

# Queries shorter than this return nothing
MIN_QUERY_LENGTH: int = 2
# Terms must be longer than one character
MIN_TERM_LENGTH: int = 2

# Spelling correction (Jaro-Winkler)
SIMILARITY_THRESHOLD: float = 0.85
JW_BOOST_THRESHOLD: float = 0.5
JW_PREFIX_SIZE: int = 3
JW_PREFIX_WEIGHT: float = 0.1

# Max distance in chars between the end of one word and the next in a cluster
MAX_DISTANCE: int = 50
# Chars of surrounding text included on each side of a cluster
SNIPPET_SURROUND: int = 50

HIGHLIGHT_START: str = "<b>"
HIGHLIGHT_END: str = "</b>"

# /* ~~~ process settings ~~~ */
DEFAULT_CORPUS: str = "completeworks.txt"
DEFAULT_HOST: str = "0.0.0.0"
DEFAULT_PORT: int = int(os.environ.get("PORT") or 3001)

# Seconds allowed for the fuzzy vocabulary scan (unset = no limit)
_timeout = os.environ.get("SHAKESEARCH_TIMEOUT")
SEARCH_TIMEOUT: float | None = float(_timeout) if _timeout else None

# How many vocabulary words to score between deadline checks
DEADLINE_CHECK_EVERY: int = 1024
