from __future__ import annotations
import logging
import os

from .models import CorpusLoadError

log = logging.getLogger(__name__)


def load_text(path: str) -> str:
    """Read the whole corpus file; any read failure is fatal for the caller."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusLoadError(f"load {path}: {e}") from e
    log.info("Loaded corpus %s (%d chars)", os.path.abspath(path), len(text))
    return text
