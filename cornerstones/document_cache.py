"""Cache helpers for the parsed reference document."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Dict, Optional, Tuple

from cornerstones.parser import load_document
from cornerstones.parser.types import SectionList

# Types for cache storage: load time, file mtime and parsed sections.
CacheEntry = Tuple[float, Optional[float], SectionList]
CacheStore = Dict[Path, CacheEntry]

# Global in-memory cache and its time-to-live in seconds.
_CACHE: CacheStore = {}
_TTL_SECONDS = 15 * 60


def _modified_time(path: Path) -> float | None:
    """Return the modification time of ``path`` or ``None`` if missing."""

    try:
        return path.stat().st_mtime
    except FileNotFoundError:
        return None


def load_sections(path: Path) -> SectionList:
    """Return the parsed sections of ``path`` using a timed cache.

    An entry is reused while it is younger than the time-to-live and the
    file has not been modified since it was parsed.

    Args:
        path: Location of the markdown source.

    Returns:
        Parsed sections shared between callers; treat them as read-only.
    """

    now = time.time()
    mtime = _modified_time(path)
    cached = _CACHE.get(path)

    # Return cached entry when still valid.
    if cached and now - cached[0] < _TTL_SECONDS and cached[1] == mtime:
        return cached[2]

    sections = load_document(path)

    # Store fresh entry in the cache.
    _CACHE[path] = (now, mtime, sections)
    return sections


def clear_cache() -> None:
    """Drop every cached document."""

    _CACHE.clear()
