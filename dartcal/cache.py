"""On-disk caching of API responses and rendered calendars."""

from __future__ import annotations

import json
import time
from pathlib import Path

from icalendar import Calendar

API_CACHE_TTL = 1800  # 30 minutes
ICS_CACHE_TTL = 900  # 15 minutes


def _is_fresh(path: Path, max_age: float | None) -> bool:
    if not path.exists():
        return False
    if max_age is None:
        return True
    return time.time() - path.stat().st_mtime < max_age


def save_json_cache(cache_dir: Path, key: str, data: object) -> None:
    """Save a decoded API response."""
    cache_dir.mkdir(parents=True, exist_ok=True)
    cache_file = cache_dir / f"{key}.json"
    cache_file.write_text(json.dumps(data), encoding="utf-8")


def load_json_cache(
    cache_dir: Path, key: str, max_age: float | None = API_CACHE_TTL
) -> object | None:
    """Load a cached API response. Returns None if missing or stale."""
    cache_file = cache_dir / f"{key}.json"
    if not _is_fresh(cache_file, max_age):
        return None
    return json.loads(cache_file.read_text(encoding="utf-8"))


def save_to_cache(cache_dir: Path, key: str, ics_data: bytes) -> None:
    """Save ICS data to cache directory."""
    cache_dir.mkdir(parents=True, exist_ok=True)
    cache_file = cache_dir / f"{key}.ics"
    cache_file.write_bytes(ics_data)


def load_cached_calendar(
    cache_dir: Path, key: str, max_age: float | None = None
) -> bytes | None:
    """Load cached ICS data.

    With ``max_age`` set, entries older than that many seconds count as
    missing. The default accepts any age, which is what the fallback path
    wants.
    """
    cache_file = cache_dir / f"{key}.ics"
    if _is_fresh(cache_file, max_age):
        return cache_file.read_bytes()
    return None


def validate_ics(data: bytes) -> bool:
    """Check that ICS data is a parseable VCALENDAR."""
    text = data.decode("utf-8", errors="replace")
    if not text.startswith("BEGIN:VCALENDAR") or "END:VCALENDAR" not in text:
        return False
    try:
        Calendar.from_ical(data)
    except ValueError:
        return False
    return True
