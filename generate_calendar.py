#!/usr/bin/env python3
"""
DDU Dart Calendar Generator

Fetches the match programme for one or more teams from the DDU API and
writes a single ICS calendar to public/dart-kampprogram.ics.

Usage: generate_calendar.py TEAM_IDS [--no-cache]
       (TEAM_IDS is comma separated, e.g. 1234,5678; falls back to the
       DART_TEAM_IDS environment variable)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dartcal.api import fetch_all
from dartcal.cache import ICS_CACHE_TTL, load_cached_calendar, save_to_cache, validate_ics
from dartcal.calendar_gen import FILENAME, create_calendar
from dartcal.params import InvalidTeamIdsError, parse_team_ids


def cache_key(team_ids: list[str]) -> str:
    return "calendar-" + "-".join(team_ids)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    use_cache = "--no-cache" not in args
    positional = [a for a in args if not a.startswith("--")]
    raw_ids = positional[0] if positional else os.environ.get("DART_TEAM_IDS")

    try:
        team_ids = parse_team_ids(raw_ids)
    except InvalidTeamIdsError as e:
        print(f"ERROR: {e}")
        return 2

    output_dir = Path("public")
    output_dir.mkdir(exist_ok=True)
    cache_dir = Path("cache")
    ics_path = output_dir / FILENAME
    key = cache_key(team_ids)

    if use_cache:
        cached = load_cached_calendar(cache_dir, key, max_age=ICS_CACHE_TTL)
        if cached:
            ics_path.write_bytes(cached)
            print(f"Calendar for teamIds {','.join(team_ids)} is fresh in cache")
            print(f"  Saved {ics_path}")
            return 0

    print(f"Fetching matches for teamIds {','.join(team_ids)} from DDU...")

    try:
        batches = fetch_all(team_ids, cache_dir if use_cache else None)
        for team_id, batch in zip(team_ids, batches):
            print(f"  teamId {team_id}: {len(batch)} matches")

        ics_bytes = create_calendar(batches, team_ids).encode("utf-8")

        if not validate_ics(ics_bytes):
            raise ValueError("Generated ICS failed validation")

        ics_path.write_bytes(ics_bytes)
        print(f"  Saved {ics_path}")
        save_to_cache(cache_dir, key, ics_bytes)

    except Exception as e:
        print(f"  ERROR: Failed to build calendar: {e}")

        cached = load_cached_calendar(cache_dir, key)
        if cached:
            print("  Using cached calendar")
            ics_path.write_bytes(cached)
        return 1

    print("Done")
    return 0


if __name__ == "__main__":
    sys.exit(main())
