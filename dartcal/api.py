"""DDU kampprogram API client."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import requests

from dartcal import MatchRecord, Team
from dartcal.cache import API_CACHE_TTL, load_json_cache, save_json_cache
from dartcal.timeutil import parse_instant

API_BASE = "https://api.dart-ddu.dk/kampprograms"
USER_AGENT = "DartCalendarBot/1.0 (ICS calendar feed)"
REQUEST_TIMEOUT = 30


class ApiError(RuntimeError):
    """Raised when the API answers with something that is not a match list."""


def build_api_url(team_id: str) -> str:
    """URL for every match where ``team_id`` plays home or away."""
    return (
        f"{API_BASE}"
        "?_sort=kampprogram_dato:asc,kampprogram_kampnr:asc"
        "&_start=0&_limit=-1"
        f"&_where%5B_or%5D%5B0%5D%5Bkampprogram_hjemmehold.id%5D={team_id}"
        f"&_where%5B_or%5D%5B1%5D%5Bkampprogram_udehold.id%5D={team_id}"
    )


def _parse_team(raw: Any) -> Team | None:
    if not isinstance(raw, dict) or raw.get("id") is None:
        return None
    return Team(id=str(raw["id"]), name=raw.get("hold_holdnavn") or None)


def parse_record(raw: dict[str, Any]) -> MatchRecord:
    """Map one API object to a MatchRecord, tolerating missing fields."""
    competition = raw.get("raekke_id")
    return MatchRecord(
        match_number=str(raw.get("kampprogram_kampnr", "")),
        start=parse_instant(raw.get("kampprogram_dato")),
        home=_parse_team(raw.get("kampprogram_hjemmehold")),
        away=_parse_team(raw.get("kampprogram_udehold")),
        competition=(
            competition.get("raekke_navn") or None
            if isinstance(competition, dict)
            else None
        ),
    )


def parse_records(data: Any, team_id: str) -> list[MatchRecord]:
    if not isinstance(data, list):
        raise ApiError(
            f"Expected a list of matches for teamId {team_id}, got {type(data).__name__}"
        )
    return [parse_record(item) for item in data if isinstance(item, dict)]


def fetch_team_records(team_id: str, cache_dir: Path | None = None) -> list[MatchRecord]:
    """Fetch all matches for one team, using the JSON cache when fresh."""
    cache_key = f"team-{team_id}"
    if cache_dir is not None:
        cached = load_json_cache(cache_dir, cache_key, max_age=API_CACHE_TTL)
        if cached is not None:
            return parse_records(cached, team_id)

    response = requests.get(
        build_api_url(team_id),
        headers={"User-Agent": USER_AGENT},
        timeout=REQUEST_TIMEOUT,
    )
    response.raise_for_status()
    try:
        data = response.json()
    except ValueError as e:
        raise ApiError(f"Failed to parse JSON for teamId {team_id}: {e}") from e

    records = parse_records(data, team_id)
    if cache_dir is not None:
        save_json_cache(cache_dir, cache_key, data)
    return records


def fetch_all(team_ids: list[str], cache_dir: Path | None = None) -> list[list[MatchRecord]]:
    """One batch per requested team, in request order."""
    return [fetch_team_records(team_id, cache_dir) for team_id in team_ids]
