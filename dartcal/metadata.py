"""Calendar title derived from the merged records."""

from __future__ import annotations

from collections.abc import Iterable

from dartcal import MatchRecord


def team_names(records: Iterable[MatchRecord], team_ids: Iterable[str]) -> list[str]:
    """Names of the requested teams, in order of first appearance.

    Opponents are skipped even though their matches end up in the calendar.
    """
    wanted = {str(team_id) for team_id in team_ids}
    names: dict[str, None] = {}
    for record in records:
        for team in (record.home, record.away):
            if team and team.name and str(team.id) in wanted:
                names.setdefault(team.name)
    return list(names)


def competition_names(records: Iterable[MatchRecord]) -> list[str]:
    names: dict[str, None] = {}
    for record in records:
        if record.competition:
            names.setdefault(record.competition)
    return list(names)


def calendar_title(records: list[MatchRecord], team_ids: Iterable[str]) -> str:
    """Build e.g. ``"Pilen, Bullseye (Serie 1, Pokal)"``."""
    teams = ", ".join(team_names(records, team_ids))
    competitions = ", ".join(competition_names(records))
    return f"{teams} ({competitions})"
