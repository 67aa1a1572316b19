"""Parsing of the requested team ids."""

from __future__ import annotations

MAX_TEAMS = 10


class InvalidTeamIdsError(ValueError):
    """Raised when the team id parameter is missing or unusable."""


def parse_team_ids(raw: str | None) -> list[str]:
    """Parse ``"123, 456,abc"`` into ``["123", "456"]``.

    Non-numeric entries are dropped; between 1 and MAX_TEAMS ids must remain.
    """
    if not raw:
        raise InvalidTeamIdsError("Missing required parameter: teamIds")

    team_ids = [part.strip() for part in raw.split(",")]
    team_ids = [t for t in team_ids if t.isascii() and t.isdigit()]

    if not 1 <= len(team_ids) <= MAX_TEAMS:
        raise InvalidTeamIdsError(
            f"Invalid number of teamIds (1-{MAX_TEAMS} allowed, got {len(team_ids)})"
        )
    return team_ids
