"""DDU Dart Calendar — shared data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Team:
    """A team as referenced by a match record."""

    id: str
    name: str | None = None


@dataclass(frozen=True)
class MatchRecord:
    """A single match as delivered by the DDU API."""

    match_number: str
    start: datetime | None
    home: Team | None = None
    away: Team | None = None
    competition: str | None = None


@dataclass(frozen=True)
class CalendarEvent:
    """One VEVENT, derived from a match record."""

    uid: str
    start: datetime
    end: datetime
    summary: str


@dataclass
class CalendarDocument:
    """Everything needed to render one calendar."""

    title: str
    tzid: str
    events: list[CalendarEvent] = field(default_factory=list)
    vtimezone: list[str] = field(default_factory=list)
