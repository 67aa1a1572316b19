"""Turn merged match records into ordered, deduplicated calendar events."""

from __future__ import annotations

from datetime import timedelta

from dartcal import CalendarEvent, MatchRecord
from dartcal.timeutil import format_local, to_utc

DEFAULT_DURATION = timedelta(hours=2)

HOME_FALLBACK = "Home"
AWAY_FALLBACK = "Away"
COMPETITION_FALLBACK = "Match"


def event_uid(record: MatchRecord) -> str:
    """``<match number>-<local start>``; equal for copies of the same match."""
    return f"{record.match_number}-{format_local(record.start)}"


def event_summary(record: MatchRecord) -> str:
    competition = record.competition or COMPETITION_FALLBACK
    home = record.home.name if record.home and record.home.name else HOME_FALLBACK
    away = record.away.name if record.away and record.away.name else AWAY_FALLBACK
    return f"{competition}: {home} vs {away}"


def sequence_events(records: list[MatchRecord]) -> list[CalendarEvent]:
    """Sort, time-box and deduplicate match records.

    Each event lasts DEFAULT_DURATION unless the next match in start order
    begins earlier, in which case it ends when that match starts. Only one
    neighbour is consulted: the first following record that is not a copy
    of the current match.
    """
    timed = [r for r in records if r.start is not None]
    starts = [to_utc(r.start) for r in timed]
    uids = [event_uid(r) for r in timed]
    order = sorted(range(len(timed)), key=lambda i: starts[i])

    events: list[CalendarEvent] = []
    seen: set[str] = set()
    for pos, i in enumerate(order):
        uid, start = uids[i], starts[i]
        if uid in seen:
            continue
        seen.add(uid)

        end = start + DEFAULT_DURATION
        following = pos + 1
        while following < len(order) and uids[order[following]] == uid:
            following += 1
        if following < len(order):
            next_start = starts[order[following]]
            if start < next_start < end:
                end = next_start

        events.append(
            CalendarEvent(uid=uid, start=start, end=end, summary=event_summary(timed[i]))
        )
    return events
