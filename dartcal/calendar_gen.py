"""ICS calendar generation from per-team match batches."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from dartcal import CalendarDocument, MatchRecord
from dartcal.ics import render_calendar
from dartcal.merge import merge_batches
from dartcal.metadata import calendar_title
from dartcal.sequencer import sequence_events
from dartcal.vtimezone import TIMEZONE, build_vtimezone

CONTENT_TYPE = "text/calendar; charset=utf-8"
FILENAME = "dart-kampprogram.ics"


def build_document(
    batches: Iterable[Iterable[MatchRecord]], team_ids: list[str]
) -> CalendarDocument:
    """Merge batches and derive the title and event list."""
    records = merge_batches(batches)
    return CalendarDocument(
        title=calendar_title(records, team_ids),
        tzid=TIMEZONE.tzid,
        events=sequence_events(records),
        vtimezone=build_vtimezone(TIMEZONE),
    )


def create_calendar(
    batches: Iterable[Iterable[MatchRecord]],
    team_ids: list[str],
    now: datetime | None = None,
) -> str:
    """Create the ICS text for the given teams' match batches."""
    document = build_document(batches, team_ids)
    return render_calendar(document, team_ids, now=now)
