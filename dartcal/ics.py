"""iCalendar text encoding: escaping, line folding and document layout."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from dartcal import CalendarDocument
from dartcal.timeutil import format_local, format_utc

MAX_LINE_OCTETS = 75
CRLF = "\r\n"

PRODID_TEMPLATE = "-//DDU Dart Calendar [teamIds:{team_ids}]//EN"
UID_DOMAIN = "dart-ddu.dk"


def escape_text(text: str) -> str:
    """Escape a TEXT value. Backslash goes first so later escapes survive."""
    return (
        text.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\n", "\\n")
    )


def fold_line(line: str) -> str:
    """Fold a logical line into physical lines of at most 75 octets.

    Continuation lines start with a single space. Multi-byte characters
    are never split.
    """
    if len(line.encode("utf-8")) <= MAX_LINE_OCTETS:
        return line

    parts: list[str] = []
    current = ""
    size = 0
    for char in line:
        width = len(char.encode("utf-8"))
        if size + width > MAX_LINE_OCTETS:
            parts.append(current)
            current, size = " ", 1
        current += char
        size += width
    parts.append(current)
    return CRLF.join(parts)


class ICSBuilder:
    """Collects logical lines; folding happens once, in ``render``."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def add(self, line: str) -> None:
        self.lines.append(line)

    def add_text(self, name: str, text: str) -> None:
        self.lines.append(f"{name}:{escape_text(text)}")

    def extend(self, lines: Iterable[str]) -> None:
        self.lines.extend(lines)

    def render(self) -> str:
        return CRLF.join(fold_line(line) for line in self.lines)


def render_calendar(
    document: CalendarDocument,
    team_ids: Iterable[str],
    now: datetime | None = None,
) -> str:
    """Render a full VCALENDAR. ``now`` sets DTSTAMP (defaults to current UTC)."""
    stamp = format_utc(now or datetime.now(timezone.utc))

    builder = ICSBuilder()
    builder.add("BEGIN:VCALENDAR")
    builder.add("VERSION:2.0")
    builder.add("PRODID:" + PRODID_TEMPLATE.format(team_ids=",".join(team_ids)))
    builder.add("CALSCALE:GREGORIAN")
    builder.add_text("X-WR-CALNAME", document.title)
    builder.add(f"X-WR-TIMEZONE:{document.tzid}")
    builder.extend(document.vtimezone)

    for event in document.events:
        builder.add("BEGIN:VEVENT")
        builder.add(f"UID:{event.uid}@{UID_DOMAIN}")
        builder.add(f"DTSTAMP:{stamp}")
        builder.add(f"DTSTART;TZID={document.tzid}:{format_local(event.start)}")
        builder.add(f"DTEND;TZID={document.tzid}:{format_local(event.end)}")
        builder.add_text("SUMMARY", event.summary)
        builder.add("END:VEVENT")

    builder.add("END:VCALENDAR")
    return builder.render()
