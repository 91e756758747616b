"""iCalendar transformer for assignment calendar events."""

import logging
from datetime import datetime
from typing import Callable, Optional

from .base import BaseTransformer
from .encoding import UTC, escape_text, format_timestamp
from .models import CalendarEvent


logger = logging.getLogger(__name__)

CHARSET = "utf-8"
MIME_TYPE = f"text/calendar;charset={CHARSET}"
DEFAULT_FILENAME = "assignments.ics"


def _utc_now() -> datetime:
    return datetime.now(UTC)


class IcsTransformer(BaseTransformer):
    """Transformer that converts calendar events to iCalendar text.

    Every event carries two display reminders, one day and one hour before
    it starts. Lines are separated with CRLF.
    """

    PRODID = "-//AssignWatch//Assignment Calendar//EN"
    CALENDAR_NAME = "AssignWatch - Assignments"
    UID_DOMAIN = "assignwatch"
    LINE_SEPARATOR = "\r\n"
    # (trigger, human readable lead time)
    REMINDERS = (
        ("-PT24H", "24 hours"),
        ("-PT1H", "1 hour"),
    )

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        """Initialize the iCalendar transformer.

        Args:
            clock: Source of the generation time written to DTSTAMP
                (default: current UTC time).
        """
        self._clock = clock or _utc_now
        self._document: Optional[str] = None

    def _event_uid(self, event: CalendarEvent) -> str:
        """Return the event UID, deriving one from the start time if unset."""
        if event.uid:
            return event.uid
        start = event.start
        if start.tzinfo is None:
            start = start.replace(tzinfo=UTC)
        epoch_ms = int(start.timestamp() * 1000)
        return f"{epoch_ms}@{self.UID_DOMAIN}"

    def _event_lines(self, event: CalendarEvent, stamp: str) -> list[str]:
        title = escape_text(event.title)
        lines = [
            "BEGIN:VEVENT",
            f"UID:{self._event_uid(event)}",
            f"DTSTAMP:{stamp}",
            f"DTSTART:{format_timestamp(event.start)}",
            f"DTEND:{format_timestamp(event.end)}",
            f"SUMMARY:{title}",
            f"DESCRIPTION:{escape_text(event.description)}",
        ]

        if event.location:
            lines.append(f"LOCATION:{escape_text(event.location)}")

        # URL values are written as-is
        if event.url:
            lines.append(f"URL:{event.url}")

        for trigger, lead_time in self.REMINDERS:
            lines.extend([
                "BEGIN:VALARM",
                f"TRIGGER:{trigger}",
                "ACTION:DISPLAY",
                f"DESCRIPTION:{title} is due in {lead_time}",
                "END:VALARM",
            ])

        lines.append("END:VEVENT")
        return lines

    def transform(self, events: list[CalendarEvent]) -> str:
        """Transform calendar events into an iCalendar document.

        Events are written in the order given.

        Args:
            events: Calendar events to include.

        Returns:
            iCalendar document text.
        """
        lines = [
            "BEGIN:VCALENDAR",
            "VERSION:2.0",
            f"PRODID:{self.PRODID}",
            "CALSCALE:GREGORIAN",
            "METHOD:PUBLISH",
            f"X-WR-CALNAME:{self.CALENDAR_NAME}",
            "X-WR-TIMEZONE:UTC",
        ]

        stamp = format_timestamp(self._clock())
        for event in events:
            lines.extend(self._event_lines(event, stamp))

        lines.append("END:VCALENDAR")
        logger.debug("Built calendar with %d events", len(events))

        self._document = self.LINE_SEPARATOR.join(lines)
        return self._document

    def save(self, output_path: str) -> None:
        """Save the calendar to an .ics file.

        Args:
            output_path: Path to the output file.

        Raises:
            RuntimeError: If transform() hasn't been called yet.
        """
        if self._document is None:
            raise RuntimeError("No calendar data. Call transform() first.")

        with open(output_path, "wb") as f:
            f.write(self._document.encode(CHARSET))


def build_ics(
    events: list[CalendarEvent],
    clock: Optional[Callable[[], datetime]] = None
) -> str:
    """Build an iCalendar document from calendar events."""
    return IcsTransformer(clock=clock).transform(events)
