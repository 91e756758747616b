"""Text and date encoding primitives for iCalendar content lines."""

from datetime import datetime
from zoneinfo import ZoneInfo

from icalendar import vDatetime


UTC = ZoneInfo("UTC")


def format_timestamp(instant: datetime) -> str:
    """Render an instant as a UTC date-time value (YYYYMMDDTHHMMSSZ).

    Naive datetimes are taken to already be in UTC.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)
    else:
        instant = instant.astimezone(UTC)
    return vDatetime(instant.replace(microsecond=0)).to_ical().decode("utf-8")


def escape_text(text: str) -> str:
    """Escape a TEXT property value.

    Backslashes go first so the escapes added afterwards are left alone.
    """
    return (
        text
        .replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
    )
