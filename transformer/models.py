"""Data models for calendar events."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class CalendarEvent:
    """A single calendar event ready to be serialized.

    Due dates are points in time, so start and end may be equal.
    """

    title: str
    description: str
    start: datetime
    end: datetime
    location: Optional[str] = field(default=None)
    url: Optional[str] = field(default=None)
    uid: Optional[str] = field(default=None)
