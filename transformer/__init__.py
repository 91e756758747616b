"""Transformer module for converting assignment data to calendar formats."""

from .base import BaseTransformer
from .encoding import escape_text, format_timestamp
from .ics_transformer import DEFAULT_FILENAME, MIME_TYPE, IcsTransformer, build_ics
from .mapper import assignment_to_event, generate_ics, map_assignments, status_label
from .models import CalendarEvent

__all__ = [
    "BaseTransformer",
    "CalendarEvent",
    "DEFAULT_FILENAME",
    "IcsTransformer",
    "MIME_TYPE",
    "assignment_to_event",
    "build_ics",
    "escape_text",
    "format_timestamp",
    "generate_ics",
    "map_assignments",
    "status_label",
]
