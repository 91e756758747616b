"""Abstract base class for calendar transformers."""

from abc import ABC, abstractmethod
from typing import Any

from .models import CalendarEvent


class BaseTransformer(ABC):
    """Abstract base class defining the interface for calendar transformers.

    Extend this class to implement transformers for different output formats
    (e.g., iCalendar, JSON, etc.).
    """

    @abstractmethod
    def transform(self, events: list[CalendarEvent]) -> Any:
        """Transform calendar events into the target format.

        Args:
            events: Calendar events, in output order.

        Returns:
            Transformed data in the target format.
        """
        pass

    @abstractmethod
    def save(self, output_path: str) -> None:
        """Save the transformed data to a file.

        Args:
            output_path: Path to the output file.
        """
        pass
