"""
Domain models for availability schedules.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class TimeRange:
    """
    Represents an immutable time range of two opaque time-of-day strings.

    The values are kept exactly as supplied; "9:00" and "09:00" are
    different ranges.
    """
    start: str
    end: str

    def to_dict(self) -> Dict[str, str]:
        """Return the JSON-shaped form ``{"start": ..., "end": ...}``."""
        return {"start": self.start, "end": self.end}

    def __str__(self) -> str:
        return f"{self.start} - {self.end}"


@dataclass(frozen=True)
class CanonicalEntry:
    """
    A validated schedule row: one day with one time range.
    """
    day: str
    hours: TimeRange

    def to_dict(self) -> Dict[str, object]:
        return {"day": self.day, "hours": self.hours.to_dict()}


@dataclass(frozen=True)
class ScheduleSlot:
    """
    A group of days sharing one exact time range.

    Invariant: ``days`` is sorted and holds each day name once.
    """
    days: Tuple[str, ...]
    hours: TimeRange

    def to_dict(self) -> Dict[str, object]:
        return {"days": list(self.days), "hours": self.hours.to_dict()}

    def entries(self) -> List[CanonicalEntry]:
        """Expand the slot back into one entry per day."""
        return [CanonicalEntry(day=day, hours=self.hours) for day in self.days]

    def format_display(self) -> str:
        """
        Format the slot for display.
        Format: HH:MM - HH:MM | Day, Day, ...
        """
        return f"{self.hours} | {', '.join(self.days)}"
