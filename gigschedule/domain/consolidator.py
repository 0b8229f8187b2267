"""
Core business logic for consolidating availability schedules.

Pure domain logic without any external dependencies (no API calls, no
database, no I/O). Malformed rows are dropped, never reported: schedules are
typed by users and are expected to be incomplete while being edited.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Dict, List, Optional, Tuple

from .models import CanonicalEntry, ScheduleSlot, TimeRange


def _field(obj: Any, name: str) -> Any:
    """Read ``name`` from a mapping or an attribute-style object."""
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _is_filled(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _rows(raw: Any) -> Iterable[Any]:
    """Treat None and non-iterable input as an empty schedule."""
    if raw is None or not isinstance(raw, Iterable):
        return ()
    return raw


class ScheduleConsolidator:
    """
    Deduplicates raw schedule rows and groups days sharing a time range.

    Algorithm:
    1. clean: keep valid rows, drop exact (day, start, end) duplicates
    2. group: bucket days by the literal (start, end) pair
    3. order slots by start time and each slot's days alphabetically

    All comparisons are plain string comparisons; times are never parsed.
    """

    def is_acceptable(self, entry: Any) -> bool:
        """
        Check whether a raw row has a day and a non-blank start and end.
        """
        if entry is None:
            return False

        day = _field(entry, "day")
        if not isinstance(day, str) or not day:
            return False

        hours = _field(entry, "hours")
        if hours is None:
            return False

        return _is_filled(_field(hours, "start")) and _is_filled(_field(hours, "end"))

    def clean(self, raw: Optional[Iterable[Any]]) -> List[CanonicalEntry]:
        """
        Validate and deduplicate raw rows, preserving input order.

        The first occurrence of a (day, start, end) triple wins.
        """
        seen: set[Tuple[str, str, str]] = set()
        cleaned: List[CanonicalEntry] = []

        for entry in _rows(raw):
            canonical = self._to_canonical(entry)
            if canonical is None:
                continue

            key = (canonical.day, canonical.hours.start, canonical.hours.end)
            if key in seen:
                continue

            seen.add(key)
            cleaned.append(canonical)

        return cleaned

    def group(self, raw: Optional[Iterable[Any]]) -> List[ScheduleSlot]:
        """
        Group days by identical time range.

        Safe to call on unclean input: every row is validated again.
        """
        groups: Dict[Tuple[str, str], List[str]] = {}

        for entry in _rows(raw):
            canonical = self._to_canonical(entry)
            if canonical is None:
                continue

            key = (canonical.hours.start, canonical.hours.end)
            days = groups.setdefault(key, [])
            if canonical.day not in days:
                days.append(canonical.day)

        slots = [
            ScheduleSlot(days=tuple(sorted(days)), hours=TimeRange(start=start, end=end))
            for (start, end), days in groups.items()
            if days
        ]

        # sorted() is stable: slots sharing a start keep first-seen order
        return sorted(slots, key=lambda slot: slot.hours.start)

    def consolidate(self, raw: Optional[Iterable[Any]]) -> List[ScheduleSlot]:
        """Clean then group raw rows."""
        return self.group(self.clean(raw))

    def flatten(self, slots: Optional[Iterable[ScheduleSlot]]) -> List[CanonicalEntry]:
        """Expand slots back into one entry per day."""
        entries: List[CanonicalEntry] = []
        for slot in _rows(slots):
            entries.extend(slot.entries())
        return entries

    def expand(self, raw: Optional[Iterable[Any]]) -> List[Any]:
        """
        Expand editor-form rows ``{"days": [...], "hours": ...}`` into
        single-day rows. Other rows pass through unchanged.
        """
        expanded: List[Any] = []
        for entry in _rows(raw):
            days = _field(entry, "days") if entry is not None else None
            if isinstance(days, (list, tuple)):
                hours = _field(entry, "hours")
                expanded.extend({"day": day, "hours": hours} for day in days)
            else:
                expanded.append(entry)
        return expanded

    def _to_canonical(self, entry: Any) -> Optional[CanonicalEntry]:
        if not self.is_acceptable(entry):
            return None

        hours = _field(entry, "hours")
        return CanonicalEntry(
            day=_field(entry, "day"),
            hours=TimeRange(start=_field(hours, "start"), end=_field(hours, "end")),
        )


_default_consolidator = ScheduleConsolidator()


def clean_schedule(raw: Optional[Iterable[Any]]) -> List[CanonicalEntry]:
    return _default_consolidator.clean(raw)


def group_schedules(raw: Optional[Iterable[Any]]) -> List[ScheduleSlot]:
    return _default_consolidator.group(raw)


def consolidate(raw: Optional[Iterable[Any]]) -> List[ScheduleSlot]:
    """Consolidate raw schedule rows into sorted day/time-range slots."""
    return _default_consolidator.consolidate(raw)


def flatten_slots(slots: Optional[Iterable[ScheduleSlot]]) -> List[CanonicalEntry]:
    return _default_consolidator.flatten(slots)


def expand_grouped_rows(raw: Optional[Iterable[Any]]) -> List[Any]:
    return _default_consolidator.expand(raw)
