"""
Repair of exported schedule rows that lost their ``day`` field.

Older gig records were saved with schedule rows carrying only ``hours``.
Such rows get a weekday assigned from their position in the list.
"""

from collections.abc import Mapping
from typing import Any, List, Optional, Sequence

WEEK_DAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def needs_day(entry: Any) -> bool:
    """Check if a mapping row is missing its day."""
    return isinstance(entry, Mapping) and not entry.get("day")


def assign_missing_days(
    raw: Optional[Sequence[Any]],
    working_days: Sequence[str] = WEEK_DAYS,
) -> List[Any]:
    """
    Assign ``working_days[index % len(working_days)]`` to rows without a day.

    Rows that already have a day, non-mapping rows and ``None`` pass through
    unchanged. Repaired rows are shallow copies; the input is never mutated.

    Example:
        [{"hours": h1}, {"day": "Friday", "hours": h2}, {"hours": h3}]
        -> Monday, Friday, Wednesday
    """
    if not raw:
        return []

    rows = list(raw)
    if not working_days:
        return rows

    repaired: List[Any] = []
    for index, entry in enumerate(rows):
        if needs_day(entry):
            fixed = dict(entry)
            fixed["day"] = working_days[index % len(working_days)]
            repaired.append(fixed)
        else:
            repaired.append(entry)
    return repaired
