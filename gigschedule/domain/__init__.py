"""
Domain layer - Schedule models and the consolidation logic.
"""

from .models import CanonicalEntry, ScheduleSlot, TimeRange
from .consolidator import (
    ScheduleConsolidator,
    clean_schedule,
    consolidate,
    expand_grouped_rows,
    flatten_slots,
    group_schedules,
)
from .day_assignment import WEEK_DAYS, assign_missing_days

__all__ = [
    "CanonicalEntry",
    "ScheduleSlot",
    "TimeRange",
    "ScheduleConsolidator",
    "clean_schedule",
    "consolidate",
    "expand_grouped_rows",
    "flatten_slots",
    "group_schedules",
    "WEEK_DAYS",
    "assign_missing_days",
]
