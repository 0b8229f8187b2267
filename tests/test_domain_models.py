"""
Tests for domain models.
"""

import dataclasses

import pytest

from gigschedule.domain.availability import (
    DEFAULT_AVAILABILITY,
    Availability,
    MinimumHours,
)
from gigschedule.domain.models import CanonicalEntry, ScheduleSlot, TimeRange


class TestTimeRange:
    """Tests for TimeRange model."""

    def test_structural_equality(self):
        """Ranges with the same strings are equal and hashable."""
        assert TimeRange("09:00", "17:00") == TimeRange(start="09:00", end="17:00")
        assert len({TimeRange("09:00", "17:00"), TimeRange("09:00", "17:00")}) == 1

    def test_is_immutable(self):
        """Frozen dataclasses reject assignment."""
        tr = TimeRange("09:00", "17:00")

        with pytest.raises(dataclasses.FrozenInstanceError):
            tr.start = "10:00"

    def test_str(self):
        assert str(TimeRange("08:30", "12:40")) == "08:30 - 12:40"


class TestScheduleSlot:
    """Tests for ScheduleSlot model."""

    def test_to_dict(self):
        """Slots serialize to the JSON shape used by the gig API."""
        slot = ScheduleSlot(days=("Friday", "Monday"), hours=TimeRange("08:30", "12:40"))

        assert slot.to_dict() == {
            "days": ["Friday", "Monday"],
            "hours": {"start": "08:30", "end": "12:40"},
        }

    def test_entries(self):
        """A slot expands into one entry per day."""
        hours = TimeRange("08:30", "12:40")
        slot = ScheduleSlot(days=("Friday", "Monday"), hours=hours)

        assert slot.entries() == [
            CanonicalEntry(day="Friday", hours=hours),
            CanonicalEntry(day="Monday", hours=hours),
        ]

    def test_format_display(self):
        slot = ScheduleSlot(days=("Friday", "Monday"), hours=TimeRange("08:30", "12:40"))

        assert slot.format_display() == "08:30 - 12:40 | Friday, Monday"


class TestAvailability:
    """Tests for the availability payload model."""

    def test_accepts_api_keys(self):
        """camelCase keys from the gig API populate the fields."""
        availability = Availability.model_validate(
            {
                "timeZone": "Singapore (SGT)",
                "flexibility": ["Flexible Hours"],
                "minimumHours": {"daily": 4, "weekly": 15, "monthly": 60},
            }
        )

        assert availability.time_zone == "Singapore (SGT)"
        assert availability.minimum_hours == MinimumHours(daily=4, weekly=15, monthly=60)
        assert availability.schedule == []

    def test_payload_uses_api_keys(self):
        """Dumping goes back to camelCase and omits unset values."""
        availability = Availability(time_zone="Paris (CET/CEST)")

        assert availability.to_payload() == {
            "schedule": [],
            "timeZone": "Paris (CET/CEST)",
            "flexibility": [],
        }

    def test_with_schedule_replaces_rows(self):
        """The schedule is replaced by canonical entries; the original is kept."""
        entry = CanonicalEntry(day="Monday", hours=TimeRange("09:00", "17:00"))

        updated = DEFAULT_AVAILABILITY.with_schedule([entry])

        assert [row.day for row in updated.schedule] == ["Monday"]
        assert updated.time_zone == DEFAULT_AVAILABILITY.time_zone
        assert len(DEFAULT_AVAILABILITY.schedule) == 5

    def test_negative_minimum_hours_rejected(self):
        """Minimum hours cannot be negative."""
        with pytest.raises(ValueError, match="must not be negative"):
            MinimumHours(daily=-1)

    def test_default_availability(self):
        """New gigs default to weekdays 09:00-18:00."""
        days = [row.day for row in DEFAULT_AVAILABILITY.schedule]

        assert days == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
        assert all(row.hours.start == "09:00" and row.hours.end == "18:00" for row in DEFAULT_AVAILABILITY.schedule)
        assert DEFAULT_AVAILABILITY.minimum_hours.weekly == 40
