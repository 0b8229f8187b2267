"""
Availability payload models as stored on a gig record.
"""

from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import CanonicalEntry


class AvailabilityHours(BaseModel):
    start: str
    end: str


class ScheduleDay(BaseModel):
    """One persisted schedule row."""
    day: str
    hours: AvailabilityHours

    @classmethod
    def from_entry(cls, entry: CanonicalEntry) -> "ScheduleDay":
        return cls(**entry.to_dict())


class MinimumHours(BaseModel):
    """Minimum commitment per period."""
    daily: Optional[int] = None
    weekly: Optional[int] = None
    monthly: Optional[int] = None

    @field_validator("daily", "weekly", "monthly")
    @classmethod
    def validate_non_negative(cls, v: Optional[int]) -> Optional[int]:
        """Hours cannot be negative."""
        if v is not None and v < 0:
            raise ValueError(f"Minimum hours must not be negative, got {v}")
        return v


class Availability(BaseModel):
    """
    Availability section of a gig.

    Accepts both the camelCase keys used by the gig API (``timeZone``,
    ``minimumHours``) and the snake_case field names.
    """
    model_config = ConfigDict(populate_by_name=True)

    schedule: List[ScheduleDay] = Field(default_factory=list)
    time_zone: Optional[str] = Field(default=None, alias="timeZone")
    flexibility: List[str] = Field(default_factory=list)
    minimum_hours: Optional[MinimumHours] = Field(default=None, alias="minimumHours")

    def with_schedule(self, entries: Iterable[CanonicalEntry]) -> "Availability":
        """Return a copy whose schedule is replaced by ``entries``."""
        return self.model_copy(
            update={"schedule": [ScheduleDay.from_entry(entry) for entry in entries]}
        )

    def to_payload(self) -> Dict[str, Any]:
        """Dump with the API's camelCase keys, omitting unset optionals."""
        return self.model_dump(by_alias=True, exclude_none=True)


DEFAULT_AVAILABILITY = Availability(
    schedule=[
        ScheduleDay(day=day, hours=AvailabilityHours(start="09:00", end="18:00"))
        for day in ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")
    ],
    time_zone="Paris (CET/CEST)",
    flexibility=["Remote Work Available", "Flexible Hours"],
    minimum_hours=MinimumHours(daily=8, weekly=40, monthly=160),
)
