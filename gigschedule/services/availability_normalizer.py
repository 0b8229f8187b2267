"""
Application service normalizing a gig's availability before persistence.

The service reads the raw schedule out of a gig document, optionally repairs
rows without a day, and delegates cleaning and grouping to the domain-level
``ScheduleConsolidator``. Metadata next to the schedule (time zone,
flexibility, minimum hours) is validated with pydantic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

import pendulum
from pendulum import DateTime
from pydantic import ValidationError

from ..domain.availability import Availability
from ..domain.consolidator import ScheduleConsolidator
from ..domain.day_assignment import WEEK_DAYS, assign_missing_days
from ..domain.exceptions import AvailabilityValidationError
from ..domain.models import ScheduleSlot

logger = logging.getLogger(__name__)

_METADATA_KEYS = ("timeZone", "time_zone", "flexibility", "minimumHours", "minimum_hours")


@dataclass
class NormalizationResult:
    """Outcome of normalizing one gig's availability."""
    availability: Availability
    slots: List[ScheduleSlot]
    normalized_at: str
    dropped_rows: int = 0
    duplicate_rows: int = 0
    repaired_rows: int = 0
    used_fallback: bool = False

    def apply_to(self, gig: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Return a copy of ``gig`` carrying the normalized availability.

        The input mapping is left untouched.
        """
        updated = dict(gig)
        updated["availability"] = self.availability.to_payload()
        updated["updatedAt"] = self.normalized_at
        return updated


class AvailabilityNormalizer:
    """
    Turns whatever availability a gig document carries into a clean payload.
    """

    def __init__(
        self,
        consolidator: ScheduleConsolidator,
        *,
        repair_missing_days: bool = False,
        working_days: Sequence[str] = WEEK_DAYS,
        fallback: Optional[Availability] = None,
        clock: Optional[Callable[[], DateTime]] = None,
    ) -> None:
        self._consolidator = consolidator
        self._repair_missing_days = repair_missing_days
        self._working_days = tuple(working_days)
        self._fallback = fallback
        self._clock = clock or (lambda: pendulum.now("UTC"))

    def normalize(self, gig: Mapping[str, Any]) -> NormalizationResult:
        """
        Clean, deduplicate and group the gig's schedule.

        Raises:
            AvailabilityValidationError: If the document or its metadata
                has the wrong shape
        """
        if not isinstance(gig, Mapping):
            raise AvailabilityValidationError(
                f"Gig document must be a mapping, got {type(gig).__name__}"
            )

        rows = self._consolidator.expand(self.extract_schedule(gig))

        repaired_rows = 0
        if self._repair_missing_days:
            fixed = assign_missing_days(rows, self._working_days)
            repaired_rows = sum(1 for before, after in zip(rows, fixed) if before is not after)
            rows = fixed

        accepted = sum(1 for row in rows if self._consolidator.is_acceptable(row))
        cleaned = self._consolidator.clean(rows)
        dropped_rows = len(rows) - accepted
        duplicate_rows = accepted - len(cleaned)

        metadata = self._validate_metadata(gig)

        used_fallback = False
        if not cleaned and self._fallback is not None:
            logger.info("Schedule is empty, using the default availability schedule")
            cleaned = self._consolidator.clean(
                [day.model_dump() for day in self._fallback.schedule]
            )
            used_fallback = True

        slots = self._consolidator.group(cleaned)

        if dropped_rows:
            logger.warning("Dropped %d malformed schedule row(s)", dropped_rows)
        if duplicate_rows:
            logger.debug("Removed %d duplicate schedule row(s)", duplicate_rows)
        logger.info(
            "Normalized availability: %d row(s) in %d slot(s)",
            len(cleaned),
            len(slots),
        )

        return NormalizationResult(
            availability=metadata.with_schedule(cleaned),
            slots=slots,
            normalized_at=self._clock().to_iso8601_string(),
            dropped_rows=dropped_rows,
            duplicate_rows=duplicate_rows,
            repaired_rows=repaired_rows,
            used_fallback=used_fallback,
        )

    @staticmethod
    def extract_schedule(gig: Mapping[str, Any]) -> List[Any]:
        """
        Read the raw schedule rows of a gig.

        Stored gigs keep them under ``availability.schedule``; the schedule
        editor keeps grouped rows under ``schedule.schedules``.
        """
        availability = gig.get("availability")
        if isinstance(availability, Mapping) and isinstance(availability.get("schedule"), list):
            return list(availability["schedule"])

        editor = gig.get("schedule")
        if isinstance(editor, Mapping) and isinstance(editor.get("schedules"), list):
            return list(editor["schedules"])

        return []

    @staticmethod
    def _metadata_section(gig: Mapping[str, Any]) -> Mapping[str, Any]:
        for key in ("availability", "schedule"):
            section = gig.get(key)
            if isinstance(section, Mapping):
                return section
        return {}

    def _validate_metadata(self, gig: Mapping[str, Any]) -> Availability:
        section = self._metadata_section(gig)
        data = {key: section[key] for key in _METADATA_KEYS if key in section}

        try:
            return Availability.model_validate(data)
        except ValidationError as exc:
            raise AvailabilityValidationError(f"Invalid availability metadata: {exc}") from exc
