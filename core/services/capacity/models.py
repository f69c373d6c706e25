from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from core.domain.intervals import days_between


@dataclass(frozen=True)
class CapacityInfo:
    engineer_id: str
    max_capacity: int
    allocated_capacity: int
    available_capacity: int
    utilization_percent: float


@dataclass(frozen=True)
class AvailabilityWindow:
    start_date: date
    end_date: date
    available_capacity: int

    @property
    def duration_days(self) -> int:
        return days_between(self.start_date, self.end_date)


__all__ = ["CapacityInfo", "AvailabilityWindow"]
