from __future__ import annotations

import logging
from datetime import date
from typing import Callable, List

from core.domain import User
from core.domain.intervals import FAR_FUTURE, start_of_day, today
from core.exceptions import NotFoundError, ValidationError
from core.interfaces import AllocationQuery, AssignmentRepository, UserRepository
from core.services.capacity.models import AvailabilityWindow, CapacityInfo
from core.services.capacity.windows import build_availability_windows

logger = logging.getLogger(__name__)


class CapacityService:
    """
    Capacity accounting for engineers.

    Allocations overlapping the requested range count at their full
    percentage, however few days actually overlap. Nothing is cached:
    every call reads the current allocation set.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        assignment_repo: AssignmentRepository,
        today_provider: Callable[[], date] | None = None,
    ):
        self._user_repo: UserRepository = user_repo
        self._assignment_repo: AssignmentRepository = assignment_repo
        self._today: Callable[[], date] = today_provider or today

    def get_engineer(self, engineer_id: str) -> User:
        user = self._user_repo.get(engineer_id) if engineer_id else None
        if user is None or not user.is_engineer:
            raise NotFoundError("Engineer not found.", code="ENGINEER_NOT_FOUND", details={"engineer_id": engineer_id})
        return user

    def available_capacity(
        self,
        engineer_id: str,
        range_start: date | None = None,
        range_end: date | None = None,
        exclude_assignment_id: str | None = None,
    ) -> int:
        engineer = self.get_engineer(engineer_id)
        return self.available_capacity_for(engineer, range_start, range_end, exclude_assignment_id)

    def available_capacity_for(
        self,
        engineer: User,
        range_start: date | None = None,
        range_end: date | None = None,
        exclude_assignment_id: str | None = None,
    ) -> int:
        start = start_of_day(range_start) if range_start is not None else self._today()
        end = start_of_day(range_end) if range_end is not None else FAR_FUTURE
        if end < start:
            raise ValidationError(
                f"Capacity range end ({end}) is before its start ({start}).",
                code="INVALID_DATES",
            )

        overlapping = self._assignment_repo.query(
            AllocationQuery(
                engineer_id=engineer.id,
                window=(start, end),
                exclude_id=exclude_assignment_id,
            )
        )
        total_allocated = sum(int(a.allocation_percentage) for a in overlapping)
        available = max(0, int(engineer.max_capacity) - total_allocated)
        logger.debug(
            "Capacity for %s over %s..%s: max=%s allocated=%s available=%s",
            engineer.id,
            start,
            end,
            engineer.max_capacity,
            total_allocated,
            available,
        )
        return available

    def capacity_info(self, engineer_id: str) -> CapacityInfo:
        return self.capacity_info_for(self.get_engineer(engineer_id))

    def capacity_info_for(self, engineer: User) -> CapacityInfo:
        max_capacity = int(engineer.max_capacity)
        available = self.available_capacity_for(engineer)
        allocated = max_capacity - available
        utilization = (allocated / max_capacity) * 100 if max_capacity > 0 else 0.0
        return CapacityInfo(
            engineer_id=engineer.id,
            max_capacity=max_capacity,
            allocated_capacity=allocated,
            available_capacity=available,
            utilization_percent=utilization,
        )

    def availability_windows(self, engineer_id: str) -> List[AvailabilityWindow]:
        engineer = self.get_engineer(engineer_id)
        current_day = self._today()
        future = self._assignment_repo.query(
            AllocationQuery(engineer_id=engineer.id, ends_on_or_after=current_day)
        )
        return build_availability_windows(
            future,
            max_capacity=int(engineer.max_capacity),
            today=current_day,
        )


__all__ = ["CapacityService"]
