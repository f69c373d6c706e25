from __future__ import annotations

from datetime import date
from typing import Iterable, List

from core.domain import Assignment
from core.domain.intervals import FAR_FUTURE
from core.services.capacity.models import AvailabilityWindow


def build_availability_windows(
    assignments: Iterable[Assignment],
    *,
    max_capacity: int,
    today: date,
    horizon: date = FAR_FUTURE,
) -> List[AvailabilityWindow]:
    """
    Gaps between an engineer's future allocations, from ``today`` to ``horizon``.

    ``assignments`` are the allocations still running on or after ``today``.
    Each gap is reported at the engineer's full ``max_capacity``. The sweep
    tracks the furthest end seen so far, so an allocation nested inside a
    longer one never opens a false gap.
    """
    ordered = sorted(assignments, key=lambda a: (a.start_date, a.end_date))
    windows: List[AvailabilityWindow] = []

    def emit(start: date, end: date) -> None:
        if start < end:
            windows.append(AvailabilityWindow(start, end, max_capacity))

    if not ordered:
        emit(today, horizon)
    else:
        first = ordered[0]
        if first.start_date > today:
            emit(today, first.start_date)

        covered_until = first.end_date
        for nxt in ordered[1:]:
            if nxt.start_date > covered_until:
                emit(covered_until, nxt.start_date)
            covered_until = max(covered_until, nxt.end_date)

        emit(covered_until, horizon)

    return [w for w in windows if w.available_capacity > 0]


__all__ = ["build_availability_windows"]
