from __future__ import annotations

from dataclasses import dataclass
from typing import List

from core.domain import Assignment, User
from core.services.capacity import CapacityInfo


@dataclass(frozen=True)
class EngineerCapacityRow:
    engineer: User
    capacity: CapacityInfo


@dataclass(frozen=True)
class EngineerProfile:
    engineer: User
    capacity: CapacityInfo
    current_assignments: List[Assignment]


__all__ = ["EngineerCapacityRow", "EngineerProfile"]
