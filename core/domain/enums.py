from __future__ import annotations

from enum import Enum


class UserRole(str, Enum):
    ENGINEER = "engineer"
    MANAGER = "manager"


class Seniority(str, Enum):
    JUNIOR = "junior"
    MID = "mid"
    SENIOR = "senior"


class ProjectStatus(str, Enum):
    PLANNING = "planning"
    ACTIVE = "active"
    COMPLETED = "completed"
    ON_HOLD = "on-hold"


# Statuses that still accept new or extended assignments.
ASSIGNABLE_STATUSES = frozenset({ProjectStatus.PLANNING, ProjectStatus.ACTIVE})


__all__ = ["UserRole", "Seniority", "ProjectStatus", "ASSIGNABLE_STATUSES"]
