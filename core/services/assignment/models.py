from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from core.domain import Project, User


@dataclass(frozen=True)
class AssignmentRequest:
    """A proposed allocation as received from the caller, before any parsing."""
    engineer_id: Any
    project_id: Any
    allocation_percentage: Any
    start_date: Any
    end_date: Any
    role: Optional[str] = None


@dataclass(frozen=True)
class ValidatedAssignment:
    engineer: User
    project: Project
    allocation_percentage: int
    start_date: date
    end_date: date
    role: str
    available_capacity: int


__all__ = ["AssignmentRequest", "ValidatedAssignment"]
