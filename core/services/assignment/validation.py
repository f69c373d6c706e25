from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable

from core.domain import DEFAULT_ASSIGNMENT_ROLE, Assignment, Project, normalize_id
from core.domain.intervals import parse_date
from core.exceptions import (
    BoundsViolationError,
    BusinessRuleError,
    CapacityExceededError,
    NotFoundError,
    ValidationError,
)
from core.interfaces import ProjectRepository
from core.services.assignment.models import AssignmentRequest, ValidatedAssignment
from core.services.capacity import CapacityService

logger = logging.getLogger(__name__)

MIN_ALLOCATION = 1
MAX_ALLOCATION = 100


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def parse_allocation(value: Any) -> int:
    """Integral percentage in [1, 100]; anything else is INVALID_PERCENTAGE."""
    message = f"Allocation percentage must be between {MIN_ALLOCATION} and {MAX_ALLOCATION}."
    if isinstance(value, bool):
        raise ValidationError(message, code="INVALID_PERCENTAGE")
    pct: float
    if isinstance(value, (int, float)):
        pct = value
    elif isinstance(value, str):
        try:
            pct = float(value.strip())
        except ValueError:
            raise ValidationError(message, code="INVALID_PERCENTAGE") from None
    else:
        raise ValidationError(message, code="INVALID_PERCENTAGE")

    if pct != pct or not float(pct).is_integer():
        raise ValidationError(message, code="INVALID_PERCENTAGE")
    if pct < MIN_ALLOCATION or pct > MAX_ALLOCATION:
        raise ValidationError(message, code="INVALID_PERCENTAGE")
    return int(pct)


def parse_date_range(start_value: Any, end_value: Any) -> tuple[date, date]:
    try:
        start = parse_date(start_value)
        end = parse_date(end_value)
    except ValueError:
        raise ValidationError("Invalid date format.", code="INVALID_DATES") from None
    if end <= start:
        raise ValidationError("End date must be after start date.", code="INVALID_DATES")
    return start, end


def check_assignments_within(project: Project, new_start: date, new_end: date, assignments: Iterable[Assignment]) -> None:
    """Reverse containment: a project's new window must still hold every assignment on it."""
    for a in assignments:
        if a.start_date < new_start or a.end_date > new_end:
            raise BoundsViolationError(
                f"Cannot update project dates. Assignment for engineer {a.engineer_id} "
                f"falls outside new date range.",
                project_id=project.id,
                engineer_id=a.engineer_id,
                assignment_id=a.id,
                code="ASSIGNMENTS_OUTSIDE_NEW_RANGE",
            )


class AssignmentValidator:
    """
    Runs a proposed allocation through the acceptance checks in order:
    required fields, dates, percentage, engineer, project status,
    project containment, capacity. The first failing check raises.
    """

    def __init__(self, capacity_service: CapacityService, project_repo: ProjectRepository):
        self._capacity = capacity_service
        self._project_repo = project_repo

    def require_fields(self, request: AssignmentRequest) -> None:
        required = (
            request.engineer_id,
            request.project_id,
            request.allocation_percentage,
            request.start_date,
            request.end_date,
        )
        if any(_is_missing(v) for v in required):
            raise ValidationError(
                "Engineer, project, allocation percentage, start date, and end date are required.",
                code="MISSING_FIELDS",
            )

    def validate(self, request: AssignmentRequest, exclude_assignment_id: str | None = None) -> ValidatedAssignment:
        self.require_fields(request)
        start, end = parse_date_range(request.start_date, request.end_date)
        pct = parse_allocation(request.allocation_percentage)

        engineer = self._capacity.get_engineer(normalize_id(request.engineer_id))

        project_id = normalize_id(request.project_id)
        project = self._project_repo.get(project_id)
        if project is None:
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND", details={"project_id": project_id})
        if not project.is_assignable:
            raise BusinessRuleError(
                f"Cannot assign to a project with status '{project.status.value}'.",
                code="PROJECT_NOT_ASSIGNABLE",
                details={"project_id": project.id, "status": project.status.value},
            )

        if not project.contains(start, end):
            raise BoundsViolationError(
                f"Assignment dates ({start} - {end}) must fall within project dates "
                f"({project.start_date} - {project.end_date}).",
                project_id=project.id,
                engineer_id=engineer.id,
                assignment_id=exclude_assignment_id,
            )

        available = self._capacity.available_capacity_for(engineer, start, end, exclude_assignment_id)
        if available < pct:
            logger.info(
                "Rejected allocation of %s%% for engineer %s (%s - %s): only %s%% available",
                pct,
                engineer.id,
                start,
                end,
                available,
            )
            raise CapacityExceededError(
                f"Insufficient capacity. Available: {available}%, Requested: {pct}%",
                requested=pct,
                available=available,
                engineer_id=engineer.id,
            )

        role = (request.role or "").strip() or DEFAULT_ASSIGNMENT_ROLE
        return ValidatedAssignment(
            engineer=engineer,
            project=project,
            allocation_percentage=pct,
            start_date=start,
            end_date=end,
            role=role,
            available_capacity=available,
        )


__all__ = [
    "AssignmentValidator",
    "parse_allocation",
    "parse_date_range",
    "check_assignments_within",
    "MIN_ALLOCATION",
    "MAX_ALLOCATION",
]
