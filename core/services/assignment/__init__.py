from core.services.assignment.locking import EngineerLockRegistry
from core.services.assignment.models import AssignmentRequest, ValidatedAssignment
from core.services.assignment.service import AssignmentService
from core.services.assignment.validation import (
    AssignmentValidator,
    check_assignments_within,
    parse_allocation,
    parse_date_range,
)

__all__ = [
    "AssignmentService",
    "AssignmentValidator",
    "AssignmentRequest",
    "ValidatedAssignment",
    "EngineerLockRegistry",
    "check_assignments_within",
    "parse_allocation",
    "parse_date_range",
]
