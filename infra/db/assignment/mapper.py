from __future__ import annotations

from core.domain import Assignment
from infra.db.models import AssignmentORM


def assignment_to_orm(assignment: Assignment) -> AssignmentORM:
    return AssignmentORM(
        id=assignment.id,
        engineer_id=assignment.engineer_id,
        project_id=assignment.project_id,
        allocation_percentage=assignment.allocation_percentage,
        start_date=assignment.start_date,
        end_date=assignment.end_date,
        role=assignment.role,
        version=getattr(assignment, "version", 1),
    )


def assignment_from_orm(obj: AssignmentORM) -> Assignment:
    return Assignment(
        id=obj.id,
        engineer_id=obj.engineer_id,
        project_id=obj.project_id,
        allocation_percentage=obj.allocation_percentage,
        start_date=obj.start_date,
        end_date=obj.end_date,
        role=obj.role,
        version=getattr(obj, "version", 1),
    )


__all__ = ["assignment_to_orm", "assignment_from_orm"]
