from __future__ import annotations

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from core.domain import Assignment
from core.interfaces import AllocationQuery, AssignmentRepository
from infra.db.assignment.mapper import assignment_from_orm, assignment_to_orm
from infra.db.models import AssignmentORM
from infra.db.optimistic import update_with_version_check


class SqlAlchemyAssignmentRepository(AssignmentRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, assignment: Assignment) -> None:
        self.session.add(assignment_to_orm(assignment))

    def update(self, assignment: Assignment) -> None:
        assignment.version = update_with_version_check(
            self.session,
            AssignmentORM,
            assignment.id,
            getattr(assignment, "version", 1),
            {
                "allocation_percentage": assignment.allocation_percentage,
                "start_date": assignment.start_date,
                "end_date": assignment.end_date,
                "role": assignment.role,
            },
            not_found_message="Assignment not found.",
            stale_message="Assignment was updated by another user.",
            not_found_code="ASSIGNMENT_NOT_FOUND",
        )

    def delete(self, assignment_id: str) -> None:
        obj = self.session.get(AssignmentORM, assignment_id)
        if obj:
            self.session.delete(obj)

    def get(self, assignment_id: str) -> Optional[Assignment]:
        obj = self.session.get(AssignmentORM, assignment_id)
        return assignment_from_orm(obj) if obj else None

    def query(self, criteria: AllocationQuery) -> List[Assignment]:
        stmt = select(AssignmentORM)
        if criteria.engineer_id is not None:
            stmt = stmt.where(AssignmentORM.engineer_id == criteria.engineer_id)
        if criteria.project_id is not None:
            stmt = stmt.where(AssignmentORM.project_id == criteria.project_id)
        if criteria.window is not None:
            # closed-interval overlap
            window_start, window_end = criteria.window
            stmt = stmt.where(
                AssignmentORM.start_date <= window_end,
                AssignmentORM.end_date >= window_start,
            )
        if criteria.ends_on_or_after is not None:
            stmt = stmt.where(AssignmentORM.end_date >= criteria.ends_on_or_after)
        if criteria.exclude_id is not None:
            stmt = stmt.where(AssignmentORM.id != criteria.exclude_id)

        if criteria.newest_first:
            stmt = stmt.order_by(AssignmentORM.start_date.desc(), AssignmentORM.id)
        else:
            stmt = stmt.order_by(AssignmentORM.start_date, AssignmentORM.end_date, AssignmentORM.id)

        rows = self.session.execute(stmt).scalars().all()
        return [assignment_from_orm(row) for row in rows]

    def count_by_project(self, project_id: str) -> int:
        stmt = select(func.count()).select_from(AssignmentORM).where(AssignmentORM.project_id == project_id)
        return int(self.session.execute(stmt).scalar_one())


__all__ = ["SqlAlchemyAssignmentRepository"]
