from __future__ import annotations

import logging
from datetime import date
from typing import Any, List

from sqlalchemy.orm import Session

from core.domain import Assignment
from core.events.domain_events import domain_events
from core.exceptions import ConcurrencyError, NotFoundError
from core.interfaces import AllocationQuery, AssignmentRepository, ProjectRepository, UserRepository
from core.services.assignment.locking import EngineerLockRegistry
from core.services.assignment.models import AssignmentRequest, ValidatedAssignment
from core.services.assignment.validation import AssignmentValidator
from core.services.capacity import CapacityService

logger = logging.getLogger(__name__)


class AssignmentService:
    """
    Validate-then-write flow for allocations.

    The capacity check and the write happen under the engineer's lock, and
    every write also bumps the engineer and project row versions. A racing
    writer in another process, or a project edit that lands between the
    checks and the commit, loses with ConcurrencyError instead of leaving an
    over-allocation or an assignment outside its project.
    """

    def __init__(
        self,
        session: Session,
        user_repo: UserRepository,
        project_repo: ProjectRepository,
        assignment_repo: AssignmentRepository,
        capacity_service: CapacityService,
        lock_registry: EngineerLockRegistry | None = None,
    ):
        self._session: Session = session
        self._user_repo: UserRepository = user_repo
        self._project_repo: ProjectRepository = project_repo
        self._assignment_repo: AssignmentRepository = assignment_repo
        self._capacity: CapacityService = capacity_service
        self._locks: EngineerLockRegistry = lock_registry or EngineerLockRegistry()
        self._validator = AssignmentValidator(capacity_service, project_repo)

    @property
    def validator(self) -> AssignmentValidator:
        return self._validator

    def create_assignment(
        self,
        engineer_id: Any,
        project_id: Any,
        allocation_percentage: Any,
        start_date: Any,
        end_date: Any,
        role: str | None = None,
    ) -> Assignment:
        request = AssignmentRequest(
            engineer_id=engineer_id,
            project_id=project_id,
            allocation_percentage=allocation_percentage,
            start_date=start_date,
            end_date=end_date,
            role=role,
        )
        self._validator.require_fields(request)

        with self._locks.hold(str(engineer_id).strip()):
            accepted = self._validator.validate(request)
            assignment = Assignment.create(
                engineer_id=accepted.engineer.id,
                project_id=accepted.project.id,
                allocation_percentage=accepted.allocation_percentage,
                start_date=accepted.start_date,
                end_date=accepted.end_date,
                role=accepted.role,
            )
            try:
                self._fence(accepted)
                self._assignment_repo.add(assignment)
                self._session.commit()
                logger.info(
                    "Created assignment %s: engineer %s on project %s at %s%% (%s - %s)",
                    assignment.id,
                    assignment.engineer_id,
                    assignment.project_id,
                    assignment.allocation_percentage,
                    assignment.start_date,
                    assignment.end_date,
                )
            except Exception as e:
                self._session.rollback()
                logger.error("Error creating assignment: %s", e)
                raise

        domain_events.assignments_changed.emit(assignment.engineer_id)
        return assignment

    def update_assignment(
        self,
        assignment_id: str,
        allocation_percentage: Any = None,
        start_date: Any = None,
        end_date: Any = None,
        role: str | None = None,
        expected_version: int | None = None,
    ) -> Assignment:
        existing = self._require_assignment(assignment_id)

        with self._locks.hold(existing.engineer_id):
            assignment = self._require_assignment(assignment_id)
            if expected_version is not None and assignment.version != expected_version:
                raise ConcurrencyError(
                    "Assignment changed since you opened it. Refresh and try again.",
                    code="STALE_WRITE",
                )

            request = AssignmentRequest(
                engineer_id=assignment.engineer_id,
                project_id=assignment.project_id,
                allocation_percentage=(
                    allocation_percentage if allocation_percentage is not None else assignment.allocation_percentage
                ),
                start_date=start_date if start_date is not None else assignment.start_date,
                end_date=end_date if end_date is not None else assignment.end_date,
                role=role if role is not None else assignment.role,
            )
            accepted = self._validator.validate(request, exclude_assignment_id=assignment.id)

            assignment.allocation_percentage = accepted.allocation_percentage
            assignment.start_date = accepted.start_date
            assignment.end_date = accepted.end_date
            assignment.role = accepted.role
            try:
                self._fence(accepted)
                self._assignment_repo.update(assignment)
                self._session.commit()
                logger.info(
                    "Updated assignment %s: %s%% (%s - %s)",
                    assignment.id,
                    assignment.allocation_percentage,
                    assignment.start_date,
                    assignment.end_date,
                )
            except Exception as e:
                self._session.rollback()
                logger.error("Error updating assignment %s: %s", assignment_id, e)
                raise

        domain_events.assignments_changed.emit(assignment.engineer_id)
        return assignment

    def delete_assignment(self, assignment_id: str) -> None:
        assignment = self._require_assignment(assignment_id)
        try:
            self._assignment_repo.delete(assignment_id)
            self._session.commit()
            logger.info("Deleted assignment %s", assignment_id)
        except Exception:
            self._session.rollback()
            raise
        domain_events.assignments_changed.emit(assignment.engineer_id)

    def get_assignment(self, assignment_id: str) -> Assignment | None:
        return self._assignment_repo.get(assignment_id)

    def list_assignments(
        self,
        engineer_id: str | None = None,
        project_id: str | None = None,
    ) -> List[Assignment]:
        return self._assignment_repo.query(
            AllocationQuery(engineer_id=engineer_id, project_id=project_id, newest_first=True)
        )

    def list_current_assignments(self, engineer_id: str, as_of: date) -> List[Assignment]:
        return self._assignment_repo.query(AllocationQuery(engineer_id=engineer_id, ends_on_or_after=as_of))

    def _require_assignment(self, assignment_id: str) -> Assignment:
        assignment = self._assignment_repo.get(assignment_id)
        if not assignment:
            raise NotFoundError("Assignment not found.", code="ASSIGNMENT_NOT_FOUND")
        return assignment

    def _fence(self, accepted: ValidatedAssignment) -> None:
        # both rows the validation read must still be at the versions it saw
        engineer = accepted.engineer
        engineer.version = self._user_repo.bump_version(engineer.id, engineer.version)
        project = accepted.project
        project.version = self._project_repo.bump_version(project.id, project.version)


__all__ = ["AssignmentService"]
