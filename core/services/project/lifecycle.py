from __future__ import annotations

import logging
from typing import Any, Iterable

from sqlalchemy.orm import Session

from core.domain import Project, ProjectStatus, clean_skills
from core.events.domain_events import domain_events
from core.exceptions import ConcurrencyError, ConflictError
from core.interfaces import AllocationQuery, AssignmentRepository, ProjectRepository
from core.services.assignment.validation import check_assignments_within
from core.services.project.validation import ProjectValidationMixin

logger = logging.getLogger(__name__)


class ProjectLifecycleMixin(ProjectValidationMixin):
    _session: Session
    _project_repo: ProjectRepository
    _assignment_repo: AssignmentRepository

    def create_project(
        self,
        name: str,
        description: str,
        start_date: Any,
        end_date: Any,
        required_skills: Iterable[str] | None = None,
        team_size: int | None = None,
        status: ProjectStatus | str | None = None,
        manager_id: str | None = None,
    ) -> Project:
        start, end = self._validate_project_dates(start_date, end_date)
        project = Project.create(
            name=self._validate_project_name(name),
            description=self._validate_description(description),
            start_date=start,
            end_date=end,
            required_skills=clean_skills(required_skills),
            team_size=self._validate_team_size(team_size) if team_size is not None else 1,
            status=self._as_status(status) if status else ProjectStatus.PLANNING,
            manager_id=manager_id,
        )

        try:
            self._project_repo.add(project)
            self._session.commit()
            logger.info("Created project %s - %s", project.id, project.name)
        except Exception as e:
            self._session.rollback()
            logger.error("Error creating project: %s", e)
            raise

        domain_events.project_changed.emit(project.id)
        return project

    def set_status(self, project_id: str, status: ProjectStatus | str) -> Project:
        project = self.require_project(project_id)
        project.status = self._as_status(status)
        try:
            self._project_repo.update(project)
            self._session.commit()
            logger.info("Project %s status set to %s", project.id, project.status.value)
        except Exception:
            self._session.rollback()
            raise
        domain_events.project_changed.emit(project.id)
        return project

    def update_project(
        self,
        project_id: str,
        expected_version: int | None = None,
        name: str | None = None,
        description: str | None = None,
        start_date: Any = None,
        end_date: Any = None,
        required_skills: Iterable[str] | None = None,
        team_size: int | None = None,
        status: ProjectStatus | str | None = None,
    ) -> Project:
        project = self.require_project(project_id)
        if expected_version is not None and project.version != expected_version:
            raise ConcurrencyError(
                "Project changed since you opened it. Refresh and try again.",
                code="STALE_WRITE",
            )

        if start_date is not None or end_date is not None:
            new_start, new_end = self._validate_project_dates(
                start_date if start_date is not None else project.start_date,
                end_date if end_date is not None else project.end_date,
            )
            existing = self._assignment_repo.query(AllocationQuery(project_id=project.id))
            check_assignments_within(project, new_start, new_end, existing)
            project.start_date = new_start
            project.end_date = new_end

        if name is not None:
            project.name = self._validate_project_name(name)
        if description is not None:
            project.description = self._validate_description(description)
        if required_skills is not None:
            project.required_skills = clean_skills(required_skills)
        if team_size is not None:
            project.team_size = self._validate_team_size(team_size)
        if status is not None:
            project.status = self._as_status(status)

        try:
            self._project_repo.update(project)
            self._session.commit()
            logger.info("Updated project %s - %s", project.id, project.name)
        except Exception:
            self._session.rollback()
            raise

        domain_events.project_changed.emit(project_id)
        return project

    def delete_project(self, project_id: str) -> None:
        project = self.require_project(project_id)

        dependents = self._assignment_repo.count_by_project(project_id)
        if dependents > 0:
            raise ConflictError(
                "Cannot delete project with existing assignments. Please remove all assignments first.",
                project_id=project.id,
                dependent_count=dependents,
            )

        try:
            # an assignment committed after the count above has bumped the version
            self._project_repo.bump_version(project.id, project.version)
            self._project_repo.delete(project_id)
            self._session.commit()
            logger.info("Deleted project %s - %s", project.id, project.name)
        except Exception:
            self._session.rollback()
            raise

        domain_events.project_changed.emit(project_id)


__all__ = ["ProjectLifecycleMixin"]
