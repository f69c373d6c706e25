from __future__ import annotations

from datetime import date
from typing import Iterable, List

from core.domain import Project, ProjectStatus
from core.domain.intervals import overlaps, parse_date
from core.exceptions import NotFoundError, ValidationError
from core.interfaces import AllocationQuery, AssignmentRepository, ProjectRepository
from core.services.project.models import ProjectDetail


class ProjectQueryMixin:
    _project_repo: ProjectRepository
    _assignment_repo: AssignmentRepository

    def get_project(self, project_id: str) -> Project | None:
        return self._project_repo.get(project_id)

    def require_project(self, project_id: str) -> Project:
        project = self._project_repo.get(project_id)
        if not project:
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")
        return project

    def get_project_detail(self, project_id: str) -> ProjectDetail:
        project = self.require_project(project_id)
        assignments = self._assignment_repo.query(AllocationQuery(project_id=project.id))
        return ProjectDetail(project=project, assignments=assignments)

    def list_projects(
        self,
        statuses: Iterable[ProjectStatus | str] | None = None,
        start_date: date | str | None = None,
        end_date: date | str | None = None,
    ) -> List[Project]:
        """
        Projects filtered by status and by overlap with [start_date, end_date]
        (either bound may be omitted), newest start first.
        """
        projects = self._project_repo.list_all()
        if statuses:
            wanted = {self._as_status(s) for s in statuses}
            projects = [p for p in projects if p.status in wanted]
        if start_date or end_date:
            try:
                lo = parse_date(start_date) if start_date else date.min
                hi = parse_date(end_date) if end_date else date.max
            except ValueError:
                raise ValidationError("Invalid date format.", code="INVALID_DATES") from None
            projects = [p for p in projects if overlaps(p.start_date, p.end_date, lo, hi)]
        return sorted(projects, key=lambda p: p.start_date, reverse=True)

    def search_projects_by_name(self, query: str) -> List[Project]:
        normalized = query.strip().lower()
        return [project for project in self._project_repo.list_all() if normalized in project.name.lower()]


__all__ = ["ProjectQueryMixin"]
