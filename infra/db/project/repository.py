from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.domain import Project
from core.interfaces import ProjectRepository
from infra.db.models import ProjectORM
from infra.db.optimistic import update_with_version_check
from infra.db.project.mapper import project_from_orm, project_to_orm


class SqlAlchemyProjectRepository(ProjectRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, project: Project) -> None:
        self.session.add(project_to_orm(project))

    def update(self, project: Project) -> None:
        project.version = update_with_version_check(
            self.session,
            ProjectORM,
            project.id,
            getattr(project, "version", 1),
            {
                "name": project.name,
                "description": project.description,
                "start_date": project.start_date,
                "end_date": project.end_date,
                "required_skills": list(project.required_skills),
                "team_size": project.team_size,
                "status": project.status,
                "manager_id": project.manager_id,
            },
            not_found_message="Project not found.",
            stale_message="Project was updated by another user.",
            not_found_code="PROJECT_NOT_FOUND",
        )

    def bump_version(self, project_id: str, expected_version: int) -> int:
        return update_with_version_check(
            self.session,
            ProjectORM,
            project_id,
            expected_version,
            {},
            not_found_message="Project not found.",
            stale_message="Project changed while the assignment was being validated. Refresh and try again.",
            not_found_code="PROJECT_NOT_FOUND",
        )

    def delete(self, project_id: str) -> None:
        self.session.query(ProjectORM).filter_by(id=project_id).delete()

    def get(self, project_id: str) -> Optional[Project]:
        obj = self.session.get(ProjectORM, project_id)
        return project_from_orm(obj) if obj else None

    def list_all(self) -> List[Project]:
        stmt = select(ProjectORM)
        rows = self.session.execute(stmt).scalars().all()
        return [project_from_orm(row) for row in rows]


__all__ = ["SqlAlchemyProjectRepository"]
