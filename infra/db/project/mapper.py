from __future__ import annotations

from core.domain import Project
from infra.db.models import ProjectORM


def project_to_orm(project: Project) -> ProjectORM:
    return ProjectORM(
        id=project.id,
        name=project.name,
        description=project.description,
        start_date=project.start_date,
        end_date=project.end_date,
        required_skills=list(project.required_skills),
        team_size=project.team_size,
        status=project.status,
        manager_id=project.manager_id,
        version=getattr(project, "version", 1),
    )


def project_from_orm(obj: ProjectORM) -> Project:
    return Project(
        id=obj.id,
        name=obj.name,
        description=obj.description or "",
        start_date=obj.start_date,
        end_date=obj.end_date,
        required_skills=list(obj.required_skills or []),
        team_size=obj.team_size,
        status=obj.status,
        manager_id=obj.manager_id,
        version=getattr(obj, "version", 1),
    )


__all__ = ["project_to_orm", "project_from_orm"]
