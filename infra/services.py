from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable

from sqlalchemy.orm import Session

from core.services.analytics import AnalyticsService
from core.services.assignment import AssignmentService, EngineerLockRegistry
from core.services.capacity import CapacityService
from core.services.engineer import EngineerService
from core.services.matching import SkillMatchingService
from core.services.project import ProjectService
from infra.db.assignment import SqlAlchemyAssignmentRepository
from infra.db.project import SqlAlchemyProjectRepository
from infra.db.user import SqlAlchemyUserRepository

# One registry per process so every service graph serialises on the same engineer locks.
_PROCESS_LOCKS = EngineerLockRegistry()


@dataclass(frozen=True)
class ServiceGraph:
    session: Session
    capacity_service: CapacityService
    matching_service: SkillMatchingService
    engineer_service: EngineerService
    project_service: ProjectService
    assignment_service: AssignmentService
    analytics_service: AnalyticsService

    def as_dict(self) -> dict[str, Any]:
        return {
            "session": self.session,
            "capacity_service": self.capacity_service,
            "matching_service": self.matching_service,
            "engineer_service": self.engineer_service,
            "project_service": self.project_service,
            "assignment_service": self.assignment_service,
            "analytics_service": self.analytics_service,
        }


def build_service_graph(
    session: Session,
    *,
    today_provider: Callable[[], date] | None = None,
    lock_registry: EngineerLockRegistry | None = None,
) -> ServiceGraph:
    user_repo = SqlAlchemyUserRepository(session)
    project_repo = SqlAlchemyProjectRepository(session)
    assignment_repo = SqlAlchemyAssignmentRepository(session)

    capacity_service = CapacityService(user_repo, assignment_repo, today_provider=today_provider)
    matching_service = SkillMatchingService(user_repo, capacity_service)
    engineer_service = EngineerService(
        session,
        user_repo,
        assignment_repo,
        capacity_service,
        matching_service,
        today_provider=today_provider,
    )
    project_service = ProjectService(session, project_repo, assignment_repo)
    assignment_service = AssignmentService(
        session,
        user_repo,
        project_repo,
        assignment_repo,
        capacity_service,
        lock_registry=lock_registry or _PROCESS_LOCKS,
    )
    analytics_service = AnalyticsService(user_repo, project_repo, assignment_repo, capacity_service)

    return ServiceGraph(
        session=session,
        capacity_service=capacity_service,
        matching_service=matching_service,
        engineer_service=engineer_service,
        project_service=project_service,
        assignment_service=assignment_service,
        analytics_service=analytics_service,
    )


def build_service_dict(session: Session, **kwargs: Any) -> dict[str, Any]:
    return build_service_graph(session, **kwargs).as_dict()
