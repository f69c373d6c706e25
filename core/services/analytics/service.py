from __future__ import annotations

import logging
import math
from typing import List

from core.domain import ProjectStatus, SkillSet, UserRole
from core.domain.skills import skill_key
from core.exceptions import NotFoundError
from core.interfaces import AllocationQuery, AssignmentRepository, ProjectRepository, UserRepository
from core.services.analytics.models import (
    AssignedEngineerSkills,
    EngineerUtilizationRow,
    SkillCount,
    SkillGapReport,
    StatusCount,
    TeamUtilization,
    UtilizationSummary,
)
from core.services.capacity import CapacityService

logger = logging.getLogger(__name__)

OVERUTILIZED_ABOVE = 90
UNDERUTILIZED_BELOW = 50


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class AnalyticsService:
    def __init__(
        self,
        user_repo: UserRepository,
        project_repo: ProjectRepository,
        assignment_repo: AssignmentRepository,
        capacity_service: CapacityService,
    ):
        self._user_repo = user_repo
        self._project_repo = project_repo
        self._assignment_repo = assignment_repo
        self._capacity = capacity_service

    def team_utilization(self) -> TeamUtilization:
        rows: List[EngineerUtilizationRow] = []
        total_capacity = 0
        total_allocated = 0
        over = 0
        under = 0

        for engineer in self._user_repo.list_by_role(UserRole.ENGINEER):
            info = self._capacity.capacity_info_for(engineer)
            rows.append(
                EngineerUtilizationRow(
                    engineer_id=engineer.id,
                    name=engineer.name,
                    email=engineer.email,
                    max_capacity=info.max_capacity,
                    allocated_capacity=info.allocated_capacity,
                    available_capacity=info.available_capacity,
                    utilization_percent=info.utilization_percent,
                )
            )
            total_capacity += info.max_capacity
            total_allocated += info.allocated_capacity
            if info.utilization_percent > OVERUTILIZED_ABOVE:
                over += 1
            elif info.utilization_percent < UNDERUTILIZED_BELOW:
                under += 1

        average = _round_half_up(total_allocated / total_capacity * 100) if total_capacity > 0 else 0
        return TeamUtilization(
            engineers=rows,
            aggregated=UtilizationSummary(
                total_engineers=len(rows),
                average_utilization=average,
                total_capacity=total_capacity,
                total_allocated=total_allocated,
                overutilized_count=over,
                underutilized_count=under,
            ),
        )

    def skill_gap(self, project_id: str) -> SkillGapReport:
        project = self._project_repo.get(project_id) if project_id else None
        if project is None:
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")

        required = project.required_skill_set
        assigned: List[AssignedEngineerSkills] = []
        available = SkillSet()
        for a in self._assignment_repo.query(AllocationQuery(project_id=project.id)):
            engineer = self._user_repo.get(a.engineer_id)
            if engineer is None:
                logger.warning("Assignment %s references missing engineer %s", a.id, a.engineer_id)
                continue
            assigned.append(
                AssignedEngineerSkills(
                    engineer_id=engineer.id,
                    name=engineer.name,
                    email=engineer.email,
                    skills=list(engineer.skills),
                    role=a.role,
                    allocation=a.allocation_percentage,
                )
            )
            for skill in engineer.skills:
                available.add(skill)

        _, missing = available.split(required)
        if len(required) == 0:
            coverage = 100
        else:
            coverage = _round_half_up((len(required) - len(missing)) / len(required) * 100)

        return SkillGapReport(
            project_id=project.id,
            project_name=project.name,
            required_skills=required.as_list(),
            assigned_engineers=assigned,
            available_skills=available.as_list(),
            missing_skills=missing,
            skill_coverage=coverage,
        )

    def project_status_distribution(self) -> List[StatusCount]:
        counts = {status: 0 for status in ProjectStatus}
        for project in self._project_repo.list_all():
            counts[project.status] += 1
        return [StatusCount(status, counts[status]) for status in ProjectStatus]

    def skill_distribution(self) -> List[SkillCount]:
        labels: dict[str, str] = {}
        counts: dict[str, int] = {}
        for engineer in self._user_repo.list_by_role(UserRole.ENGINEER):
            for skill in engineer.skill_set:
                key = skill_key(skill)
                labels.setdefault(key, skill)
                counts[key] = counts.get(key, 0) + 1
        ordered = sorted(counts, key=lambda k: (-counts[k], k))
        return [SkillCount(labels[k], counts[k]) for k in ordered]


__all__ = ["AnalyticsService", "OVERUTILIZED_ABOVE", "UNDERUTILIZED_BELOW"]
