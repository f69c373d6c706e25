from __future__ import annotations

from dataclasses import dataclass
from typing import List

from core.domain import ProjectStatus


@dataclass(frozen=True)
class EngineerUtilizationRow:
    engineer_id: str
    name: str
    email: str
    max_capacity: int
    allocated_capacity: int
    available_capacity: int
    utilization_percent: float


@dataclass(frozen=True)
class UtilizationSummary:
    total_engineers: int
    average_utilization: int
    total_capacity: int
    total_allocated: int
    overutilized_count: int
    underutilized_count: int


@dataclass(frozen=True)
class TeamUtilization:
    engineers: List[EngineerUtilizationRow]
    aggregated: UtilizationSummary


@dataclass(frozen=True)
class AssignedEngineerSkills:
    engineer_id: str
    name: str
    email: str
    skills: List[str]
    role: str
    allocation: int


@dataclass(frozen=True)
class SkillGapReport:
    project_id: str
    project_name: str
    required_skills: List[str]
    assigned_engineers: List[AssignedEngineerSkills]
    available_skills: List[str]
    missing_skills: List[str]
    skill_coverage: int


@dataclass(frozen=True)
class StatusCount:
    status: ProjectStatus
    count: int


@dataclass(frozen=True)
class SkillCount:
    skill: str
    count: int


__all__ = [
    "EngineerUtilizationRow",
    "UtilizationSummary",
    "TeamUtilization",
    "AssignedEngineerSkills",
    "SkillGapReport",
    "StatusCount",
    "SkillCount",
]
