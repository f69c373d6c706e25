from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from core.domain.enums import ASSIGNABLE_STATUSES, ProjectStatus
from core.domain.identifiers import generate_id
from core.domain.skills import SkillSet


@dataclass
class Project:
    id: str
    name: str
    description: str
    start_date: date
    end_date: date
    required_skills: List[str] = field(default_factory=list)
    team_size: int = 1
    status: ProjectStatus = ProjectStatus.PLANNING
    manager_id: Optional[str] = None
    version: int = 1

    @property
    def is_assignable(self) -> bool:
        return self.status in ASSIGNABLE_STATUSES

    @property
    def required_skill_set(self) -> SkillSet:
        return SkillSet(self.required_skills)

    def contains(self, start: date, end: date) -> bool:
        return start >= self.start_date and end <= self.end_date

    @staticmethod
    def create(name: str, description: str, start_date: date, end_date: date, **extra) -> "Project":
        return Project(
            id=generate_id(),
            name=name,
            description=description,
            start_date=start_date,
            end_date=end_date,
            **extra,
        )


__all__ = ["Project"]
