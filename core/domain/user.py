from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from core.domain.enums import Seniority, UserRole
from core.domain.identifiers import generate_id
from core.domain.skills import SkillSet, clean_skills

DEFAULT_MAX_CAPACITY = 100


@dataclass
class User:
    id: str
    name: str
    email: str
    role: UserRole = UserRole.ENGINEER
    skills: List[str] = field(default_factory=list)
    seniority: Seniority = Seniority.MID
    max_capacity: int = DEFAULT_MAX_CAPACITY
    department: Optional[str] = None
    version: int = 1

    @property
    def is_engineer(self) -> bool:
        return self.role == UserRole.ENGINEER

    @property
    def skill_set(self) -> SkillSet:
        return SkillSet(self.skills)

    @staticmethod
    def create(
        name: str,
        email: str,
        role: UserRole = UserRole.ENGINEER,
        skills: List[str] | None = None,
        seniority: Seniority = Seniority.MID,
        max_capacity: int = DEFAULT_MAX_CAPACITY,
        department: Optional[str] = None,
    ) -> "User":
        return User(
            id=generate_id(),
            name=name,
            email=email,
            role=role,
            skills=clean_skills(skills),
            seniority=seniority,
            max_capacity=max_capacity,
            department=department,
        )


__all__ = ["User", "DEFAULT_MAX_CAPACITY"]
