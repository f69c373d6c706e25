from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from core.domain.identifiers import generate_id

DEFAULT_ASSIGNMENT_ROLE = "Developer"


@dataclass
class Assignment:
    id: str
    engineer_id: str
    project_id: str
    allocation_percentage: int
    start_date: date
    end_date: date
    role: str = DEFAULT_ASSIGNMENT_ROLE
    version: int = 1

    @staticmethod
    def create(
        engineer_id: str,
        project_id: str,
        allocation_percentage: int,
        start_date: date,
        end_date: date,
        role: str = DEFAULT_ASSIGNMENT_ROLE,
    ) -> "Assignment":
        return Assignment(
            id=generate_id(),
            engineer_id=engineer_id,
            project_id=project_id,
            allocation_percentage=allocation_percentage,
            start_date=start_date,
            end_date=end_date,
            role=role,
        )


__all__ = ["Assignment", "DEFAULT_ASSIGNMENT_ROLE"]
