from __future__ import annotations

from dataclasses import dataclass
from typing import List

from core.domain import Assignment, Project


@dataclass(frozen=True)
class ProjectDetail:
    project: Project
    assignments: List[Assignment]


__all__ = ["ProjectDetail"]
