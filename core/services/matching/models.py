from __future__ import annotations

from dataclasses import dataclass
from typing import List

from core.domain import User


@dataclass(frozen=True)
class EngineerMatch:
    engineer: User
    matching_skills: List[str]
    missing_skills: List[str]
    available_capacity: int
    match_score: float


__all__ = ["EngineerMatch"]
