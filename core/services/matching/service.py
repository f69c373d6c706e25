from __future__ import annotations

import logging
from typing import Iterable, List

from core.domain import SkillSet, User, UserRole
from core.domain.skills import skill_key
from core.interfaces import UserRepository
from core.services.capacity import CapacityService
from core.services.matching.models import EngineerMatch

logger = logging.getLogger(__name__)


def match_score(matching: int, required: int) -> float:
    """Share of required skills covered, in percent. An empty requirement is a full match."""
    if required <= 0:
        return 100.0
    return matching / required * 100


class SkillMatchingService:
    def __init__(self, user_repo: UserRepository, capacity_service: CapacityService):
        self._user_repo: UserRepository = user_repo
        self._capacity: CapacityService = capacity_service

    def find_matching_engineers(self, required_skills: Iterable[str], min_capacity: int = 0) -> List[EngineerMatch]:
        required = SkillSet(required_skills or ())
        matches: List[EngineerMatch] = []

        for engineer in self._user_repo.list_by_role(UserRole.ENGINEER):
            matching, missing = engineer.skill_set.split(required)
            available = self._capacity.available_capacity_for(engineer)
            if available < min_capacity:
                continue
            matches.append(
                EngineerMatch(
                    engineer=engineer,
                    matching_skills=matching,
                    missing_skills=missing,
                    available_capacity=available,
                    match_score=match_score(len(matching), len(required)),
                )
            )

        matches.sort(key=lambda m: (m.match_score, m.available_capacity), reverse=True)
        logger.debug(
            "Skill match for %s (min capacity %s): %d candidate(s)",
            required.as_list(),
            min_capacity,
            len(matches),
        )
        return matches

    def filter_engineers_by_skills(self, skills: Iterable[str] | None) -> List[User]:
        """Engineers owning any of ``skills``; a fragment matches inside a longer skill name."""
        fragments = [s for s in (skills or ()) if s and s.strip()]
        engineers = self._user_repo.list_by_role(UserRole.ENGINEER)
        if not fragments:
            return engineers
        return [e for e in engineers if e.skill_set.matches_any_fragment(fragments)]

    def list_all_skills(self) -> List[str]:
        known = SkillSet()
        for engineer in self._user_repo.list_by_role(UserRole.ENGINEER):
            for skill in engineer.skills:
                known.add(skill)
        return sorted(known, key=skill_key)


__all__ = ["SkillMatchingService", "match_score"]
