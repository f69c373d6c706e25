from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Iterable, List

from sqlalchemy.orm import Session

from core.domain import DEFAULT_MAX_CAPACITY, Seniority, User, UserRole, clean_skills
from core.domain.intervals import FAR_FUTURE, today
from core.events.domain_events import domain_events
from core.exceptions import ConcurrencyError, NotFoundError
from core.interfaces import AllocationQuery, AssignmentRepository, UserRepository
from core.services.capacity import CapacityService
from core.services.engineer.models import EngineerCapacityRow, EngineerProfile
from core.services.engineer.validation import EngineerValidationMixin
from core.services.matching import SkillMatchingService

logger = logging.getLogger(__name__)


class EngineerService(EngineerValidationMixin):
    def __init__(
        self,
        session: Session,
        user_repo: UserRepository,
        assignment_repo: AssignmentRepository,
        capacity_service: CapacityService,
        matching_service: SkillMatchingService,
        today_provider: Callable[[], date] | None = None,
    ):
        self._session = session
        self._user_repo = user_repo
        self._assignment_repo = assignment_repo
        self._capacity = capacity_service
        self._matching = matching_service
        self._today = today_provider or today

    def register_user(
        self,
        name: str,
        email: str,
        role: UserRole | str = UserRole.ENGINEER,
        skills: Iterable[str] | None = None,
        seniority: Seniority | str = Seniority.MID,
        max_capacity: int = DEFAULT_MAX_CAPACITY,
        department: str | None = None,
    ) -> User:
        user = User.create(
            name=self._validate_name(name),
            email=self._validate_email(email),
            role=self._as_role(role),
            skills=clean_skills(skills),
            seniority=self._as_seniority(seniority),
            max_capacity=self._validate_max_capacity(max_capacity),
            department=(department or "").strip() or None,
        )
        try:
            self._user_repo.add(user)
            self._session.commit()
            logger.info("Registered %s %s - %s", user.role.value, user.id, user.name)
        except Exception as e:
            self._session.rollback()
            logger.error("Error registering user: %s", e)
            raise
        domain_events.engineer_changed.emit(user.id)
        return user

    def update_engineer(
        self,
        engineer_id: str,
        name: str | None = None,
        skills: Iterable[str] | None = None,
        seniority: Seniority | str | None = None,
        max_capacity: int | None = None,
        department: str | None = None,
        expected_version: int | None = None,
    ) -> User:
        engineer = self.get_engineer(engineer_id)
        if expected_version is not None and engineer.version != expected_version:
            raise ConcurrencyError(
                "Engineer changed since you opened it. Refresh and try again.",
                code="STALE_WRITE",
            )

        if name is not None:
            engineer.name = self._validate_name(name)
        if skills is not None:
            engineer.skills = clean_skills(skills)
        if seniority is not None:
            engineer.seniority = self._as_seniority(seniority)
        if max_capacity is not None:
            engineer.max_capacity = self._validate_max_capacity(max_capacity)
        if department is not None:
            engineer.department = department.strip() or None

        try:
            self._user_repo.update(engineer)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise

        if max_capacity is not None:
            self._warn_if_overallocated(engineer)
        domain_events.engineer_changed.emit(engineer.id)
        return engineer

    def get_engineer(self, engineer_id: str) -> User:
        user = self._user_repo.get(engineer_id)
        if user is None or not user.is_engineer:
            raise NotFoundError("Engineer not found.", code="ENGINEER_NOT_FOUND")
        return user

    def get_user(self, user_id: str) -> User | None:
        return self._user_repo.get(user_id)

    def list_engineers(self) -> List[User]:
        return self._user_repo.list_by_role(UserRole.ENGINEER)

    def list_engineers_with_capacity(self, skills: Iterable[str] | None = None) -> List[EngineerCapacityRow]:
        if skills:
            engineers = self._matching.filter_engineers_by_skills(skills)
        else:
            engineers = self.list_engineers()
        return [EngineerCapacityRow(e, self._capacity.capacity_info_for(e)) for e in engineers]

    def get_engineer_profile(self, engineer_id: str) -> EngineerProfile:
        engineer = self.get_engineer(engineer_id)
        current = self._assignment_repo.query(
            AllocationQuery(engineer_id=engineer.id, ends_on_or_after=self._today())
        )
        return EngineerProfile(
            engineer=engineer,
            capacity=self._capacity.capacity_info_for(engineer),
            current_assignments=current,
        )

    def _warn_if_overallocated(self, engineer: User) -> None:
        # capacity is only enforced on assignment writes; lowering it is allowed
        committed = sum(
            a.allocation_percentage
            for a in self._assignment_repo.query(
                AllocationQuery(engineer_id=engineer.id, window=(self._today(), FAR_FUTURE))
            )
        )
        if committed > engineer.max_capacity:
            logger.warning(
                "Engineer %s now has max capacity %s%% but %s%% already committed",
                engineer.id,
                engineer.max_capacity,
                committed,
            )


__all__ = ["EngineerService"]
