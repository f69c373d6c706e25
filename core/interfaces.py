from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from core.domain import Assignment, Project, User, UserRole


@dataclass(frozen=True)
class AllocationQuery:
    """
    Filter for the allocation store.

    ``window`` selects allocations overlapping a closed date range,
    ``ends_on_or_after`` keeps allocations still running on that day and
    ``exclude_id`` drops one record (an update re-validating itself).
    """
    engineer_id: Optional[str] = None
    project_id: Optional[str] = None
    window: Optional[tuple[date, date]] = None
    ends_on_or_after: Optional[date] = None
    exclude_id: Optional[str] = None
    newest_first: bool = False


class UserRepository(ABC):
    @abstractmethod
    def add(self, user: User) -> None: ...

    @abstractmethod
    def update(self, user: User) -> None: ...

    @abstractmethod
    def bump_version(self, user_id: str, expected_version: int) -> int:
        """Compare-and-set the row version; raises ConcurrencyError when stale."""

    @abstractmethod
    def get(self, user_id: str) -> Optional[User]: ...

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]: ...

    @abstractmethod
    def list_all(self) -> List[User]: ...

    @abstractmethod
    def list_by_role(self, role: UserRole) -> List[User]: ...


class ProjectRepository(ABC):
    @abstractmethod
    def add(self, project: Project) -> None: ...

    @abstractmethod
    def update(self, project: Project) -> None: ...

    @abstractmethod
    def bump_version(self, project_id: str, expected_version: int) -> int:
        """Compare-and-set the row version; raises ConcurrencyError when stale."""

    @abstractmethod
    def delete(self, project_id: str) -> None: ...

    @abstractmethod
    def get(self, project_id: str) -> Optional[Project]: ...

    @abstractmethod
    def list_all(self) -> List[Project]: ...


class AssignmentRepository(ABC):
    @abstractmethod
    def add(self, assignment: Assignment) -> None: ...

    @abstractmethod
    def update(self, assignment: Assignment) -> None: ...

    @abstractmethod
    def delete(self, assignment_id: str) -> None: ...

    @abstractmethod
    def get(self, assignment_id: str) -> Optional[Assignment]: ...

    @abstractmethod
    def query(self, criteria: AllocationQuery) -> List[Assignment]:
        """Allocations matching ``criteria``, ordered by start date."""

    @abstractmethod
    def count_by_project(self, project_id: str) -> int: ...


__all__ = [
    "AllocationQuery",
    "UserRepository",
    "ProjectRepository",
    "AssignmentRepository",
]
