# core/exceptions.py
from __future__ import annotations

from typing import Any, Mapping


class DomainError(Exception):
    """Base class for domain-level errors."""
    def __init__(self, message: str, *, code: str | None = None, details: Mapping[str, Any] | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__
        self.details: dict[str, Any] = dict(details or {})


class ValidationError(DomainError):
    """Raised when data is invalid or violates constraints."""


class NotFoundError(DomainError):
    """Raised when an entity is not found (or has the wrong role)."""


class BusinessRuleError(DomainError):
    """Raised when business rules are violated (e.g., assigning to a closed project)."""


class CapacityExceededError(BusinessRuleError):
    """Raised when an allocation request asks for more than the engineer has left."""

    def __init__(self, message: str, *, requested: int, available: int, engineer_id: str, code: str | None = None):
        super().__init__(
            message,
            code=code or "INSUFFICIENT_CAPACITY",
            details={"requested": requested, "available": available, "engineer_id": engineer_id},
        )
        self.requested = requested
        self.available = available
        self.engineer_id = engineer_id


class BoundsViolationError(BusinessRuleError):
    """Raised when an assignment falls outside its project's date window."""

    def __init__(
        self,
        message: str,
        *,
        project_id: str,
        engineer_id: str | None = None,
        assignment_id: str | None = None,
        code: str | None = None,
    ):
        super().__init__(
            message,
            code=code or "OUT_OF_PROJECT_BOUNDS",
            details={"project_id": project_id, "engineer_id": engineer_id, "assignment_id": assignment_id},
        )
        self.project_id = project_id
        self.engineer_id = engineer_id
        self.assignment_id = assignment_id


class ConflictError(BusinessRuleError):
    """Raised when an entity cannot be removed while dependents still reference it."""

    def __init__(self, message: str, *, project_id: str, dependent_count: int, code: str | None = None):
        super().__init__(
            message,
            code=code or "HAS_ASSIGNMENTS",
            details={"project_id": project_id, "dependent_count": dependent_count},
        )
        self.project_id = project_id
        self.dependent_count = dependent_count


class ConcurrencyError(DomainError):
    """Raised when optimistic locking detects a stale update."""
