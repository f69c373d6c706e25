from __future__ import annotations

import re
from typing import Any

from core.domain import Seniority, UserRole
from core.exceptions import ValidationError
from core.interfaces import UserRepository

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class EngineerValidationMixin:
    _user_repo: UserRepository

    def _validate_name(self, name: str | None) -> str:
        cleaned = (name or "").strip()
        if not cleaned:
            raise ValidationError("Name cannot be empty.", code="USER_NAME_EMPTY")
        return cleaned

    def _validate_email(self, email: str | None, *, current_user_id: str | None = None) -> str:
        cleaned = (email or "").strip().lower()
        if not cleaned or not _EMAIL_PATTERN.match(cleaned):
            raise ValidationError("A valid e-mail address is required.", code="USER_EMAIL_INVALID")
        existing = self._user_repo.get_by_email(cleaned)
        if existing is not None and existing.id != current_user_id:
            raise ValidationError("A user with this e-mail already exists.", code="USER_EMAIL_DUPLICATE")
        return cleaned

    def _validate_max_capacity(self, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not float(value).is_integer():
            raise ValidationError("Max capacity must be a whole percentage.", code="INVALID_CAPACITY")
        capacity = int(value)
        if capacity < 0 or capacity > 100:
            raise ValidationError("Max capacity must be between 0 and 100.", code="INVALID_CAPACITY")
        return capacity

    def _as_role(self, value: UserRole | str) -> UserRole:
        try:
            return value if isinstance(value, UserRole) else UserRole(str(value).strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown role: {value!r}", code="INVALID_ROLE") from None

    def _as_seniority(self, value: Seniority | str) -> Seniority:
        try:
            return value if isinstance(value, Seniority) else Seniority(str(value).strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown seniority: {value!r}", code="INVALID_SENIORITY") from None


__all__ = ["EngineerValidationMixin"]
