from __future__ import annotations

from datetime import date
from typing import Any

from core.domain import ProjectStatus
from core.exceptions import ValidationError
from core.services.assignment.validation import parse_date_range

MIN_TEAM_SIZE = 1
MAX_TEAM_SIZE = 50


class ProjectValidationMixin:
    def _validate_project_name(self, name: str | None) -> str:
        cleaned = (name or "").strip()
        if not cleaned:
            raise ValidationError("Project name cannot be empty.", code="PROJECT_NAME_EMPTY")
        return cleaned

    def _validate_description(self, description: str | None) -> str:
        cleaned = (description or "").strip()
        if not cleaned:
            raise ValidationError("Project description cannot be empty.", code="PROJECT_DESCRIPTION_EMPTY")
        return cleaned

    def _validate_project_dates(self, start_date: Any, end_date: Any) -> tuple[date, date]:
        if start_date in (None, "") or end_date in (None, ""):
            raise ValidationError("Project start and end dates are required.", code="MISSING_FIELDS")
        return parse_date_range(start_date, end_date)

    def _validate_team_size(self, team_size: Any) -> int:
        if isinstance(team_size, bool) or not isinstance(team_size, int):
            raise ValidationError("Team size must be a whole number.", code="INVALID_TEAM_SIZE")
        if team_size < MIN_TEAM_SIZE or team_size > MAX_TEAM_SIZE:
            raise ValidationError(
                f"Team size must be between {MIN_TEAM_SIZE} and {MAX_TEAM_SIZE}.",
                code="INVALID_TEAM_SIZE",
            )
        return team_size

    def _as_status(self, value: ProjectStatus | str) -> ProjectStatus:
        try:
            return value if isinstance(value, ProjectStatus) else ProjectStatus(str(value).strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown project status: {value!r}", code="INVALID_STATUS") from None


__all__ = ["ProjectValidationMixin", "MIN_TEAM_SIZE", "MAX_TEAM_SIZE"]
