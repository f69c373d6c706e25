from core.services.analytics.models import (
    AssignedEngineerSkills,
    EngineerUtilizationRow,
    SkillCount,
    SkillGapReport,
    StatusCount,
    TeamUtilization,
    UtilizationSummary,
)
from core.services.analytics.service import AnalyticsService

__all__ = [
    "AnalyticsService",
    "AssignedEngineerSkills",
    "EngineerUtilizationRow",
    "SkillCount",
    "SkillGapReport",
    "StatusCount",
    "TeamUtilization",
    "UtilizationSummary",
]
