"""Reporting API wrappers around renderer classes."""

from datetime import date
from pathlib import Path
from typing import Iterable

from core.reporting.contexts import UtilizationWorkbookContext
from core.reporting.renderers.excel import UtilizationWorkbookRenderer
from core.services.analytics import AnalyticsService, SkillCount, TeamUtilization


def _ensure_parent(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def export_utilization_workbook(
    report: TeamUtilization,
    skills: Iterable[SkillCount],
    output_path: str | Path,
    as_of: date | None = None,
) -> Path:
    ctx = UtilizationWorkbookContext(
        report=report,
        skills=list(skills),
        as_of=as_of or date.today(),
    )
    return UtilizationWorkbookRenderer().render(ctx, _ensure_parent(Path(output_path)))


def generate_utilization_workbook(analytics_service: AnalyticsService, output_path: str | Path) -> Path:
    return export_utilization_workbook(
        analytics_service.team_utilization(),
        analytics_service.skill_distribution(),
        output_path,
    )


__all__ = ["export_utilization_workbook", "generate_utilization_workbook"]
