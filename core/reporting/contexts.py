from dataclasses import dataclass
from datetime import date
from typing import List

from core.services.analytics import SkillCount, TeamUtilization


@dataclass
class UtilizationWorkbookContext:
    report: TeamUtilization
    skills: List[SkillCount]
    as_of: date
