from .analytics import AnalyticsService, SkillGapReport, TeamUtilization
from .assignment import AssignmentService, AssignmentValidator, EngineerLockRegistry
from .capacity import AvailabilityWindow, CapacityInfo, CapacityService, build_availability_windows
from .engineer import EngineerService, EngineerCapacityRow, EngineerProfile
from .matching import EngineerMatch, SkillMatchingService
from .project import ProjectService, ProjectDetail

__all__ = [
    "AnalyticsService",
    "SkillGapReport",
    "TeamUtilization",
    "AssignmentService",
    "AssignmentValidator",
    "EngineerLockRegistry",
    "CapacityService",
    "CapacityInfo",
    "AvailabilityWindow",
    "build_availability_windows",
    "EngineerService",
    "EngineerCapacityRow",
    "EngineerProfile",
    "SkillMatchingService",
    "EngineerMatch",
    "ProjectService",
    "ProjectDetail",
]
