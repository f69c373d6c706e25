from core.domain.assignment import DEFAULT_ASSIGNMENT_ROLE, Assignment
from core.domain.enums import ASSIGNABLE_STATUSES, ProjectStatus, Seniority, UserRole
from core.domain.identifiers import generate_id, normalize_id
from core.domain.intervals import FAR_FUTURE
from core.domain.project import Project
from core.domain.skills import SkillSet, clean_skills
from core.domain.user import DEFAULT_MAX_CAPACITY, User

__all__ = [
    "generate_id",
    "normalize_id",
    "FAR_FUTURE",
    "UserRole",
    "Seniority",
    "ProjectStatus",
    "ASSIGNABLE_STATUSES",
    "User",
    "DEFAULT_MAX_CAPACITY",
    "Project",
    "Assignment",
    "DEFAULT_ASSIGNMENT_ROLE",
    "SkillSet",
    "clean_skills",
]
