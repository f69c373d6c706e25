from core.services.project.models import ProjectDetail
from core.services.project.service import ProjectService

__all__ = ["ProjectService", "ProjectDetail"]
