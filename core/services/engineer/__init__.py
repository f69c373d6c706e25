from core.services.engineer.models import EngineerCapacityRow, EngineerProfile
from core.services.engineer.service import EngineerService

__all__ = ["EngineerService", "EngineerCapacityRow", "EngineerProfile"]
