from core.services.matching.models import EngineerMatch
from core.services.matching.service import SkillMatchingService, match_score

__all__ = ["SkillMatchingService", "EngineerMatch", "match_score"]
