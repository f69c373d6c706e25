from core.services.capacity.models import AvailabilityWindow, CapacityInfo
from core.services.capacity.service import CapacityService
from core.services.capacity.windows import build_availability_windows

__all__ = [
    "CapacityService",
    "CapacityInfo",
    "AvailabilityWindow",
    "build_availability_windows",
]
