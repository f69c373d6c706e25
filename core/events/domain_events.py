"""Change notifications for engineers, projects and assignments."""
from __future__ import annotations

from core.events.signal import Signal


class DomainEvents:
    def __init__(self) -> None:
        self.engineer_changed: Signal[str] = Signal("engineer_changed")        # user_id
        self.project_changed: Signal[str] = Signal("project_changed")          # project_id
        self.assignments_changed: Signal[str] = Signal("assignments_changed")  # engineer_id


# SINGLE global instance
domain_events = DomainEvents()
