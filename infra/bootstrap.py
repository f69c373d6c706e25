from __future__ import annotations

import logging

from infra.db.base import build_engine, build_session_factory
from infra.migrate import run_migrations
from infra.services import ServiceGraph, build_service_graph
from infra.settings import AppSettings

logger = logging.getLogger(__name__)


def open_service_graph(settings: AppSettings | None = None, *, migrate: bool = True) -> ServiceGraph:
    """Upgrade the schema, open a session and wire the services on top of it."""
    settings = settings or AppSettings.from_env()
    if migrate:
        run_migrations(settings.db_url)
    session = build_session_factory(build_engine(settings))()
    logger.info("Service graph ready")
    return build_service_graph(session)


__all__ = ["open_service_graph"]
