# infra/db/base.py
from __future__ import annotations
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from infra.settings import AppSettings

logger = logging.getLogger(__name__)

Base = declarative_base()


def build_engine(settings: AppSettings | None = None) -> Engine:
    settings = settings or AppSettings.from_env()
    logger.info("Using database at: %s", settings.db_url)
    return create_engine(
        settings.db_url,
        echo=settings.sql_echo,
        future=True,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)
