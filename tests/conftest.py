# tests/conftest.py
import logging
from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.services.assignment import EngineerLockRegistry
from infra.db.base import Base
import infra.db.models  # noqa
from infra.services import build_service_dict

TODAY = date(2026, 1, 1)


@pytest.fixture
def session():
    # separate in-memory DB for tests
    engine = create_engine("sqlite:///:memory:", future=True)
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def services(session):
    # Same wiring as the app, pinned to a fixed "today" and a private lock registry
    return build_service_dict(
        session,
        today_provider=lambda: TODAY,
        lock_registry=EngineerLockRegistry(),
    )


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def engineer(services):
    return services["engineer_service"].register_user(
        "Ada Lovelace",
        "ada@example.com",
        skills=["Python", "React"],
        seniority="senior",
    )


@pytest.fixture
def project(services):
    return services["project_service"].create_project(
        "Apollo",
        "Capacity planning pilot",
        date(2026, 1, 1),
        date(2026, 12, 31),
        required_skills=["Python", "Go"],
        status="active",
    )


@pytest.fixture
def restore_logging():
    # setup_logging() and alembic's fileConfig() both rewire the root logger
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield root
    finally:
        for handler in list(root.handlers):
            if handler not in handlers:
                root.removeHandler(handler)
                handler.close()
        for handler in handlers:
            if handler not in root.handlers:
                root.addHandler(handler)
        root.setLevel(level)
