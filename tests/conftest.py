"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from app.api import create_app
from app.data.database import build_engine, build_session_factory, init_db


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across threads, fresh per test."""
    engine = build_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(engine):
    return TestClient(create_app(engine))
