# tests/conftest.py
"""
Shared fixtures: an in-memory SQLite store (foreign keys on), a session on it,
and a TestClient whose app is built around that store.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from vanfleet.config import settings
from vanfleet.database import Base, build_engine, build_session_factory, create_tables
from vanfleet.main import create_app
from helpers import TEST_PASSWORD


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    create_tables(engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = build_session_factory(engine)()
    yield session
    session.close()


@pytest.fixture
def client(engine, monkeypatch):
    monkeypatch.setattr(settings, "APP_PASSWORD", TEST_PASSWORD)
    app = create_app(session_factory=build_session_factory(engine), create_schema=False)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_client(client):
    resp = client.post("/api/v1/auth/login", json={"password": TEST_PASSWORD})
    assert resp.status_code == 200
    return client
