"""Pytest configuration and fixtures."""
import json
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_FILE", "")

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from notes_app.database import Base, build_engine, get_db
from notes_app.main import app
from notes_app.services import webhook_service

USER_ID = "user-1"
WEBHOOK_URL = "https://example.com/hook"


class WebhookReceiver:
    """Captures outbound webhook requests instead of sending them."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.error = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error:
            raise self.error
        return httpx.Response(self.status_code)

    @property
    def payloads(self):
        return [json.loads(request.content) for request in self.requests]


@pytest.fixture
def test_db():
    """Create a test database for testing."""
    # Use in-memory SQLite shared across threads for tests
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        try:
            db = TestingSessionLocal()
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    yield TestingSessionLocal

    Base.metadata.drop_all(bind=engine)
    app.dependency_overrides.clear()


@pytest.fixture
def db(test_db):
    """Database session bound to the test database."""
    session = test_db()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(test_db):
    """API client sending requests as USER_ID."""
    return TestClient(app, headers={"X-User-Id": USER_ID})


@pytest.fixture
def anonymous_client(test_db):
    """API client without a user identity."""
    return TestClient(app)


@pytest.fixture
def receiver(monkeypatch):
    """Route outbound webhook calls to an in-process receiver."""
    webhook_receiver = WebhookReceiver()

    def get_http_client():
        return httpx.AsyncClient(transport=httpx.MockTransport(webhook_receiver.handler))

    monkeypatch.setattr(webhook_service, "get_http_client", get_http_client)
    return webhook_receiver
