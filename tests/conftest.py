"""
Shared pytest fixtures.

Every test gets its own application instance backed by a fresh on-disk
SQLite database (``sqlite+aiosqlite``) so no PostgreSQL server is needed.
Calls to Gemini never leave the process: the advice service is overridden
with one that talks to an ``httpx.MockTransport``.
"""

import os
import sys
from pathlib import Path

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

# Ensure project root is on sys.path for direct imports like `api`, `core`, etc.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Keep the import-time default app away from any real provider or database
os.environ.setdefault("GEMINI_API_KEY", "")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from api.main import create_fastapi_app  # noqa: E402
from core.settings import (  # noqa: E402
    AppSettings,
    GeminiSettings,
    PgDbSettings,
    SecuritySettings,
    Settings,
)
from tests.fakes import FakeGemini, make_advice_service  # noqa: E402


@pytest.fixture
def settings(tmp_path):
    return Settings(
        APP=AppSettings(LOG_LEVEL="WARNING"),
        DATABASE=PgDbSettings(
            DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'maternal.db'}"
        ),
        SECURITY=SecuritySettings(BCRYPT_ROUNDS=4),
        GEMINI=GeminiSettings(GEMINI_API_KEY="test-key"),
    )


@pytest.fixture
def app(settings):
    _app = create_fastapi_app(settings)
    yield _app
    _app.container.unwire()


@pytest.fixture
def fake_gemini(app):
    fake = FakeGemini()
    app.container.services.advice_service.override(
        providers.Factory(make_advice_service, fake)
    )
    yield fake
    app.container.services.advice_service.reset_override()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def registered(client):
    """Two registered accounts: (email, password) pairs."""
    accounts = [("a@x.com", "pw1"), ("b@x.com", "pw2")]
    for email, password in accounts:
        resp = client.post("/signup", json={"email": email, "password": password})
        assert resp.status_code == 201
    return accounts
