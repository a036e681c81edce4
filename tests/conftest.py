"""
Shared pytest fixtures: an isolated application per test, backed by its own
SQLite file and a known admin password.
"""
import sqlite3
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.core.services.auth_service import pwd_context
from app.infrastructure.config.config import (
    AdminConfig,
    AppConfig,
    DBConfig,
    RateLimitConfig,
    SessionConfig,
)
from app.main import create_app


ADMIN_USERNAME = "Admin"
ADMIN_PASSWORD = "Pass123"

VALID_SUBMISSION = {
    "full_name": "Jane Doe",
    "phone": "0400000000",
    "email": "jane@example.com",
    "message": "Need a quote",
}


@pytest.fixture(scope="session")
def admin_password_hash() -> str:
    return pwd_context.hash(ADMIN_PASSWORD)


@pytest.fixture
def db_path(tmp_path) -> Path:
    return tmp_path / "data" / "submissions.db"


@pytest.fixture
def admin_config(admin_password_hash) -> AdminConfig:
    return AdminConfig(ADMIN_USERNAME=ADMIN_USERNAME, ADMIN_PASSWORD_HASH=admin_password_hash)


@pytest.fixture
def session_config() -> SessionConfig:
    return SessionConfig(SESSION_SECRET="test_secret", SESSION_COOKIE_NAME="sid")


@pytest.fixture
def rate_limit_config() -> RateLimitConfig:
    return RateLimitConfig(
        GLOBAL_MAX_REQUESTS=1000,
        GLOBAL_WINDOW_SECONDS=900,
        STRICT_MAX_REQUESTS=100,
        STRICT_WINDOW_SECONDS=900,
    )


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(APP_ENV="test", ALLOWED_ORIGIN="http://localhost:3000")


@pytest.fixture
def app(app_config, admin_config, session_config, db_path, rate_limit_config):
    return create_app(
        app_config=app_config,
        admin_config=admin_config,
        session_config=session_config,
        db_config=DBConfig(DB_PATH=str(db_path)),
        rate_limit_config=rate_limit_config,
    )


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_client(client):
    """Client already holding an authenticated admin session cookie."""
    response = client.post(
        "/api/admin/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return client


def count_rows(db_path: Path) -> int:
    with sqlite3.connect(db_path) as connection:
        return connection.execute("SELECT COUNT(*) FROM submissions").fetchone()[0]
