"""Shared fixtures: SQLite in-memory database, app, client and bearer tokens."""

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from roadready.adapters.outbound.persistence.models import Base
from roadready.infrastructure.db import enable_sqlite_foreign_keys
from roadready.infrastructure.config.settings import settings
from roadready.infrastructure.wiring.dependencies import get_session_factory
from roadready.main import create_app


@pytest.fixture
def sqlite_engine():
    """Create SQLite in-memory engine shared across threads for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(sqlite_engine):
    """Session factory bound to the in-memory engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=sqlite_engine)


@pytest.fixture
def fk_session_factory():
    """Session factory for an in-memory database that enforces foreign keys."""
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def app(session_factory):
    """Create the application with repositories pointed at the in-memory database."""
    app = create_app()
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


def make_token(*roles: str, subject: str = "1") -> str:
    """Encode a bearer token carrying the given roles."""
    claims = {"sub": subject}
    if len(roles) == 1:
        claims["role"] = roles[0]
    elif roles:
        claims["roles"] = list(roles)
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def auth(*roles: str) -> dict[str, str]:
    """Authorization header for a caller holding ``roles``."""
    return {"Authorization": f"Bearer {make_token(*roles)}"}


@pytest.fixture
def auth_headers():
    """Build Authorization headers: ``auth_headers("Admin")``."""
    return auth


@pytest.fixture
def token_for():
    """Build raw bearer tokens: ``token_for("Agent", subject="7")``."""
    return make_token
