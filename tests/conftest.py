"""
Shared fixtures.

- In-memory SQLite per test (StaticPool, so every thread sees one database)
- Argon2 with the cheapest parameters the library accepts
- A controllable millisecond clock shared by the service and the app
- One RSA signing key per test session (key generation is slow)
"""

import pytest
from fastapi.testclient import TestClient

from onboarding.core.config import Settings
from onboarding.core.database import build_engine, build_session_factory, init_db
from onboarding.main import create_app
from onboarding.repositories.sessions import SessionStore
from onboarding.repositories.users import UserStore
from onboarding.services.auth_service import AuthService, current_millis
from onboarding.services.password import PasswordHasher
from onboarding.services.tokens import generate_private_key_pem

from tests.helpers import PUBLIC_URL, SITE_URL


class FakeClock:
    def __init__(self, now: int):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture(scope="session")
def private_key_pem() -> str:
    return generate_private_key_pem()


@pytest.fixture
def settings(private_key_pem) -> Settings:
    return Settings(
        DATABASE_URL="sqlite://",
        SITE_URL=SITE_URL,
        PUBLIC_URL=PUBLIC_URL,
        SESSION_COOKIE_NAME="__session",
        SESSION_DURATION_DAYS=30,
        JWT_PRIVATE_KEY=private_key_pem,
        ALGORITHM="RS256",
        TOKEN_AUDIENCE="onboarding",
        ARGON2_TIME_COST=1,
        ARGON2_MEMORY_COST=8,
        ARGON2_PARALLELISM=1,
        LOG_LEVEL="WARNING",
        DEBUG=False,
    )


@pytest.fixture
def clock() -> FakeClock:
    # Anchored on real time so cookie expiries stay in the future
    return FakeClock(current_millis())


@pytest.fixture
def db(settings):
    engine = build_engine(settings)
    init_db(engine)
    session = build_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def users(db) -> UserStore:
    return UserStore(db)


@pytest.fixture
def sessions(db) -> SessionStore:
    return SessionStore(db)


@pytest.fixture
def hasher(settings) -> PasswordHasher:
    return PasswordHasher.from_settings(settings)


@pytest.fixture
def auth_service(settings, users, sessions, hasher, clock) -> AuthService:
    return AuthService(settings, users, sessions, hasher, clock=clock)


@pytest.fixture
def app(settings, clock):
    return create_app(settings, clock=clock)


@pytest.fixture
def client(app):
    with TestClient(app, base_url="https://testserver") as test_client:
        yield test_client
