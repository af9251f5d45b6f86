"""
Shared test fixtures for DevConnect API tests.

Provides database session management, test clients, user fixtures and a
stubbed GitHub API.
"""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from devconnect.auth.jwt import create_access_token
from devconnect.auth.password import hash_password
from devconnect.config import settings
from devconnect.database import Base, get_db
from devconnect.main import app
from devconnect.middleware.rate_limit import reset_limiter
from devconnect.services.accounts import gravatar_url
from devconnect.services.github import GitHubClient, get_github_client

# Import models so they're registered with Base.metadata before table creation
from devconnect.models import Post, Profile, User  # noqa: F401

# Test database URL (uses separate test database)
TEST_DATABASE_URL = settings.test_database_url

# Create test engine with NullPool to avoid connection issues
test_engine = create_async_engine(
    TEST_DATABASE_URL,
    poolclass=NullPool,
    echo=False,
)

TestSessionLocal = async_sessionmaker(
    bind=test_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


# --- Rate Limiter Reset Fixture ---


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    """Reset rate limiter before each test to ensure test isolation."""
    reset_limiter()
    yield


# --- Database Fixtures ---


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Create tables before each test function, drop after.
    Provides isolated database state per test.
    """
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionLocal() as session:
        yield session
        await session.rollback()

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture(scope="function")
async def async_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Async HTTP client configured for testing.
    Overrides database dependency with test session.
    """

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        follow_redirects=True,
    ) as client:
        yield client

    app.dependency_overrides.clear()


# --- Authentication Helper Fixtures ---


@pytest.fixture
def auth_headers():
    """Factory fixture for creating bearer token headers."""

    def _auth_headers(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers


@pytest.fixture
def valid_registration_data() -> dict[str, str]:
    """Valid user registration payload."""
    return {
        "name": "New User",
        "email": "newuser@example.com",
        "password": "secret123",
    }


@pytest.fixture
def valid_profile_data() -> dict[str, str]:
    """Valid profile submission in the web client's format."""
    return {
        "status": "Developer",
        "skills": "python, sql,docker",
        "company": "Acme",
        "website": "https://example.com",
        "location": "Berlin",
        "bio": "Writes code",
        "githubusername": "octocat",
        "twitter": "https://twitter.com/octocat",
        "linkedin": "https://linkedin.com/in/octocat",
    }


# --- User Fixtures ---


async def _create_user(
    db_session: AsyncSession,
    name: str,
    email: str,
    password: str,
) -> dict[str, Any]:
    """Helper to create a user in the database and issue a token for it."""
    user = User(
        name=name,
        email=email.lower(),
        password_hash=hash_password(password),
        avatar=gravatar_url(email),
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)

    return {
        "user_id": str(user.id),
        "name": user.name,
        "email": user.email,
        "password": password,
        "token": create_access_token(str(user.id), user.name),
    }


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession) -> dict[str, Any]:
    """Create a standard test user and a valid token for it."""
    return await _create_user(
        db_session,
        name="Test User",
        email="test@example.com",
        password="testpass123",
    )


@pytest_asyncio.fixture
async def second_user(db_session: AsyncSession) -> dict[str, Any]:
    """Create a second user for testing ownership/authorization scenarios."""
    return await _create_user(
        db_session,
        name="Second User",
        email="second@example.com",
        password="secondpass123",
    )


@pytest_asyncio.fixture
async def user_with_profile(
    async_client: AsyncClient, test_user: dict, auth_headers, valid_profile_data: dict
) -> dict[str, Any]:
    """Test user who has already submitted a profile."""
    response = await async_client.post(
        "/api/profile",
        json=valid_profile_data,
        headers=auth_headers(test_user["token"]),
    )
    assert response.status_code == 200
    return {**test_user, "profile": response.json()}


# --- GitHub Fixtures ---


def _repo(repo_id: int, name: str, created_at: str) -> dict[str, Any]:
    return {
        "id": repo_id,
        "name": name,
        "full_name": f"octocat/{name}",
        "html_url": f"https://github.com/octocat/{name}",
        "description": f"{name} description",
        "language": "Python",
        "stargazers_count": repo_id,
        "watchers_count": repo_id,
        "forks_count": 0,
        "created_at": created_at,
        "owner": {"login": "octocat"},
    }


GITHUB_REPOS = [
    _repo(1, "first", "2015-01-01T00:00:00Z"),
    _repo(2, "second", "2016-01-01T00:00:00Z"),
    _repo(3, "third", "2017-01-01T00:00:00Z"),
    _repo(4, "fourth", "2018-01-01T00:00:00Z"),
    _repo(5, "fifth", "2019-01-01T00:00:00Z"),
    _repo(6, "sixth", "2020-01-01T00:00:00Z"),
]


@pytest.fixture
def github_handler() -> Callable[[httpx.Request], httpx.Response]:
    """
    Fake GitHub REST endpoint.

    Knows the user ``octocat`` and answers 404 for anyone else. Sorting and
    paging follow the query parameters it receives.
    """

    def _handler(request: httpx.Request) -> httpx.Response:
        if request.url.path != "/users/octocat/repos":
            return httpx.Response(404, json={"message": "Not Found"})
        repos = sorted(
            GITHUB_REPOS,
            key=lambda r: r["created_at"],
            reverse=request.url.params.get("direction") == "desc",
        )
        per_page = int(request.url.params.get("per_page", 30))
        return httpx.Response(200, json=repos[:per_page])

    return _handler


@pytest.fixture
def github_requests(async_client: AsyncClient, github_handler) -> list[httpx.Request]:
    """
    Route the app's GitHub client to the fake endpoint.

    Returns the list of outbound requests for inspection.
    """
    seen: list[httpx.Request] = []

    def _recording_handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return github_handler(request)

    client = GitHubClient(
        token="test-token",
        base_url="https://api.github.test",
        transport=httpx.MockTransport(_recording_handler),
    )
    app.dependency_overrides[get_github_client] = lambda: client
    return seen


# --- Utility Fixtures ---


@pytest.fixture
def frozen_time():
    """
    Fixture for time-based testing using freezegun.

    Usage:
        with frozen_time("2026-02-01 12:00:00"):
            # time is frozen
    """
    from freezegun import freeze_time

    return freeze_time
