import os
import uuid
import datetime as dt

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

TEST_DB_URL = "sqlite://:memory:"
os.environ.pop("DATABASE_URL", None)

from riyadah.core import db as db_module  # noqa: E402
from riyadah.core.security import hash_password  # noqa: E402
from riyadah.main import app  # noqa: E402
from riyadah.models import ACCOUNT_MODELS, Reward, Tournament, User  # noqa: E402

db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL

LOGIN_PATHS = {
    "user": "/api/v1/auth/login",
    "admin": "/api/v1/auth/admin-login",
    "host": "/api/v1/auth/host-login",
    "moderator": "/api/v1/auth/moderator-login",
}


async def _init_test_db() -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await Tortoise.init(config=db_module.TORTOISE_ORM)
    await Tortoise.generate_schemas()


@pytest_asyncio.fixture
async def db():
    """Fresh database without an HTTP client, for service-level tests."""
    await _init_test_db()
    yield
    await Tortoise.close_connections()


def _make_client(raise_app_exceptions: bool = True) -> AsyncClient:
    transport = ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
    return AsyncClient(transport=transport, base_url="http://testserver")


@pytest_asyncio.fixture
async def client(db):
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    """
    async with _make_client() as async_client:
        yield async_client


@pytest_asyncio.fixture
async def lenient_client(db):
    """Client that returns 500 responses instead of re-raising server errors."""
    async with _make_client(raise_app_exceptions=False) as async_client:
        yield async_client


@pytest_asyncio.fixture
async def create_staff():
    """
    Factory fixture to create admin / host / moderator accounts directly via ORM.
    """

    async def _create_staff(role: str = "admin", email: str | None = None, password: str = "StaffPass!23"):
        model = ACCOUNT_MODELS[role]
        account = await model.create(
            name=f"{role.capitalize()} {uuid.uuid4().hex[:4]}",
            email=email or f"{role}_{uuid.uuid4().hex[:6]}@example.com",
            password_hash=hash_password(password),
        )
        return account, password

    return _create_staff


@pytest_asyncio.fixture
async def create_user():
    """
    Factory fixture to create regular users directly, with a chosen balance.
    """

    async def _create_user(points: int = 100, password: str = "UserPass!23") -> tuple[User, str]:
        user = await User.create(
            name=f"Player {uuid.uuid4().hex[:4]}",
            email=f"user_{uuid.uuid4().hex[:6]}@example.com",
            password_hash=hash_password(password),
            points=points,
        )
        return user, password

    return _create_user


@pytest_asyncio.fixture
async def create_reward():
    async def _create_reward(points: int = 50, stock: int = 5, is_active: bool = True, name: str | None = None):
        return await Reward.create(
            name=name or f"Reward {uuid.uuid4().hex[:4]}",
            points=points,
            stock=stock,
            is_active=is_active,
        )

    return _create_reward


@pytest_asyncio.fixture
async def create_tournament():
    async def _create_tournament(status: str = "upcoming", days_ahead: int = 7, title: str | None = None):
        start = dt.datetime(2030, 1, 1) + dt.timedelta(days=days_ahead)
        return await Tournament.create(
            title=title or f"Cup {uuid.uuid4().hex[:4]}",
            game_name="Rocket League",
            start_date=start,
            end_date=start + dt.timedelta(days=2),
            status=status,
        )

    return _create_tournament


@pytest_asyncio.fixture
async def auth_header_factory(client):
    """
    Helper fixture to obtain Authorization headers via the matching login endpoint.
    """

    async def _get_headers(email: str, password: str, role: str = "user") -> dict[str, str]:
        resp = await client.post(LOGIN_PATHS[role], json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        token = resp.json()["token"]
        return {"Authorization": f"Bearer {token}"}

    return _get_headers


@pytest_asyncio.fixture
async def registered_user(client):
    """
    Register a user through the public endpoint.
    Returns (headers, user_json).
    """

    async def _register(email: str | None = None, password: str = "abcdef", name: str = "Player"):
        resp = await client.post(
            "/api/v1/auth/register",
            json={"name": name, "email": email or f"p_{uuid.uuid4().hex[:6]}@example.com", "password": password},
        )
        assert resp.status_code == 201, resp.text
        body = resp.json()
        return {"Authorization": f"Bearer {body['token']}"}, body["user"]

    return _register
