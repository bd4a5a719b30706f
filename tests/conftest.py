import itertools

import httpx
import pytest
from fastapi.testclient import TestClient

from chatgen.core.config import Settings
from chatgen.core.errors import ConflictError
from chatgen.main import create_app
from chatgen.users.models import User


class MemoryUserStore:
    """Fake en memoria con la misma interfaz que UserStore."""

    def __init__(self):
        self.rows: dict[str, User] = {}
        self._ids = itertools.count(1)

    async def get_by_email(self, email: str):
        return self.rows.get(email)

    async def create_user(self, username: str, email: str, hashed_password: str):
        if email in self.rows:
            raise ConflictError("email already registered")
        user = User(id=next(self._ids), username=username, email=email, hashed_password=hashed_password)
        self.rows[email] = user
        return user


@pytest.fixture
def memory_store():
    return MemoryUserStore()


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'db' / 'users.db'}"


@pytest.fixture
def settings(db_url):
    return Settings(
        DATABASE_URL=db_url,
        GROQ_API_KEY="test-key",
        PASSWORD_POLICY="strict",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def mock_http():
    """Fabrica AsyncClient cuyo transporte responde con `handler(request)`."""

    def _make(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make
