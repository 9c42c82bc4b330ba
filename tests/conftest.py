# ==============================================================================
# CONFTEST - Pytest Fixtures and Configuration
# ==============================================================================
# Shared fixtures: in-memory MongoDB, recording image host, app and
# per-role authenticated clients
# ==============================================================================

from __future__ import annotations

from typing import Any, AsyncGenerator, Dict, List, Optional
from uuid import uuid4

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from artverse.core.constants import DatabaseConstants
from artverse.core.security import create_access_token
from artverse.core.settings import Environment, Settings
from artverse.database.adapters.base_adapter import BaseDatabaseAdapter
from artverse.database.factory import DatabaseFactory
from artverse.main import create_app
from artverse.storage import ImageStorage

API = "/api/v1"


class RecordingImageStorage(ImageStorage):
    """Image host double that remembers what it was asked to delete."""

    def __init__(self) -> None:
        self.deleted: List[str] = []

    def delete(self, public_id: str) -> bool:
        self.deleted.append(public_id)
        return True


# ==============================================================================
# APPLICATION FIXTURES
# ==============================================================================

@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the environment."""
    return Settings(
        SECRET_KEY="test-secret-key-for-testing-only-32chars!",
        ENVIRONMENT=Environment.DEVELOPMENT,
        DEBUG=False,
        MONGODB_DB=f"artverse_test_{uuid4().hex[:8]}",
        COOKIE_SECURE=False,
        LOG_LEVEL="WARNING",
    )


@pytest_asyncio.fixture
async def adapter(test_settings: Settings) -> AsyncGenerator[BaseDatabaseAdapter, None]:
    """Connected adapter over an in-memory MongoDB."""
    db = await DatabaseFactory.initialize(test_settings, client=AsyncMongoMockClient())
    yield db
    await DatabaseFactory.shutdown(db)


@pytest.fixture
def storage() -> RecordingImageStorage:
    """Recording image host."""
    return RecordingImageStorage()


@pytest.fixture
def app(test_settings: Settings, adapter: BaseDatabaseAdapter, storage: RecordingImageStorage):
    """Application wired to the in-memory database."""
    application = create_app(test_settings)
    application.state.db = adapter
    application.state.storage = storage
    return application


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Anonymous HTTP client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        timeout=30.0,
    ) as async_client:
        yield async_client


# ==============================================================================
# USER FIXTURES
# ==============================================================================

@pytest_asyncio.fixture
async def make_user(app, adapter: BaseDatabaseAdapter, test_settings: Settings):
    """
    Factory creating a stored user and a client carrying their session.

    Returns:
        Async callable ``(role, name=None) -> (client, user)``
    """
    clients: List[AsyncClient] = []

    async def _make(role: str = "buyer", name: Optional[str] = None):
        name = name or f"{role.title()} {uuid4().hex[:4]}"
        user = await adapter.create(
            DatabaseConstants.USERS_COLLECTION,
            {
                "email": f"{role}_{uuid4().hex[:8]}@example.com",
                "hashed_password": "unused",
                "role": role,
                "profile": {"name": name, "avatar": "/default-avatar.png"},
                "is_active": True,
            },
        )
        token = create_access_token(
            user["id"],
            test_settings,
            additional_claims={"role": role, "email": user["email"]},
        )
        user_client = AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
            headers={"Cookie": f"{test_settings.COOKIE_NAME}={token}"},
            timeout=30.0,
        )
        clients.append(user_client)
        return user_client, user

    yield _make

    for user_client in clients:
        await user_client.aclose()


@pytest_asyncio.fixture
async def artist(make_user):
    """(client, user) of an artist."""
    return await make_user("artist")


@pytest_asyncio.fixture
async def buyer(make_user):
    """(client, user) of a buyer."""
    return await make_user("buyer")


@pytest_asyncio.fixture
async def admin(make_user):
    """(client, user) of an admin."""
    return await make_user("admin")


# ==============================================================================
# CATALOG FIXTURES
# ==============================================================================

@pytest.fixture
def seed_artwork(adapter: BaseDatabaseAdapter):
    """Factory inserting an artwork document directly."""

    async def _seed(artist_id: str, **overrides: Any) -> Dict[str, Any]:
        data = {
            "artist_id": ObjectId(artist_id),
            "title": "Sunset Study",
            "description": "Oil on canvas",
            "category": "Painting",
            "price": 25.0,
            "stock": 1,
            "images": [{"url": "https://img.example.com/a.jpg", "public_id": "art/a"}],
            "tags": [],
            "status": "approved",
            "rejection_reason": None,
            "stats": {"views": 0, "likes": 0},
            "approved_at": None,
            "sold_at": None,
        }
        data.update(overrides)
        return await adapter.create(DatabaseConstants.ARTWORKS_COLLECTION, data)

    return _seed


@pytest.fixture
def seed_course(adapter: BaseDatabaseAdapter):
    """Factory inserting a course document directly."""

    async def _seed(artist_id: str, **overrides: Any) -> Dict[str, Any]:
        data = {
            "artist_id": ObjectId(artist_id),
            "title": "Watercolor Basics",
            "description": "From washes to layering",
            "price": 4999,
            "thumbnail": {"url": "https://img.example.com/c.jpg", "public_id": "course/c"},
            "lessons": [
                {
                    "_id": ObjectId(),
                    "title": "Materials",
                    "youtube_url": "https://youtube.com/watch?v=abc",
                    "duration": 12,
                    "resources": [],
                }
            ],
            "status": "published",
            "is_approved": True,
            "students": [],
            "student_count": 0,
            "average_rating": 0.0,
            "rejection_reason": None,
        }
        data.update(overrides)
        return await adapter.create(DatabaseConstants.COURSES_COLLECTION, data)

    return _seed


@pytest.fixture
def artwork_payload() -> Dict[str, Any]:
    """Artwork submission body with numeric strings."""
    return {
        "title": "Harbour at Dawn",
        "description": "Acrylic on board",
        "category": "Painting",
        "price": "10.50",
        "stock": "3",
        "images": [{"url": "https://img.example.com/h.jpg", "public_id": "art/h"}],
        "tags": "sea, dawn ,harbour",
    }


@pytest.fixture
def course_payload() -> Dict[str, Any]:
    """Course creation body."""
    return {
        "title": "Ink Drawing",
        "description": "Pen and brush techniques",
        "price": 29.99,
        "thumbnail": {"url": "https://img.example.com/i.jpg", "public_id": "course/i"},
    }


@pytest.fixture
def lesson_payload() -> Dict[str, Any]:
    """Lesson body."""
    return {
        "title": "Holding the pen",
        "youtube_url": "https://youtube.com/watch?v=xyz",
        "duration": 8,
        "resources": [{"name": "Worksheet", "url": "https://files.example.com/w.pdf"}],
    }
