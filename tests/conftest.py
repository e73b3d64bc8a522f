"""Shared fixtures: a fresh SQLite database per test and an ASGI client bound to it."""
import itertools
import os
import tempfile

# Settings are read at import time, so point them at a throwaway database first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(tempfile.gettempdir(), "chathub_test.db")
os.environ["ENVIRONMENT"] = "test"
os.environ.pop("REDIS_URL", None)

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from chathub.core.cache import cache
from chathub.core.database import create_engine, get_db
from chathub.main import app
from chathub.models import Base, PushNotification
from chathub.schemas.chat_schemas import ChatRoomCreate, RoomMemberCreate
from chathub.schemas.user_schemas import UserCreate
from chathub.services.chat import ChatRoomService, RoomMemberService
from chathub.services.user_service import UserService


class FakeRedis:
    """Just enough of redis.asyncio.Redis for CacheManager"""

    def __init__(self):
        self.store = {}
        self.ttls = {}

    async def get(self, key):
        return self.store.get(key)

    async def setex(self, key, ttl, value):
        self.store[key] = value
        self.ttls[key] = ttl
        return True

    async def delete(self, *keys):
        return sum(1 for key in keys if self.store.pop(key, None) is not None)

    async def aclose(self):
        pass


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def app_cache(monkeypatch, fake_redis):
    """Turn on the application-wide cache, backed by an in-memory store"""
    monkeypatch.setattr(cache, "url", "redis://cache:6379/0")
    monkeypatch.setattr(cache, "redis", fake_redis)
    return fake_redis


@pytest.fixture
async def engine(tmp_path):
    test_engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'chathub.db'}")
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession, autoflush=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    counter = itertools.count(1)

    async def _make_user(username=None, status=None):
        username = username or f"user{next(counter)}"
        return await UserService(db).create_user(
            UserCreate(username=username, email=f"{username}@example.com", status=status)
        )
    return _make_user


@pytest.fixture
def make_room(db):
    async def _make_room(creator, name="General", members=()):
        room = await ChatRoomService(db).create_chat_room(
            ChatRoomCreate(name=name, created_by=creator.id)
        )
        for member in members:
            await RoomMemberService(db).add_room_member(
                RoomMemberCreate(room_id=room.id, user_id=member.id)
            )
        return room
    return _make_room


@pytest.fixture
def notifications_for(db):
    """Fetch the notifications a user has received, optionally of one type, oldest first"""
    async def _notifications_for(user, notification_type=None):
        stmt = select(PushNotification).where(PushNotification.user_id == user.id)
        if notification_type is not None:
            stmt = stmt.where(PushNotification.type == notification_type)
        result = await db.execute(stmt.order_by(PushNotification.id))
        return list(result.scalars().all())
    return _notifications_for
