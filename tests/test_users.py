import json

import pytest
from sqlalchemy import func, select

from chathub.core.exceptions import ConflictError, NotFoundError
from chathub.models import NotificationType, PushNotification, UserStatus
from chathub.schemas.user_schemas import UserCreate, UserUpdate
from chathub.services.user_service import UserService


async def test_create_user_applies_defaults(db):
    user = await UserService(db).create_user(UserCreate(username="alice", email="alice@example.com"))

    assert user.id is not None
    assert user.status == UserStatus.OFFLINE
    assert user.avatar_url is None
    assert user.created_at is not None


async def test_create_user_rejects_duplicate_username(db, make_user):
    await make_user("alice")

    with pytest.raises(ConflictError, match="alice"):
        await UserService(db).create_user(UserCreate(username="alice", email="other@example.com"))


async def test_create_user_rejects_duplicate_email(db, make_user):
    await make_user("alice")

    with pytest.raises(ConflictError, match="alice@example.com"):
        await UserService(db).create_user(UserCreate(username="alicia", email="alice@example.com"))


async def test_get_online_users_filters_by_status(db, make_user):
    await make_user("alice", status=UserStatus.ONLINE)
    await make_user("bob")
    await make_user("carol", status=UserStatus.AWAY)

    service = UserService(db)
    assert [u.username for u in await service.get_users()] == ["alice", "bob", "carol"]
    assert [u.username for u in await service.get_online_users()] == ["alice"]


async def test_update_unknown_user_raises_not_found(db):
    with pytest.raises(NotFoundError, match="User not found"):
        await UserService(db).update_user(999, UserUpdate(status=UserStatus.ONLINE))


async def test_update_changes_only_present_fields(db, make_user):
    user = await make_user("alice")
    created_at = user.created_at

    updated = await UserService(db).update_user(user.id, UserUpdate(avatar_url="https://cdn/a.png"))

    assert updated.avatar_url == "https://cdn/a.png"
    assert updated.username == "alice"
    assert updated.email == "alice@example.com"
    assert updated.status == UserStatus.OFFLINE
    assert updated.created_at == created_at
    assert updated.updated_at >= created_at


async def test_update_rejects_username_taken_by_another_user(db, make_user):
    await make_user("alice")
    bob = await make_user("bob")

    with pytest.raises(ConflictError):
        await UserService(db).update_user(bob.id, UserUpdate(username="alice"))


async def test_status_change_notifies_each_room_mate_once(db, make_user, make_room, notifications_for):
    alice = await make_user("alice")
    bob = await make_user("bob")
    carol = await make_user("carol")
    loner = await make_user("dave")
    # bob shares two rooms with alice, carol one
    await make_room(alice, name="One", members=[bob, carol])
    await make_room(alice, name="Two", members=[bob])

    await UserService(db).update_user(alice.id, UserUpdate(status=UserStatus.ONLINE))

    bob_updates = await notifications_for(bob, NotificationType.STATUS_UPDATE)
    carol_updates = await notifications_for(carol, NotificationType.STATUS_UPDATE)
    assert len(bob_updates) == 1
    assert len(carol_updates) == 1
    assert await notifications_for(loner) == []
    assert await notifications_for(alice, NotificationType.STATUS_UPDATE) == []

    notification = bob_updates[0]
    assert notification.title == "User Status Update"
    assert notification.body == "alice is now online"
    assert json.loads(notification.data) == {
        "user_id": alice.id,
        "username": "alice",
        "old_status": "offline",
        "new_status": "online",
    }


async def test_unchanged_or_absent_status_sends_nothing(db, make_user, make_room):
    alice = await make_user("alice", status=UserStatus.AWAY)
    bob = await make_user("bob")
    await make_room(alice, members=[bob])
    service = UserService(db)

    await service.update_user(alice.id, UserUpdate(status=UserStatus.AWAY))
    await service.update_user(alice.id, UserUpdate(avatar_url=None))

    result = await db.execute(
        select(func.count()).select_from(PushNotification)
        .where(PushNotification.type == NotificationType.STATUS_UPDATE)
    )
    assert result.scalar() == 0
