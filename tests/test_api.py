"""End-to-end flows over HTTP against the FastAPI app."""
import json

import pytest
from sqlalchemy import text


async def _create_user(client, username, **extra):
    response = await client.post(
        "/api/v1/users/",
        json={"username": username, "email": f"{username}@example.com", **extra},
    )
    assert response.status_code == 200, response.text
    return response.json()


async def test_healthcheck(client):
    response = await client.get("/health/")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


async def test_chat_flow(client):
    alice = await _create_user(client, "alice")
    bob = await _create_user(client, "bob")
    assert alice["status"] == "offline"

    response = await client.post("/api/v1/rooms/", json={"name": "Test Room", "created_by": alice["id"]})
    assert response.status_code == 200
    room = response.json()
    assert room["is_private"] is False

    response = await client.post(f"/api/v1/rooms/{room['id']}/members", json={"user_id": bob["id"]})
    assert response.status_code == 200
    assert response.json()["role"] == "member"

    members = (await client.get(f"/api/v1/rooms/{room['id']}/members")).json()
    assert {(m["user_id"], m["role"]) for m in members} == {(alice["id"], "admin"), (bob["id"], "member")}

    response = await client.post(
        "/api/v1/messages/",
        json={"room_id": room["id"], "user_id": alice["id"], "content": "Hello, this is a test message!"},
    )
    assert response.status_code == 200
    message = response.json()
    assert message["message_type"] == "text"

    response = await client.get(f"/api/v1/users/{bob['id']}/notifications")
    notifications = response.json()
    assert [n["type"] for n in notifications] == ["new_message", "room_invite"]
    assert json.loads(notifications[0]["data"])["message_id"] == message["id"]

    unread = (await client.get(f"/api/v1/users/{bob['id']}/notifications/unread-count")).json()
    assert unread == {"user_id": bob["id"], "unread_count": 2}

    response = await client.post(f"/api/v1/notifications/{notifications[0]['id']}/read")
    assert response.status_code == 200
    assert response.json()["is_read"] is True
    unread = (await client.get(f"/api/v1/users/{bob['id']}/notifications/unread-count")).json()
    assert unread["unread_count"] == 1

    response = await client.patch(f"/api/v1/messages/{message['id']}", json={"content": "Edited"})
    assert response.json()["content"] == "Edited"

    history = (await client.get(f"/api/v1/rooms/{room['id']}/messages")).json()
    assert [m["id"] for m in history] == [message["id"]]

    rooms = (await client.get(f"/api/v1/users/{bob['id']}/rooms")).json()
    assert [r["id"] for r in rooms] == [room["id"]]


async def test_status_update_over_http(client):
    alice = await _create_user(client, "alice")
    bob = await _create_user(client, "bob")
    room = (await client.post("/api/v1/rooms/", json={"name": "Team", "created_by": alice["id"]})).json()
    await client.post(f"/api/v1/rooms/{room['id']}/members", json={"user_id": bob["id"]})

    response = await client.patch(f"/api/v1/users/{alice['id']}", json={"status": "online"})
    assert response.status_code == 200
    assert response.json()["status"] == "online"

    online = (await client.get("/api/v1/users/online")).json()
    assert [u["username"] for u in online] == ["alice"]

    notifications = (await client.get(f"/api/v1/users/{bob['id']}/notifications")).json()
    assert notifications[0]["type"] == "status_update"
    assert notifications[0]["body"] == "alice is now online"


async def test_upload_and_comment_flow(client):
    owner = await _create_user(client, "owner")
    bob = await _create_user(client, "bob")

    response = await client.post(
        "/api/v1/uploads/",
        json={
            "user_id": owner["id"],
            "filename": "slides.pdf",
            "file_url": "https://files.example.com/slides.pdf",
            "file_size": 4096,
            "file_type": "application/pdf",
        },
    )
    assert response.status_code == 200
    upload = response.json()

    response = await client.post(
        "/api/v1/comments/",
        json={"upload_id": upload["id"], "user_id": bob["id"], "content": "Nice slides"},
    )
    assert response.status_code == 200

    comments = (await client.get(f"/api/v1/uploads/{upload['id']}/comments")).json()
    assert [c["content"] for c in comments] == ["Nice slides"]

    listed = (await client.get("/api/v1/uploads/", params={"user_id": owner["id"]})).json()
    assert listed[0]["comment_count"] == 1
    assert listed[0]["user"]["username"] == "owner"

    notifications = (await client.get(f"/api/v1/users/{owner['id']}/notifications")).json()
    assert [n["type"] for n in notifications] == ["new_comment"]


@pytest.mark.parametrize("method, path, body", [
    ("get", "/api/v1/users/999", None),
    ("get", "/api/v1/rooms/999", None),
    ("patch", "/api/v1/messages/999", {"content": "x"}),
    ("post", "/api/v1/notifications/999/read", None),
    ("post", "/api/v1/comments/", {"upload_id": 999, "user_id": 1, "content": "x"}),
])
async def test_missing_entities_return_404(client, method, path, body):
    kwargs = {"json": body} if body is not None else {}
    response = await getattr(client, method)(path, **kwargs)

    assert response.status_code == 404
    assert response.json()["type"] == "NotFoundError"


async def test_duplicate_username_returns_409(client):
    await _create_user(client, "alice")

    response = await client.post("/api/v1/users/", json={"username": "alice", "email": "new@example.com"})

    assert response.status_code == 409
    assert response.json() == {"error": "Username 'alice' is already taken", "type": "ConflictError"}


async def test_duplicate_member_returns_409(client):
    alice = await _create_user(client, "alice")
    room = (await client.post("/api/v1/rooms/", json={"name": "Solo", "created_by": alice["id"]})).json()

    response = await client.post(f"/api/v1/rooms/{room['id']}/members", json={"user_id": alice["id"]})

    assert response.status_code == 409


async def test_non_member_message_returns_403(client):
    alice = await _create_user(client, "alice")
    mallory = await _create_user(client, "mallory")
    room = (await client.post("/api/v1/rooms/", json={"name": "Closed", "created_by": alice["id"]})).json()

    response = await client.post(
        "/api/v1/messages/",
        json={"room_id": room["id"], "user_id": mallory["id"], "content": "hi"},
    )

    assert response.status_code == 403
    assert response.json()["type"] == "AuthorizationError"


@pytest.mark.parametrize("path, body", [
    ("/api/v1/users/", {"username": "al", "email": "al@example.com"}),
    ("/api/v1/users/", {"username": "alice", "email": "not-an-email"}),
    ("/api/v1/uploads/", {"user_id": 1, "filename": "a", "file_url": "u", "file_size": 0, "file_type": "t"}),
    ("/api/v1/messages/", {"room_id": 1, "user_id": 1, "content": ""}),
])
async def test_invalid_payloads_return_422(client, path, body):
    response = await client.post(path, json=body)

    assert response.status_code == 422


async def test_pagination_bounds_are_validated(client):
    alice = await _create_user(client, "alice")

    response = await client.get(f"/api/v1/users/{alice['id']}/notifications", params={"limit": 0})
    assert response.status_code == 422
    response = await client.get(f"/api/v1/users/{alice['id']}/notifications", params={"limit": 101})
    assert response.status_code == 422


async def test_operation_ids_are_published(client):
    schema = (await client.get("/openapi.json")).json()
    operation_ids = {
        operation["operationId"]
        for path in schema["paths"].values()
        for operation in path.values()
    }

    assert {
        "healthcheck",
        "createUser", "getUsers", "getOnlineUsers", "getUser", "updateUser", "getUserRooms",
        "createChatRoom", "getChatRoom", "addRoomMember", "getRoomMembers", "getRoomMessages",
        "createMessage", "updateMessage",
        "createUpload", "getUploads", "getUploadComments", "createComment",
        "getUserNotifications", "getUnreadNotificationCount",
        "createPushNotification", "markNotificationRead",
    } <= operation_ids


async def test_user_writes_refresh_cached_listings(client, app_cache):
    alice = await _create_user(client, "alice")

    assert (await client.get("/api/v1/users/online")).json() == []
    assert [u["username"] for u in (await client.get("/api/v1/users/")).json()] == ["alice"]
    assert "users:online" in app_cache.store
    assert "users:all" in app_cache.store

    await client.patch(f"/api/v1/users/{alice['id']}", json={"status": "online"})
    assert [u["username"] for u in (await client.get("/api/v1/users/online")).json()] == ["alice"]

    await _create_user(client, "bob")
    assert [u["username"] for u in (await client.get("/api/v1/users/")).json()] == ["alice", "bob"]


async def test_rejected_notification_returns_500_and_keeps_no_message(client, db):
    alice = await _create_user(client, "alice")
    bob = await _create_user(client, "bob")
    room = (await client.post("/api/v1/rooms/", json={"name": "Team", "created_by": alice["id"]})).json()
    await client.post(f"/api/v1/rooms/{room['id']}/members", json={"user_id": bob["id"]})
    await db.execute(text(
        "CREATE TRIGGER reject_notifications BEFORE INSERT ON push_notifications "
        "BEGIN SELECT RAISE(ABORT, 'notifications rejected'); END"
    ))
    await db.commit()

    response = await client.post(
        "/api/v1/messages/",
        json={"room_id": room["id"], "user_id": alice["id"], "content": "lost"},
    )

    assert response.status_code == 500
    assert response.json()["type"] == "PersistenceError"
    assert (await client.get(f"/api/v1/rooms/{room['id']}/messages")).json() == []
