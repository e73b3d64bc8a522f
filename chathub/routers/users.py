# chathub/routers/users.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.cache import USERS_ALL_KEY, USERS_ONLINE_KEY
from ..core.database import get_db
from ..schemas.chat_schemas import ChatRoom
from ..schemas.notification_schemas import PushNotification, UnreadCount
from ..schemas.user_schemas import User, UserCreate, UserUpdate
from ..services.chat import ChatRoomService
from ..services.notification_service import NotificationService
from ..services.user_service import UserService
from ..utils.cache_decorators import cached
from ..utils.pagination import LimitOffsetParams, limit_offset_params

router = APIRouter(prefix="/api/v1/users", tags=["Users"])

@router.post("/", response_model=User, operation_id="createUser")
async def create_user(
    user_in: UserCreate,
    db: AsyncSession = Depends(get_db)
):
    """Register a user; username and email must be unused"""
    return await UserService(db).create_user(user_in)

@router.get("/", response_model=List[User], operation_id="getUsers")
@cached(USERS_ALL_KEY)
async def get_users(db: AsyncSession = Depends(get_db)):
    users = await UserService(db).get_users()
    return [User.model_validate(user).model_dump(mode="json") for user in users]

@router.get("/online", response_model=List[User], operation_id="getOnlineUsers")
@cached(USERS_ONLINE_KEY)
async def get_online_users(db: AsyncSession = Depends(get_db)):
    users = await UserService(db).get_online_users()
    return [User.model_validate(user).model_dump(mode="json") for user in users]

@router.get("/{user_id}", response_model=User, operation_id="getUser")
async def get_user(user_id: int, db: AsyncSession = Depends(get_db)):
    return await UserService(db).get_user(user_id)

@router.patch("/{user_id}", response_model=User, operation_id="updateUser")
async def update_user(
    user_id: int,
    user_in: UserUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Update profile fields; a changed status notifies the user's room mates"""
    return await UserService(db).update_user(user_id, user_in)

@router.get("/{user_id}/rooms", response_model=List[ChatRoom], operation_id="getUserRooms")
async def get_user_rooms(user_id: int, db: AsyncSession = Depends(get_db)):
    return await ChatRoomService(db).get_user_rooms(user_id)

@router.get("/{user_id}/notifications", response_model=List[PushNotification], operation_id="getUserNotifications")
async def get_user_notifications(
    user_id: int,
    pagination: LimitOffsetParams = Depends(limit_offset_params(20)),
    db: AsyncSession = Depends(get_db)
):
    return await NotificationService(db).get_user_notifications(
        user_id, limit=pagination.limit, offset=pagination.offset
    )

@router.get("/{user_id}/notifications/unread-count", response_model=UnreadCount, operation_id="getUnreadNotificationCount")
async def get_unread_notification_count(user_id: int, db: AsyncSession = Depends(get_db)):
    count = await NotificationService(db).get_unread_count(user_id)
    return UnreadCount(user_id=user_id, unread_count=count)
