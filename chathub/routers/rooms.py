# chathub/routers/rooms.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..schemas.chat_schemas import (
    ChatRoom, ChatRoomCreate, Message, RoomMember, RoomMemberAdd, RoomMemberCreate
)
from ..services.chat import ChatRoomService, MessageService, RoomMemberService
from ..utils.pagination import LimitOffsetParams, limit_offset_params

router = APIRouter(prefix="/api/v1/rooms", tags=["Chat Rooms"])

@router.post("/", response_model=ChatRoom, operation_id="createChatRoom")
async def create_chat_room(
    room_in: ChatRoomCreate,
    db: AsyncSession = Depends(get_db)
):
    """Create a room; the creator joins it as admin"""
    return await ChatRoomService(db).create_chat_room(room_in)

@router.get("/{room_id}", response_model=ChatRoom, operation_id="getChatRoom")
async def get_chat_room(room_id: int, db: AsyncSession = Depends(get_db)):
    return await ChatRoomService(db).get_room(room_id)

@router.post("/{room_id}/members", response_model=RoomMember, operation_id="addRoomMember")
async def add_room_member(
    room_id: int,
    member_in: RoomMemberAdd,
    db: AsyncSession = Depends(get_db)
):
    """Add a user to the room and send them an invite notification"""
    return await RoomMemberService(db).add_room_member(
        RoomMemberCreate(room_id=room_id, user_id=member_in.user_id, role=member_in.role)
    )

@router.get("/{room_id}/members", response_model=List[RoomMember], operation_id="getRoomMembers")
async def get_room_members(room_id: int, db: AsyncSession = Depends(get_db)):
    return await RoomMemberService(db).get_room_members(room_id)

@router.get("/{room_id}/messages", response_model=List[Message], operation_id="getRoomMessages")
async def get_room_messages(
    room_id: int,
    pagination: LimitOffsetParams = Depends(limit_offset_params(50)),
    db: AsyncSession = Depends(get_db)
):
    """Room history, most recent first"""
    return await MessageService(db).get_room_messages(
        room_id, limit=pagination.limit, offset=pagination.offset
    )
