# chathub/schemas/chat_schemas.py
"""Pydantic schemas for chat rooms, memberships and messages."""
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field
from ..models.chat import RoomRole, MessageType

class ChatRoomCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, description="Room name")
    description: Optional[str] = Field(default=None, description="Room description")
    is_private: Optional[bool] = Field(default=False, description="Private room flag")
    created_by: int = Field(..., description="User creating the room, becomes its admin")

class ChatRoom(BaseModel):
    id: int
    name: str
    description: Optional[str]
    is_private: bool
    created_by: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class RoomMemberCreate(BaseModel):
    room_id: int
    user_id: int
    role: Optional[RoomRole] = Field(default=None, description="Defaults to member")

class RoomMemberAdd(BaseModel):
    """Body of the add-member route; the room comes from the path"""
    user_id: int
    role: Optional[RoomRole] = Field(default=None)

class RoomMember(BaseModel):
    id: int
    room_id: int
    user_id: int
    role: RoomRole
    joined_at: datetime

    class Config:
        from_attributes = True

class MessageCreate(BaseModel):
    room_id: int
    user_id: int
    content: str = Field(..., min_length=1, description="Message text")
    message_type: Optional[MessageType] = Field(default=None, description="Defaults to text")
    file_url: Optional[str] = Field(default=None)
    reply_to_id: Optional[int] = Field(default=None, description="Message in the same room being replied to")

class MessageUpdate(BaseModel):
    content: Optional[str] = Field(default=None, min_length=1)

class Message(BaseModel):
    id: int
    room_id: int
    user_id: int
    content: str
    message_type: MessageType
    file_url: Optional[str]
    reply_to_id: Optional[int]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
