# chathub/services/chat/chat_room_service.py
from typing import List
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from ..base_service import BaseService
from ...models.chat import ChatRoom, RoomMember, RoomRole
from ...schemas.chat_schemas import ChatRoomCreate

logger = logging.getLogger(__name__)

class ChatRoomService(BaseService[ChatRoom]):
    label = "Chat room"

    def __init__(self, db: AsyncSession):
        super().__init__(ChatRoom, db)

    async def create_chat_room(self, room_in: ChatRoomCreate) -> ChatRoom:
        """Create a room and make its creator an admin member, both or neither"""
        chat_room = ChatRoom(
            name=room_in.name,
            description=room_in.description,
            is_private=bool(room_in.is_private),
            created_by=room_in.created_by,
        )
        self.db.add(chat_room)
        await self.flush()

        self.db.add(RoomMember(
            room_id=chat_room.id,
            user_id=room_in.created_by,
            role=RoomRole.ADMIN,
        ))
        await self.commit()
        await self.db.refresh(chat_room)

        logger.info(f"Created chat room {chat_room.id} ({chat_room.name}) by user {chat_room.created_by}")
        return chat_room

    async def get_room(self, room_id: int) -> ChatRoom:
        return await self.get_or_404(room_id)

    async def get_user_rooms(self, user_id: int) -> List[ChatRoom]:
        """Rooms the user is a member of; empty for unknown users"""
        stmt = (
            select(ChatRoom)
            .join(RoomMember, RoomMember.room_id == ChatRoom.id)
            .where(RoomMember.user_id == user_id)
            .order_by(ChatRoom.id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
