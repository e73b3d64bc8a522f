# chathub/services/chat/message_service.py
from typing import List
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_, desc, func

from ..base_service import BaseService
from ..notification_service import NotificationService
from .room_member_service import RoomMemberService
from ...core.exceptions import AuthorizationError, NotFoundError
from ...models.chat import Message, MessageType
from ...schemas.chat_schemas import MessageCreate, MessageUpdate
from ...utils.pagination import validate_limit_offset

logger = logging.getLogger(__name__)

class MessageService(BaseService[Message]):
    label = "Message"

    def __init__(self, db: AsyncSession):
        super().__init__(Message, db)
        self.members = RoomMemberService(db)
        self.notifications = NotificationService(db)

    async def create_message(self, message_in: MessageCreate) -> Message:
        """Post a message to a room and notify the other members"""
        if not await self.members.is_member(message_in.room_id, message_in.user_id):
            raise AuthorizationError("User is not a member of this room")

        if message_in.reply_to_id is not None:
            stmt = select(Message.id).where(
                and_(
                    Message.id == message_in.reply_to_id,
                    Message.room_id == message_in.room_id
                )
            )
            result = await self.db.execute(stmt)
            if result.scalar_one_or_none() is None:
                raise NotFoundError("Reply target message not found in this room")

        message = Message(
            room_id=message_in.room_id,
            user_id=message_in.user_id,
            content=message_in.content,
            message_type=message_in.message_type or MessageType.TEXT,
            file_url=message_in.file_url,
            reply_to_id=message_in.reply_to_id,
        )
        self.db.add(message)
        await self.flush()

        await self.notifications.notify_new_message(message)
        await self.commit()
        await self.db.refresh(message)
        return message

    async def update_message(self, message_id: int, message_in: MessageUpdate) -> Message:
        """Edit message content; everything except content and updated_at is immutable"""
        message = await self.get(message_id)
        if message is None:
            raise NotFoundError(f"Message with ID {message_id} not found")

        if message_in.content is not None:
            message.content = message_in.content
        message.updated_at = func.now()

        await self.commit()
        await self.db.refresh(message)
        logger.info(f"Updated message {message.id}")
        return message

    async def get_room_messages(self, room_id: int, limit: int = 50, offset: int = 0) -> List[Message]:
        """Messages in a room, most recent first"""
        validate_limit_offset(limit, offset)
        stmt = (
            select(Message)
            .where(Message.room_id == room_id)
            .order_by(desc(Message.created_at), desc(Message.id))
            .offset(offset)
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
