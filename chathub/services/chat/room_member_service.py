# chathub/services/chat/room_member_service.py
from typing import List
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_
from sqlalchemy.exc import IntegrityError

from ..base_service import BaseService
from ..notification_service import NotificationService
from ...core.exceptions import ConflictError, NotFoundError
from ...models.chat import ChatRoom, RoomMember, RoomRole
from ...models.user import User
from ...schemas.chat_schemas import RoomMemberCreate

logger = logging.getLogger(__name__)

class RoomMemberService(BaseService[RoomMember]):
    label = "Room member"

    def __init__(self, db: AsyncSession):
        super().__init__(RoomMember, db)
        self.notifications = NotificationService(db)

    async def is_member(self, room_id: int, user_id: int) -> bool:
        stmt = select(RoomMember.id).where(
            and_(
                RoomMember.room_id == room_id,
                RoomMember.user_id == user_id
            )
        ).limit(1)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def add_room_member(self, member_in: RoomMemberCreate) -> RoomMember:
        """Add a user to a room and send them a room_invite notification"""
        user = await self.db.get(User, member_in.user_id)
        if user is None:
            raise NotFoundError(f"User with ID {member_in.user_id} not found")

        room = await self.db.get(ChatRoom, member_in.room_id)
        if room is None:
            raise NotFoundError(f"Chat room with ID {member_in.room_id} not found")

        duplicate_message = f"User {member_in.user_id} is already a member of room {member_in.room_id}"
        if await self.is_member(member_in.room_id, member_in.user_id):
            raise ConflictError(duplicate_message)

        member = RoomMember(
            room_id=member_in.room_id,
            user_id=member_in.user_id,
            role=member_in.role or RoomRole.MEMBER,
        )
        self.db.add(member)
        try:
            # The unique (room_id, user_id) constraint settles concurrent adds
            await self.db.flush()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Concurrent membership insert rejected: {e.orig}")
            raise ConflictError(duplicate_message)

        await self.notifications.notify_room_invite(room, member.user_id)
        await self.commit()
        await self.db.refresh(member)

        logger.info(f"Added user {member.user_id} to room {member.room_id} as {member.role.value}")
        return member

    async def get_room_members(self, room_id: int) -> List[RoomMember]:
        stmt = (
            select(RoomMember)
            .where(RoomMember.room_id == room_id)
            .order_by(RoomMember.joined_at, RoomMember.id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
