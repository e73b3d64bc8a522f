# chathub/models/chat/room_member.py
from sqlalchemy import Column, Integer, DateTime, ForeignKey, Enum, UniqueConstraint, func
from ..base import Base
import enum


class RoomRole(str, enum.Enum):
    ADMIN = "admin"
    MODERATOR = "moderator"
    MEMBER = "member"


class RoomMember(Base):
    __tablename__ = "room_members"

    room_id = Column(Integer, ForeignKey("chat_rooms.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    role = Column(
        Enum(
            RoomRole,
            name="room_role",
            native_enum=False,
            values_callable=lambda enum_cls: [e.value for e in enum_cls]
        ),
        default=RoomRole.MEMBER,
        server_default=RoomRole.MEMBER.value,
        nullable=False
    )
    joined_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # One membership row per user and room
    __table_args__ = (
        UniqueConstraint('room_id', 'user_id', name='uq_room_members_room_user'),
    )
