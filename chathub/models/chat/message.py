# chathub/models/chat/message.py
from sqlalchemy import Column, Integer, Text, ForeignKey, Enum, Index
from ..base import Base, TimestampMixin
import enum


class MessageType(str, enum.Enum):
    TEXT = "text"
    IMAGE = "image"
    FILE = "file"
    SYSTEM = "system"


class Message(TimestampMixin, Base):
    __tablename__ = "messages"

    room_id = Column(Integer, ForeignKey("chat_rooms.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    message_type = Column(
        Enum(
            MessageType,
            name="message_type",
            native_enum=False,
            values_callable=lambda enum_cls: [e.value for e in enum_cls]
        ),
        default=MessageType.TEXT,
        server_default=MessageType.TEXT.value,
        nullable=False
    )
    file_url = Column(Text, nullable=True)
    reply_to_id = Column(Integer, ForeignKey("messages.id"), nullable=True)

    # Room history is read newest first
    __table_args__ = (
        Index('idx_messages_room_time', 'room_id', 'created_at'),
    )
