# chathub/models/chat/chat_room.py
from sqlalchemy import Column, String, Text, Boolean, Integer, ForeignKey, false
from ..base import Base, TimestampMixin

class ChatRoom(TimestampMixin, Base):
    __tablename__ = "chat_rooms"

    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    is_private = Column(Boolean, default=False, server_default=false(), nullable=False)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
