# chathub/models/notification.py
from sqlalchemy import Column, String, Integer, Boolean, ForeignKey, Text, Enum, Index, false
from .base import Base, CreatedAtMixin
import enum


class NotificationType(str, enum.Enum):
    NEW_MESSAGE = "new_message"
    NEW_UPLOAD = "new_upload"
    NEW_COMMENT = "new_comment"
    STATUS_UPDATE = "status_update"
    ROOM_INVITE = "room_invite"


class PushNotification(CreatedAtMixin, Base):
    __tablename__ = "push_notifications"

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    body = Column(Text, nullable=False)
    type = Column(
        Enum(
            NotificationType,
            name="notification_type",
            native_enum=False,
            values_callable=lambda enum_cls: [e.value for e in enum_cls]
        ),
        nullable=False
    )
    data = Column(Text, nullable=True)  # JSON string for additional data
    is_read = Column(Boolean, default=False, server_default=false(), nullable=False)

    __table_args__ = (
        Index('idx_push_notifications_user_time', 'user_id', 'created_at'),
        Index('idx_push_notifications_unread', 'user_id', 'is_read'),
    )
