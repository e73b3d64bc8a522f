# chathub/models/user.py
from sqlalchemy import Column, String, Text, Enum
from .base import Base, TimestampMixin
import enum


class UserStatus(str, enum.Enum):
    ONLINE = "online"
    OFFLINE = "offline"
    AWAY = "away"


class User(TimestampMixin, Base):
    __tablename__ = "users"

    username = Column(String(50), unique=True, index=True, nullable=False)
    email = Column(String(254), unique=True, index=True, nullable=False)
    avatar_url = Column(Text, nullable=True)
    status = Column(
        Enum(
            UserStatus,
            name="user_status",
            native_enum=False,
            values_callable=lambda enum_cls: [e.value for e in enum_cls]
        ),
        default=UserStatus.OFFLINE,
        server_default=UserStatus.OFFLINE.value,
        nullable=False,
        index=True
    )
