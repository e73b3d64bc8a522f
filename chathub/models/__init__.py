"""Import all models here, if needed for Alembic migration."""
from .base import Base

from .user import User, UserStatus
from .chat import ChatRoom, RoomMember, RoomRole, Message, MessageType
from .upload import Upload
from .comment import Comment
from .notification import PushNotification, NotificationType
