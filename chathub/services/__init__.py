from .base_service import BaseService
from .notification_service import NotificationService
from .user_service import UserService
from .chat import ChatRoomService, RoomMemberService, MessageService
from .upload_service import UploadService
from .comment_service import CommentService

__all__ = [
    "BaseService",
    "NotificationService",
    "UserService",
    "ChatRoomService",
    "RoomMemberService",
    "MessageService",
    "UploadService",
    "CommentService",
]
