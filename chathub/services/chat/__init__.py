# chathub/services/chat/__init__.py
from .chat_room_service import ChatRoomService
from .room_member_service import RoomMemberService
from .message_service import MessageService

__all__ = ["ChatRoomService", "RoomMemberService", "MessageService"]
