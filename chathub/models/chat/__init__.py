# chathub/models/chat/__init__.py
from .chat_room import ChatRoom
from .room_member import RoomMember, RoomRole
from .message import Message, MessageType

__all__ = ["ChatRoom", "RoomMember", "RoomRole", "Message", "MessageType"]
