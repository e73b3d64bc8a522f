from . import health, users, rooms, messages, uploads, notifications

__all__ = [
    "health",
    "users",
    "rooms",
    "messages",
    "uploads",
    "notifications"
]
