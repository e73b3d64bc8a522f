# chathub/services/notification_service.py
import json
import logging
from typing import Any, Dict, Iterable, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, insert, func, desc, and_
from sqlalchemy.exc import IntegrityError

from .base_service import BaseService
from ..core.config import settings
from ..core.exceptions import NotFoundError
from ..models.chat import ChatRoom, Message, RoomMember
from ..models.comment import Comment
from ..models.notification import PushNotification, NotificationType
from ..models.upload import Upload
from ..models.user import User, UserStatus
from ..schemas.notification_schemas import PushNotificationCreate
from ..utils.pagination import validate_limit_offset

logger = logging.getLogger(__name__)


def build_message_preview(content: str, length: Optional[int] = None) -> str:
    """First `length` characters of content, with an ellipsis only when something was cut."""
    if length is None:
        length = settings.message_preview_length
    if len(content) > length:
        return content[:length] + "..."
    return content


class NotificationService(BaseService[PushNotification]):
    label = "Notification"

    def __init__(self, db: AsyncSession):
        super().__init__(PushNotification, db)

    async def create_push_notification(self, notification_in: PushNotificationCreate) -> PushNotification:
        """Create a notification directly; an unknown user is rejected by the foreign key"""
        notification = await self.create({
            "user_id": notification_in.user_id,
            "title": notification_in.title,
            "body": notification_in.body,
            "type": notification_in.type,
            "data": notification_in.data,
            "is_read": False,
        })
        logger.info(f"Created {notification.type.value} notification {notification.id} for user {notification.user_id}")
        return notification

    async def mark_notification_read(self, notification_id: int) -> PushNotification:
        """Flag a notification as read. Marking an already read notification again is a no-op."""
        notification = await self.get(notification_id)
        if notification is None:
            raise NotFoundError(f"Notification with id {notification_id} not found")

        notification.is_read = True
        await self.commit()
        await self.db.refresh(notification)
        return notification

    async def get_user_notifications(self, user_id: int, limit: int = 20, offset: int = 0) -> List[PushNotification]:
        """Notifications for a user, newest first"""
        validate_limit_offset(limit, offset)
        stmt = (
            select(PushNotification)
            .where(PushNotification.user_id == user_id)
            .order_by(desc(PushNotification.created_at), desc(PushNotification.id))
            .offset(offset)
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_unread_count(self, user_id: int) -> int:
        stmt = select(func.count()).select_from(PushNotification).where(
            and_(
                PushNotification.user_id == user_id,
                PushNotification.is_read.is_(False)
            )
        )
        result = await self.db.execute(stmt)
        return result.scalar() or 0

    # Fan-out. These add rows to the caller's transaction and never commit,
    # so a failed insert fails the mutation that triggered it.

    async def notify_users(
        self,
        user_ids: Iterable[int],
        title: str,
        body: str,
        notification_type: NotificationType,
        data: Optional[Dict[str, Any]] = None
    ) -> int:
        """Insert one notification per distinct recipient"""
        recipients = list(dict.fromkeys(user_ids))
        if not recipients:
            return 0

        payload = json.dumps(data) if data is not None else None
        rows = [
            {
                "user_id": user_id,
                "title": title,
                "body": body,
                "type": notification_type,
                "data": payload,
                "is_read": False,
            }
            for user_id in recipients
        ]
        try:
            await self.db.execute(insert(PushNotification), rows)
        except IntegrityError as e:
            await self._reject(e)
        logger.debug(f"Queued {len(rows)} {notification_type.value} notifications")
        return len(rows)

    async def _other_room_members(self, room_id: int, exclude_user_id: int) -> List[int]:
        stmt = (
            select(RoomMember.user_id)
            .where(
                and_(
                    RoomMember.room_id == room_id,
                    RoomMember.user_id != exclude_user_id
                )
            )
            .order_by(RoomMember.id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def notify_status_change(self, user: User, old_status: UserStatus) -> int:
        """Tell everyone sharing at least one room with the user, once each"""
        shared_rooms = select(RoomMember.room_id).where(RoomMember.user_id == user.id)
        stmt = (
            select(RoomMember.user_id)
            .where(
                and_(
                    RoomMember.room_id.in_(shared_rooms),
                    RoomMember.user_id != user.id
                )
            )
            .distinct()
            .order_by(RoomMember.user_id)
        )
        result = await self.db.execute(stmt)
        room_mates = list(result.scalars().all())

        new_status = UserStatus(user.status)
        count = await self.notify_users(
            room_mates,
            title="User Status Update",
            body=f"{user.username} is now {new_status.value}",
            notification_type=NotificationType.STATUS_UPDATE,
            data={
                "user_id": user.id,
                "username": user.username,
                "old_status": UserStatus(old_status).value,
                "new_status": new_status.value,
            },
        )
        logger.info(f"Status change of user {user.id} fanned out to {count} room mates")
        return count

    async def notify_room_invite(self, room: ChatRoom, user_id: int) -> int:
        return await self.notify_users(
            [user_id],
            title="Room Invitation",
            body=f"You've been added to {room.name}",
            notification_type=NotificationType.ROOM_INVITE,
            data={"room_id": room.id, "room_name": room.name},
        )

    async def notify_new_message(self, message: Message) -> int:
        recipients = await self._other_room_members(message.room_id, message.user_id)
        count = await self.notify_users(
            recipients,
            title="New Message",
            body=f"New message in room: {build_message_preview(message.content)}",
            notification_type=NotificationType.NEW_MESSAGE,
            data={
                "room_id": message.room_id,
                "message_id": message.id,
                "sender_id": message.user_id,
            },
        )
        logger.info(f"Message {message.id} fanned out to {count} room members")
        return count

    async def notify_new_upload(self, upload: Upload, uploader: User) -> int:
        """Room members other than the uploader hear about shared files; private uploads notify nobody"""
        if upload.room_id is None:
            return 0

        recipients = await self._other_room_members(upload.room_id, uploader.id)
        count = await self.notify_users(
            recipients,
            title="New Upload",
            body=f"{uploader.username} uploaded {upload.filename}",
            notification_type=NotificationType.NEW_UPLOAD,
            data={
                "upload_id": upload.id,
                "room_id": upload.room_id,
                "filename": upload.filename,
            },
        )
        logger.info(f"Upload {upload.id} fanned out to {count} room members")
        return count

    async def notify_new_comment(self, comment: Comment, upload: Upload) -> int:
        """Notify the upload owner and every earlier commenter, once each"""
        data = {
            "comment_id": comment.id,
            "upload_id": upload.id,
            "commenter_id": comment.user_id,
        }
        count = 0

        if upload.user_id != comment.user_id:
            count += await self.notify_users(
                [upload.user_id],
                title="New Comment",
                body=f"Someone commented on your upload: {upload.filename}",
                notification_type=NotificationType.NEW_COMMENT,
                data=data,
            )

        stmt = (
            select(Comment.user_id)
            .where(
                and_(
                    Comment.upload_id == upload.id,
                    Comment.user_id != comment.user_id,
                    Comment.user_id != upload.user_id
                )
            )
            .distinct()
            .order_by(Comment.user_id)
        )
        result = await self.db.execute(stmt)
        count += await self.notify_users(
            result.scalars().all(),
            title="New Comment",
            body=f"Someone else commented on an upload you commented on: {upload.filename}",
            notification_type=NotificationType.NEW_COMMENT,
            data=data,
        )
        logger.info(f"Comment {comment.id} fanned out to {count} users")
        return count
