# chathub/services/upload_service.py
from typing import Dict, List, Optional
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc, func

from .base_service import BaseService
from .chat.room_member_service import RoomMemberService
from .notification_service import NotificationService
from ..core.exceptions import AuthorizationError, NotFoundError
from ..models.chat import ChatRoom
from ..models.comment import Comment
from ..models.upload import Upload
from ..models.user import User
from ..schemas.upload_schemas import UploadCreate
from ..utils.pagination import validate_limit_offset

logger = logging.getLogger(__name__)

class UploadService(BaseService[Upload]):
    label = "Upload"

    def __init__(self, db: AsyncSession):
        super().__init__(Upload, db)
        self.members = RoomMemberService(db)
        self.notifications = NotificationService(db)

    async def create_upload(self, upload_in: UploadCreate) -> Upload:
        """Record file metadata; uploads shared in a room notify its other members"""
        uploader = await self.db.get(User, upload_in.user_id)
        if uploader is None:
            raise NotFoundError(f"User with ID {upload_in.user_id} not found")

        if upload_in.room_id is not None:
            if await self.db.get(ChatRoom, upload_in.room_id) is None:
                raise NotFoundError(f"Chat room with ID {upload_in.room_id} not found")
            if not await self.members.is_member(upload_in.room_id, upload_in.user_id):
                raise AuthorizationError("User is not a member of this room")

        upload = Upload(
            user_id=upload_in.user_id,
            filename=upload_in.filename,
            file_url=upload_in.file_url,
            file_size=upload_in.file_size,
            file_type=upload_in.file_type,
            room_id=upload_in.room_id,
        )
        self.db.add(upload)
        await self.flush()

        await self.notifications.notify_new_upload(upload, uploader)
        await self.commit()
        await self.db.refresh(upload)

        logger.info(f"User {upload.user_id} uploaded {upload.filename} ({upload.file_size} bytes)")
        return upload

    async def get_uploads(
        self,
        room_id: Optional[int] = None,
        user_id: Optional[int] = None,
        limit: int = 50,
        offset: int = 0
    ) -> List[Dict]:
        """Uploads newest first with their uploader and comment count"""
        validate_limit_offset(limit, offset)

        comment_counts = (
            select(Comment.upload_id, func.count(Comment.id).label("comment_count"))
            .group_by(Comment.upload_id)
            .subquery()
        )
        stmt = (
            select(Upload, User, func.coalesce(comment_counts.c.comment_count, 0))
            .join(User, User.id == Upload.user_id)
            .outerjoin(comment_counts, comment_counts.c.upload_id == Upload.id)
        )
        if room_id is not None:
            stmt = stmt.where(Upload.room_id == room_id)
        if user_id is not None:
            stmt = stmt.where(Upload.user_id == user_id)

        stmt = stmt.order_by(desc(Upload.created_at), desc(Upload.id)).offset(offset).limit(limit)
        result = await self.db.execute(stmt)

        return [
            {
                "id": upload.id,
                "user_id": upload.user_id,
                "filename": upload.filename,
                "file_url": upload.file_url,
                "file_size": upload.file_size,
                "file_type": upload.file_type,
                "room_id": upload.room_id,
                "created_at": upload.created_at,
                "user": {
                    "id": user.id,
                    "username": user.username,
                    "email": user.email,
                    "avatar_url": user.avatar_url,
                },
                "comment_count": int(comment_count),
            }
            for upload, user, comment_count in result.all()
        ]
