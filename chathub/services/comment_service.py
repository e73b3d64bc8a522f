# chathub/services/comment_service.py
from typing import List
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from .base_service import BaseService
from .notification_service import NotificationService
from ..core.exceptions import NotFoundError
from ..models.comment import Comment
from ..models.upload import Upload
from ..models.user import User
from ..schemas.upload_schemas import CommentCreate

logger = logging.getLogger(__name__)

class CommentService(BaseService[Comment]):
    label = "Comment"

    def __init__(self, db: AsyncSession):
        super().__init__(Comment, db)
        self.notifications = NotificationService(db)

    async def create_comment(self, comment_in: CommentCreate) -> Comment:
        upload = await self.db.get(Upload, comment_in.upload_id)
        if upload is None:
            raise NotFoundError("Upload not found")

        if await self.db.get(User, comment_in.user_id) is None:
            raise NotFoundError("User not found")

        comment = Comment(
            upload_id=comment_in.upload_id,
            user_id=comment_in.user_id,
            content=comment_in.content,
        )
        self.db.add(comment)
        await self.flush()

        await self.notifications.notify_new_comment(comment, upload)
        await self.commit()
        await self.db.refresh(comment)

        logger.info(f"User {comment.user_id} commented on upload {comment.upload_id}")
        return comment

    async def get_upload_comments(self, upload_id: int) -> List[Comment]:
        """Comments on an upload, oldest first"""
        stmt = (
            select(Comment)
            .where(Comment.upload_id == upload_id)
            .order_by(Comment.created_at, Comment.id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
