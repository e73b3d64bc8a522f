# chathub/services/user_service.py
from typing import List, Optional
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, or_
from sqlalchemy.exc import IntegrityError

from .base_service import BaseService
from .notification_service import NotificationService
from ..core.cache import invalidate_user_listings
from ..core.exceptions import ConflictError, NotFoundError
from ..models.user import User, UserStatus
from ..schemas.user_schemas import UserCreate, UserUpdate

logger = logging.getLogger(__name__)

class UserService(BaseService[User]):
    label = "User"

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)
        self.notifications = NotificationService(db)

    async def _ensure_unique(self, username: Optional[str], email: Optional[str], exclude_id: Optional[int] = None):
        """Raise ConflictError when another user already holds the username or email"""
        conditions = []
        if username is not None:
            conditions.append(User.username == username)
        if email is not None:
            conditions.append(User.email == email)
        if not conditions:
            return

        stmt = select(User).where(or_(*conditions))
        if exclude_id is not None:
            stmt = stmt.where(User.id != exclude_id)
        result = await self.db.execute(stmt.limit(1))
        existing = result.scalar_one_or_none()
        if existing is None:
            return
        if username is not None and existing.username == username:
            raise ConflictError(f"Username '{username}' is already taken")
        raise ConflictError(f"Email '{email}' is already registered")

    async def _commit_unique(self, username: Optional[str], email: Optional[str]):
        """Commit, turning a unique index violation from a concurrent writer into ConflictError"""
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"User uniqueness violated on commit: {e.orig}")
            raise ConflictError(f"Username '{username}' or email '{email}' is already in use")

    async def create_user(self, user_in: UserCreate) -> User:
        await self._ensure_unique(user_in.username, user_in.email)

        user = User(
            username=user_in.username,
            email=user_in.email,
            avatar_url=user_in.avatar_url,
            status=user_in.status or UserStatus.OFFLINE,
        )
        self.db.add(user)
        await self._commit_unique(user_in.username, user_in.email)
        await self.db.refresh(user)

        await invalidate_user_listings()
        logger.info(f"Created user {user.id} ({user.username})")
        return user

    async def get_users(self) -> List[User]:
        result = await self.db.execute(select(User).order_by(User.id))
        return list(result.scalars().all())

    async def get_online_users(self) -> List[User]:
        stmt = select(User).where(User.status == UserStatus.ONLINE).order_by(User.id)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_user(self, user_id: int) -> User:
        return await self.get_or_404(user_id)

    async def update_user(self, user_id: int, user_in: UserUpdate) -> User:
        """
        Apply the fields present in the request.

        A status that differs from the stored one is announced to every user
        sharing a room with this one, inside the same transaction.
        """
        user = await self.get(user_id)
        if user is None:
            raise NotFoundError("User not found")

        changes = user_in.changes()
        old_status = user.status
        await self._ensure_unique(changes.get("username"), changes.get("email"), exclude_id=user.id)

        for key, value in changes.items():
            setattr(user, key, value)
        user.updated_at = func.now()

        if "status" in changes and changes["status"] != old_status:
            await self.notifications.notify_status_change(user, old_status)

        await self._commit_unique(changes.get("username"), changes.get("email"))
        await self.db.refresh(user)

        await invalidate_user_listings()
        logger.info(f"Updated user {user.id}: {sorted(changes)}")
        return user
