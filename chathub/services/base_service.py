# chathub/services/base_service.py
"""Base service with common CRUD operations."""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from typing import Type, Any, Dict, Optional, TypeVar, Generic
import logging

from ..core.exceptions import NotFoundError, PersistenceError

logger = logging.getLogger(__name__)

# Define generic type
T = TypeVar('T')

class BaseService(Generic[T]):
    # Used in "<label> with ID <id> not found" messages
    label = "Record"

    def __init__(self, model: Type[T], db: AsyncSession):
        self.model = model
        self.db = db

    async def get(self, id: Any) -> Optional[T]:
        stmt = select(self.model).where(self.model.id == id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_or_404(self, id: Any) -> T:
        obj = await self.get(id)
        if obj is None:
            raise NotFoundError(f"{self.label} with ID {id} not found")
        return obj

    async def create(self, obj_in: Dict) -> T:
        obj = self.model(**obj_in)
        self.db.add(obj)
        await self.commit()
        await self.db.refresh(obj)
        return obj

    async def flush(self):
        """Send pending writes without committing, e.g. to obtain generated ids"""
        try:
            await self.db.flush()
        except IntegrityError as e:
            await self._reject(e)

    async def commit(self):
        """Commit the unit of work; store rejections roll back and surface as PersistenceError"""
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self._reject(e)

    async def _reject(self, error: IntegrityError):
        await self.db.rollback()
        logger.error(f"{self.label} write rejected by the database: {error.orig}")
        raise PersistenceError(f"{self.label} write rejected by the database: {error.orig}")
