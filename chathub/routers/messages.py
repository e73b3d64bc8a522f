# chathub/routers/messages.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..schemas.chat_schemas import Message, MessageCreate, MessageUpdate
from ..services.chat import MessageService

router = APIRouter(prefix="/api/v1/messages", tags=["Messages"])

@router.post("/", response_model=Message, operation_id="createMessage")
async def create_message(
    message_in: MessageCreate,
    db: AsyncSession = Depends(get_db)
):
    """Post a message; the other room members are notified"""
    return await MessageService(db).create_message(message_in)

@router.patch("/{message_id}", response_model=Message, operation_id="updateMessage")
async def update_message(
    message_id: int,
    message_in: MessageUpdate,
    db: AsyncSession = Depends(get_db)
):
    return await MessageService(db).update_message(message_id, message_in)
