# chathub/routers/notifications.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..schemas.notification_schemas import PushNotification, PushNotificationCreate
from ..services.notification_service import NotificationService

router = APIRouter(prefix="/api/v1/notifications", tags=["Push Notifications"])

@router.post("/", response_model=PushNotification, operation_id="createPushNotification")
async def create_push_notification(
    notification_in: PushNotificationCreate,
    db: AsyncSession = Depends(get_db)
):
    return await NotificationService(db).create_push_notification(notification_in)

@router.post("/{notification_id}/read", response_model=PushNotification, operation_id="markNotificationRead")
async def mark_notification_read(notification_id: int, db: AsyncSession = Depends(get_db)):
    """Mark a notification read; repeating the call is harmless"""
    return await NotificationService(db).mark_notification_read(notification_id)
