# chathub/schemas/notification_schemas.py
"""Pydantic schemas for push notifications."""
import json
from typing import Any, Dict, Optional, Union
from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from ..models.notification import NotificationType

class PushNotificationCreate(BaseModel):
    user_id: int
    title: str = Field(..., max_length=200)
    body: str
    type: NotificationType
    data: Optional[Union[str, Dict[str, Any]]] = Field(default=None, description="JSON payload")

    @field_validator('data')
    @classmethod
    def serialize_data(cls, v):
        if isinstance(v, dict):
            return json.dumps(v)
        return v

class PushNotification(BaseModel):
    id: int
    user_id: int
    title: str
    body: str
    type: NotificationType
    data: Optional[str]
    is_read: bool
    created_at: datetime

    class Config:
        from_attributes = True

class UnreadCount(BaseModel):
    user_id: int
    unread_count: int
