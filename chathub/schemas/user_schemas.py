# chathub/schemas/user_schemas.py
"""Pydantic schemas for User entity."""
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field
from ..models.user import UserStatus

class UserCreate(BaseModel):
    username: str = Field(..., min_length=3, max_length=50, description="Unique username")
    email: EmailStr = Field(..., description="Unique email address")
    avatar_url: Optional[str] = Field(default=None, description="Avatar image URL")
    status: Optional[UserStatus] = Field(default=None, description="Presence status, offline when omitted")

class UserUpdate(BaseModel):
    """Schema for updating a user - only fields sent by the client are applied"""
    username: Optional[str] = Field(default=None, min_length=3, max_length=50)
    email: Optional[EmailStr] = Field(default=None)
    avatar_url: Optional[str] = Field(default=None)
    status: Optional[UserStatus] = Field(default=None)

    def changes(self) -> dict:
        """Fields present in the request; avatar_url is the only one that may be cleared"""
        data = self.model_dump(exclude_unset=True)
        return {
            key: value for key, value in data.items()
            if value is not None or key == "avatar_url"
        }

class User(BaseModel):
    id: int
    username: str
    email: str
    avatar_url: Optional[str]
    status: UserStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
