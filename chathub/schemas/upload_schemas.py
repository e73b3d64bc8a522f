# chathub/schemas/upload_schemas.py
"""Pydantic schemas for uploads and their comments."""
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field

class UploadCreate(BaseModel):
    user_id: int
    filename: str = Field(..., min_length=1, max_length=255)
    file_url: str = Field(..., min_length=1)
    file_size: int = Field(..., gt=0, description="Size in bytes")
    file_type: str = Field(..., min_length=1, max_length=100)
    room_id: Optional[int] = Field(default=None, description="Room the file is shared in")

class Upload(BaseModel):
    id: int
    user_id: int
    filename: str
    file_url: str
    file_size: int
    file_type: str
    room_id: Optional[int]
    created_at: datetime

    class Config:
        from_attributes = True

class UploadUser(BaseModel):
    id: int
    username: str
    email: str
    avatar_url: Optional[str]

class UploadWithDetails(Upload):
    user: UploadUser
    comment_count: int = 0

class CommentCreate(BaseModel):
    upload_id: int
    user_id: int
    content: str = Field(..., min_length=1)

class Comment(BaseModel):
    id: int
    upload_id: int
    user_id: int
    content: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
