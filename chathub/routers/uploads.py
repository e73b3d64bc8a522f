# chathub/routers/uploads.py
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..schemas.upload_schemas import (
    Comment, CommentCreate, Upload, UploadCreate, UploadWithDetails
)
from ..services.comment_service import CommentService
from ..services.upload_service import UploadService
from ..utils.pagination import LimitOffsetParams, limit_offset_params

router = APIRouter(prefix="/api/v1", tags=["Uploads"])

@router.post("/uploads/", response_model=Upload, operation_id="createUpload")
async def create_upload(
    upload_in: UploadCreate,
    db: AsyncSession = Depends(get_db)
):
    """Record uploaded file metadata; the file itself is stored elsewhere"""
    return await UploadService(db).create_upload(upload_in)

@router.get("/uploads/", response_model=List[UploadWithDetails], operation_id="getUploads")
async def get_uploads(
    room_id: Optional[int] = Query(None),
    user_id: Optional[int] = Query(None),
    pagination: LimitOffsetParams = Depends(limit_offset_params(50)),
    db: AsyncSession = Depends(get_db)
):
    return await UploadService(db).get_uploads(
        room_id=room_id,
        user_id=user_id,
        limit=pagination.limit,
        offset=pagination.offset,
    )

@router.get("/uploads/{upload_id}/comments", response_model=List[Comment], operation_id="getUploadComments")
async def get_upload_comments(upload_id: int, db: AsyncSession = Depends(get_db)):
    """Comments on an upload, oldest first"""
    return await CommentService(db).get_upload_comments(upload_id)

@router.post("/comments/", response_model=Comment, operation_id="createComment")
async def create_comment(
    comment_in: CommentCreate,
    db: AsyncSession = Depends(get_db)
):
    return await CommentService(db).create_comment(comment_in)
