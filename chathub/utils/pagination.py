# chathub/utils/pagination.py
"""Limit/offset pagination helpers shared by listing operations."""
from pydantic import BaseModel, Field
from fastapi import Query

from ..core.exceptions import ValidationError

MAX_PAGE_SIZE = 100

class LimitOffsetParams(BaseModel):
    """Standard pagination parameters."""
    limit: int = Field(50, ge=1, le=MAX_PAGE_SIZE, description="Maximum rows returned")
    offset: int = Field(0, ge=0, description="Rows skipped before the first returned row")


def limit_offset_params(default_limit: int):
    """Build a FastAPI dependency for limit/offset with a per-route default limit."""
    def dependency(
        limit: int = Query(default_limit, ge=1, le=MAX_PAGE_SIZE, description="Maximum rows returned"),
        offset: int = Query(0, ge=0, description="Rows to skip"),
    ) -> LimitOffsetParams:
        return LimitOffsetParams(limit=limit, offset=offset)
    return dependency


def validate_limit_offset(limit: int, offset: int):
    """Reject pagination values the store would misinterpret."""
    if limit is None or limit < 1:
        raise ValidationError("limit must be a positive integer")
    if limit > MAX_PAGE_SIZE:
        raise ValidationError(f"limit must not exceed {MAX_PAGE_SIZE}")
    if offset is None or offset < 0:
        raise ValidationError("offset must be a non-negative integer")
