# chathub/models/comment.py
from sqlalchemy import Column, Integer, Text, ForeignKey
from .base import Base, TimestampMixin

class Comment(TimestampMixin, Base):
    __tablename__ = "comments"

    upload_id = Column(Integer, ForeignKey("uploads.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
