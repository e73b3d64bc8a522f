# chathub/models/upload.py
from sqlalchemy import Column, String, Text, Integer, ForeignKey, CheckConstraint
from .base import Base, CreatedAtMixin

class Upload(CreatedAtMixin, Base):
    __tablename__ = "uploads"

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    filename = Column(String(255), nullable=False)
    # Stored verbatim, storage is handled outside the service
    file_url = Column(Text, nullable=False)
    file_size = Column(Integer, nullable=False)
    file_type = Column(String(100), nullable=False)
    room_id = Column(Integer, ForeignKey("chat_rooms.id"), nullable=True, index=True)

    __table_args__ = (
        CheckConstraint('file_size > 0', name='ck_uploads_file_size_positive'),
    )
