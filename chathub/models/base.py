# chathub/models/base.py
from sqlalchemy.orm import as_declarative, declared_attr
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import DateTime, Integer, func


@as_declarative()
class Base:
    __abstract__ = True  # Prevents creating a table for the base class

    id: Mapped[int]

    @declared_attr
    def __tablename__(cls) -> str:
        return cls.__name__.lower()

    # Server-assigned surrogate key
    id = mapped_column(Integer, primary_key=True, index=True, autoincrement=True)


class CreatedAtMixin:
    created_at = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)


class TimestampMixin(CreatedAtMixin):
    updated_at = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
