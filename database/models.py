"""
SQLAlchemy ORM models.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    user_id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    first_name = Column(String(128))
    last_name = Column(String(128))
    email = Column(String(255), unique=True, nullable=False)
    phone = Column(String(32))
    city_state = Column(String(128))
    password_hash = Column(String(255), nullable=False)
    user_type = Column(String(32), nullable=False, default="Free")
    created_at = Column(DateTime(timezone=True), default=_utcnow)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    def __repr__(self) -> str:
        # password_hash stays out of logs
        return f"<User {self.user_id} {self.email!r} {self.user_type}>"
