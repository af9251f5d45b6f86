"""User account model."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from devconnect.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """Registered account holding login credentials."""

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    email = Column(String(320), nullable=False)
    password_hash = Column(Text, nullable=False)
    avatar = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    __table_args__ = (UniqueConstraint("email", name="uq_users_email"),)

    profile = relationship("Profile", back_populates="user", uselist=False, passive_deletes=True)
    posts = relationship("Post", back_populates="user", passive_deletes=True)
