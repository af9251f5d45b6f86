"""Post model."""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Index, Text, Uuid
from sqlalchemy.orm import relationship

from devconnect.database import Base
from devconnect.models.user import utcnow


class Post(Base):
    """A text post written by a user."""

    __tablename__ = "posts"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    text = Column(Text, nullable=False)
    # Author name and avatar are copied at creation time
    name = Column(Text)
    avatar = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    __table_args__ = (
        Index("idx_posts_user", user_id),
        Index("idx_posts_created", created_at.desc()),
    )

    user = relationship("User", back_populates="posts")
