"""Profile model with its experience and education entries."""

import uuid

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Text,
    UniqueConstraint,
    Uuid,
    false,
)
from sqlalchemy.orm import relationship

from devconnect.database import Base
from devconnect.models.user import utcnow


class Profile(Base):
    """
    Professional profile of a user.

    One row per user. Skills and social links are stored as JSON; experience
    and education live in child tables ordered by ``position``.
    """

    __tablename__ = "profiles"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    company = Column(Text)
    website = Column(Text)
    location = Column(Text)
    bio = Column(Text)
    status = Column(Text, nullable=False)
    skills = Column(JSON, nullable=False, default=list)
    github_username = Column(Text)
    social = Column(JSON)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    __table_args__ = (UniqueConstraint("user_id", name="uq_profiles_user_id"),)

    user = relationship("User", back_populates="profile")
    experience = relationship(
        "Experience",
        back_populates="profile",
        cascade="all, delete-orphan",
        order_by="Experience.position",
    )
    education = relationship(
        "Education",
        back_populates="profile",
        cascade="all, delete-orphan",
        order_by="Education.position",
    )


class Experience(Base):
    """A job held by the profile owner."""

    __tablename__ = "experiences"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    profile_id = Column(Uuid, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False, default=0)
    title = Column(Text, nullable=False)
    company = Column(Text, nullable=False)
    location = Column(Text)
    from_date = Column(Date, nullable=False)
    to_date = Column(Date)
    current = Column(Boolean, nullable=False, default=False, server_default=false())
    description = Column(Text)

    __table_args__ = (Index("idx_experiences_profile", profile_id, position),)

    profile = relationship("Profile", back_populates="experience")


class Education(Base):
    """A school attended by the profile owner."""

    __tablename__ = "educations"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    profile_id = Column(Uuid, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False, default=0)
    school = Column(Text, nullable=False)
    degree = Column(Text, nullable=False)
    field_of_study = Column(Text, nullable=False)
    from_date = Column(Date, nullable=False)
    to_date = Column(Date)
    current = Column(Boolean, nullable=False, default=False, server_default=false())
    description = Column(Text)

    __table_args__ = (Index("idx_educations_profile", profile_id, position),)

    profile = relationship("Profile", back_populates="education")
