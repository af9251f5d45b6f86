"""Database models for the DevConnect API."""

from devconnect.models.post import Post
from devconnect.models.profile import Education, Experience, Profile
from devconnect.models.user import User

__all__ = [
    "User",
    "Profile",
    "Experience",
    "Education",
    "Post",
]
