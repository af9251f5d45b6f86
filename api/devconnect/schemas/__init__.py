"""Pydantic schemas for request/response validation."""

from devconnect.schemas.auth import (
    AccountIdentity,
    AccountResponse,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
)
from devconnect.schemas.post import CreatePostRequest, PostResponse
from devconnect.schemas.profile import (
    EducationCreateRequest,
    ExperienceCreateRequest,
    MessageResponse,
    ProfileResponse,
    ProfileUpsertRequest,
    RepoSummary,
)

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "TokenResponse",
    "AccountIdentity",
    "AccountResponse",
    "ProfileUpsertRequest",
    "ExperienceCreateRequest",
    "EducationCreateRequest",
    "ProfileResponse",
    "RepoSummary",
    "MessageResponse",
    "CreatePostRequest",
    "PostResponse",
]
