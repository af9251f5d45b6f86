"""Profile router: profile CRUD, experience/education entries, GitHub repos."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from devconnect.auth.dependencies import get_current_identity
from devconnect.database import get_db
from devconnect.schemas.auth import AccountIdentity
from devconnect.schemas.profile import (
    EducationCreateRequest,
    ExperienceCreateRequest,
    MessageResponse,
    ProfileResponse,
    ProfileUpsertRequest,
    RepoSummary,
)
from devconnect.services.github import GitHubClient, get_github_client
from devconnect.services.profiles import ProfileService

router = APIRouter(prefix="/api/profile", tags=["Profile"])


@router.get(
    "/me",
    response_model=ProfileResponse,
    status_code=status.HTTP_200_OK,
)
async def get_my_profile(
    db: AsyncSession = Depends(get_db),
    identity: AccountIdentity = Depends(get_current_identity),
) -> ProfileResponse:
    """Get the authenticated user's profile."""
    profile = await ProfileService(db).get_own_profile(identity.id)
    return ProfileResponse.model_validate(profile)


@router.post(
    "",
    response_model=ProfileResponse,
    status_code=status.HTTP_200_OK,
)
async def upsert_profile(
    data: ProfileUpsertRequest,
    db: AsyncSession = Depends(get_db),
    identity: AccountIdentity = Depends(get_current_identity),
) -> ProfileResponse:
    """
    Create or update the authenticated user's profile.

    ``skills`` is a comma-separated list.
    """
    profile = await ProfileService(db).upsert_profile(identity.id, data)
    return ProfileResponse.model_validate(profile)


@router.get(
    "",
    response_model=list[ProfileResponse],
    status_code=status.HTTP_200_OK,
)
async def list_profiles(
    db: AsyncSession = Depends(get_db),
) -> list[ProfileResponse]:
    """Get all profiles."""
    profiles = await ProfileService(db).list_profiles()
    return [ProfileResponse.model_validate(p) for p in profiles]


@router.get(
    "/user/{user_id}",
    response_model=ProfileResponse,
    status_code=status.HTTP_200_OK,
)
async def get_profile_by_user(
    user_id: str,
    db: AsyncSession = Depends(get_db),
) -> ProfileResponse:
    """Get a profile by user id."""
    profile = await ProfileService(db).get_profile_by_account(user_id)
    return ProfileResponse.model_validate(profile)


@router.delete(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
)
async def delete_account(
    db: AsyncSession = Depends(get_db),
    identity: AccountIdentity = Depends(get_current_identity),
) -> MessageResponse:
    """Delete the authenticated user's posts, profile and account."""
    await ProfileService(db).delete_account_cascade(identity.id)
    return MessageResponse(msg="User deleted")


@router.put(
    "/experience",
    response_model=ProfileResponse,
    status_code=status.HTTP_200_OK,
)
async def add_experience(
    data: ExperienceCreateRequest,
    db: AsyncSession = Depends(get_db),
    identity: AccountIdentity = Depends(get_current_identity),
) -> ProfileResponse:
    """Add an experience entry to the front of the profile's list."""
    profile = await ProfileService(db).add_experience(identity.id, data)
    return ProfileResponse.model_validate(profile)


@router.delete(
    "/experience/{exp_id}",
    response_model=ProfileResponse,
    status_code=status.HTTP_200_OK,
)
async def remove_experience(
    exp_id: str,
    db: AsyncSession = Depends(get_db),
    identity: AccountIdentity = Depends(get_current_identity),
) -> ProfileResponse:
    """Remove an experience entry from the profile."""
    profile = await ProfileService(db).remove_experience(identity.id, exp_id)
    return ProfileResponse.model_validate(profile)


@router.put(
    "/education",
    response_model=ProfileResponse,
    status_code=status.HTTP_200_OK,
)
async def add_education(
    data: EducationCreateRequest,
    db: AsyncSession = Depends(get_db),
    identity: AccountIdentity = Depends(get_current_identity),
) -> ProfileResponse:
    """Add an education entry to the front of the profile's list."""
    profile = await ProfileService(db).add_education(identity.id, data)
    return ProfileResponse.model_validate(profile)


@router.delete(
    "/education/{edu_id}",
    response_model=ProfileResponse,
    status_code=status.HTTP_200_OK,
)
async def remove_education(
    edu_id: str,
    db: AsyncSession = Depends(get_db),
    identity: AccountIdentity = Depends(get_current_identity),
) -> ProfileResponse:
    """Remove an education entry from the profile."""
    profile = await ProfileService(db).remove_education(identity.id, edu_id)
    return ProfileResponse.model_validate(profile)


@router.get(
    "/github/{username}",
    response_model=list[RepoSummary],
    status_code=status.HTTP_200_OK,
)
async def list_github_repos(
    username: str,
    github: GitHubClient = Depends(get_github_client),
) -> list[RepoSummary]:
    """Get a user's five oldest GitHub repositories."""
    return await github.list_repos(username)
