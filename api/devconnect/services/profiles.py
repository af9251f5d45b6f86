"""Profile CRUD keyed by account id."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from devconnect.errors import NotFound, ServerError, Unauthorized
from devconnect.logging import get_logger
from devconnect.models.post import Post
from devconnect.models.profile import Education, Experience, Profile
from devconnect.models.user import User
from devconnect.schemas.profile import (
    EducationCreateRequest,
    ExperienceCreateRequest,
    ProfileUpsertRequest,
)

logger = get_logger(__name__)

NO_PROFILE_MESSAGE = "There is no profile for this user"


def _prepend(entries: list, entry) -> None:
    """Insert an entry at the front of an ordered child collection."""
    entry.position = min((e.position for e in entries), default=0) - 1
    entries.insert(0, entry)


def _remove(entries: list, entry_id: str) -> None:
    """Drop the entry with the given id; unknown or malformed ids are ignored."""
    try:
        target = UUID(entry_id)
    except ValueError:
        return
    for entry in [e for e in entries if e.id == target]:
        entries.remove(entry)


class ProfileService:
    """Service for profile-related business logic."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _query(self):
        return select(Profile).options(
            selectinload(Profile.user),
            selectinload(Profile.experience),
            selectinload(Profile.education),
        )

    async def _find(self, user_id: UUID, *, refresh: bool = False) -> Profile | None:
        stmt = self._query().where(Profile.user_id == user_id)
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def _require(self, user_id: UUID) -> Profile:
        profile = await self._find(user_id)
        if profile is None:
            raise NotFound(NO_PROFILE_MESSAGE)
        return profile

    async def _save(self, user_id: UUID) -> Profile:
        await self.db.commit()
        return await self._find(user_id, refresh=True)

    async def get_own_profile(self, user_id: UUID) -> Profile:
        """
        Get the caller's profile.

        Raises:
            NotFound: the account has no profile yet
        """
        return await self._require(user_id)

    async def upsert_profile(self, user_id: UUID, data: ProfileUpsertRequest) -> Profile:
        """
        Create the caller's profile, or merge the supplied fields into it.

        Only non-empty top-level fields overwrite stored values. Social links
        are merged per network: supplied links replace, omitted links are kept.

        Raises:
            Unauthorized: the account behind the token no longer exists
        """
        fields = data.profile_fields()
        social = data.social_links()
        profile = await self._find(user_id)

        if profile is None:
            if await self.db.get(User, user_id) is None:
                raise Unauthorized("User not found")
            self.db.add(Profile(user_id=user_id, social=social or None, **fields))
            try:
                await self.db.commit()
            except IntegrityError:
                # Another request created the profile first; update that one.
                await self.db.rollback()
                profile = await self._find(user_id, refresh=True)
                if profile is None:
                    raise Unauthorized("User not found")
                logger.info("profile_create_raced", user_id=str(user_id))

        if profile is not None:
            for name, value in fields.items():
                setattr(profile, name, value)
            if social:
                profile.social = {**(profile.social or {}), **social}

        return await self._save(user_id)

    async def list_profiles(self) -> list[Profile]:
        """All profiles, each with its owner's name and avatar."""
        result = await self.db.execute(self._query().order_by(Profile.created_at))
        return list(result.scalars().all())

    async def get_profile_by_account(self, user_id: str) -> Profile:
        """
        Get a profile by its owner's id.

        Raises:
            NotFound: no profile, or the id is not a valid identifier
        """
        try:
            account_id = UUID(user_id)
        except ValueError:
            raise NotFound("Profile not found")

        profile = await self._find(account_id)
        if profile is None:
            raise NotFound("Profile not found")
        return profile

    async def delete_account_cascade(self, user_id: UUID) -> None:
        """
        Delete the account's posts, its profile and the account itself.

        Runs in the session's transaction. Store failures are rolled back and
        reported as ``ServerError``.
        """
        try:
            await self.db.execute(delete(Post).where(Post.user_id == user_id))
            profile = await self._find(user_id)
            if profile is not None:
                await self.db.delete(profile)
            user = await self.db.get(User, user_id)
            if user is not None:
                await self.db.delete(user)
            await self.db.commit()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            logger.error("account_delete_failed", user_id=str(user_id), error=str(exc))
            raise ServerError() from exc

        logger.info("account_deleted", user_id=str(user_id))

    async def add_experience(self, user_id: UUID, data: ExperienceCreateRequest) -> Profile:
        """
        Prepend an experience entry to the caller's profile.

        Raises:
            NotFound: the account has no profile yet
        """
        profile = await self._require(user_id)
        _prepend(profile.experience, Experience(**data.model_dump()))
        return await self._save(user_id)

    async def remove_experience(self, user_id: UUID, experience_id: str) -> Profile:
        """Remove an experience entry; absent ids leave the profile unchanged."""
        profile = await self._require(user_id)
        _remove(profile.experience, experience_id)
        return await self._save(user_id)

    async def add_education(self, user_id: UUID, data: EducationCreateRequest) -> Profile:
        """
        Prepend an education entry to the caller's profile.

        Raises:
            NotFound: the account has no profile yet
        """
        profile = await self._require(user_id)
        _prepend(profile.education, Education(**data.model_dump()))
        return await self._save(user_id)

    async def remove_education(self, user_id: UUID, education_id: str) -> Profile:
        """Remove an education entry; absent ids leave the profile unchanged."""
        profile = await self._require(user_id)
        _remove(profile.education, education_id)
        return await self._save(user_id)
