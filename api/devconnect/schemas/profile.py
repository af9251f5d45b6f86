"""Profile-related Pydantic schemas."""

from datetime import date, datetime
from typing import Any
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

SOCIAL_NETWORKS = ("youtube", "twitter", "instagram", "linkedin", "facebook")


def _require_text(v: str, message: str) -> str:
    if not v or not v.strip():
        raise ValueError(message)
    return v.strip()


def parse_skills(raw: str | list[str]) -> list[str]:
    """
    Split a comma-separated skills string into an ordered list.

    Each skill is trimmed and blank entries are dropped.

    Raises:
        ValueError: a list item is not a string
    """
    items = raw.split(",") if isinstance(raw, str) else raw
    if not all(isinstance(skill, str) for skill in items):
        raise ValueError("Skills must be text")
    return [skill.strip() for skill in items if skill.strip()]


class ProfileUpsertRequest(BaseModel):
    """
    Request to create or update the caller's profile.

    Accepts the field names used by the original web client
    (``githubusername``) as well as snake_case.
    """

    model_config = ConfigDict(populate_by_name=True)

    status: str
    skills: list[str]
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = Field(
        default=None,
        validation_alias=AliasChoices("github_username", "githubusername"),
    )
    youtube: str | None = None
    twitter: str | None = None
    instagram: str | None = None
    linkedin: str | None = None
    facebook: str | None = None

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: str) -> str:
        return _require_text(v, "Status is required")

    @field_validator("skills", mode="before")
    @classmethod
    def validate_skills(cls, v: Any) -> list[str]:
        if not isinstance(v, (str, list)):
            raise ValueError("Skills is required")
        skills = parse_skills(v)
        if not skills:
            raise ValueError("Skills is required")
        return skills

    def profile_fields(self) -> dict[str, Any]:
        """Top-level fields that were supplied with a non-empty value."""
        fields: dict[str, Any] = {"status": self.status, "skills": self.skills}
        for name in ("company", "website", "location", "bio", "github_username"):
            value = getattr(self, name)
            if value:
                fields[name] = value
        return fields

    def social_links(self) -> dict[str, str]:
        """Social links that were supplied with a non-empty value."""
        return {name: getattr(self, name) for name in SOCIAL_NETWORKS if getattr(self, name)}


class ExperienceCreateRequest(BaseModel):
    """Request to add an experience entry."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    company: str
    location: str | None = None
    from_date: date = Field(validation_alias=AliasChoices("from_date", "from"))
    to_date: date | None = Field(default=None, validation_alias=AliasChoices("to_date", "to"))
    current: bool = False
    description: str | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _require_text(v, "Title is required")

    @field_validator("company")
    @classmethod
    def validate_company(cls, v: str) -> str:
        return _require_text(v, "Company is required")


class EducationCreateRequest(BaseModel):
    """Request to add an education entry."""

    model_config = ConfigDict(populate_by_name=True)

    school: str
    degree: str
    field_of_study: str = Field(validation_alias=AliasChoices("field_of_study", "fieldofstudy"))
    from_date: date = Field(validation_alias=AliasChoices("from_date", "from"))
    to_date: date | None = Field(default=None, validation_alias=AliasChoices("to_date", "to"))
    current: bool = False
    description: str | None = None

    @field_validator("school")
    @classmethod
    def validate_school(cls, v: str) -> str:
        return _require_text(v, "School is required")

    @field_validator("degree")
    @classmethod
    def validate_degree(cls, v: str) -> str:
        return _require_text(v, "Degree is required")

    @field_validator("field_of_study")
    @classmethod
    def validate_field_of_study(cls, v: str) -> str:
        return _require_text(v, "Field of study is required")


class ProfileOwner(BaseModel):
    """Public fields of the account that owns a profile."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    avatar: str | None


class SocialLinks(BaseModel):
    youtube: str | None = None
    twitter: str | None = None
    instagram: str | None = None
    linkedin: str | None = None
    facebook: str | None = None


class ExperienceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    company: str
    location: str | None
    from_date: date
    to_date: date | None
    current: bool
    description: str | None


class EducationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    school: str
    degree: str
    field_of_study: str
    from_date: date
    to_date: date | None
    current: bool
    description: str | None


class ProfileResponse(BaseModel):
    """Profile joined with its owner's name and avatar."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user: ProfileOwner
    company: str | None
    website: str | None
    location: str | None
    bio: str | None
    status: str
    skills: list[str]
    github_username: str | None
    social: SocialLinks | None
    experience: list[ExperienceResponse]
    education: list[EducationResponse]
    created_at: datetime
    updated_at: datetime


class RepoSummary(BaseModel):
    """Subset of a GitHub repository record."""

    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    full_name: str
    html_url: str
    description: str | None = None
    language: str | None = None
    stargazers_count: int = 0
    watchers_count: int = 0
    forks_count: int = 0
    created_at: datetime


class MessageResponse(BaseModel):
    msg: str
