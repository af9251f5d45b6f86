"""Posts router."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from devconnect.auth.dependencies import get_current_identity
from devconnect.database import get_db
from devconnect.schemas.auth import AccountIdentity
from devconnect.schemas.post import CreatePostRequest, PostResponse
from devconnect.schemas.profile import MessageResponse
from devconnect.services.posts import PostService

router = APIRouter(prefix="/api/posts", tags=["Posts"])


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_200_OK,
)
async def create_post(
    data: CreatePostRequest,
    db: AsyncSession = Depends(get_db),
    identity: AccountIdentity = Depends(get_current_identity),
) -> PostResponse:
    """Create a post as the authenticated user."""
    post = await PostService(db).create_post(identity.id, data.text)
    return PostResponse.model_validate(post)


@router.get(
    "",
    response_model=list[PostResponse],
    status_code=status.HTTP_200_OK,
)
async def list_posts(
    db: AsyncSession = Depends(get_db),
    identity: AccountIdentity = Depends(get_current_identity),
) -> list[PostResponse]:
    """Get all posts, newest first."""
    posts = await PostService(db).list_posts()
    return [PostResponse.model_validate(p) for p in posts]


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    status_code=status.HTTP_200_OK,
)
async def get_post(
    post_id: str,
    db: AsyncSession = Depends(get_db),
    identity: AccountIdentity = Depends(get_current_identity),
) -> PostResponse:
    """Get a post by id."""
    post = await PostService(db).get_post(post_id)
    return PostResponse.model_validate(post)


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
)
async def delete_post(
    post_id: str,
    db: AsyncSession = Depends(get_db),
    identity: AccountIdentity = Depends(get_current_identity),
) -> MessageResponse:
    """Delete one of the authenticated user's posts."""
    await PostService(db).delete_post(identity.id, post_id)
    return MessageResponse(msg="Post removed")
