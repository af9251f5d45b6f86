"""Users router for account registration."""

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from devconnect.config import settings
from devconnect.database import get_db
from devconnect.middleware.rate_limit import limiter
from devconnect.schemas.auth import RegisterRequest, TokenResponse
from devconnect.services.accounts import AuthService

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post(
    "",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
)
@limiter.limit(settings.register_rate_limit)
async def register(
    request: Request,
    data: RegisterRequest,
    db: AsyncSession = Depends(get_db),
) -> TokenResponse:
    """
    Register a new user.

    Returns a signed token for the new account.
    """
    token = await AuthService(db).register(data.name, data.email, data.password)
    return TokenResponse(token=token)
