"""Authentication router for login and the current account."""

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from devconnect.auth.dependencies import get_current_identity
from devconnect.config import settings
from devconnect.database import get_db
from devconnect.middleware.rate_limit import limiter
from devconnect.schemas.auth import AccountIdentity, AccountResponse, LoginRequest, TokenResponse
from devconnect.services.accounts import AuthService

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.get(
    "",
    response_model=AccountResponse,
    status_code=status.HTTP_200_OK,
)
async def get_current_account(
    db: AsyncSession = Depends(get_db),
    identity: AccountIdentity = Depends(get_current_identity),
) -> AccountResponse:
    """Return the logged-in account (without its password hash)."""
    user = await AuthService(db).get_account(identity.id)
    return AccountResponse.model_validate(user)


@router.post(
    "",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
)
@limiter.limit(settings.login_rate_limit)
async def login(
    request: Request,
    data: LoginRequest,
    db: AsyncSession = Depends(get_db),
) -> TokenResponse:
    """Authenticate with email and password and get a token."""
    token = await AuthService(db).authenticate(data.email, data.password)
    return TokenResponse(token=token)
