from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from typing import Callable, Optional

from onboarding.core.config import Settings
from onboarding.core.database import get_db
from onboarding.core.errors import InvalidSessionError
from onboarding.models.user import User
from onboarding.repositories.sessions import SessionStore
from onboarding.repositories.users import UserStore
from onboarding.services.auth_service import AuthService
from onboarding.services.tokens import TokenIssuer

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_clock(request: Request) -> Callable[[], int]:
    return request.app.state.clock


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def get_auth_service(
    request: Request,
    db: Session = Depends(get_db),
) -> AuthService:
    state = request.app.state
    return AuthService(
        settings=state.settings,
        users=UserStore(db),
        sessions=SessionStore(db),
        hasher=state.password_hasher,
        clock=state.clock,
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    issuer: TokenIssuer = Depends(get_token_issuer),
    auth: AuthService = Depends(get_auth_service),
) -> User:
    if credentials is None:
        raise InvalidSessionError("Not authenticated")

    payload = issuer.decode(credentials.credentials)
    user_key = payload.get("sub")
    if not user_key:
        raise InvalidSessionError("Invalid token")

    user = await auth.get_user_by_identity(user_key)
    if user is None:
        raise InvalidSessionError("Invalid token")
    return user
