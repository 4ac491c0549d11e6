import logging
from typing import Callable

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse

from onboarding.api.deps import get_auth_service, get_clock, get_settings, get_token_issuer
from onboarding.core.config import Settings
from onboarding.core.errors import AppError, InternalError, InvalidSessionError
from onboarding.schemas.user import SignInRequest, SignUpRequest
from onboarding.services.auth_service import AuthService
from onboarding.services.profile_validator import check_profile_shape
from onboarding.services.tokens import TokenIssuer
from onboarding.utils.cookies import read_session_cookie, set_session_cookie

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/signUp", status_code=status.HTTP_200_OK)
async def sign_up(
    data: SignUpRequest,
    response: Response,
    auth: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
    clock: Callable[[], int] = Depends(get_clock),
):
    # Reject malformed role/profile before touching the store
    check_profile_shape(data.role, data.profile)

    session_id = await auth.sign_up(data.email, data.password, data.role, data.profile)

    set_session_cookie(response, settings, session_id, "refresh", clock())
    return {"message": "Signed up"}


@router.post("/signIn", status_code=status.HTTP_200_OK)
async def sign_in(
    data: SignInRequest,
    response: Response,
    auth: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
    clock: Callable[[], int] = Depends(get_clock),
):
    session_id = await auth.sign_in(data.email, data.password)

    set_session_cookie(response, settings, session_id, "refresh", clock())
    return {"message": "Signed in"}


@router.post("/signOut", status_code=status.HTTP_200_OK)
async def sign_out(
    request: Request,
    response: Response,
    auth: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
    clock: Callable[[], int] = Depends(get_clock),
):
    session_id = read_session_cookie(request, settings)
    await auth.sign_out(session_id)

    set_session_cookie(response, settings, session_id or "", "expired", clock())
    return {"message": "Signed out"}


@router.get("/token", response_class=PlainTextResponse)
async def token(
    request: Request,
    auth: AuthService = Depends(get_auth_service),
    issuer: TokenIssuer = Depends(get_token_issuer),
    settings: Settings = Depends(get_settings),
    clock: Callable[[], int] = Depends(get_clock),
):
    """Exchange the session cookie for a short-lived identity token."""
    session_id = read_session_cookie(request, settings)
    if not session_id:
        raise InvalidSessionError()

    try:
        user = await auth.verify_and_refresh(session_id)
        identity_token = issuer.issue(user)
    except AppError:
        raise
    except Exception:
        logger.exception("Token issuance failed")
        raise InternalError()

    response = PlainTextResponse(identity_token, status_code=status.HTTP_200_OK)
    set_session_cookie(response, settings, session_id, "refresh", clock())
    return response
