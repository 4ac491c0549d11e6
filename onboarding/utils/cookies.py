from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Literal

from fastapi import Request, Response

from onboarding.core.config import Settings

EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


def session_cookie_header(
    settings: Settings,
    value: str,
    expire: Literal["refresh", "expired"],
    now_ms: int,
) -> str:
    if expire == "refresh":
        expires = datetime.fromtimestamp((now_ms + settings.session_duration_ms) / 1000, tz=timezone.utc)
    else:
        expires = EPOCH

    # http.cookies has no Partitioned attribute, so the header is built by hand.
    return "; ".join([
        f"{settings.SESSION_COOKIE_NAME}={value}",
        f"Expires={format_datetime(expires, usegmt=True)}",
        "HttpOnly",
        "Path=/",
        "SameSite=None",
        "Secure",
        "Partitioned",
    ])


def set_session_cookie(
    response: Response,
    settings: Settings,
    value: str,
    expire: Literal["refresh", "expired"],
    now_ms: int,
) -> None:
    response.headers.append("set-cookie", session_cookie_header(settings, value, expire, now_ms))


def read_session_cookie(request: Request, settings: Settings) -> str | None:
    return request.cookies.get(settings.SESSION_COOKIE_NAME) or None
