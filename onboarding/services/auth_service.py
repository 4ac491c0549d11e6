import logging
import time
from typing import Any, Callable, Optional

from fastapi.concurrency import run_in_threadpool

from onboarding.core.config import Settings
from onboarding.core.errors import (
    AuthError,
    ConflictError,
    DuplicateEmailError,
    InvalidSessionError,
)
from onboarding.models.user import User
from onboarding.repositories.sessions import SessionStore
from onboarding.repositories.users import UserStore
from onboarding.services.password import PasswordHasher
from onboarding.services.profile_validator import check_role, normalize_profile

logger = logging.getLogger(__name__)


def current_millis() -> int:
    return int(time.time() * 1000)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class AuthService:
    def __init__(
        self,
        settings: Settings,
        users: UserStore,
        sessions: SessionStore,
        hasher: PasswordHasher,
        clock: Callable[[], int] = current_millis,
    ):
        self.settings = settings
        self.users = users
        self.sessions = sessions
        self.hasher = hasher
        self.clock = clock

    @property
    def session_duration_ms(self) -> int:
        return self.settings.session_duration_ms

    async def _create_session(self, user_id: str) -> str:
        return await self.sessions.create(user_id, self.clock() + self.session_duration_ms)

    async def sign_up(self, email: str, password: str, role: Any, profile: Any) -> str:
        user_role = check_role(role)
        email = normalize_email(email)

        if await self.users.find_by_email(email) is not None:
            raise ConflictError("User already exists")

        normalized = normalize_profile(user_role, profile)

        user = User(
            user_key=email,
            email=email,
            password_hash=await run_in_threadpool(self.hasher.hash, password),
            role=user_role,
            profile=normalized.model_dump(by_alias=True),
        )
        try:
            user_id = await self.users.insert(user)
        except DuplicateEmailError:
            # Lost the race against a concurrent sign-up for the same email
            logger.warning("Duplicate email rejected at insert", extra={"email": email})
            raise ConflictError("User already exists")

        logger.info("User signed up", extra={"user_id": user_id, "role": user_role.value})
        return await self._create_session(user_id)

    async def sign_in(self, email: str, password: str) -> str:
        email = normalize_email(email)
        user = await self.users.find_by_email(email)
        if user is None:
            raise AuthError("Email not found")

        if not await run_in_threadpool(self.hasher.verify, password, user.password_hash):
            logger.warning("Incorrect password", extra={"user_id": user.id})
            raise AuthError("Incorrect password")

        if self.hasher.needs_rehash(user.password_hash):
            new_hash = await run_in_threadpool(self.hasher.hash, password)
            await self.users.patch(user.id, password_hash=new_hash)

        logger.info("User signed in", extra={"user_id": user.id})
        return await self._create_session(user.id)

    async def sign_out(self, session_id: Optional[str]) -> None:
        session = await self.sessions.get(session_id)
        if session is not None:
            await self.sessions.delete(session.id)
            logger.info("User signed out", extra={"user_id": session.user_id})

    async def verify_and_refresh(self, session_id: Optional[str]) -> User:
        session = await self.sessions.get(session_id)
        if session is None:
            raise InvalidSessionError()

        now = self.clock()
        if session.expiration_time < now:
            await self.sessions.delete(session.id)
            logger.info("Expired session removed", extra={"user_id": session.user_id})
            raise InvalidSessionError()

        user = await self.users.get(session.user_id)
        if user is None:
            await self.sessions.delete(session.id)
            raise InvalidSessionError()

        await self.sessions.patch(session.id, now + self.session_duration_ms)
        return user

    async def get_user_by_identity(self, user_key: str) -> Optional[User]:
        """Resolve the `sub` of an identity token back to its user."""
        return await self.users.find_by_user_key(user_key)
