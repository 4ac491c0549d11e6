import uuid
from typing import Optional

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from onboarding.models.session import UserSession


def _normalize_id(session_id: Optional[str]) -> Optional[str]:
    """Canonical form of a session id, or None when it cannot be one."""
    if not session_id:
        return None
    try:
        return str(uuid.UUID(session_id))
    except (ValueError, TypeError, AttributeError):
        return None


class SessionStore:
    def __init__(self, db: Session):
        self.db = db

    async def create(self, user_id: str, expiration_time: int) -> str:
        def _create():
            record = UserSession(user_id=user_id, expiration_time=expiration_time)
            self.db.add(record)
            self.db.commit()
            return record.id

        return await run_in_threadpool(_create)

    async def get(self, session_id: Optional[str]) -> Optional[UserSession]:
        valid_id = _normalize_id(session_id)
        if valid_id is None:
            return None
        return await run_in_threadpool(self.db.get, UserSession, valid_id)

    async def patch(self, session_id: str, expiration_time: int) -> None:
        def _patch():
            self.db.query(UserSession).filter(UserSession.id == session_id).update(
                {UserSession.expiration_time: expiration_time}
            )
            self.db.commit()

        await run_in_threadpool(_patch)

    async def delete(self, session_id: str) -> None:
        def _delete():
            self.db.query(UserSession).filter(UserSession.id == session_id).delete()
            self.db.commit()

        await run_in_threadpool(_delete)

    async def delete_expired(self, now: int) -> int:
        def _purge():
            count = (
                self.db.query(UserSession)
                .filter(UserSession.expiration_time < now)
                .delete(synchronize_session=False)
            )
            self.db.commit()
            return count

        return await run_in_threadpool(_purge)
