from typing import Any, Optional

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from onboarding.core.errors import DuplicateEmailError
from onboarding.models.user import User


class UserStore:
    def __init__(self, db: Session):
        self.db = db

    async def find_by_email(self, email: str) -> Optional[User]:
        return await run_in_threadpool(
            lambda: self.db.query(User).filter(User.email == email).first()
        )

    async def find_by_user_key(self, user_key: str) -> Optional[User]:
        return await run_in_threadpool(
            lambda: self.db.query(User).filter(User.user_key == user_key).first()
        )

    async def get(self, user_id: str) -> Optional[User]:
        return await run_in_threadpool(self.db.get, User, user_id)

    async def insert(self, user: User) -> str:
        def _insert():
            self.db.add(user)
            try:
                self.db.commit()
            except IntegrityError:
                self.db.rollback()
                raise DuplicateEmailError(user.email)
            self.db.refresh(user)
            return user.id

        return await run_in_threadpool(_insert)

    async def patch(self, user_id: str, **fields: Any) -> None:
        def _patch():
            user = self.db.get(User, user_id)
            if user is None:
                return
            for key, value in fields.items():
                setattr(user, key, value)
            self.db.commit()

        await run_in_threadpool(_patch)
