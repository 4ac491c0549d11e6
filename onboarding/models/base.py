import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime

from onboarding.core.database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class BaseModel(Base):
    __abstract__ = True

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True, onupdate=_utcnow)
