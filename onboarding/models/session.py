from sqlalchemy import Column, String, BigInteger, ForeignKey, Index

from onboarding.models.base import BaseModel


class UserSession(BaseModel):
    """One authenticated browser session. The row id is the cookie value."""

    __tablename__ = "sessions"

    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    # Absolute expiry, milliseconds since epoch
    expiration_time = Column(BigInteger, nullable=False)

    __table_args__ = (
        Index("ix_sessions_user_id", "user_id"),
        Index("ix_sessions_expiration_time", "expiration_time"),
    )

    def __repr__(self) -> str:
        return f"UserSession(user_id={self.user_id!r}, expiration_time={self.expiration_time})"
