import enum

from sqlalchemy import Column, String, JSON, Enum

from onboarding.models.base import BaseModel


class UserRole(str, enum.Enum):
    TENANT = "Tenant"
    LANDLORD = "Landlord"
    MAINTENANCE = "Maintenance"
    CLEANER = "Cleaner"


class User(BaseModel):
    __tablename__ = "users"

    # Identity key used as the `sub` of issued tokens; derived from the email
    user_key = Column(String(255), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)

    role = Column(Enum(UserRole, values_callable=lambda e: [m.value for m in e]), nullable=False)
    profile = Column(JSON, nullable=True)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, email={self.email!r}, role={self.role.value!r})"
