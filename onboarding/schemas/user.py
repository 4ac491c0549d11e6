from pydantic import BaseModel, EmailStr, Field
from typing import Any, Dict, Optional


class SignUpRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)
    # role and profile are checked by the profile validator so that a bad
    # value is reported as "Invalid role" / "Invalid profile for <Role>"
    role: Any = None
    profile: Any = None


class SignInRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    id: str
    email: str
    role: str
    profile: Optional[Dict[str, Any]] = None
    profile_complete: bool


class RoleResponse(BaseModel):
    role: Optional[str] = None
