from fastapi import APIRouter, Depends

from onboarding.api.deps import get_current_user
from onboarding.models.user import User
from onboarding.schemas.user import RoleResponse, UserResponse
from onboarding.services.profile_validator import is_profile_empty

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: User = Depends(get_current_user)):
    return UserResponse(
        id=current_user.id,
        email=current_user.email,
        role=current_user.role.value,
        profile=current_user.profile,
        profile_complete=not is_profile_empty(current_user.role, current_user.profile),
    )


@router.get("/me/role", response_model=RoleResponse)
async def get_my_role(current_user: User = Depends(get_current_user)):
    return RoleResponse(role=current_user.role.value)


@router.get("/me/profile")
async def get_my_profile(current_user: User = Depends(get_current_user)):
    """Role-shaped profile as stored at sign-up (camelCase keys)."""
    return current_user.profile
