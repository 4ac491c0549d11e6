from typing import Any, Dict, Type

from pydantic import ValidationError as PydanticValidationError

from onboarding.core.errors import ValidationError
from onboarding.models.user import UserRole
from onboarding.schemas.profile import (
    LandlordProfile,
    Profile,
    ProfileBase,
    ServiceProfile,
    TenantProfile,
)

PROFILE_MODELS: Dict[UserRole, Type[ProfileBase]] = {
    UserRole.LANDLORD: LandlordProfile,
    UserRole.TENANT: TenantProfile,
    UserRole.MAINTENANCE: ServiceProfile,
    UserRole.CLEANER: ServiceProfile,
}

# Field that must be present (with this primitive type) for each variant
_REQUIRED_FIELD = {
    UserRole.LANDLORD: ("numberOfProperties", "number"),
    UserRole.TENANT: ("currentAddress", "string"),
    UserRole.MAINTENANCE: ("availability", "array"),
    UserRole.CLEANER: ("availability", "array"),
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _matches(value: Any, kind: str) -> bool:
    if kind == "number":
        return _is_number(value)
    if kind == "string":
        return isinstance(value, str)
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def check_role(role: Any) -> UserRole:
    """Resolve the role string; anything outside the four roles is rejected."""
    try:
        return UserRole(role)
    except ValueError:
        raise ValidationError("Invalid role")


def check_profile_shape(role: Any, profile: Any) -> UserRole:
    user_role = check_role(role)
    label = "Maintenance or Cleaner" if PROFILE_MODELS[user_role] is ServiceProfile else user_role.value

    field, kind = _REQUIRED_FIELD[user_role]
    if not isinstance(profile, dict) or not _matches(profile.get(field), kind):
        raise ValidationError(f"Invalid profile for {label}")
    return user_role


def normalize_profile(role: Any, profile: Any) -> Profile:
    user_role = check_role(role)
    model = PROFILE_MODELS[user_role]

    try:
        return model.model_validate(profile or {})
    except PydanticValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "profile"
        raise ValidationError(f"Invalid profile for {user_role.value}: malformed field '{field}'")


def is_profile_empty(role: Any, profile: Dict[str, Any] | None) -> bool:
    """True when the stored profile still holds nothing but its role's defaults."""
    if not profile:
        return True
    defaults = PROFILE_MODELS[check_role(role)]().model_dump(by_alias=True)
    return all(value == defaults.get(key) for key, value in profile.items())
