from typing import Any, List, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationInfo,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel


class ProfileBase(BaseModel):
    """Profiles travel and are stored with camelCase keys (fullName, moveDate, ...)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        allow_inf_nan=False,
    )

    full_name: str = ""

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # null means "not filled in" and falls back to the field default
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @field_validator("*", mode="before")
    @classmethod
    def reject_bool_numbers(cls, v, info: ValidationInfo):
        # lax mode would read true as 1 for int and float fields
        if isinstance(v, bool) and cls.model_fields[info.field_name].annotation in (int, float):
            raise ValueError("expected a number, got a boolean")
        return v


class LandlordProfile(ProfileBase):
    number_of_properties: int = 0


class TenantProfile(ProfileBase):
    current_address: str = ""
    current_income: float = 0
    job_title: str = ""
    area_to_move: str = ""
    move_date: str = ""
    smoker: Literal["yes", "no"] = "no"
    pets: int = 0
    number_of_people: int = 0
    summary: str = ""

    @field_validator("smoker", mode="before")
    @classmethod
    def normalize_smoker(cls, v):
        if isinstance(v, str):
            return v.strip().lower() or "no"
        return v


class ServiceProfile(ProfileBase):
    """Maintenance and Cleaner share one shape."""

    availability: List[str] = []
    key_skills: List[str] = []
    area_to_move: str = ""
    miles: float = 0
    summary: str = ""
    # Placeholder strings only; there is no upload pipeline behind these
    images: List[str] = []


Profile = Union[LandlordProfile, TenantProfile, ServiceProfile]
