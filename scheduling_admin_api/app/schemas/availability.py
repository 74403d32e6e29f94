"""
Pydantic models for weekly availability windows.

Each window names a weekday (0 = Sunday … 6 = Saturday) and a start and
end time in zero‑padded 24‑hour ``HH:MM`` form.  Because both times are
zero‑padded, comparing the strings gives the chronological order, which
is how ``start_time < end_time`` is checked.

Windows are validated one by one; a list is valid when every entry is.
Overlapping windows and several windows on the same day are allowed.
"""

import re
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from .profile import integral_float_to_int

TIME_PATTERN = re.compile(r"^([01][0-9]|2[0-3]):[0-5][0-9]$")


class AvailabilityCreate(BaseModel):
    """Schema for one window of a submitted availability set."""

    day_of_week: int = Field(..., strict=True, ge=0, le=6, examples=[1])
    # end_time is declared first so the range check on start_time can see it
    end_time: str = Field(..., strict=True, examples=["18:00"])
    start_time: str = Field(..., strict=True, examples=["09:00"])

    @field_validator("day_of_week", mode="before")
    @classmethod
    def accept_whole_float(cls, v: Any) -> Any:
        return integral_float_to_int(v)

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_time_format(cls, v: str) -> str:
        if not TIME_PATTERN.fullmatch(v):
            raise PydanticCustomError("time_format", "Invalid time format, expected HH:MM")
        return v

    @field_validator("start_time")
    @classmethod
    def validate_time_range(cls, v: str, info: ValidationInfo) -> str:
        # end_time is absent from info.data when it failed its own checks
        end = info.data.get("end_time")
        if end is not None and not v < end:
            raise PydanticCustomError("time_range", "start_time must be earlier than end_time")
        return v


class AvailabilityRead(BaseModel):
    id: int
    profile_id: str
    day_of_week: int
    start_time: str
    end_time: str
    created_at: str

    model_config = ConfigDict(from_attributes=True)


class AvailabilityListResponse(BaseModel):
    availabilities: List[AvailabilityRead]
