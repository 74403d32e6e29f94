"""
Pydantic models for offered services.

A service is an appointment type with a fixed duration.  ``duration``
must be a whole number: ``30`` and ``30.0`` are accepted, while ``30.5``,
``"30"`` and ``true`` are rejected rather than coerced.  Name and duration are
validated independently and every violation is reported.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .profile import DisplayName, integral_float_to_int

MIN_DURATION = 15
MAX_DURATION = 480


class ServiceCreate(BaseModel):
    """Schema for creating or replacing a service."""

    name: DisplayName = Field(..., examples=["Corte"])
    duration: int = Field(
        ...,
        strict=True,
        ge=MIN_DURATION,
        le=MAX_DURATION,
        description="Duration in minutes (15 to 480)",
        examples=[30],
    )

    @field_validator("duration", mode="before")
    @classmethod
    def accept_whole_float(cls, v: Any) -> Any:
        return integral_float_to_int(v)


class ServiceRead(BaseModel):
    """Schema for reading a service."""

    id: int
    profile_id: str
    name: str
    duration: int
    created_at: str
    updated_at: str

    model_config = ConfigDict(from_attributes=True)


class ServiceResponse(BaseModel):
    service: ServiceRead


class ServiceListResponse(BaseModel):
    services: List[ServiceRead]


class MessageResponse(BaseModel):
    message: str
