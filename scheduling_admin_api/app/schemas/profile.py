"""
Pydantic models for the business profile.

A profile is the tenant record: one per identity, keyed by the ``sub``
claim of the caller's token.  Clients only send ``business_name``; the
slug is derived server‑side when the profile is first created.
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

# Shared by profile and service names: trimmed, then 2–100 characters.
DisplayName = Annotated[
    str,
    StringConstraints(strict=True, strip_whitespace=True, min_length=2, max_length=100),
]


def integral_float_to_int(v: Any) -> Any:
    """Turn a whole float such as ``30.0`` into ``30``; leave anything else alone.

    JSON has a single number type, so ``30.0`` is the same integer as
    ``30``.  Fractional floats, strings and booleans still reach the
    strict integer check and are rejected there.
    """
    if isinstance(v, float) and v.is_integer():
        return int(v)
    return v


class ProfileUpdate(BaseModel):
    """Schema for creating or updating the caller's profile."""

    business_name: DisplayName = Field(..., examples=["Barbearia do João"])


class ProfileRead(BaseModel):
    """Schema for reading a profile."""

    id: str
    business_name: str
    unique_slug: str
    created_at: str
    updated_at: str

    model_config = ConfigDict(from_attributes=True)


class ProfileResponse(BaseModel):
    profile: ProfileRead
