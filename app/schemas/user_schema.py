"""User profile schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import ConfigDict, StringConstraints

from app.schemas.response_schema import CamelModel


class UserProfileResponse(CamelModel):
    """Public user representation."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int
    email: str
    name: str | None = None
    avatar_url: str | None = None
    created_at: datetime
    updated_at: datetime


class UpdateProfileRequest(CamelModel):
    """Partial profile update."""

    name: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)
    ] | None = None
