"""Unified API response schemas."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base for payloads exchanged with the mobile client (camelCase JSON)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(BaseModel, Generic[T]):
    """Success response with status, message, and data (no code field)."""

    status: int = 200
    message: str = "Success"
    data: T | None = None


class DeletedResponse(CamelModel):
    """Acknowledgement for a hard delete."""

    model_config = ConfigDict(frozen=True)

    deleted: bool = True


def success_response(data: T, status: int = 200, message: str = "Success") -> dict:
    """Build a success response dict for returning from endpoints."""
    return {"status": status, "message": message, "data": data}
