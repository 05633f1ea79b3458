"""Journal request and response schemas."""

from datetime import datetime

from pydantic import ConfigDict, Field, model_validator

from app.schemas.response_schema import CamelModel


class CreateJournalRequest(CamelModel):
    """Body of POST /journal."""

    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1, max_length=10000)


class UpdateJournalRequest(CamelModel):
    """Partial update; omitted fields are left untouched."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    content: str | None = Field(default=None, min_length=1, max_length=10000)

    @model_validator(mode="after")
    def require_any_field(self) -> "UpdateJournalRequest":
        if self.title is None and self.content is None:
            raise ValueError("Provide a title or content to update")
        return self


class JournalEntryResponse(CamelModel):
    """A stored journal entry."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
