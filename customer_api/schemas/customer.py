"""Customer Schemas — Pydantic models for the request and response bodies.

Invariants:
    - CustomerDetails fields are free text; absent or null becomes ""
    - Non-string field values are rejected (400), never coerced
    - Date of birth accepted as "dob" or "date_of_birth", emitted as "dob"
    - Unknown body keys are ignored
    - Timestamps are UTC (SQLite CURRENT_TIMESTAMP) and serialize with a "Z" suffix
"""

from datetime import datetime, timezone

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class CustomerDetails(BaseModel):
    """Request body for create and update — full-field replace, no patch."""
    name: str = ""
    dob: str = Field("", validation_alias=AliasChoices("dob", "date_of_birth"))
    email: str = ""
    contact: str = ""

    @field_validator("name", "dob", "email", "contact", mode="before")
    @classmethod
    def null_to_empty(cls, v):
        return "" if v is None else v


class CustomerResponse(BaseModel):
    """Customer as returned to clients."""
    id: int
    name: str
    dob: str
    email: str
    contact: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        return v.replace(tzinfo=timezone.utc) if v.tzinfo is None else v


class CustomerPage(BaseModel):
    """One page of the customer listing."""
    data: list[CustomerResponse]
    total_pages: int
