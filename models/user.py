# backend/models/user.py
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


def to_iso_utc(value: datetime) -> str:
    """ISO-8601 en UTC con milisegundos y sufijo Z (2024-12-03T00:00:00.000Z)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class User(BaseModel):
    id: Optional[str] = Field(default=None, alias="_id")
    username: str
    password: str
    dateJoined: datetime
    biography: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class SafeUser(BaseModel):
    """Usuario sin password: la única representación que sale hacia el cliente."""

    id: str = Field(alias="_id")
    username: str
    dateJoined: datetime
    biography: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("id", mode="before")
    @classmethod
    def stringify_object_id(cls, value: Any) -> str:
        return str(value)

    @field_serializer("dateJoined")
    def serialize_date_joined(self, value: datetime) -> str:
        return to_iso_utc(value)

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
