"""Pydantic schemas for the Player model.

Field names are snake_case in Python and camelCase on the wire. Birthdays
travel as epoch milliseconds.
"""

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from player_registry.core.enums import Profession, Race

from .transformers import date_to_epoch_millis, epoch_millis_to_date


class PlayerFields(BaseModel):
    """Player fields a client may send; every one of them is optional.

    Services tell an omitted field apart from one sent with a zero value
    through ``model_fields_set``. Unknown keys such as ``id`` or ``level``
    are ignored.
    """

    name: Optional[str] = Field(None, description="Character name")
    title: Optional[str] = Field(None, description="Character title")
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    birthday: Optional[date] = Field(
        None, description="Registration date as epoch milliseconds or YYYY-MM-DD"
    )
    experience: Optional[int] = Field(None, description="Experience points")
    banned: Optional[bool] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("birthday", mode="before")
    @classmethod
    def parse_epoch_millis(cls, value: Any) -> Any:
        """Accept epoch milliseconds alongside the ISO forms pydantic parses."""
        if isinstance(value, bool):
            raise ValueError("birthday must be epoch milliseconds or a date")
        if isinstance(value, (int, float)):
            return epoch_millis_to_date(value)
        return value

    def present_fields(self) -> dict[str, Any]:
        """Fields the client actually supplied with a non-null value."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class PlayerCreate(PlayerFields):
    """Schema for creating a new player."""

    pass


class PlayerUpdate(PlayerFields):
    """Schema for partially updating an existing player."""

    pass


class PlayerResponse(BaseModel):
    """Schema for player response data."""

    id: int = Field(..., description="Database ID")
    name: str
    title: str
    race: Race
    profession: Profession
    experience: int
    level: int
    until_next_level: int = Field(
        ..., description="Experience remaining until the next level"
    )
    birthday: date
    banned: bool

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_serializer("birthday")
    def serialize_birthday(self, birthday: date) -> int:
        return date_to_epoch_millis(birthday)


class PlayerFilter(BaseModel):
    """Optional listing criteria, combined with logical AND."""

    name: Optional[str] = Field(None, description="Substring of the name")
    title: Optional[str] = Field(None, description="Substring of the title")
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    after: Optional[int] = Field(
        None, description="Earliest birthday, epoch milliseconds (inclusive)"
    )
    before: Optional[int] = Field(
        None, description="Latest birthday, epoch milliseconds (inclusive)"
    )
    banned: Optional[bool] = None
    min_experience: Optional[int] = None
    max_experience: Optional[int] = None
    min_level: Optional[int] = None
    max_level: Optional[int] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
