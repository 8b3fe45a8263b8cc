from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator

from .common import AuditRead, CamelModel

NAME_MAX_LENGTH = 200
TYPE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000
MAX_BOX_NUMBER = 2_147_483_647


class NamedPayload(CamelModel):
    """Payload with a required, non-blank name of at most 200 characters."""
    name: str = Field(..., max_length=NAME_MAX_LENGTH, description="Name")

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name is required and cannot be empty or whitespace.")
        return v


class SomethingWrite(NamedPayload):
    """Create/update payload for a Something."""


class SomethingRead(AuditRead):
    name: str = Field(..., description="Name")


class StorageUnitWrite(NamedPayload):
    """Create/update payload for a storage unit."""
    type: Optional[str] = Field(None, max_length=TYPE_MAX_LENGTH, description="Kind of storage unit")


class StorageUnitRead(AuditRead):
    name: str = Field(..., description="Name")
    type: Optional[str] = Field(None, description="Kind of storage unit")


class BoxWrite(CamelModel):
    """Create/update payload for a box."""
    number: int = Field(..., ge=1, le=MAX_BOX_NUMBER, description="Positive box number")
    storage_unit_id: Optional[int] = Field(None, description="Storage unit holding the box")


class BoxRead(AuditRead):
    number: int = Field(..., description="Box number")
    storage_unit_id: Optional[int] = Field(None, description="Storage unit holding the box")


class ItemWrite(NamedPayload):
    """Create/update payload for an item."""
    description: Optional[str] = Field(None, max_length=DESCRIPTION_MAX_LENGTH, description="Description")
    box_id: Optional[int] = Field(None, description="Box holding the item")
    storage_unit_id: Optional[int] = Field(None, description="Storage unit holding the item")


class ItemRead(AuditRead):
    name: str = Field(..., description="Name")
    description: Optional[str] = Field(None, description="Description")
    box_id: Optional[int] = Field(None, description="Box holding the item")
    storage_unit_id: Optional[int] = Field(None, description="Storage unit holding the item")
