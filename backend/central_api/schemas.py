"""Pydantic request schemas used by the API.

Schemas keep API input shapes stable and provide validation for
controller handlers and tests. Responses are the SQLModel records
themselves.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .models import EntityType

# Largest value a SQLite INTEGER primary key can hold.
MAX_RECORD_ID = 2**63 - 1


class SoftwareIn(BaseModel):
    """Payload for creating or fully updating a software product."""
    name: str = Field(min_length=1)
    description: Optional[str] = None
    status: bool = True


class ModuleIn(BaseModel):
    """Payload for creating or fully updating a module."""
    name: str = Field(min_length=1)
    description: Optional[str] = None
    status: bool = True
    software_id: int = Field(ge=1, le=MAX_RECORD_ID)


class EntityIn(BaseModel):
    """Payload for creating or fully updating an organizational entity."""
    name: str = Field(min_length=1)
    address: Optional[str] = None
    phone: Optional[str] = None
    status: bool = True
    entity_type: EntityType


class ResellerIn(BaseModel):
    """Payload for creating or fully updating a reseller."""
    entity_id: int = Field(ge=1, le=MAX_RECORD_ID)
    status: bool = True


class StatusIn(BaseModel):
    status: bool


class NameIn(BaseModel):
    name: str = Field(min_length=1)


class AddressIn(BaseModel):
    address: Optional[str] = None


class PhoneIn(BaseModel):
    phone: Optional[str] = None


class EntityTypeIn(BaseModel):
    entity_type: EntityType
