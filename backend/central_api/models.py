"""SQLModel data models.

This module defines the persisted records of the central: software
products, their modules, organizational entities and resellers. The
foreign keys below carry the relationship configuration: a module
belongs to a software product and a reseller to an organizational
entity, and neither parent can be deleted while a child references it.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from sqlmodel import SQLModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EntityType(str, Enum):
    """Kinds of organizational entity known to the central."""
    COMPANY = "company"
    ACCOUNTING_OFFICE = "accounting_office"
    RESELLER = "reseller"
    CUSTOMER = "customer"


class Software(SQLModel, table=True):
    """A software product that can be licensed.

    `status` is the active flag; inactive products stay stored.
    """
    __tablename__ = "software"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, nullable=False)
    description: Optional[str] = None
    status: bool = Field(default=True, nullable=False)
    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: Optional[datetime] = None


class Module(SQLModel, table=True):
    """A module of a `Software` product."""
    __tablename__ = "modules"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, nullable=False)
    description: Optional[str] = None
    status: bool = Field(default=True, nullable=False)
    software_id: int = Field(foreign_key="software.id", ondelete="RESTRICT", nullable=False, index=True)
    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: Optional[datetime] = None


class OrganizationalEntity(SQLModel, table=True):
    """A company, office or customer registered in the central.

    Fields:
    - `entity_type`: one of `EntityType`
    - `address` / `phone`: free-form contact details
    """
    __tablename__ = "organizational_entities"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, nullable=False)
    address: Optional[str] = None
    phone: Optional[str] = None
    status: bool = Field(default=True, nullable=False)
    entity_type: EntityType = Field(nullable=False)
    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: Optional[datetime] = None


class Reseller(SQLModel, table=True):
    """An organizational entity acting as reseller.

    Deleting the referenced entity is rejected by the database while the
    reseller row exists.
    """
    __tablename__ = "resellers"

    id: Optional[int] = Field(default=None, primary_key=True)
    entity_id: int = Field(foreign_key="organizational_entities.id", ondelete="RESTRICT", nullable=False, index=True)
    status: bool = Field(default=True, nullable=False)
    created_at: datetime = Field(default_factory=utcnow, nullable=False)
